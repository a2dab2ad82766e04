"""
Indeed AI jobs sweep: searches every configured job title in one city,
prints summary statistics and saves all jobs to ONE combined JSON file.

Usage: python scrape_indeed.py [search.yaml]
"""
import logging
import os
import sys

import job_export
import job_search
import job_stats

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def print_banner(config):
    print("=" * 60)
    print(f"Indeed AI Jobs Scraper - {config['location']}")
    print("=" * 60)
    print(f"Location: {config['location']}, {config['country']}")
    print(f"Job Board: {config['site_name'].capitalize()}")
    print(f"Search terms: {len(config['search_terms'])}")
    print("=" * 60)


def print_summary(stats, config):
    print("\n" + "=" * 60)
    print("Summary Statistics:")
    print("=" * 60)
    print(f"  Total jobs: {stats['total_jobs']}")
    print(f"  Search terms used: {len(config['search_terms'])}")

    if stats['total_jobs'] == 0:
        return

    print("\nTop 10 Companies:")
    for company, count in stats['top_companies']:
        print(f"  {company}: {count} jobs")

    print(f"\nJobs with contact emails: {stats['with_emails']}")
    print(f"Jobs with company website: {stats['with_website']}")
    print(f"Remote jobs: {stats['remote']}")
    print(f"Jobs with salary info: {stats['with_salary']}")


def main(config_path="search.yaml", fetch=None, sleep=None, output_dir="."):
    try:
        config = job_search.load_config(config_path)
        print_banner(config)

        kwargs = {}
        if fetch is not None:
            kwargs['fetch'] = fetch
        if sleep is not None:
            kwargs['sleep'] = sleep
        jobs = job_search.run_searches(config, **kwargs)

        print_summary(job_stats.summarize(jobs), config)

        print("\n" + "=" * 60)
        print("Saving all jobs to ONE combined file...")
        print("=" * 60)
        path = job_export.save_jobs(jobs, config, output_dir=output_dir)
    except Exception:
        logger.exception("Scraping session failed")
        return 1

    print("\n" + "=" * 60)
    print("Scraping session complete!")
    print("=" * 60)
    if path:
        print(f"\nOutput file: {os.path.basename(path)}")
        print(f"Saved in directory: {os.path.abspath(output_dir)}")
    return 0


def run():
    """Console entry: the optional first argument is the config path."""
    return main(*sys.argv[1:2])


if __name__ == "__main__":
    sys.exit(run())
