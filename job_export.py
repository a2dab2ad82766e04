"""
Writes the combined search results to one dated JSON file.
"""
import json
import logging
import os
import tempfile
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


def output_filename(location, day):
    slug = location.strip().lower().replace(' ', '_')
    return f"{slug}_all_jobs_{day.isoformat()}.json"


def build_metadata(jobs, config, now):
    return {
        'total_jobs': len(jobs),
        'location': config['location'],
        'country': config['country'],
        'search_terms': list(config['search_terms']),
        'scraped_at': now.isoformat(),
    }


def save_jobs(jobs, config, output_dir=".", now=None):
    """
    Saves jobs plus run metadata as pretty-printed JSON and returns the path.

    One file per day: a second run on the same date overwrites the first.
    Returns None without writing anything when there are no jobs.
    """
    if not jobs:
        logger.warning("No jobs to save")
        return None

    if now is None:
        now = datetime.now(timezone.utc)

    path = os.path.join(output_dir, output_filename(config['location'], now.date()))
    combined = {
        'metadata': build_metadata(jobs, config, now),
        'jobs': jobs,
    }

    # Swap in atomically
    tmp = tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=output_dir, suffix=".tmp", delete=False
    )
    try:
        with tmp:
            json.dump(combined, tmp, indent=2, ensure_ascii=False)
        os.replace(tmp.name, path)
    except Exception:
        os.unlink(tmp.name)
        raise

    logger.info(f"Successfully saved: {path}")
    logger.info(f"Total jobs saved: {len(jobs)}")

    # Verify file was created
    size = os.path.getsize(path)
    logger.info(f"File size: {size / 1024:.2f} KB")
    return path
