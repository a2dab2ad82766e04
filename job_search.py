"""
Runs the per-term Indeed searches through JobSpy and collects the results.
"""
import json
import logging
import time

import pandas as pd
import yaml
from jobspy import scrape_jobs

logger = logging.getLogger(__name__)

JOB_TYPES = ["fulltime", "parttime", "contract", "internship", "temporary"]

DEFAULT_SEARCH_TERMS = [
    'AI Engineer',
    'Machine Learning Engineer',
    'Artificial Intelligence Engineer',
    'ML Engineer',
    'AI/ML Engineer',
    'Deep Learning Engineer',
    'NLP Engineer',
    'Computer Vision Engineer',
]

DEFAULT_CONFIG = {
    'site_name': 'indeed',
    'location': 'Amsterdam',
    'country': 'Netherlands',
    'country_indeed': 'netherlands',
    'results_wanted': 50,
    'hours_old': 168,  # 7 days
    'job_type': 'fulltime',
    'is_remote': False,
    'delay_seconds': 3,
    'search_terms': DEFAULT_SEARCH_TERMS,
}

PREVIEW_COLS = ['title', 'company', 'location']


class SearchError(Exception):
    """Raised when the job board could not be searched for a term."""


def load_config(config_path="search.yaml"):
    """
    Loads run settings from YAML on top of DEFAULT_CONFIG.
    A missing file just means the defaults are used.
    """
    config = dict(DEFAULT_CONFIG)
    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.info(f"No config at {config_path}, using defaults")
        loaded = {}

    if not isinstance(loaded, dict):
        raise ValueError(f"{config_path} must contain a mapping, got {type(loaded).__name__}")

    config.update(loaded)
    validate_config(config)
    return config


def validate_config(config):
    terms = config.get('search_terms')
    if not isinstance(terms, list) or not terms:
        raise ValueError("search_terms must be a non-empty list")
    for term in terms:
        if not isinstance(term, str) or not term.strip():
            raise ValueError(f"Invalid search term: {term!r}")

    job_type = config.get('job_type')
    if job_type is not None and job_type not in JOB_TYPES:
        raise ValueError(f"job_type must be one of {JOB_TYPES}, got {job_type!r}")

    for key in ('results_wanted', 'hours_old', 'delay_seconds'):
        value = config.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{key} must be a number, got {value!r}")
        if value < 0:
            raise ValueError(f"{key} cannot be negative")


def build_query(config, term):
    """Builds the scrape_jobs arguments for one search term."""
    return {
        'site_name': config['site_name'],
        'search_term': term,
        'location': config['location'],
        'country_indeed': config['country_indeed'],
        'results_wanted': config['results_wanted'],
        'hours_old': config['hours_old'],
        'job_type': config['job_type'],
        'is_remote': config['is_remote'],
    }


def fetch_jobs(query):
    """
    Searches the job board with JobSpy and returns the jobs as plain dicts.

    Scraper failures are re-raised as SearchError. The DataFrame is turned
    into JSON-safe records in memory: NaN becomes None and dates become ISO
    strings.
    """
    try:
        jobs = scrape_jobs(
            site_name=[query['site_name']],
            search_term=query['search_term'],
            location=query['location'],
            country_indeed=query['country_indeed'],
            results_wanted=query['results_wanted'],
            hours_old=query['hours_old'],
            job_type=query['job_type'],
            is_remote=query['is_remote'],
            verbose=0,
        )
    except Exception as e:
        raise SearchError(str(e)) from e

    if not isinstance(jobs, pd.DataFrame):
        raise TypeError(f"Expected a DataFrame from scrape_jobs, got {type(jobs).__name__}")

    if jobs.empty:
        return []
    return json.loads(jobs.to_json(orient="records", date_format="iso", default_handler=str))


def preview(records, n=2):
    """Renders the first few records as a small table for the log."""
    head = pd.DataFrame(records[:n])
    available_cols = [col for col in PREVIEW_COLS if col in head.columns]
    if not available_cols:
        return head.to_string(index=False)
    return head[available_cols].to_string(index=False)


def run_searches(config, fetch=fetch_jobs, sleep=time.sleep):
    """
    Searches every configured term, one at a time, and returns all jobs
    found, each tagged with the term it was found under.

    A failing term is logged and skipped. Between terms the runner waits
    delay_seconds so the job board is not hammered.
    """
    terms = config['search_terms']
    delay = config['delay_seconds']
    all_jobs = []

    for i, term in enumerate(terms):
        logger.info(f'Searching for: "{term}" in {config["location"]}...')
        try:
            records = fetch(build_query(config, term))
        except SearchError as e:
            logger.error(f'Error scraping "{term}": {e}')
        else:
            if records:
                logger.info(f'Found {len(records)} jobs for "{term}"')
                logger.info(f"Preview (first 2 jobs):\n{preview(records)}")
                for job in records:
                    job['search_term'] = term
                    all_jobs.append(job)
                logger.info(f"Added {len(records)} jobs to collection")
            else:
                logger.warning(f'No jobs found for "{term}"')

        if i < len(terms) - 1 and delay:
            logger.info(f"Waiting {delay} seconds before next search...")
            sleep(delay)

    return all_jobs
