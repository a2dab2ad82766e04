"""
Summary statistics over the collected jobs.
"""
from collections import Counter

import pandas as pd

COMPANY_FIELDS = ('company', 'company_name')
SALARY_FIELDS = ('min_amount', 'max_amount')


def _has_value(value):
    if value is None:
        return False
    if isinstance(value, float) and pd.isna(value):
        return False
    return bool(value)


def company_of(job):
    for field in COMPANY_FIELDS:
        name = job.get(field)
        if _has_value(name):
            return name
    return None


def has_salary(job):
    """True if the job carries a min or max amount, nested under compensation or flat."""
    compensation = job.get('compensation')
    if not isinstance(compensation, dict):
        compensation = {}
    return any(
        _has_value(source.get(field))
        for source in (compensation, job)
        for field in SALARY_FIELDS
    )


def summarize(jobs, top_n=10):
    """
    Computes the run summary without touching the jobs themselves.

    Companies with equal counts keep the order they first appeared in.
    """
    companies = Counter()
    for job in jobs:
        name = company_of(job)
        if name is not None:
            companies[name] += 1

    return {
        'total_jobs': len(jobs),
        'company_counts': dict(companies),
        'top_companies': companies.most_common(top_n),
        'with_emails': sum(1 for job in jobs if _has_value(job.get('emails'))),
        'with_website': sum(1 for job in jobs if _has_value(job.get('company_url_direct'))),
        'remote': sum(1 for job in jobs if job.get('is_remote') is True),
        'with_salary': sum(1 for job in jobs if has_salary(job)),
    }
