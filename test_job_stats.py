import copy

import job_stats


def test_company_counts():
    jobs = [
        {'company': 'Acme', 'search_term': 'AI Engineer'},
        {'company': 'Booking.com', 'search_term': 'AI Engineer'},
        {'company': 'Acme', 'search_term': 'ML Engineer'},
        {'search_term': 'ML Engineer'},
        {'company': None, 'search_term': 'ML Engineer'},
        {'company': '', 'search_term': 'ML Engineer'},
    ]
    stats = job_stats.summarize(jobs)

    assert stats['total_jobs'] == 6
    assert stats['company_counts'] == {'Acme': 2, 'Booking.com': 1}
    assert sum(stats['company_counts'].values()) == 3
    assert stats['top_companies'][0] == ('Acme', 2)


def test_company_name_fallback():
    jobs = [{'company_name': 'Adyen'}, {'company': 'Adyen'}]
    assert job_stats.summarize(jobs)['company_counts'] == {'Adyen': 2}


def test_top_companies_limit_and_ties():
    jobs = [{'company': f'Company {i}'} for i in range(12)]
    jobs += [{'company': 'Company 11'}, {'company': 'Company 5'}]

    top = job_stats.summarize(jobs)['top_companies']

    assert len(top) == 10
    assert top[:2] == [('Company 5', 2), ('Company 11', 2)]
    # remaining ties keep first-appearance order
    assert [name for name, _ in top[2:]] == [f'Company {i}' for i in (0, 1, 2, 3, 4, 6, 7, 8)]


def test_salary_detection():
    assert job_stats.has_salary({'compensation': {'min_amount': 50000}})
    assert job_stats.has_salary({'compensation': {'max_amount': 90000, 'min_amount': None}})
    assert job_stats.has_salary({'min_amount': 4000.0})
    assert job_stats.has_salary({'max_amount': 6000})
    assert not job_stats.has_salary({'title': 'ML Engineer'})
    assert not job_stats.has_salary({'compensation': None, 'min_amount': None})
    assert not job_stats.has_salary({'min_amount': float('nan'), 'max_amount': 0})


def test_optional_field_counts():
    jobs = [
        {'emails': ['jobs@acme.nl'], 'company_url_direct': 'https://acme.nl', 'is_remote': True},
        {'emails': 'hr@adyen.com, talent@adyen.com', 'is_remote': False},
        {'emails': [], 'company_url_direct': '', 'is_remote': None},
        {'emails': None, 'company_url_direct': 'https://booking.com'},
        {},
    ]
    stats = job_stats.summarize(jobs)

    assert stats['with_emails'] == 2
    assert stats['with_website'] == 2
    assert stats['remote'] == 1
    assert stats['with_salary'] == 0


def test_summarize_empty():
    stats = job_stats.summarize([])
    assert stats['total_jobs'] == 0
    assert stats['top_companies'] == []
    assert stats['company_counts'] == {}


def test_summarize_does_not_mutate():
    jobs = [{'company': 'Acme', 'compensation': {'min_amount': 1}}, {'emails': ['a@b.nl']}]
    before = copy.deepcopy(jobs)
    job_stats.summarize(jobs)
    assert jobs == before
