from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from jobrecs.catalog.config import CatalogConfig
from jobrecs.catalog.data_store import (
    CatalogError,
    filter_jobs,
    get_fingerprint,
    get_jobs,
    get_metadata,
    load_catalog,
    reset_catalog,
)
from jobrecs.recommendations.models import JobFilters

HEADER = "id,title,company,location,type,category,work_arrangement,salary,salary_period,description,required_skills,posted_date\n"


def _write(tmp_path: Path, rows: str, header: str = HEADER) -> CatalogConfig:
    path = tmp_path / "jobs.csv"
    path.write_text(header + rows, encoding="utf-8")
    return CatalogConfig(jobs_path=path)


def test_load_catalog_parses_rows_in_file_order(tmp_path: Path):
    cfg = _write(
        tmp_path,
        "2,Tutor,TutorHub,Leeds,Freelance,Education,Remote,22,per hour,\"Evening tutoring, online\",Maths; Communication ,2026-09-05\n"
        "1,Barista,Cafe,York,Part-time,Hospitality,onsite,11.5,per hour,Coffee,,2026-09-02T08:30:00\n",
    )
    jobs = load_catalog(cfg)

    assert [j.id for j in jobs] == [2, 1]
    tutor = jobs[0]
    assert tutor.work_arrangement == "remote"
    assert tutor.salary == 22.0
    assert tutor.description == "Evening tutoring, online"
    assert tutor.required_skills == ("Maths", "Communication")
    assert tutor.posted_date.tzinfo is not None
    assert jobs[1].required_skills == ()


def test_load_catalog_skips_malformed_rows(tmp_path: Path):
    cfg = _write(
        tmp_path,
        "1,A,Co,Leeds,Part-time,Tech,remote,abc,per hour,x,,2026-09-01\n"
        "2,B,Co,Leeds,Part-time,Tech,office,10,per hour,x,,2026-09-01\n"
        "3,C,Co,Leeds,Part-time,Tech,hybrid,10,per hour,x,,not-a-date\n"
        "4,D,Co,Leeds,Part-time,Tech,hybrid,10,per hour,x,,2026-09-01\n"
        "4,E,Co,Leeds,Part-time,Tech,hybrid,12,per hour,x,,2026-09-02\n",
    )
    jobs = load_catalog(cfg)
    assert [(j.id, j.title) for j in jobs] == [(4, "D")]


def test_load_catalog_rejects_missing_columns(tmp_path: Path):
    cfg = _write(tmp_path, "1,Barista\n", header="id,title\n")
    with pytest.raises(CatalogError):
        load_catalog(cfg)


def test_bundled_catalog_loads():
    jobs = get_jobs()
    assert len(jobs) == 12
    assert len({j.id for j in jobs}) == len(jobs)


def test_filter_by_category_and_work_arrangement():
    jobs = filter_jobs(get_jobs(), JobFilters(category="Education", work_arrangement="hybrid"))
    assert {j.id for j in jobs} == {2, 11}


def test_filter_search_matches_title_company_and_description():
    jobs = filter_jobs(get_jobs(), JobFilters(search="UNIVERSITY"))
    assert {j.id for j in jobs} == {2, 4, 11}
    jobs = filter_jobs(get_jobs(), JobFilters(search="psychology"))
    assert [j.id for j in jobs] == [11]


def test_filter_salary_range_and_sort_by_salary():
    jobs = filter_jobs(get_jobs(), JobFilters(min_salary=14, max_salary=16, sort_by="salary"))
    assert [j.id for j in jobs] == [3, 11, 7]


def test_default_sort_is_newest_first():
    jobs = filter_jobs(get_jobs(), JobFilters())
    dates = [j.posted_date for j in jobs]
    assert dates == sorted(dates, reverse=True)
    assert jobs[0].id == 8


def test_metadata_lists_distinct_values():
    meta = get_metadata(get_jobs())
    assert meta["work_arrangements"] == ["hybrid", "onsite", "remote"]
    assert "Manchester" in meta["locations"]
    assert meta["categories"] == sorted(meta["categories"])


def test_reset_catalog_reloads_configured_file(tmp_path: Path):
    cfg = _write(tmp_path, "1,Barista,Cafe,York,Part-time,Hospitality,onsite,11.5,per hour,Coffee,,2026-09-02\n")
    bundled_fingerprint = get_fingerprint()
    try:
        with patch("jobrecs.catalog.data_store.DEFAULT_CATALOG_CONFIG", cfg):
            reset_catalog()
            assert [j.title for j in get_jobs()] == ["Barista"]
            assert get_fingerprint() != bundled_fingerprint
    finally:
        reset_catalog()
    assert len(get_jobs()) == 12
