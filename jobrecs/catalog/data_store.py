from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Any, List

import pandas as pd

from ..recommendations.models import Job, JobFilters
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: List[str] = [
    "id",
    "title",
    "company",
    "location",
    "type",
    "category",
    "work_arrangement",
    "salary",
    "salary_period",
    "description",
    "required_skills",
    "posted_date",
]
REQUIRED_COLUMNS: List[str] = [
    "id",
    "location",
    "category",
    "work_arrangement",
    "salary",
    "posted_date",
]
WORK_ARRANGEMENTS = ("onsite", "remote", "hybrid")

_jobs: list[Job] | None = None
_fingerprint: str | None = None


class CatalogError(ValueError):
    """The catalog file cannot be turned into job listings."""


def _split_skills(raw: str, separator: str) -> tuple[str, ...]:
    return tuple(s.strip() for s in raw.split(separator) if s.strip())


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[Job]:
    """
    Read the catalog CSV into ``Job`` records, keeping file order.

    Rows with an unparsable id, salary, date or work arrangement are skipped,
    as are repeated ids after their first occurrence.
    """
    path = config.jobs_path
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"{path} is missing columns: {', '.join(missing)}")

    for col in CATALOG_COLUMNS:
        if col not in df.columns:
            df[col] = ""

    df["id"] = pd.to_numeric(df["id"], errors="coerce")
    df["salary"] = pd.to_numeric(df["salary"], errors="coerce")
    df["posted_date"] = pd.to_datetime(
        df["posted_date"], errors="coerce", utc=True, format="ISO8601"
    )
    df["work_arrangement"] = df["work_arrangement"].str.strip().str.lower()

    bad = (
        df["id"].isna()
        | df["salary"].isna()
        | df["posted_date"].isna()
        | ~df["work_arrangement"].isin(WORK_ARRANGEMENTS)
    )
    if bad.any():
        logger.warning("Skipping %d malformed rows in %s", int(bad.sum()), path)
    df = df.loc[~bad]

    dupes = df["id"].duplicated(keep="first")
    if dupes.any():
        logger.warning("Skipping %d rows with repeated ids in %s", int(dupes.sum()), path)
    df = df.loc[~dupes]

    jobs: list[Job] = []
    for record in df[CATALOG_COLUMNS].to_dict("records"):
        jobs.append(Job(
            id=int(record["id"]),
            title=record["title"],
            company=record["company"],
            location=record["location"].strip(),
            type=record["type"],
            category=record["category"].strip(),
            work_arrangement=record["work_arrangement"],
            salary=float(record["salary"]),
            salary_period=record["salary_period"],
            description=record["description"],
            required_skills=_split_skills(record["required_skills"], config.skills_separator),
            posted_date=record["posted_date"].to_pydatetime(),
        ))

    logger.info("Loaded %d jobs from %s", len(jobs), path)
    return jobs


def _file_fingerprint(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()[:16]


def get_jobs() -> list[Job]:
    """Return the in-memory catalog, loading it on first call."""
    global _jobs, _fingerprint
    if _jobs is None:
        _jobs = load_catalog(DEFAULT_CATALOG_CONFIG)
        _fingerprint = _file_fingerprint(DEFAULT_CATALOG_CONFIG.jobs_path)
    return _jobs


def get_fingerprint() -> str:
    """Digest of the loaded catalog file, used to key cached results."""
    get_jobs()
    return _fingerprint or ""


def get_job(job_id: int) -> Job | None:
    for job in get_jobs():
        if job.id == job_id:
            return job
    return None


def reset_catalog() -> None:
    global _jobs, _fingerprint
    _jobs = None
    _fingerprint = None


def filter_jobs(jobs: list[Job], filters: JobFilters) -> list[Job]:
    needle = filters.search.strip().lower()

    def _matches(job: Job) -> bool:
        if needle and not (
            needle in job.title.lower()
            or needle in job.company.lower()
            or needle in job.description.lower()
        ):
            return False
        if filters.category and job.category != filters.category:
            return False
        if filters.location and job.location != filters.location:
            return False
        if filters.type and job.type != filters.type:
            return False
        if filters.work_arrangement and job.work_arrangement != filters.work_arrangement:
            return False
        if filters.min_salary is not None and job.salary < filters.min_salary:
            return False
        if filters.max_salary is not None and job.salary > filters.max_salary:
            return False
        return True

    matched = [job for job in jobs if _matches(job)]
    if filters.sort_by == "salary":
        return sorted(matched, key=lambda j: j.salary, reverse=True)
    return sorted(matched, key=lambda j: j.posted_date, reverse=True)


def get_metadata(jobs: list[Job]) -> dict[str, Any]:
    return {
        "categories": sorted({j.category for j in jobs}),
        "locations": sorted({j.location for j in jobs}),
        "types": sorted({j.type for j in jobs if j.type}),
        "work_arrangements": sorted({j.work_arrangement for j in jobs}),
    }
