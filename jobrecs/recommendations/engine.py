"""
Job recommendation engine.

Ranks catalog jobs for one user from the jobs they favourited and the filter
criteria of their recent searches. Four passes run in fixed order, each
appending to a shared result list:

* **category** (score 90): best-paid job in a preferred category
* **location** (score 80): newest job in a preferred location
* **work arrangement** (score 70): best-paid job with a preferred arrangement
* **backfill** (score 60): newest remaining jobs, up to ``MAX_RECOMMENDATIONS``

A preference pass keeps adding one job per preferred value until the
shared result list reaches that pass's cap (1, 2 and 3 respectively).
Favourited jobs are never recommended and no job is recommended twice.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from .models import Job, Preferences, RecentSearch, Recommendation

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 4

CATEGORY_SCORE = 90
LOCATION_SCORE = 80
WORK_ARRANGEMENT_SCORE = 70
BACKFILL_SCORE = 60

WORK_ARRANGEMENT_PHRASES: dict[str, str] = {
    "remote": "remote work",
    "onsite": "on-site work",
    "hybrid": "hybrid work",
}


def _ordered_unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def extract_preferences(
    favorites: Sequence[Job],
    recent_searches: Sequence[RecentSearch] = (),
) -> Preferences:
    """Collect preferred values in first-seen order, favourites before searches."""
    categories: list[str] = []
    locations: list[str] = []
    work_arrangements: list[str] = []
    skills: list[str] = []

    for job in favorites:
        categories.append(job.category)
        locations.append(job.location)
        work_arrangements.append(job.work_arrangement)
        skills.extend(job.required_skills)

    for search in recent_searches:
        if search.category:
            categories.append(search.category)
        if search.location:
            locations.append(search.location)
        if search.work_arrangement:
            work_arrangements.append(search.work_arrangement)

    return Preferences(
        categories=_ordered_unique(categories),
        locations=_ordered_unique(locations),
        work_arrangements=_ordered_unique(work_arrangements),
        skills=_ordered_unique(skills),
    )


def _by_salary(job: Job) -> float:
    return job.salary


def _by_posted_date(job: Job):
    return job.posted_date


def _run_pass(
    results: list[Recommendation],
    available: list[Job],
    preferred: list[str],
    attribute: str,
    best_by: Callable[[Job], object],
    score: int,
    reason: Callable[[str], str],
    cap: int,
) -> None:
    """Append one match per preferred value until ``results`` reaches ``cap``."""
    for value in preferred:
        if len(results) >= cap:
            break
        taken = {r.job.id for r in results}
        matches = [
            job for job in available
            if getattr(job, attribute) == value and job.id not in taken
        ]
        if not matches:
            continue
        # max() keeps the first of equal keys, i.e. catalog order
        best = max(matches, key=best_by)
        logger.debug("%s pass picked job %s for %r", attribute, best.id, value)
        results.append(Recommendation(job=best, score=score, reason=reason(value)))
        if len(results) >= cap:
            break


def generate_recommendations(
    catalog: Sequence[Job],
    favorites: Sequence[Job] = (),
    recent_searches: Sequence[RecentSearch] = (),
) -> list[Recommendation]:
    """Return up to ``MAX_RECOMMENDATIONS`` jobs, highest score first."""
    if not catalog:
        return []

    favorite_ids = {job.id for job in favorites}
    available = [job for job in catalog if job.id not in favorite_ids]
    if not available:
        return []

    prefs = extract_preferences(favorites, recent_searches)
    results: list[Recommendation] = []

    _run_pass(
        results, available, prefs.categories, "category", _by_salary,
        CATEGORY_SCORE, lambda c: f"Matches your interest in {c}", cap=1,
    )
    _run_pass(
        results, available, prefs.locations, "location", _by_posted_date,
        LOCATION_SCORE, lambda loc: f"Located in {loc} where you've shown interest", cap=2,
    )
    _run_pass(
        results, available, prefs.work_arrangements, "work_arrangement", _by_salary,
        WORK_ARRANGEMENT_SCORE,
        lambda w: f"Offers {WORK_ARRANGEMENT_PHRASES.get(w, 'hybrid work')} that you prefer",
        cap=3,
    )

    remaining = MAX_RECOMMENDATIONS - len(results)
    if remaining > 0:
        taken = {r.job.id for r in results}
        # sorted() is stable with reverse=True, so equal dates keep catalog order
        newest = sorted(
            (job for job in available if job.id not in taken),
            key=_by_posted_date,
            reverse=True,
        )
        for job in newest[:remaining]:
            results.append(
                Recommendation(job=job, score=BACKFILL_SCORE, reason="Recently posted opportunity")
            )

    return sorted(results, key=lambda r: r.score, reverse=True)
