from __future__ import annotations

import time
from typing import Sequence

from ..analytics.store import record_event
from ..catalog.data_store import get_fingerprint, get_jobs
from .cache import cache_get, cache_set, make_key
from .engine import extract_preferences, generate_recommendations
from .models import Job, RecentSearch, Recommendation, RecommendationResponse


def _record(
    results: list[Recommendation],
    favorites: Sequence[Job],
    recent_searches: Sequence[RecentSearch],
    start_time: float,
    cache_hit: bool,
) -> None:
    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("recommendations", {
        "favorites_count": len(favorites),
        "searches_count": len(recent_searches),
        "results_returned": len(results),
        "scores": [r.score for r in results],
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })


def get_recommendations(
    favorites: Sequence[Job],
    recent_searches: Sequence[RecentSearch],
) -> RecommendationResponse:
    start_time = time.time()

    catalog = get_jobs()
    favorite_ids = {job.id for job in favorites}
    total_available = sum(1 for job in catalog if job.id not in favorite_ids)
    preferences = extract_preferences(favorites, recent_searches)

    # --- Cache check ---
    key = make_key(get_fingerprint(), favorites, recent_searches)
    cached = cache_get(key)
    if cached is not None:
        _record(cached, favorites, recent_searches, start_time, cache_hit=True)
        return RecommendationResponse(
            recommendations=cached,
            total_available=total_available,
            preferences=preferences,
        )

    results = generate_recommendations(catalog, favorites, recent_searches)
    cache_set(key, results)
    _record(results, favorites, recent_searches, start_time, cache_hit=False)

    return RecommendationResponse(
        recommendations=results,
        total_available=total_available,
        preferences=preferences,
    )
