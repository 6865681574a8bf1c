from __future__ import annotations

import os
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Query
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_event
from .catalog.data_store import filter_jobs, get_job, get_jobs, get_metadata
from .profile.dependencies import get_client_id
from .profile.favorites import get_favorites, toggle_favorite
from .profile.searches import get_recent_searches, record_search
from .recommendations.cache import get_cache_stats
from .recommendations.models import (
    FavoriteToggleResponse,
    Job,
    JobFilters,
    RecentSearch,
    RecentSearchResponse,
    RecommendationResponse,
)
from .recommendations.service import get_recommendations

app = FastAPI(title="Job Recommendation API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "jobrecs-secret-change-in-production"),
)


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return get_metadata(get_jobs())


@app.get("/jobs", response_model=list[Job])
def list_jobs(filters: Annotated[JobFilters, Query()]) -> list[Job]:
    return filter_jobs(get_jobs(), filters)


@app.get("/jobs/{job_id}", response_model=Job)
def job_detail(job_id: int) -> Job:
    job = get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


# ── Profile endpoints ────────────────────────────────────────────────────


@app.get("/favorites", response_model=list[Job])
def favorites(client_id: str = Depends(get_client_id)) -> list[Job]:
    return get_favorites(client_id)


@app.post("/favorites/{job_id}/toggle", response_model=FavoriteToggleResponse)
def favorite_toggle(
    job_id: int,
    client_id: str = Depends(get_client_id),
) -> FavoriteToggleResponse:
    job = get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    state = toggle_favorite(client_id, job)
    record_event("favorite_toggle", {"job_id": job_id, "is_favorite": state})
    return FavoriteToggleResponse(
        job_id=job_id,
        is_favorite=state,
        total=len(get_favorites(client_id)),
    )


@app.get("/recent-searches", response_model=list[RecentSearch])
def recent_searches(client_id: str = Depends(get_client_id)) -> list[RecentSearch]:
    return get_recent_searches(client_id)


@app.post("/recent-searches", response_model=RecentSearchResponse)
def add_recent_search(
    body: RecentSearch,
    client_id: str = Depends(get_client_id),
) -> RecentSearchResponse:
    recorded = record_search(client_id, body)
    if recorded:
        record_event("search", body.model_dump())
    return RecentSearchResponse(
        recorded=recorded,
        recent_searches=get_recent_searches(client_id),
    )


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.get("/recommendations", response_model=RecommendationResponse)
def recommendations(client_id: str = Depends(get_client_id)) -> RecommendationResponse:
    return get_recommendations(
        get_favorites(client_id),
        get_recent_searches(client_id),
    )


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())
