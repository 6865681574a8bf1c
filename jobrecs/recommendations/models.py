from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

WorkArrangement = Literal["onsite", "remote", "hybrid"]


class Job(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str = ""
    company: str = ""
    location: str
    type: str = ""
    category: str
    work_arrangement: WorkArrangement
    salary: float
    salary_period: str = ""
    description: str = ""
    required_skills: tuple[str, ...] = ()
    posted_date: datetime

    @field_validator("posted_date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive and aware datetimes cannot be compared
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class RecentSearch(BaseModel):
    model_config = ConfigDict(frozen=True)

    search: str = ""
    category: str | None = None
    location: str | None = None
    type: str | None = None
    work_arrangement: str | None = None


class Preferences(BaseModel):
    categories: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    work_arrangements: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    job: Job
    score: int
    reason: str


class RecommendationResponse(BaseModel):
    recommendations: list[Recommendation]
    total_available: int
    preferences: Preferences


class JobFilters(BaseModel):
    search: str = ""
    category: str | None = None
    location: str | None = None
    type: str | None = None
    work_arrangement: WorkArrangement | None = None
    min_salary: float | None = Field(default=None, ge=0)
    max_salary: float | None = Field(default=None, ge=0)
    sort_by: Literal["date", "salary"] = "date"


class FavoriteToggleResponse(BaseModel):
    job_id: int
    is_favorite: bool
    total: int


class RecentSearchResponse(BaseModel):
    recorded: bool
    recent_searches: list[RecentSearch]
