from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class RecommendationConfig:
    settle_delay: float = int(os.getenv("RECOMMENDATION_SETTLE_MS", "300")) / 1000
    cache_ttl: float = float(os.getenv("RECOMMENDATION_CACHE_TTL", "300"))
    cache_max_entries: int = int(os.getenv("RECOMMENDATION_CACHE_MAX_ENTRIES", "1024"))
    max_recent_searches: int = int(os.getenv("MAX_RECENT_SEARCHES", "5"))


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()
