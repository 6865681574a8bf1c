"""
Memoised engine results.

One entry per distinct (catalog, favourites, search history) combination.
Entries expire after ``cache_ttl`` seconds; once ``cache_max_entries`` is
reached the least recently used entry is evicted.
"""
from __future__ import annotations

import hashlib
import json
import time
from collections import OrderedDict
from typing import Any, Sequence

from .config import DEFAULT_RECOMMENDATION_CONFIG
from .models import Job, RecentSearch, Recommendation

_DEFAULT_TTL = DEFAULT_RECOMMENDATION_CONFIG.cache_ttl
_MAX_ENTRIES = DEFAULT_RECOMMENDATION_CONFIG.cache_max_entries

# key -> (created_at, recommendations), oldest use first
_cache: OrderedDict[str, tuple[float, list[Recommendation]]] = OrderedDict()
_stats: dict[str, int] = {"hits": 0, "misses": 0, "expired": 0, "evicted": 0}


def make_key(
    fingerprint: str,
    favorites: Sequence[Job],
    recent_searches: Sequence[RecentSearch],
) -> str:
    normalized = json.dumps(
        {
            "catalog": fingerprint,
            "favorites": [job.id for job in favorites],
            "searches": [s.model_dump() for s in recent_searches],
        },
        sort_keys=True,
        default=str,
    )
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(key: str, ttl: float = _DEFAULT_TTL) -> list[Recommendation] | None:
    entry = _cache.get(key)
    if entry is None:
        _stats["misses"] += 1
        return None
    created_at, results = entry
    if time.time() - created_at >= ttl:
        del _cache[key]
        _stats["expired"] += 1
        _stats["misses"] += 1
        return None
    _cache.move_to_end(key)
    _stats["hits"] += 1
    return results


def cache_set(
    key: str,
    results: list[Recommendation],
    max_entries: int = _MAX_ENTRIES,
) -> None:
    _cache[key] = (time.time(), results)
    _cache.move_to_end(key)
    while len(_cache) > max_entries:
        _cache.popitem(last=False)
        _stats["evicted"] += 1


def get_cache_stats() -> dict[str, Any]:
    lookups = _stats["hits"] + _stats["misses"]
    return {
        "size": len(_cache),
        **_stats,
        "hit_rate": round(_stats["hits"] / lookups * 100, 1) if lookups else 0.0,
    }


def clear_cache() -> None:
    _cache.clear()
    for name in _stats:
        _stats[name] = 0
