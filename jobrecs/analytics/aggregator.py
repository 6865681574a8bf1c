from __future__ import annotations

from collections import Counter
from typing import Any


def _top(counter: Counter[str]) -> list[dict[str, Any]]:
    return [{"name": n, "count": c} for n, c in counter.most_common(10)]


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    requests = [e for e in events if e["type"] == "recommendations"]
    searches = [e for e in events if e["type"] == "search"]
    toggles = [e for e in events if e["type"] == "favorite_toggle"]
    total = len(requests)

    # Average response time
    times = [r["response_time_ms"] for r in requests if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Which score bands actually get served
    score_counter: Counter[str] = Counter()
    for r in requests:
        for score in r.get("scores", []) or []:
            score_counter[str(score)] += 1

    # Searched facets
    category_counter: Counter[str] = Counter()
    location_counter: Counter[str] = Counter()
    arrangement_counter: Counter[str] = Counter()
    for s in searches:
        if s.get("category"):
            category_counter[s["category"]] += 1
        if s.get("location"):
            location_counter[s["location"]] += 1
        if s.get("work_arrangement"):
            arrangement_counter[s["work_arrangement"]] += 1

    cache_hits = sum(1 for r in requests if r.get("cache_hit"))
    added = sum(1 for t in toggles if t.get("is_favorite"))

    return {
        "total_recommendation_requests": total,
        "avg_response_time_ms": avg_time,
        "score_band_usage": dict(score_counter),
        "total_searches": len(searches),
        "top_categories": _top(category_counter),
        "top_locations": _top(location_counter),
        "top_work_arrangements": _top(arrangement_counter),
        "cache_stats": {
            "hits": cache_hits,
            "misses": total - cache_hits,
            "hit_rate": round(cache_hits / total * 100, 1) if total else 0.0,
        },
        "favorite_toggles": {
            "total": len(toggles),
            "added": added,
            "removed": len(toggles) - added,
        },
    }
