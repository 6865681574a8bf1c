from __future__ import annotations

from fastapi.testclient import TestClient

from jobrecs.analytics.store import clear_events, get_events
from jobrecs.app import app
from jobrecs.profile.favorites import clear_favorites
from jobrecs.profile.searches import clear_searches
from jobrecs.recommendations.cache import clear_cache

client = TestClient(app)


def _reset():
    clear_events()
    clear_cache()
    clear_favorites()
    clear_searches()


def test_analytics_returns_empty_initially():
    _reset()
    resp = client.get("/analytics")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_recommendation_requests"] == 0
    assert body["avg_response_time_ms"] == 0.0
    assert body["score_band_usage"] == {}


def test_analytics_tracks_recommendation_requests():
    _reset()
    client.get("/recommendations")
    client.get("/recommendations")
    body = client.get("/analytics").json()
    assert body["total_recommendation_requests"] == 2
    assert body["score_band_usage"] == {"60": 8}
    assert body["cache_stats"] == {"hits": 1, "misses": 1, "hit_rate": 50.0}


def test_analytics_tracks_searches():
    _reset()
    client.post("/recent-searches", json={"category": "Education", "location": "Leeds"})
    client.post("/recent-searches", json={"category": "Education", "work_arrangement": "remote"})
    client.post("/recent-searches", json={"search": "x"})
    body = client.get("/analytics").json()
    assert body["total_searches"] == 2
    assert body["top_categories"] == [{"name": "Education", "count": 2}]
    assert body["top_locations"] == [{"name": "Leeds", "count": 1}]
    assert body["top_work_arrangements"] == [{"name": "remote", "count": 1}]


def test_analytics_tracks_favorite_toggles():
    _reset()
    client.post("/favorites/1/toggle")
    client.post("/favorites/2/toggle")
    client.post("/favorites/1/toggle")
    body = client.get("/analytics").json()
    assert body["favorite_toggles"] == {"total": 3, "added": 2, "removed": 1}


def test_event_store_filters_by_type():
    _reset()
    client.post("/favorites/1/toggle")
    client.get("/recommendations")
    assert len(get_events("favorite_toggle")) == 1
    assert len(get_events("recommendations")) == 1
    assert len(get_events()) == 2
