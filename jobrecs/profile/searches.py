from __future__ import annotations

from ..recommendations.config import DEFAULT_RECOMMENDATION_CONFIG
from ..recommendations.models import RecentSearch

_MIN_SEARCH_LENGTH = 3

_searches: dict[str, list[RecentSearch]] = {}


def is_significant(search: RecentSearch) -> bool:
    """Ignore keystroke-level changes; only real filter choices count."""
    if len(search.search.strip()) >= _MIN_SEARCH_LENGTH:
        return True
    return bool(search.category or search.location or search.type or search.work_arrangement)


def record_search(
    client_id: str,
    search: RecentSearch,
    max_entries: int = DEFAULT_RECOMMENDATION_CONFIG.max_recent_searches,
) -> bool:
    """Push ``search`` to the front of the client's history.

    Returns False when the search was not significant enough to keep.
    """
    if not is_significant(search):
        return False
    history = [s for s in _searches.get(client_id, []) if s != search]
    history.insert(0, search)
    _searches[client_id] = history[:max_entries]
    return True


def get_recent_searches(client_id: str) -> list[RecentSearch]:
    return list(_searches.get(client_id, []))


def clear_searches(client_id: str | None = None) -> None:
    if client_id is None:
        _searches.clear()
    else:
        _searches.pop(client_id, None)
