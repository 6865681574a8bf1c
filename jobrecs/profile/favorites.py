from __future__ import annotations

from ..recommendations.models import Job

# client id -> {job id -> job}, dicts keep favourite order
_favorites: dict[str, dict[int, Job]] = {}


def get_favorites(client_id: str) -> list[Job]:
    return list(_favorites.get(client_id, {}).values())


def is_favorite(client_id: str, job_id: int) -> bool:
    return job_id in _favorites.get(client_id, {})


def add_favorite(client_id: str, job: Job) -> None:
    _favorites.setdefault(client_id, {})[job.id] = job


def remove_favorite(client_id: str, job_id: int) -> None:
    _favorites.get(client_id, {}).pop(job_id, None)


def toggle_favorite(client_id: str, job: Job) -> bool:
    """Flip the favourite state of ``job`` and return the new state."""
    if is_favorite(client_id, job.id):
        remove_favorite(client_id, job.id)
        return False
    add_favorite(client_id, job)
    return True


def clear_favorites(client_id: str | None = None) -> None:
    if client_id is None:
        _favorites.clear()
    else:
        _favorites.pop(client_id, None)
