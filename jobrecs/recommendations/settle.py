"""
Settle-delay wrapper around the recommendation engine.

Interactive callers change their inputs in bursts (typing in a filter box,
toggling several favourites). ``RecommendationFeed`` waits for the inputs to
stay unchanged for ``settle_delay`` seconds before recomputing, and exposes
``is_loading`` while a computation is pending so a UI can show placeholders.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Sequence

from .config import DEFAULT_RECOMMENDATION_CONFIG
from .engine import generate_recommendations
from .models import Job, RecentSearch, Recommendation

logger = logging.getLogger(__name__)


class RecommendationFeed:
    def __init__(
        self,
        settle_delay: float = DEFAULT_RECOMMENDATION_CONFIG.settle_delay,
        on_update: Callable[[list[Recommendation]], None] | None = None,
    ) -> None:
        self.settle_delay = settle_delay
        self.on_update = on_update
        self.recommendations: list[Recommendation] = []
        self.is_loading = True
        self._pending: asyncio.Task | None = None

    def update(
        self,
        catalog: Sequence[Job],
        favorites: Sequence[Job] = (),
        recent_searches: Sequence[RecentSearch] = (),
    ) -> None:
        """Schedule a recomputation, superseding any pending one.

        Must be called from within a running event loop.
        """
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
            logger.debug("Superseded pending recommendation run")
        self.is_loading = True
        self._pending = asyncio.get_running_loop().create_task(
            self._settle(list(catalog), list(favorites), list(recent_searches))
        )

    async def _settle(
        self,
        catalog: list[Job],
        favorites: list[Job],
        recent_searches: list[RecentSearch],
    ) -> None:
        await asyncio.sleep(self.settle_delay)
        self.recommendations = generate_recommendations(catalog, favorites, recent_searches)
        self.is_loading = False
        if self.on_update is not None:
            self.on_update(self.recommendations)

    async def wait(self) -> list[Recommendation]:
        """Wait for the latest scheduled run and return its result."""
        # asyncio.wait() does not raise when the awaited run gets superseded
        while self._pending is not None and not self._pending.done():
            await asyncio.wait({self._pending})
        if self._pending is not None and not self._pending.cancelled():
            # Re-raises a failure from the engine or the on_update callback
            self._pending.result()
        return self.recommendations

    def cancel(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self.is_loading = False
