"""Background loading of historical case averages for the selected month."""

from __future__ import annotations

import enum
from typing import Optional

from medipredict.config import HISTORY_WARNING
from medipredict.errors import HistoryFetchError
from medipredict.models import HistorySnapshot
from medipredict.service import ForecastService
from medipredict.utils.logging import get_logger

log = get_logger(__name__)


class LoadStatus(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class HistoryLoader:
    """Fetches :class:`HistorySnapshot` objects with last-request-wins semantics.

    Every call to :meth:`load` takes a new generation number. When a fetch
    completes, its outcome is applied only if no newer load has been started
    in the meantime, so a slow response for a month the operator has already
    left can never overwrite the current one.
    """

    def __init__(self, service: ForecastService) -> None:
        self._service = service
        self._generation = 0
        self.status = LoadStatus.IDLE
        self.month: Optional[int] = None
        self.snapshot: Optional[HistorySnapshot] = None
        self.warning = ""

    @property
    def loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def load(self, month: int) -> Optional[HistorySnapshot]:
        """Fetch averages for *month*.

        Returns the snapshot when it was applied, ``None`` when the fetch
        failed or was superseded by a newer load.
        """
        self._generation += 1
        generation = self._generation
        self.month = month
        self.status = LoadStatus.LOADING
        self.warning = ""
        log.debug("History load #%d for month %d started", generation, month)

        try:
            payload = await self._service.fetch_history(month)
        except HistoryFetchError as exc:
            if not self._is_current(generation):
                log.debug("Discarding stale history failure #%d: %s", generation, exc)
                return None
            log.warning("%s", exc)
            self.snapshot = None
            self.warning = HISTORY_WARNING
            self.status = LoadStatus.FAILED
            return None

        if not self._is_current(generation):
            log.debug("Discarding stale history for month %d (#%d)", month, generation)
            return None

        self.snapshot = HistorySnapshot(month=month, average_cases_by_disease=dict(payload.avg_cases))
        self.status = LoadStatus.LOADED
        log.info("Loaded history for month %d (%d diseases)", month, len(payload.avg_cases))
        return self.snapshot

