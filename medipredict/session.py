"""Top-level state machine for one operator session."""

from __future__ import annotations

import enum
from typing import Optional

from medipredict.client import PredictionClient
from medipredict.derive import DerivedView, degraded_view, derive
from medipredict.errors import DataConsistencyError, PredictionError, ValidationError
from medipredict.history import HistoryLoader
from medipredict.inputs import InputModel
from medipredict.models import PredictionResult
from medipredict.service import ForecastService
from medipredict.utils.logging import get_logger

log = get_logger(__name__)


class Phase(enum.Enum):
    COLLECTING = "collecting"
    REVIEWING = "reviewing"


class Session:
    """Owns the inputs, the history loader, the prediction client and the result.

    ``COLLECTING`` shows the inputs and historical averages; ``REVIEWING``
    shows the result. The only way in to ``REVIEWING`` is a successful
    :meth:`submit`; the only way out is :meth:`reset`. Errors never escape:
    they land in ``error`` (submission), ``history.warning`` (history) or
    ``result_error`` (inconsistent payload).
    """

    def __init__(
        self,
        service: Optional[ForecastService] = None,
        month: Optional[int] = None,
    ) -> None:
        service = service or ForecastService()
        self.inputs = InputModel(month=month)
        self.history = HistoryLoader(service)
        self.client = PredictionClient(service)
        self.phase = Phase.COLLECTING
        self.result: Optional[PredictionResult] = None
        self.error = ""
        self.result_error = ""

    @property
    def busy(self) -> bool:
        return self.client.in_flight

    async def start(self) -> None:
        """Load history for the month selected at session start."""
        await self.history.load(self.inputs.selection.month)

    async def set_month(self, month: int) -> None:
        if self.inputs.set_month(month):
            await self.history.load(month)

    async def refresh_history(self) -> None:
        await self.history.load(self.inputs.selection.month)

    async def submit(self) -> bool:
        """Send the current inputs for prediction. Returns True on success."""
        if self.phase is Phase.REVIEWING or self.busy:
            return False
        try:
            self.inputs.validate()
        except ValidationError as exc:
            self.error = str(exc)
            return False

        self.error = ""
        try:
            result = await self.client.submit(
                self.inputs.selection,
                self.inputs.readings,
                self.inputs.indicators,
            )
        except PredictionError as exc:
            self.error = str(exc)
            return False

        self.result = result
        self.result_error = ""
        self.phase = Phase.REVIEWING
        log.info(
            "Prediction for %s received: %d expected patients",
            result.requested_month, result.total_expected_patients,
        )
        return True

    def reset(self) -> None:
        """Discard the result and go back to collecting inputs."""
        self.result = None
        self.result_error = ""
        self.error = ""
        self.phase = Phase.COLLECTING
        log.info("Session reset")

    def view(self) -> Optional[DerivedView]:
        if self.result is None:
            return None
        try:
            view = derive(self.result)
        except DataConsistencyError as exc:
            log.warning("%s", exc)
            self.result_error = str(exc)
            return degraded_view(self.result)
        self.result_error = ""
        return view
