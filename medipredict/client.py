"""Submission of forecast requests to the prediction service."""

from __future__ import annotations

from medipredict.config import PREDICTION_BUSY_MESSAGE
from medipredict.errors import PredictionError
from medipredict.inputs import EnvironmentalReadings, Selection, SocialIndicators
from medipredict.models import PredictionResult
from medipredict.schemas import PredictRequest
from medipredict.service import ForecastService
from medipredict.utils.logging import get_logger

log = get_logger(__name__)


def build_request(
    selection: Selection,
    readings: EnvironmentalReadings,
    indicators: SocialIndicators,
) -> PredictRequest:
    """Type-convert operator inputs into the wire request.

    Readings must already have been validated; an unparseable one raises
    ``ValueError`` (or ``TypeError`` when unset) here.
    """
    return PredictRequest(
        month=selection.month,
        category=selection.category,
        humidity=float(readings.humidity),
        rainfall=float(readings.rainfall),
        temperature=float(readings.temperature),
        festive=1 if indicators.festive else 0,
        awareness=float(indicators.awareness),
    )


class PredictionClient:
    """Single-flight forecast submission.

    While a request is outstanding ``in_flight`` is True and a second
    :meth:`submit` fails immediately without touching the network. There is
    no cancellation: an in-flight request always runs to success or failure.
    """

    def __init__(self, service: ForecastService) -> None:
        self._service = service
        self.in_flight = False

    async def submit(
        self,
        selection: Selection,
        readings: EnvironmentalReadings,
        indicators: SocialIndicators,
    ) -> PredictionResult:
        if self.in_flight:
            raise PredictionError(PREDICTION_BUSY_MESSAGE)

        request = build_request(selection, readings, indicators)
        self.in_flight = True
        log.info(
            "Submitting prediction: month=%d category=%s festive=%d awareness=%.2f",
            request.month, request.category, request.festive, request.awareness,
        )
        try:
            response = await self._service.predict(request)
        finally:
            self.in_flight = False

        return PredictionResult(
            predictions_by_disease=dict(response.predictions),
            total_expected_patients=response.total_expected_patients,
            recommendations=tuple(response.recommendation),
            requested_month=selection.month_label,
            requested_category=selection.category,
        )
