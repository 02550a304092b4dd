"""Async HTTP transport for the remote prediction service."""

from __future__ import annotations

from typing import Optional

import httpx

from medipredict.config import (
    API_BASE_URL,
    HISTORY_PATH,
    PREDICT_PATH,
    PREDICTION_FALLBACK_MESSAGE,
    REQUEST_TIMEOUT,
)
from medipredict.errors import HistoryFetchError, PredictionError
from medipredict.schemas import (
    ErrorResponse,
    HistoryResponse,
    PredictRequest,
    PredictResponse,
)
from medipredict.utils.logging import get_logger

log = get_logger(__name__)


def _service_error(response: httpx.Response) -> Optional[str]:
    """Pull the ``error`` field out of a failed response, if there is one."""
    try:
        return ErrorResponse.model_validate(response.json()).error
    except ValueError:
        return None


class ForecastService:
    """Thin client for ``GET /history`` and ``POST /predict-frontend``.

    A fresh ``httpx.AsyncClient`` is opened per request so the service can be
    shared across separate event loops. Pass *transport* to substitute the
    network (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def fetch_history(self, month: int) -> HistoryResponse:
        try:
            async with self._client() as client:
                response = await client.get(HISTORY_PATH, params={"month": month})
            response.raise_for_status()
            return HistoryResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            raise HistoryFetchError(f"History request for month {month} failed: {exc}") from exc

    async def predict(self, request: PredictRequest) -> PredictResponse:
        try:
            async with self._client() as client:
                response = await client.post(PREDICT_PATH, json=request.model_dump())
        except httpx.HTTPError as exc:
            log.warning("Prediction request failed: %s", exc)
            raise PredictionError(PREDICTION_FALLBACK_MESSAGE) from exc

        if response.is_error:
            message = _service_error(response)
            log.warning("Prediction service returned %d: %s", response.status_code, message)
            raise PredictionError(message or PREDICTION_FALLBACK_MESSAGE)

        try:
            return PredictResponse.model_validate(response.json())
        except ValueError as exc:
            log.warning("Malformed prediction payload: %s", exc)
            raise PredictionError(PREDICTION_FALLBACK_MESSAGE) from exc
