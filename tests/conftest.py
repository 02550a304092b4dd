import asyncio
import json

import httpx
import pytest

from medipredict.service import ForecastService
from medipredict.session import Session

BASE_URL = "http://medipredict.test"


def _history_payload(month):
    return {"Dengue": month * 10.0 + 0.4, "Road_Accidents": 42.6}


def _predict_payload(**overrides):
    base = {
        "predictions": {
            "Dengue": 180,
            "Road_Accidents": 95,
            "Heart_Patients": 61,
            "Hadisi_Anthuru": 40,
            "Tuberculosis": 12,
            "Cold": 150,
            "Fever": 101,
        },
        "total_expected_patients": 639,
        "recommendation": ["Increase ward capacity", "Stock IV fluids"],
    }
    base.update(overrides)
    return base


class FakeBackend:
    """In-process stand-in for the prediction service."""

    def __init__(self):
        self.history_calls = []
        self.predict_bodies = []
        self.failing_months = set()
        self.gates = {}
        self.predict_status = 200
        self.predict_payload = _predict_payload()
        self.predict_gate = None
        self.network_down = False

    async def handler(self, request):
        if self.network_down:
            raise httpx.ConnectError("connection refused", request=request)

        if request.url.path == "/history":
            month = int(request.url.params["month"])
            self.history_calls.append(month)
            gate = self.gates.get(month)
            if gate is not None:
                await gate.wait()
            if month in self.failing_months:
                return httpx.Response(500, json={"error": "db offline"})
            return httpx.Response(200, json={"avg_cases": _history_payload(month)})

        if request.url.path == "/predict-frontend":
            self.predict_bodies.append(json.loads(request.content))
            if self.predict_gate is not None:
                await self.predict_gate.wait()
            return httpx.Response(self.predict_status, json=self.predict_payload)

        return httpx.Response(404)


@pytest.fixture()
def backend():
    return FakeBackend()


@pytest.fixture()
def service(backend):
    return ForecastService(base_url=BASE_URL, transport=httpx.MockTransport(backend.handler))


@pytest.fixture()
def session(service):
    return Session(service=service, month=1)


@pytest.fixture()
def filled_session(session):
    session.inputs.set_reading("humidity", "78.5")
    session.inputs.set_reading("rainfall", "215.4")
    session.inputs.set_reading("temperature", "31.2")
    return session
