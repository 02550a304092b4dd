"""Immutable records exchanged between the session components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from medipredict.config import ALL_CATEGORY


@dataclass(frozen=True)
class HistorySnapshot:
    """Average case counts per disease for one calendar month."""

    month: int
    average_cases_by_disease: Mapping[str, float] = field(default_factory=dict)

    def rounded(self) -> dict[str, int]:
        return {d: round(v) for d, v in self.average_cases_by_disease.items()}


@dataclass(frozen=True)
class PredictionResult:
    """A forecast as returned by the service, annotated with what was asked.

    ``requested_month`` is the month label (e.g. ``"July"``) and
    ``requested_category`` the category selected when the request was sent;
    the service does not echo either back.
    """

    predictions_by_disease: Mapping[str, int]
    total_expected_patients: int
    recommendations: tuple[str, ...]
    requested_month: str
    requested_category: str = ALL_CATEGORY

    def to_dict(self) -> dict:
        return {
            "predictions": dict(self.predictions_by_disease),
            "total_expected_patients": self.total_expected_patients,
            "recommendation": list(self.recommendations),
            "month": self.requested_month,
            "category": self.requested_category,
        }
