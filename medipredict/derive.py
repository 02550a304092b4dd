"""Derivation of display structures from a prediction result.

Everything here is a pure function of its arguments: deriving twice from the
same result and filter yields equal views.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from medipredict.config import (
    ALL_CATEGORY,
    CATEGORY_LABELS,
    DEFAULT_DISEASE_META,
    DISEASE_META,
    SEVERITY_FLOOR,
    SEVERITY_TIERS,
)
from medipredict.errors import DataConsistencyError
from medipredict.models import PredictionResult


@dataclass(frozen=True)
class DiseaseMeta:
    icon: str
    color: str
    ward: str


@dataclass(frozen=True)
class BarPoint:
    name: str
    value: int
    color_hint: str


@dataclass(frozen=True)
class RadarPoint:
    subject: str
    value: int


@dataclass(frozen=True)
class DerivedView:
    visible_entries: Mapping[str, int]
    max_count: int
    severity_by_disease: Mapping[str, str]
    bar_fill_pct: Mapping[str, float]
    bar_series: tuple[BarPoint, ...]
    radar_series: tuple[RadarPoint, ...]


def display_name(disease: str) -> str:
    """``Road_Accidents`` -> ``Road Accidents``."""
    return disease.replace("_", " ")


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, display_name(category))


def disease_meta(disease: str) -> DiseaseMeta:
    return DiseaseMeta(*DISEASE_META.get(disease, DEFAULT_DISEASE_META))


def classify_severity(count: int) -> str:
    """Map a predicted case count onto a severity tier.

    Thresholds are strict: exactly 150 is High, 151 is Critical.
    """
    for threshold, label in SEVERITY_TIERS:
        if count > threshold:
            return label
    return SEVERITY_FLOOR


def visible_entries(
    predictions: Mapping[str, int],
    filter_category: str,
) -> dict[str, int]:
    if filter_category == ALL_CATEGORY:
        return dict(predictions)
    if filter_category not in predictions:
        raise DataConsistencyError(
            f"Prediction has no entry for requested category '{display_name(filter_category)}'."
        )
    return {filter_category: predictions[filter_category]}


def bar_fill_pct(entries: Mapping[str, int], max_count: int) -> dict[str, float]:
    if max_count <= 0:
        return {disease: 0.0 for disease in entries}
    return {disease: count / max_count * 100.0 for disease, count in entries.items()}


def _build(predictions: Mapping[str, int], entries: dict[str, int]) -> DerivedView:
    max_count = max(entries.values(), default=0)
    return DerivedView(
        visible_entries=entries,
        max_count=max_count,
        severity_by_disease={d: classify_severity(c) for d, c in predictions.items()},
        bar_fill_pct=bar_fill_pct(entries, max_count),
        bar_series=tuple(
            BarPoint(display_name(d), c, disease_meta(d).color) for d, c in predictions.items()
        ),
        radar_series=tuple(RadarPoint(display_name(d), c) for d, c in predictions.items()),
    )


def derive(result: PredictionResult, filter_category: Optional[str] = None) -> DerivedView:
    """Build the :class:`DerivedView` for *result*.

    The card grid (``visible_entries`` and its bar fills) honours
    *filter_category*; severities and the comparison series always cover
    every disease in the prediction.
    """
    if filter_category is None:
        filter_category = result.requested_category
    predictions = result.predictions_by_disease
    return _build(predictions, visible_entries(predictions, filter_category))


def degraded_view(result: PredictionResult) -> DerivedView:
    """A view with no cards, used when the filter cannot be honoured."""
    return _build(result.predictions_by_disease, {})
