"""Operator inputs: selection, environmental readings and social indicators."""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass, replace
from typing import Optional, Union

from medipredict.config import (
    ALL_CATEGORY,
    AWARENESS_COLOURS,
    AWARENESS_LOW_BELOW,
    AWARENESS_MODERATE_BELOW,
    CATEGORIES,
    DEFAULT_AWARENESS,
    MONTHS,
    READING_BOUNDS,
    READING_FIELDS,
    VALIDATION_MESSAGE,
)
from medipredict.errors import ValidationError


@dataclass(frozen=True)
class Selection:
    category: str = ALL_CATEGORY
    month: int = 1

    @property
    def month_label(self) -> str:
        return MONTHS[self.month - 1]


@dataclass(frozen=True)
class EnvironmentalReadings:
    """Raw operator text per reading; ``None`` means the field is unset."""

    humidity: Optional[str] = None
    rainfall: Optional[str] = None
    temperature: Optional[str] = None


@dataclass(frozen=True)
class SocialIndicators:
    festive: bool = False
    awareness: float = DEFAULT_AWARENESS


def parse_reading(raw: Optional[str]) -> Optional[float]:
    """Return *raw* as a finite float, or ``None`` if it is unset or not numeric."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def awareness_tier(value: float) -> tuple[str, str]:
    """Classify awareness for display.

    Returns (label, colour), e.g. ("Moderate", "#f59e0b"). A value exactly
    on a boundary belongs to the upper tier.
    """
    if value < AWARENESS_LOW_BELOW:
        label = "Low"
    elif value < AWARENESS_MODERATE_BELOW:
        label = "Moderate"
    else:
        label = "High"
    return label, AWARENESS_COLOURS[label]


class InputModel:
    """Holds everything the operator has entered so far.

    Each setter replaces exactly one field. Values are kept in frozen
    dataclasses so callers can capture a consistent snapshot before awaiting.
    """

    def __init__(self, month: Optional[int] = None) -> None:
        if month is None:
            month = dt.date.today().month
        self._check_month(month)
        self.selection = Selection(month=month)
        self.readings = EnvironmentalReadings()
        self.indicators = SocialIndicators()

    @staticmethod
    def _check_month(month: int) -> None:
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")

    def set_category(self, category: str) -> None:
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category}")
        self.selection = replace(self.selection, category=category)

    def set_month(self, month: int) -> bool:
        """Select *month*. Returns True when the month actually changed."""
        self._check_month(month)
        if month == self.selection.month:
            return False
        self.selection = replace(self.selection, month=month)
        return True

    def set_reading(self, name: str, raw: Union[str, float, None]) -> None:
        if name not in READING_FIELDS:
            raise ValueError(f"Unknown environmental reading: {name}")
        text = None if raw is None else (str(raw).strip() or None)
        self.readings = replace(self.readings, **{name: text})

    def set_festive(self, festive: bool) -> None:
        self.indicators = replace(self.indicators, festive=bool(festive))

    def set_awareness(self, value: float) -> None:
        value = float(value)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Awareness must be between 0 and 1, got {value}")
        self.indicators = replace(self.indicators, awareness=value)

    # ── Validation ───────────────────────────────────────────────────────────

    def parsed_readings(self) -> dict[str, Optional[float]]:
        return {name: parse_reading(getattr(self.readings, name)) for name in READING_FIELDS}

    def is_submittable(self) -> bool:
        return all(v is not None for v in self.parsed_readings().values())

    def validation_message(self) -> Optional[str]:
        return None if self.is_submittable() else VALIDATION_MESSAGE

    def validate(self) -> None:
        if not self.is_submittable():
            raise ValidationError(VALIDATION_MESSAGE)

    def out_of_range(self) -> list[str]:
        """Readings that parse but fall outside their physical bounds. Advisory."""
        flagged: list[str] = []
        for name, value in self.parsed_readings().items():
            if value is None:
                continue
            lower, upper = READING_BOUNDS[name]
            if (lower is not None and value < lower) or (upper is not None and value > upper):
                flagged.append(name)
        return flagged

    @property
    def awareness_tier(self) -> tuple[str, str]:
        return awareness_tier(self.indicators.awareness)
