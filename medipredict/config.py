"""Central configuration for the MediPredict hospital forecasting client."""

from __future__ import annotations

import os
from typing import Final

from dotenv import load_dotenv

load_dotenv()

# ── Remote prediction service ────────────────────────────────────────────────
API_BASE_URL: Final[str] = os.getenv("MEDIPREDICT_API_URL", "http://127.0.0.1:5000").rstrip("/")
HISTORY_PATH: Final[str] = "/history"
PREDICT_PATH: Final[str] = "/predict-frontend"
REQUEST_TIMEOUT: Final[float] = float(os.getenv("MEDIPREDICT_TIMEOUT", "30"))

# ── Calendar ─────────────────────────────────────────────────────────────────
MONTHS: Final[list[str]] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# ── Disease catalogue ────────────────────────────────────────────────────────
ALL_CATEGORY: Final[str] = "all"
DISEASES: Final[list[str]] = [
    "Dengue",
    "Road_Accidents",
    "Heart_Patients",
    "Hadisi_Anthuru",
    "Tuberculosis",
    "Cold",
    "Fever",
]
CATEGORIES: Final[list[str]] = [ALL_CATEGORY, *DISEASES]

CATEGORY_LABELS: Final[dict[str, str]] = {
    ALL_CATEGORY: "All Diseases",
    "Dengue": "Dengue",
    "Road_Accidents": "Road Accidents",
    "Heart_Patients": "Heart Disease",
    "Hadisi_Anthuru": "Gastroenteritis",
    "Tuberculosis": "Tuberculosis",
    "Cold": "Common Cold",
    "Fever": "Fever",
}

# icon, colour hint, receiving ward
DISEASE_META: Final[dict[str, tuple[str, str, str]]] = {
    "Dengue":         ("🦟", "#e63c3c", "Infectious Disease Ward"),
    "Road_Accidents": ("🚗", "#f59e0b", "Emergency / Trauma Ward"),
    "Heart_Patients": ("❤️", "#ef4444", "Cardiac ICU"),
    "Hadisi_Anthuru": ("🤢", "#8b5cf6", "General Medicine Ward"),
    "Tuberculosis":   ("🫁", "#0a5c7f", "Respiratory Ward"),
    "Cold":           ("🤧", "#3b82f6", "OPD / Outpatient"),
    "Fever":          ("🌡️", "#10b981", "General Ward"),
}
DEFAULT_DISEASE_META: Final[tuple[str, str, str]] = ("🔬", "#0a5c7f", "General Ward")
CATEGORY_ICONS: Final[dict[str, str]] = {
    ALL_CATEGORY: "🏥",
    **{disease: meta[0] for disease, meta in DISEASE_META.items()},
}

# ── Environmental readings ───────────────────────────────────────────────────
READING_FIELDS: Final[list[str]] = ["humidity", "rainfall", "temperature"]
# (lower, upper); None means unbounded
READING_BOUNDS: Final[dict[str, tuple[float | None, float | None]]] = {
    "humidity": (0.0, 100.0),
    "rainfall": (0.0, None),
    "temperature": (None, None),
}
READING_UNITS: Final[dict[str, str]] = {
    "humidity": "%",
    "rainfall": "mm",
    "temperature": "°C",
}
READING_PLACEHOLDERS: Final[dict[str, str]] = {
    "humidity": "e.g. 78.5",
    "rainfall": "e.g. 215.4",
    "temperature": "e.g. 31.2",
}

# ── Social indicators ────────────────────────────────────────────────────────
DEFAULT_AWARENESS: Final[float] = 0.5
AWARENESS_LOW_BELOW: Final[float] = 0.34
AWARENESS_MODERATE_BELOW: Final[float] = 0.67
AWARENESS_COLOURS: Final[dict[str, str]] = {
    "Low": "#e63c3c",
    "Moderate": "#f59e0b",
    "High": "#10b981",
}

# ── Severity thresholds (strictly greater than) ──────────────────────────────
SEVERITY_TIERS: Final[list[tuple[int, str]]] = [
    (150, "Critical"),
    (100, "High"),
    (60, "Moderate"),
]
SEVERITY_FLOOR: Final[str] = "Low"

# ── User-facing messages ─────────────────────────────────────────────────────
VALIDATION_MESSAGE: Final[str] = "Please fill all Environmental Factor fields."
HISTORY_WARNING: Final[str] = "Could not auto-load past cases. You can still run prediction."
PREDICTION_FALLBACK_MESSAGE: Final[str] = (
    "Prediction failed. Make sure the prediction service is running."
)
PREDICTION_BUSY_MESSAGE: Final[str] = "A prediction is already running."

# ── Env overrides ────────────────────────────────────────────────────────────
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO")
