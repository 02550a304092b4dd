"""I/O helpers for exporting session artefacts."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from medipredict.derive import DerivedView
from medipredict.models import PredictionResult
from medipredict.utils.logging import get_logger

log = get_logger(__name__)


def ensure_dir(path: Path) -> Path:
    """Create directory (and parents) if it doesn't exist. Returns *path*."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def export_payload(result: PredictionResult, view: Optional[DerivedView]) -> dict:
    """Combine a result and its derived view into one JSON-ready dict."""
    payload = result.to_dict()
    payload["derived"] = asdict(view) if view is not None else None
    return payload


def save_json(data: dict, path: Path) -> None:
    """Write a JSON file."""
    ensure_dir(path.parent)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2, ensure_ascii=False, default=str)
    log.info("Saved JSON: %s", path)
