"""Persisted output settings for the command line.

Only presentation settings are stored. The operation and operands always
come from the command line, so a bare run prints the default cross product.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import config


@dataclass
class CliSettings:
    precision: int = config.DEFAULT_PRECISION
    tolerance: float = config.DEFAULT_TOLERANCE

    def to_json(self) -> dict[str, Any]:
        return {"precision": self.precision, "tolerance": self.tolerance}

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "CliSettings":
        return cls(
            precision=int(payload.get("precision", config.DEFAULT_PRECISION)),
            tolerance=float(payload.get("tolerance", config.DEFAULT_TOLERANCE)),
        )


def load_last_used(path: Path | None = None) -> CliSettings:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    try:
        data = json.loads(settings_path.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return CliSettings()
    if not isinstance(data, dict):
        return CliSettings()
    try:
        return CliSettings.from_json(data)
    except (TypeError, ValueError):
        # wrong value types, e.g. {"precision": "high"}
        return CliSettings()


def save_last_used(settings: CliSettings, path: Path | None = None) -> Path:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    settings_path.write_text(json.dumps(settings.to_json(), indent=2, sort_keys=True))
    return settings_path
