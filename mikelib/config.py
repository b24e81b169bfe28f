"""Default configuration values for mikelib."""

from __future__ import annotations

from pathlib import Path

DEFAULT_TOLERANCE = 1e-9
DEFAULT_PRECISION = 6
DEFAULT_OPERATION = "cross"
DEFAULT_T = 0.5

DEFAULT_A = (1.0, 2.0, 3.0)
DEFAULT_B = (4.0, 5.0, 6.0)

DEFAULT_SETTINGS_PATH = Path.home() / ".mikelib_settings.json"
