"""CSV logging of vector operations run from the command line."""

from __future__ import annotations

import csv
from pathlib import Path

AXES = ("x", "y", "z")


def _axes(values: tuple[float, ...] | None) -> list[float | str]:
    """Pad 2D (or missing) components with empty cells."""
    values = values or ()
    return [float(v) for v in values] + [""] * (len(AXES) - len(values))


class VecLogger:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        self._file = self.path.open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(self._header())

    def _header(self) -> list[str]:
        header = ["operation"]
        header.extend([f"a_{axis}" for axis in AXES])
        header.extend([f"b_{axis}" for axis in AXES])
        header.append("t")
        header.extend([f"result_{axis}" for axis in AXES])
        header.append("scalar")
        return header

    def log(self, operation: str, a, b, result, t: float | None = None) -> None:
        """Write one row; result is either a vector or a scalar."""
        row: list[float | str] = [operation]
        row.extend(_axes(a.to_tuple()))
        row.extend(_axes(b.to_tuple() if b is not None else None))
        row.append("" if t is None else float(t))

        if hasattr(result, "to_tuple"):
            row.extend(_axes(result.to_tuple()))
            row.append("")
        else:
            row.extend(_axes(None))
            row.append(result)

        self._writer.writerow(row)

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
