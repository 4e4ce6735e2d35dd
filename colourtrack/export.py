"""Saving tracked positions and spreads as JSON."""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from pathlib import Path

JSON_SUFFIX = "-data.json"


def positions_to_json(
    positions: Sequence[Sequence[tuple[int, int]]],
    stddevs: Sequence[Sequence[int]],
    filename_base: str | os.PathLike[str],
) -> Path:
    """Write per-slot positions and spreads to ``<filename_base>-data.json``.

    Returns the path that was written.
    """
    data = {
        "positions": [[[int(y), int(x)] for y, x in slot] for slot in positions],
        "stddevs": [[int(value) for value in slot] for slot in stddevs],
    }
    path = Path(f"{os.fspath(filename_base)}{JSON_SUFFIX}")
    path.write_text(json.dumps(data, separators=(",", ":")), encoding="utf-8")
    return path