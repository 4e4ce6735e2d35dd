"""Path handling and progress output for the terminal."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from pathlib import PurePath
from typing import TextIO

from colourtrack.errors import PathError

HIGHLIGHT = "\x1b[92m"
RESET = "\x1b[0m"
_CURSOR_UP = "\x1b[1A"
_DELETE_LINE = "\x1b[2K\r"

SPACE_PER_SECTION = 15
TIMING_COLUMNS = ("Frame", "Video Time", "Actual Time", "Took", "Average")

SOURCE_FOLDER = "res"
DESTINATION_FOLDER = "data"
DEFAULT_MESSAGE = "Using default source and destination video filepaths."


@dataclass(frozen=True)
class VideoPaths:
    """Where a video is read from and where its results go."""

    source: str
    destination: str
    name: str
    ext: str
    output_folder: str


def resolve_paths(source: str) -> VideoPaths:
    """Work out output locations for ``source``.

    A ``res`` folder in the source path becomes ``data`` in the output path.
    """
    parts = PurePath(source).parts
    if not parts:
        raise PathError("Path element not found")
    *folders, filename_with_ext = parts
    output_folder = "/".join(
        DESTINATION_FOLDER if part == SOURCE_FOLDER else part for part in folders
    )
    name, dot, ext = filename_with_ext.partition(".")
    if not dot:
        raise PathError(filename_with_ext)
    return VideoPaths(
        source=source,
        destination=f"{output_folder}/{name}-output.{ext}",
        name=name,
        ext=ext,
        output_folder=output_folder,
    )


def default_paths() -> VideoPaths:
    """Paths used when no source video is given."""
    name = "res/video"
    ext = ".mp4"
    return VideoPaths(
        source=f"{name}.{ext}",
        destination="data/output",
        name=name,
        ext=ext,
        output_folder=DESTINATION_FOLDER,
    )


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def highlight(text: str, stream: TextIO) -> str:
    """Wrap ``text`` in the highlight colour when ``stream`` is a terminal."""
    return f"{HIGHLIGHT}{text}{RESET}" if _is_tty(stream) else text


def _row(values) -> str:
    return "".join(format(str(value), f"^{SPACE_PER_SECTION}") for value in values)


def format_timing_header() -> str:
    """The column titles of the progress table."""
    return _row(TIMING_COLUMNS)


def _millis(seconds: float) -> float:
    return int(seconds * 1_000_000) / 1000


def format_timing_row(
    start_time: float,
    before_time: float,
    now: float,
    video_position: float,
    iteration_index: int,
) -> str:
    """One progress row; times are in seconds from the same clock."""
    frames = iteration_index + 1
    return _row(
        (
            frames,
            f"{video_position:.2f}s",
            f"{now - start_time:.2f}s",
            f"{_millis(now - before_time):.2f}ms",
            f"{_millis(now - start_time) / frames:.2f}ms",
        )
    )


def print_timing_info(
    start_time: float,
    before_time: float,
    video_position: float,
    iteration_index: int,
    stream: TextIO | None = None,
) -> None:
    """Redraw the two-line progress table for the frame just processed."""
    stream = stream or sys.stdout
    now = time.perf_counter()
    tty = _is_tty(stream)
    if tty:
        stream.write(_CURSOR_UP * 2 + RESET + _DELETE_LINE)
    stream.write(format_timing_header() + "\n")
    if tty:
        stream.write(_DELETE_LINE + HIGHLIGHT)
    stream.write(
        format_timing_row(start_time, before_time, now, video_position, iteration_index) + "\n"
    )
    if tty:
        stream.write(RESET)
    stream.flush()


def print_final_timing_info(
    start_time: float,
    final_index: int,
    stream: TextIO | None = None,
) -> None:
    """Report the total time taken and the time per frame."""
    stream = stream or sys.stdout
    elapsed = time.perf_counter() - start_time
    frames = final_index + 1
    stream.write(
        "\nTook "
        + highlight(f"{elapsed:.3f}s", stream)
        + " to process "
        + highlight(str(frames), stream)
        + " frames ["
        + highlight(f"{_millis(elapsed) / frames:.2f}ms", stream)
        + " per frame]\n"
    )
    stream.flush()