"""Command that tracks colours through a video and saves the results."""

from __future__ import annotations

import subprocess
import sys
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import ExitStack
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

import imageio.v2 as iio
import numpy as np

from colourtrack.colour import ALL_COLOURS
from colourtrack.console import (
    DEFAULT_MESSAGE,
    default_paths,
    highlight,
    print_final_timing_info,
    print_timing_info,
    resolve_paths,
)
from colourtrack.errors import ProcessorError, VideoError
from colourtrack.export import positions_to_json
from colourtrack.image import RenderOptions, process

FRAME_RATE = 24
SHOW_PLOT = True
VIDEO_PLAYER = "parole"
PLOT_SCRIPT = "src/plot.py"

_VIDEO_ERRORS = (OSError, ValueError, RuntimeError, ImportError, IndexError)


def _empty_slots() -> list[list]:
    return [[] for _ in ALL_COLOURS]


@dataclass
class TrackResult:
    """Per-slot positions and spreads gathered over every frame."""

    positions: list[list[tuple[int, int]]] = field(default_factory=_empty_slots)
    stddevs: list[list[int]] = field(default_factory=_empty_slots)
    frame_count: int = 0


def track_frames(
    frames: Iterable[np.ndarray],
    image_size: tuple[int, int],
    options: RenderOptions | None = None,
    on_frame: Callable[[int, np.ndarray], None] | None = None,
) -> TrackResult:
    """Process every frame, calling ``on_frame(index, frame)`` after each one."""
    result = TrackResult()
    for index, frame in enumerate(frames):
        processed, avg_pos, stddev = process(frame, image_size, options)
        if on_frame is not None:
            on_frame(index, processed)
        for slot, (position, spread) in enumerate(zip(avg_pos, stddev)):
            result.positions[slot].append(position)
            result.stddevs[slot].append(spread)
        result.frame_count += 1
    return result


def _read_frames(reader) -> Iterator[np.ndarray]:
    """Yield frames until the video ends or a frame cannot be decoded."""
    frames = iter(reader)
    while True:
        try:
            frame = next(frames)
        except StopIteration:
            return
        except _VIDEO_ERRORS:
            return
        yield np.array(frame, dtype=np.uint8)


def run(
    source: str | None = None,
    options: RenderOptions | None = None,
    stream: TextIO | None = None,
) -> TrackResult:
    """Track colours through ``source`` and write the video, JSON data and plot."""
    options = options or RenderOptions()
    stream = stream or sys.stdout

    if source is None:
        stream.write(DEFAULT_MESSAGE + "\n")
        paths = default_paths()
    else:
        paths = resolve_paths(source)
        if paths.output_folder:
            Path(paths.output_folder).mkdir(parents=True, exist_ok=True)

    stream.write(
        f"Source: {highlight(paths.source, stream)}"
        f"    Destination: {highlight(paths.destination, stream)}"
    )
    stream.flush()

    with ExitStack() as stack:
        try:
            reader = stack.enter_context(iio.get_reader(paths.source))
            size = reader.get_meta_data().get("size")
        except _VIDEO_ERRORS as exc:
            raise VideoError(f"Could not open video {paths.source}: {exc}") from exc
        if size is None:
            raise VideoError(f"Could not read frame size of {paths.source}")
        image_size = (int(size[0]), int(size[1]))
        stream.write(f"    {image_size}\n\n\n")

        writer = None
        if options.write_to_video:
            try:
                writer = stack.enter_context(
                    iio.get_writer(
                        paths.destination,
                        fps=FRAME_RATE,
                        codec="libx264",
                        pixelformat="yuv420p",
                    )
                )
            except _VIDEO_ERRORS as exc:
                raise VideoError(f"Could not create video {paths.destination}: {exc}") from exc

        start_time = time.perf_counter()
        before_time = start_time

        def on_frame(index: int, frame: np.ndarray) -> None:
            nonlocal before_time
            position = (index + 1) / FRAME_RATE
            if writer is not None:
                writer.append_data(frame)
            print_timing_info(start_time, before_time, position, index, stream)
            before_time = time.perf_counter()

        result = track_frames(_read_frames(reader), image_size, options, on_frame)

    print_final_timing_info(start_time, max(result.frame_count - 1, 0), stream)

    base = f"{paths.output_folder}/{paths.name}"
    positions_to_json(result.positions, result.stddevs, base)

    if options.write_to_video:
        subprocess.Popen([VIDEO_PLAYER, f"{base}-output.{paths.ext}"])
    if SHOW_PLOT:
        subprocess.Popen([PLOT_SCRIPT, f"{base}.{paths.ext}"])

    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tracker on the one video given, or on the default video."""
    args = sys.argv[1:] if argv is None else list(argv)
    source = args[0] if len(args) == 1 else None
    try:
        run(source)
    except (ProcessorError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())