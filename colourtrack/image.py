"""Per-frame colour detection, position averaging and marker drawing."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from colourtrack.colour import (
    ALL_COLOURS,
    SYMMETRY_AROUND,
    enum_to_bitmap,
    get_channel_and_others,
    symmetric_pair_index,
)
from colourtrack.errors import SymmetricPairError

BORDERS = (30, 120, 30, 120)  # left, top, right, bottom
CIRC_RADIUS = 18
CIRC_INNER_RADIUS = 4
EPSILON_THRESHOLD = ((40, 25), (50, 40), (80, 70))

SELECTED_BITMAPS = tuple(enum_to_bitmap(colour) for colour in ALL_COLOURS)
SELECTED_VALUES = tuple(get_channel_and_others(bitmap) for bitmap in SELECTED_BITMAPS)

Highlight = tuple[int, tuple[int, int]]


@dataclass(frozen=True)
class RenderOptions:
    """What is drawn back into processed frames."""

    write_to_video: bool = True
    draw_border: bool = False
    fill_unhighlighted: bool = False


def _check_image(image: np.ndarray) -> None:
    if image.ndim != 3 or image.shape[2] < 3:
        raise ValueError(f"expected an image of shape (height, width, 3), got {image.shape}")


def get_highlighted_pixels(
    image: np.ndarray,
    image_size: tuple[int, int],
    options: RenderOptions | None = None,
) -> list[Highlight]:
    """Find pixels matching a tracked colour, painting them in place.

    ``image_size`` is ``(width, height)``. Returns ``(colour_index, (y, x))``
    pairs in row-major order.
    """
    options = options or RenderOptions()
    _check_image(image)
    width, height = image_size
    rows, cols = image.shape[:2]
    left, top, right, bottom = BORDERS

    ys = np.arange(rows)[:, None]
    xs = np.arange(cols)[None, :]
    inside = (ys >= top) & (ys <= height - bottom) & (xs >= left) & (xs <= width - right)

    pixels = image[..., :3].astype(np.int64)
    best_index = np.full((rows, cols), -1, dtype=np.int64)
    best_diff = np.full((rows, cols), -1, dtype=np.int64)

    for colour_index, (selected, others, _) in enumerate(SELECTED_VALUES[: SYMMETRY_AROUND + 1]):
        balanced = pixels[..., list(selected)].sum(axis=-1) // len(selected)
        balanced_others = pixels[..., list(others)].sum(axis=-1) // len(others)
        brightness, margin = EPSILON_THRESHOLD[colour_index]
        matched = (
            inside
            & (np.minimum(balanced_others + margin, 255) < balanced)
            & (balanced > brightness)
        )
        diff = np.maximum(balanced - balanced_others, 0)
        # Ties go to the later colour.
        better = matched & (diff >= best_diff)
        best_index[better] = colour_index
        best_diff[better] = diff[better]

    if options.write_to_video:
        if options.draw_border:
            image[~inside, :3] = 255
        for colour_index, (_, _, set_colour) in enumerate(SELECTED_VALUES[: SYMMETRY_AROUND + 1]):
            image[best_index == colour_index, :3] = set_colour
        if options.fill_unhighlighted:
            image[best_index < 0, :3] = 0

    found_y, found_x = np.nonzero(best_index >= 0)
    return [
        (int(best_index[y, x]), (int(y), int(x)))
        for y, x in zip(found_y.tolist(), found_x.tolist())
    ]


def _target_index(colour_index: int, x: int, half_width: int) -> int | None:
    if colour_index < SYMMETRY_AROUND:
        if x < half_width:
            return colour_index
        try:
            return symmetric_pair_index(colour_index)
        except SymmetricPairError:
            return None
    if colour_index == SYMMETRY_AROUND:
        return colour_index
    return None


def get_avg_pos(
    highlighted_pixels: Sequence[Highlight],
    image_size: tuple[int, int],
) -> list[tuple[int, int]]:
    """Average ``(y, x)`` position per colour slot, splitting left and right halves."""
    half_width = image_size[0] // 2
    sums = [[0, 0, 0] for _ in ALL_COLOURS]  # count, y, x
    for colour_index, (y, x) in highlighted_pixels:
        target = _target_index(colour_index, x, half_width)
        if target is None:
            continue
        slot = sums[target]
        slot[0] += 1
        slot[1] += y
        slot[2] += x
    return [(y // n, x // n) if n else (y, x) for n, y, x in sums]


def get_stddev(
    avg_pos: Sequence[tuple[int, int]],
    highlighted_pixels: Sequence[Highlight],
    image_size: tuple[int, int],
) -> list[int]:
    """Spread of each colour slot's pixels around its average position."""
    half_width = image_size[0] // 2
    sums = [[0, 0] for _ in ALL_COLOURS]  # squared distance, count
    for key, (y, x) in highlighted_pixels:
        index = key
        if key < SYMMETRY_AROUND and x >= half_width:
            try:
                index = symmetric_pair_index(key)
            except SymmetricPairError:
                pass
        avg_y, avg_x = avg_pos[index]
        sums[index][0] += max(x - avg_x, 0) ** 2 + max(y - avg_y, 0) ** 2
        sums[index][1] += 1
    return [int(np.sqrt(np.float32(diff // n))) if n else diff for diff, n in sums]


def draw_markers(image: np.ndarray, avg_pos: Sequence[tuple[int, int]]) -> np.ndarray:
    """Draw a ring in half-intensity slot colour around each average position."""
    _check_image(image)
    rows, cols = image.shape[:2]
    ys, xs = np.ogrid[:rows, :cols]
    outer = CIRC_RADIUS**2
    inner = (CIRC_RADIUS - CIRC_INNER_RADIUS) ** 2
    for (y, x), (_, _, set_colour) in zip(avg_pos, SELECTED_VALUES):
        dist = (xs - x) ** 2 + (ys - y) ** 2
        ring = (dist < outer) & (dist > inner)
        image[ring, :3] = tuple(value // 2 for value in set_colour)
    return image


def process(
    image: np.ndarray,
    image_size: tuple[int, int],
    options: RenderOptions | None = None,
) -> tuple[np.ndarray, list[tuple[int, int]], list[int]]:
    """Track colours in one frame, modifying it in place.

    Returns the frame, the average position per colour slot and the spread.
    """
    options = options or RenderOptions()
    highlighted = get_highlighted_pixels(image, image_size, options)
    avg_pos = get_avg_pos(highlighted, image_size)
    stddev = get_stddev(avg_pos, highlighted, image_size)
    if options.write_to_video:
        draw_markers(image, avg_pos)
    return image, avg_pos, stddev