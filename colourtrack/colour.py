"""Tracked colours, their channel masks and their left/right symmetry."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from colourtrack.errors import (
    ChannelSelectError,
    EnumToIndexError,
    IndexToEnumError,
    SymmetricPairError,
)


class Colour(Enum):
    """A colour the tracker looks for."""

    BLUE = "blue"
    RED = "red"
    YELLOW = "yellow"


ALL_COLOURS: tuple[Colour, ...] = (
    Colour.BLUE,
    Colour.RED,
    Colour.YELLOW,
    Colour.RED,
    Colour.BLUE,
)


def find_symmetry_centre(colours: Sequence[Colour]) -> int:
    """Return the index around which the colour sequence is mirrored."""
    if not colours:
        raise ValueError("Could not find centre of symmetry")
    rest = list(colours)
    seen: list[tuple[bool, Colour]] = []
    for colour in colours:
        if (True, colour) in seen or (False, colour) in seen:
            continue
        seen.append((True, colour))
        try:
            rest.remove(colour)
        except ValueError:
            raise ValueError("Could not find centre of symmetry") from None
        if colour in rest:
            seen[-1] = (False, colour)

    last = len(colours) - 1
    for keep, colour in seen:
        if not keep:
            continue
        index = list(colours).index(colour)
        if 0 < index < last and colours[index - 1] == colours[index + 1]:
            return index
    return len(seen) - 1


SYMMETRY_AROUND: int = find_symmetry_centre(ALL_COLOURS)


def colour_from_index(index: int) -> Colour:
    """Return the colour at ``index`` in the colour table."""
    if 0 <= index < len(ALL_COLOURS):
        return ALL_COLOURS[index]
    raise EnumToIndexError(index)


def colour_to_index(colour: Colour) -> int:
    """Return the first index of ``colour`` in the colour table."""
    try:
        return ALL_COLOURS.index(colour)
    except ValueError:
        raise IndexToEnumError(colour) from None


def symmetric_pair_index(index: int) -> int:
    """Return the index mirrored across the centre of symmetry."""
    mirrored = 2 * SYMMETRY_AROUND - index
    if 0 <= mirrored < len(ALL_COLOURS) and index >= 0:
        return mirrored
    raise SymmetricPairError(index)


def to_symmetric_pair(index: int) -> Colour:
    """Return the colour mirrored across the centre of symmetry."""
    return ALL_COLOURS[symmetric_pair_index(index)]


_BITMAPS = {
    Colour.RED: (True, False, False),
    Colour.YELLOW: (True, True, False),
    Colour.BLUE: (False, True, True),
}


def enum_to_bitmap(colour: Colour) -> tuple[bool, bool, bool]:
    """Return which RGB channels make up ``colour``."""
    return _BITMAPS[colour]


def get_channel_and_others(
    selected: Sequence[bool],
) -> tuple[tuple[int, ...], tuple[int, ...], tuple[int, ...]]:
    """Split RGB channels into selected and other ones.

    Returns the selected channel indices, the remaining channel indices and
    the full-intensity colour the bitmap describes.
    """
    indices = [i for i, bit in enumerate(selected) if bit]
    if len(indices) not in (1, 2) or any(i > 2 for i in indices):
        raise ChannelSelectError(indices, selected)
    others = tuple(i for i in range(3) if i not in indices)
    set_colour = tuple(255 if bit else 0 for bit in selected)
    return tuple(indices), others, set_colour