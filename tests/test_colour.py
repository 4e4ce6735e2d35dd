import pytest

from colourtrack.colour import (
    ALL_COLOURS,
    SYMMETRY_AROUND,
    Colour,
    colour_from_index,
    colour_to_index,
    enum_to_bitmap,
    find_symmetry_centre,
    get_channel_and_others,
    symmetric_pair_index,
    to_symmetric_pair,
)
from colourtrack.errors import ChannelSelectError, EnumToIndexError, SymmetricPairError


def test_symmetry_centre_of_table():
    assert find_symmetry_centre(ALL_COLOURS) == SYMMETRY_AROUND
    assert ALL_COLOURS[SYMMETRY_AROUND] is Colour.YELLOW


def test_find_symmetry_centre_custom():
    assert find_symmetry_centre([Colour.RED, Colour.BLUE, Colour.RED]) == 1


def test_find_symmetry_centre_single():
    assert find_symmetry_centre([Colour.RED]) == 0


def test_find_symmetry_centre_empty():
    with pytest.raises(ValueError):
        find_symmetry_centre([])


@pytest.mark.parametrize("index", range(len(ALL_COLOURS)))
def test_symmetric_pairs_share_colour(index):
    pair = symmetric_pair_index(index)
    assert ALL_COLOURS[pair] == ALL_COLOURS[index]
    assert symmetric_pair_index(pair) == index
    assert to_symmetric_pair(index) == ALL_COLOURS[index]


def test_centre_is_its_own_pair():
    assert symmetric_pair_index(SYMMETRY_AROUND) == SYMMETRY_AROUND


def test_symmetric_pair_out_of_range():
    with pytest.raises(SymmetricPairError) as info:
        symmetric_pair_index(len(ALL_COLOURS))
    assert info.value.index == len(ALL_COLOURS)


@pytest.mark.parametrize("index", range(len(ALL_COLOURS)))
def test_colour_from_index(index):
    assert colour_from_index(index) is ALL_COLOURS[index]


def test_colour_from_index_out_of_range():
    with pytest.raises(EnumToIndexError):
        colour_from_index(len(ALL_COLOURS))


@pytest.mark.parametrize("colour", list(Colour))
def test_colour_to_index_round_trip(colour):
    assert colour_from_index(colour_to_index(colour)) is colour
    assert colour_to_index(colour) == ALL_COLOURS.index(colour)


def test_enum_to_bitmap():
    assert enum_to_bitmap(Colour.RED) == (True, False, False)
    assert enum_to_bitmap(Colour.YELLOW) == (True, True, False)
    assert enum_to_bitmap(Colour.BLUE) == (False, True, True)


def test_channel_and_others_single():
    selected, others, colour = get_channel_and_others((True, False, False))
    assert selected == (0,)
    assert others == (1, 2)
    assert colour == (255, 0, 0)


def test_channel_and_others_pair():
    selected, others, colour = get_channel_and_others((False, True, True))
    assert selected == (1, 2)
    assert others == (0,)
    assert colour == (0, 255, 255)


@pytest.mark.parametrize("bits", [(True, True, True), (False, False, False)])
def test_channel_and_others_errors(bits):
    with pytest.raises(ChannelSelectError):
        get_channel_and_others(bits)