import json

import pytest

from colourtrack.export import JSON_SUFFIX, positions_to_json


def test_round_trip_structure(tmp_path):
    positions = [[(1, 2), (3, 4)], []]
    stddevs = [[5, 6], []]
    path = positions_to_json(positions, stddevs, tmp_path / "clip")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["positions"] == [[[1, 2], [3, 4]], []]
    assert data["stddevs"] == [[5, 6], []]


def test_written_path_uses_suffix(tmp_path):
    path = positions_to_json([], [], tmp_path / "clip")
    assert path == tmp_path / f"clip{JSON_SUFFIX}"
    assert path.name.endswith("-data.json")
    assert path.exists()


def test_compact_text(tmp_path):
    path = positions_to_json([[(1, 2)]], [[3]], str(tmp_path / "clip"))
    assert path.read_text(encoding="utf-8") == '{"positions":[[[1,2]]],"stddevs":[[3]]}'


def test_overwrites_previous_file(tmp_path):
    positions_to_json([[(9, 9)]], [[9]], tmp_path / "clip")
    path = positions_to_json([[(7, 8)]], [[1]], tmp_path / "clip")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"positions": [[[7, 8]]], "stddevs": [[1]]}


def test_missing_folder_raises(tmp_path):
    with pytest.raises(OSError):
        positions_to_json([], [], tmp_path / "missing" / "clip")