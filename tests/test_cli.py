import io

import numpy as np
import pytest

from colourtrack.cli import main, run, track_frames
from colourtrack.colour import ALL_COLOURS
from colourtrack.console import DEFAULT_MESSAGE
from colourtrack.errors import PathError, VideoError
from colourtrack.image import RenderOptions

SIZE = (400, 400)
NO_DRAW = RenderOptions(write_to_video=False)


def _blank():
    return np.zeros((SIZE[1], SIZE[0], 3), dtype=np.uint8)


def test_blank_frames_give_zero_positions():
    result = track_frames([_blank() for _ in range(3)], SIZE, NO_DRAW)
    assert result.frame_count == 3
    assert len(result.positions) == len(ALL_COLOURS)
    assert all(slot == [(0, 0)] * 3 for slot in result.positions)
    assert all(slot == [0] * 3 for slot in result.stddevs)


def test_no_frames():
    result = track_frames([], SIZE, NO_DRAW)
    assert result.frame_count == 0
    assert result.positions == [[] for _ in ALL_COLOURS]
    assert result.stddevs == [[] for _ in ALL_COLOURS]


def test_red_pixel_on_left_half():
    frame = _blank()
    frame[150, 60] = (255, 0, 0)
    result = track_frames([frame], SIZE, NO_DRAW)
    red = ALL_COLOURS.index(ALL_COLOURS[1])
    assert result.positions[red] == [(150, 60)]
    assert result.stddevs[red] == [0]
    assert result.positions[3] == [(0, 0)]


def test_red_pixel_on_right_half_goes_to_mirror_slot():
    frame = _blank()
    frame[150, 300] = (255, 0, 0)
    result = track_frames([frame], SIZE, NO_DRAW)
    assert result.positions[3] == [(150, 300)]
    assert result.positions[1] == [(0, 0)]
    assert ALL_COLOURS[3] == ALL_COLOURS[1]


def test_on_frame_receives_each_processed_frame():
    frames = [_blank() for _ in range(3)]
    seen = []
    track_frames(frames, SIZE, NO_DRAW, lambda index, frame: seen.append((index, frame)))
    assert [index for index, _ in seen] == [0, 1, 2]
    assert all(frame is original for (_, frame), original in zip(seen, frames))


def test_run_rejects_source_without_extension():
    with pytest.raises(PathError):
        run("res/video", stream=io.StringIO())


def test_run_default_paths_missing_video(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    with pytest.raises(VideoError):
        run(None, stream=out)
    assert out.getvalue().startswith(DEFAULT_MESSAGE)


def test_main_missing_video_creates_output_folder(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["clips/res/missing.mp4"]) == 1
    assert (tmp_path / "clips" / "data").is_dir()
    assert "missing.mp4" in capsys.readouterr().err


def test_main_with_two_arguments_uses_defaults(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["a.mp4", "b.mp4"]) == 1
    assert DEFAULT_MESSAGE in capsys.readouterr().out