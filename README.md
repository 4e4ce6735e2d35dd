# colourtrack

colourtrack finds coloured markers in video frames and records where they are.

It tracks five colour slots, in this order:

| Slot | Colour |
|------|--------|
| 0 | blue |
| 1 | red |
| 2 | yellow |
| 3 | red |
| 4 | blue |

The slots mirror each other around the yellow slot. Slot 0 pairs with slot 4, and slot 1 pairs with slot 3.

## What it does to each frame

1. It picks out the pixels that clearly belong to blue, red or yellow. Only pixels inside a fixed border are considered. The border is 30 px on the left and right and 120 px at the top and bottom.
2. It averages the `(y, x)` position of each slot. A blue or red pixel goes to the left-hand slot if it lies in the left half of the frame, and to its mirrored slot if it lies in the right half.
3. It measures how widely each slot's pixels spread around that average.
4. It can paint the result back into the frame:
   - matched pixels are recoloured in full-intensity slot colours;
   - a ring in half-intensity colour is drawn around each average position.

A slot with no matching pixels reports position `(0, 0)` and spread `0`.

## Installation

```
pip install .
```

Reading and writing video goes through `imageio`, which needs a video plugin. For example, install `imageio[ffmpeg]` for H.264 output.

## Command line

```
colourtrack res/clip.mp4
```

The command takes one video path. The output folder is the source's folder, with any `res` component replaced by `data`; the folder is created if needed. The example above writes:

- `data/clip-output.mp4`: the annotated video, at 24 frames per second, using H.264 and yuv420p;
- `data/clip-data.json`: positions and spreads for each slot, in this form:
  `{"positions": [[[y, x], ...], ...], "stddevs": [[n, ...], ...]}`

If the command is not given exactly one argument, it uses built-in default paths (see `colourtrack.console.default_paths`).

While it runs, the command shows a live progress table with these columns:

- frame number;
- video time;
- elapsed time;
- time taken by the last frame;
- average time per frame.

When the output is a terminal, the table is redrawn in place and in colour. A summary line is printed at the end.

When the command finishes, it starts two external programs in the background:

- the video player `parole`, on the output video;
- the script `src/plot.py`, looked up relative to the current directory.

On any `ProcessorError` or `OSError`, the command prints the message to standard error and exits with status 1.

## Library use

```python
import numpy as np
from colourtrack.image import RenderOptions, process

frame = np.zeros((480, 640, 3), dtype=np.uint8)
annotated, positions, stddevs = process(frame, (640, 480), RenderOptions())
```

Notes on `process`:

- `image_size` is `(width, height)`.
- The frame is changed in place and also returned.
- `positions` holds one `(y, x)` pair per slot.
- `stddevs` holds one integer spread per slot.

`RenderOptions` has three fields:

- `write_to_video` (default `True`): paint matches and rings into the frame.
- `draw_border` (default `False`): paint the area outside the border white.
- `fill_unhighlighted` (default `False`): paint unmatched pixels black.

Each step of `process` can also be called on its own, from `colourtrack.image`:

- `get_highlighted_pixels`
- `get_avg_pos`
- `get_stddev`
- `draw_markers`

Other entry points:

- `colourtrack.cli.track_frames(frames, image_size, options, on_frame)` processes a whole sequence of frames. It returns a `TrackResult` with `positions`, `stddevs` and `frame_count`.
- `colourtrack.cli.run(source, options, stream)` does what the command does.
- `colourtrack.export.positions_to_json(positions, stddevs, filename_base)` writes `<filename_base>-data.json` and returns its path.
- `colourtrack.colour` has the colour table and the helpers for mirroring slots:
  - `Colour`
  - `colour_from_index`
  - `colour_to_index`
  - `symmetric_pair_index`
  - `to_symmetric_pair`
  - `get_channel_and_others`

Errors are raised as subclasses of `colourtrack.errors.ProcessorError`.

## What it does not do

- The package does not plot the tracked data. The command only launches an external `src/plot.py`, which is not part of this package.
- It does not play video itself. It relies on an external `parole` player being installed.
- The command has no options. Thresholds, border sizes and drawing choices are fixed in the code or set through `RenderOptions` when used as a library.