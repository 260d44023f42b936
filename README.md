# memory_corridor

A small photo-memory toolkit. It keeps an album of dated photo frames with
descriptions, models a character walking and jumping through a
side-scrolling gallery of those frames, and produces a yearly report of how
many frames were kept each month and which descriptions came up most.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The command

```
memory-corridor --data album.json
```

reads the photo frame file, prints `Photo frames loaded successfully!`
followed by one line per frame (creation time, date, description, image
path), or `Failed to load photo frames.` when the file cannot be read.

Options:

- `--data PATH`: the photo frame JSON file. Without it a fixed default path
  is used, which will usually not exist, so pass your own file.
- `--music-dir DIR`: the folder holding the background music tracks.
- `--report YEAR`: also print the HTML yearly report for `YEAR`. If no
  frames were loaded, the message `没有可用的相框数据！` goes to standard
  error and the command exits with status 1.

## The data file

Photo frames are stored as a JSON array of objects with the keys
`creationTime`, `date`, `description` and `imagePath`, dates and times in
ISO 8601. Entries that are not objects are skipped; missing or invalid
fields are read as empty.

## Using it as a library

```python
from memory_corridor.photoframes import PhotoFrameManager
from memory_corridor.report import generate_report_html

manager = PhotoFrameManager()
manager.load("album.json")
summary = manager.yearly_summary(2024)
print(summary.total_frames, summary.frames_per_month)
print(generate_report_html("2024", summary))
```

The modules:

- `memory_corridor.photoframes`: `PhotoFrameData` (with `to_dict` and
  `from_dict`), `PhotoFrameManager` (`load`, `save`, `yearly_summary`, the
  `frames` list) and `YearlySummary`. `PhotoFrameError` is raised when a
  file cannot be opened, is not valid JSON, or is not a JSON array.
- `memory_corridor.album`: `Album` (`add`, `remove`, `sort`, `resize`,
  `save`, `load`) holding `PhotoFrame`s kept in date order, ties broken by
  creation time; `compute_frame_sizes` picks frame and button sizes for a
  given width.
- `memory_corridor.flowlayout`: `FlowLayout`, which places `LayoutItem`s
  left to right inside a `Rect` and wraps onto new rows; `Size` and `Rect`.
- `memory_corridor.report`: `YearlyReport` (`years`, `html`, `charts`),
  `generate_report_html`, `monthly_chart`, `keyword_chart` (which returns
  `None` when no frame has a description) and `available_years`, giving
  this year and the ten before it.
- `memory_corridor.game`: `GameWorld`, the character's state, driven by
  `press_key` and `release_key` with a `Key`, advanced by `tick` and
  `advance_animation`; `gallery_layout` places frames in one row, skipping
  those whose image file does not exist.
- `memory_corridor.pet`: `DesktopPet`, whose `PetEmotion` and animation
  path follow `chat_started` and `chat_finished`, and which can be dragged
  with `press`, `drag_to` and `release`.
- `memory_corridor.settings`: `CharacterSettings`, `BackgroundSettings`,
  `GameSettings` and `MusicSettings`, each announcing changes through a
  `Signal`.
- `memory_corridor.app`: `MainWindow` (`navigate`, `open_settings`,
  `yearly_report`), `SettingsPanel`, `BgmPlayer`, `Page`, `font_sizes` and
  the `main` function behind the command.

## What it does not do

- There is no graphical interface: windows, pages, dialogs and the desktop
  pet exist only as state objects, and nothing is drawn on screen.
- No sound is played. `BgmPlayer` only records the track, volume and mute
  state.
- Images are not decoded or displayed. Only the width and height of a PNG
  character sprite sheet are read, to cut it into walking frames.
- There is no chat with an assistant; `DesktopPet` only reacts to being
  told that a chat started or finished.