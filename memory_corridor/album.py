"""The photo album: frames with a date, a description and an image, kept in date order."""

from __future__ import annotations

import datetime as dt
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .flowlayout import FlowLayout, LayoutItem, Rect, Size
from .photoframes import PhotoFrameData, PhotoFrameError

MAX_FRAME_WIDTH = 180
MIN_FRAME_WIDTH = 80
FRAME_SPACING = 10
DESCRIPTION_HEIGHT = 30
MIN_BUTTON_WIDTH = 80
BUTTON_HEIGHT = 30
ALBUM_MARGIN = 10
DEFAULT_FRAME_SIZE = Size(150, 150)
NO_DATE_LABEL = "日期"


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class FrameSizes:
    """Frame and button sizes chosen for one album width."""

    frame_width: int
    frame_height: int
    button_width: int
    button_height: int


def compute_frame_sizes(available_width: int) -> FrameSizes:
    """Choose frame and button sizes so that whole frames fit in each row."""
    per_row = max(1, _trunc_div(available_width, MAX_FRAME_WIDTH + FRAME_SPACING))
    frame_width = _trunc_div(available_width, per_row) - FRAME_SPACING
    frame_width = max(MIN_FRAME_WIDTH, min(frame_width, MAX_FRAME_WIDTH))
    return FrameSizes(
        frame_width=frame_width,
        frame_height=frame_width + DESCRIPTION_HEIGHT,
        button_width=max(MIN_BUTTON_WIDTH, _trunc_div(available_width, 8)),
        button_height=BUTTON_HEIGHT,
    )


@dataclass(eq=False)
class PhotoFrame:
    """One frame of the album; ``creation_time`` breaks ties between equal dates."""

    date: dt.date | None = None
    description: str = ""
    image_path: str = ""
    creation_time: dt.datetime = field(default_factory=dt.datetime.now)
    fixed_size: Size | None = None

    def date_label(self) -> str:
        """Return the text shown under the frame for its date."""
        if self.date is None:
            return NO_DATE_LABEL
        return f"拍摄日期: {self.date.isoformat()}"

    def set_image(self, path: str) -> None:
        """Show the image at ``path`` in this frame."""
        self.image_path = path

    def edit(self, date: dt.date, description: str, image_path: str | None = None) -> None:
        """Apply an edit: new date and description, and a new image if one was picked."""
        self.date = date
        self.description = description
        if image_path is not None and image_path != self.image_path:
            self.set_image(image_path)

    def to_json(self) -> dict[str, str]:
        """Return the frame as a JSON object with ISO 8601 dates."""
        return PhotoFrameData(
            creation_time=self.creation_time,
            date=self.date,
            description=self.description,
            image_path=self.image_path,
        ).to_dict()

    def update_from_json(self, obj: dict[str, Any]) -> None:
        """Take over the string fields of ``obj``; invalid dates are ignored."""
        parsed = PhotoFrameData.from_dict(obj)
        if isinstance(obj.get("imagePath"), str):
            self.set_image(parsed.image_path)
        if isinstance(obj.get("description"), str):
            self.description = parsed.description
        if parsed.date is not None:
            self.date = parsed.date
        if parsed.creation_time is not None:
            self.creation_time = parsed.creation_time


def _sort_key(frame: PhotoFrame) -> tuple[bool, dt.date, float]:
    return (
        frame.date is not None,
        frame.date or dt.date.min,
        frame.creation_time.timestamp(),
    )


class Album:
    """An ordered collection of frames laid out in a flow of rows."""

    def __init__(self, width: int = 400, data_path: str | Path | None = None) -> None:
        self.width = width
        self.frames: list[PhotoFrame] = []
        self.button_width = MIN_BUTTON_WIDTH
        self.layout = FlowLayout(
            margin=ALBUM_MARGIN, h_spacing=FRAME_SPACING, v_spacing=FRAME_SPACING
        )
        if data_path is not None and Path(data_path).exists():
            self.load(data_path)

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self):
        return iter(self.frames)

    def add(self, date: dt.date | None = None) -> PhotoFrame:
        """Add a new frame for ``date`` (today by default) and return it."""
        frame = PhotoFrame(date=date if date is not None else dt.date.today())
        self.frames.append(frame)
        self.sort()
        self._adjust_sizes()
        return frame

    def remove(self, frame: PhotoFrame) -> None:
        """Remove ``frame`` from the album if it is there."""
        self.frames = [kept for kept in self.frames if kept is not frame]
        self.sort()
        self._adjust_sizes()

    def sort(self) -> None:
        """Order frames by date, then by creation time, and rebuild the layout."""
        self.frames.sort(key=_sort_key)
        self._sync_layout()

    def resize(self, width: int) -> FrameSizes | None:
        """Fit the frames to a new album width; None when the album is empty."""
        self.width = width
        return self._adjust_sizes()

    def _adjust_sizes(self) -> FrameSizes | None:
        if not self.frames:
            return None
        sizes = compute_frame_sizes(self.width - 2 * self.layout.margin)
        for frame in self.frames:
            frame.fixed_size = Size(sizes.frame_width, sizes.frame_height)
        self.button_width = sizes.button_width
        self._sync_layout()
        return sizes

    def _sync_layout(self) -> None:
        self.layout.clear()
        for frame in self.frames:
            self.layout.add_item(LayoutItem(size_hint=frame.fixed_size or DEFAULT_FRAME_SIZE))
        self.layout.set_geometry(Rect(0, 0, self.width, 0))

    def save(self, path: str | Path) -> None:
        """Write every frame to ``path`` as an indented JSON array."""
        text = json.dumps(
            [frame.to_json() for frame in self.frames], indent=4, ensure_ascii=False
        )
        try:
            Path(path).write_text(text + "\n", encoding="utf-8")
        except OSError as exc:
            raise PhotoFrameError(f"Cannot open file for writing: {path}") from exc

    def load(self, path: str | Path) -> None:
        """Replace the frames with those in the JSON array at ``path``."""
        try:
            raw = Path(path).read_bytes()
        except OSError as exc:
            raise PhotoFrameError(f"Cannot open file: {path}") from exc
        try:
            document = json.loads(raw)
        except (ValueError, UnicodeDecodeError) as exc:
            raise PhotoFrameError(f"JSON parse error: {exc}") from exc
        if not isinstance(document, list):
            raise PhotoFrameError("JSON is not an array!")

        frames = []
        for entry in document:
            if not isinstance(entry, dict):
                continue
            frame = PhotoFrame()
            frame.update_from_json(entry)
            frames.append(frame)
        self.frames = frames
        self._adjust_sizes()
        self.sort()