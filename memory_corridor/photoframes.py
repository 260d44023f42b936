"""Photo frame records, their JSON storage and yearly statistics."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any


class PhotoFrameError(Exception):
    """Raised when frame data cannot be read or written."""


def _format_datetime(value: datetime | None) -> str:
    if value is None:
        return ""
    text = value.isoformat(timespec="seconds")
    if value.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def _parse_datetime(text: Any) -> datetime | None:
    if not isinstance(text, str) or not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _format_date(value: date | None) -> str:
    return value.isoformat() if value is not None else ""


def _parse_date(text: Any) -> date | None:
    if not isinstance(text, str) or not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass
class PhotoFrameData:
    """One photo frame: when it was made, the day it shows, text and image."""

    creation_time: datetime | None = None
    date: date | None = None
    description: str = ""
    image_path: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON object form, with dates in ISO 8601."""
        return {
            "creationTime": _format_datetime(self.creation_time),
            "date": _format_date(self.date),
            "description": self.description,
            "imagePath": self.image_path,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PhotoFrameData":
        """Build a frame from a JSON object; missing or bad fields become empty."""
        return cls(
            creation_time=_parse_datetime(data.get("creationTime")),
            date=_parse_date(data.get("date")),
            description=_as_str(data.get("description")),
            image_path=_as_str(data.get("imagePath")),
        )


@dataclass
class YearlySummary:
    """Counts of the frames dated in one year."""

    total_frames: int = 0
    frames_per_month: list[int] = field(default_factory=lambda: [0] * 12)
    keyword_counts: dict[str, int] = field(default_factory=dict)
    most_used_images: list[str] = field(default_factory=list)


class PhotoFrameManager:
    """Holds a list of frames and moves it to and from a JSON file."""

    def __init__(self, frames: list[PhotoFrameData] | None = None) -> None:
        self.frames: list[PhotoFrameData] = list(frames) if frames else []

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
        self.frames = [
            PhotoFrameData.from_dict(entry)
            for entry in document
            if isinstance(entry, dict)
        ]

    def save(self, path: str | Path) -> None:
        """Write the frames to ``path`` as an indented JSON array."""
        text = json.dumps(
            [frame.to_dict() for frame in self.frames],
            indent=4,
            ensure_ascii=False,
        )
        try:
            Path(path).write_text(text + "\n", encoding="utf-8")
        except OSError as exc:
            raise PhotoFrameError(f"Cannot open file for writing: {path}") from exc

    def yearly_summary(self, year: int) -> YearlySummary:
        """Count frames per month and full descriptions for ``year``."""
        summary = YearlySummary()
        counts: dict[str, int] = {}
        for frame in self.frames:
            if frame.date is None or frame.date.year != year:
                continue
            summary.total_frames += 1
            summary.frames_per_month[frame.date.month - 1] += 1
            if frame.description:
                counts[frame.description] = counts.get(frame.description, 0) + 1
        summary.keyword_counts = dict(sorted(counts.items()))
        return summary