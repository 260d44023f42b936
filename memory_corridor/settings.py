"""Settings panels for the character, the background, the game and the music."""

from __future__ import annotations

from typing import Any, Callable

CHARACTER_IMAGES = (
    ("角色1", ":/new/prefix1/Girl_1.png"),
    ("角色2", ":/new/prefix1/Girl_2.png"),
    ("角色3", ":/new/prefix1/Girl_3.png"),
    ("角色4", ":/new/prefix1/Boy_1.png"),
    ("角色5", ":/new/prefix1/Boy_2.png"),
    ("角色6", ":/new/prefix1/Boy_3.png"),
)
SIZE_RANGE = (50, 200)
SIZE_DEFAULT = 100
Y_OFFSET_RANGE = (-100, 100)
Y_OFFSET_DEFAULT = 0

DEFAULT_BACKGROUNDS = tuple(f":/new/prefix1/background{i}.png" for i in range(1, 9))
BACKGROUND_COLUMNS = 4
NO_PREVIEW = "当前无预览"

SPEED_RANGE = (10, 100)
SPEED_DEFAULT = 50
SPEED_LABEL = "角色移动速度：{}"

DEFAULT_MUSIC_DIR = "D:/程设大作业/Memory_Corridor"
MUSIC_TRACKS = {
    "BGM1 - 甜美的微笑": "甜美的微笑.mp3",
    "BGM2 - 蒙德的一日": "蒙德的一日.mp3",
    "BGM3 - 风所爱之城": "风所爱之城.mp3",
}
VOLUME_RANGE = (0, 100)
VOLUME_DEFAULT = 50


class Signal:
    """A list of callbacks that are all called when the signal is emitted."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        """Call ``callback`` on every later emission."""
        self._callbacks.append(callback)

    def emit(self, *args: Any) -> None:
        """Call every connected callback with ``args``, in connection order."""
        for callback in list(self._callbacks):
            callback(*args)


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(value, high))


class CharacterSettings:
    """Character look: sprite image, size and vertical offset."""

    def __init__(self) -> None:
        self.image_changed = Signal()
        self.size_changed = Signal()
        self.y_offset_changed = Signal()
        self.images = list(CHARACTER_IMAGES)
        self.index = 0
        self.size_value = SIZE_DEFAULT
        self.y_offset = Y_OFFSET_DEFAULT

    @property
    def image_path(self) -> str:
        return self.images[self.index][1]

    @property
    def scale(self) -> float:
        return self.size_value / 100.0

    def select_image(self, index: int) -> str:
        """Pick the image at ``index``, announce its path and return it."""
        if not 0 <= index < len(self.images):
            raise IndexError(f"no character image at index {index}")
        self.index = index
        path = self.image_path
        self.image_changed.emit(path)
        return path

    def set_size(self, value: int) -> float:
        """Set the size slider (kept in range); announce the scale if it changed."""
        value = _clamp(value, SIZE_RANGE)
        if value != self.size_value:
            self.size_value = value
            self.size_changed.emit(self.scale)
        return self.scale

    def set_y_offset(self, value: int) -> int:
        """Set the vertical offset slider (kept in range); announce it if it changed."""
        value = _clamp(value, Y_OFFSET_RANGE)
        if value != self.y_offset:
            self.y_offset = value
            self.y_offset_changed.emit(value)
        return self.y_offset


class BackgroundSettings:
    """Background picker: one of the built-in images or a file chosen by the user."""

    def __init__(self) -> None:
        self.image_changed = Signal()
        self.defaults = list(DEFAULT_BACKGROUNDS)
        self.preview: str | None = None

    def grid_position(self, index: int) -> tuple[int, int]:
        """Return the (row, column) of a built-in background's button."""
        return divmod(index, BACKGROUND_COLUMNS)

    def choose_default(self, index: int) -> str:
        """Pick built-in background ``index``, announce its path and return it."""
        if not 0 <= index < len(self.defaults):
            raise IndexError(f"no default background at index {index}")
        path = self.defaults[index]
        self.preview = path
        self.image_changed.emit(path)
        return path

    def choose_custom(self, path: str) -> bool:
        """Pick a background file; an empty path (cancelled choice) changes nothing."""
        if not path:
            return False
        self.preview = path
        self.image_changed.emit(path)
        return True


class GameSettings:
    """Game options: the character's walking speed."""

    def __init__(self) -> None:
        self.speed_changed = Signal()
        self.speed = SPEED_DEFAULT
        self.label = SPEED_LABEL.format(self.speed)

    def set_speed(self, value: int) -> int:
        """Set the speed slider (kept in range); update the label and announce a change."""
        value = _clamp(value, SPEED_RANGE)
        if value != self.speed:
            self.speed = value
            self.label = SPEED_LABEL.format(value)
            self.speed_changed.emit(value)
        return self.speed


class MusicSettings:
    """Background music: track, volume and mute."""

    def __init__(self, music_dir: str = DEFAULT_MUSIC_DIR) -> None:
        self.track_changed = Signal()
        self.volume_changed = Signal()
        self.muted_changed = Signal()
        self.music_dir = music_dir
        self.tracks = list(MUSIC_TRACKS)
        self.track = self.tracks[0]
        self.volume = VOLUME_DEFAULT
        self.muted = False

    def track_path(self, name: str) -> str:
        """Return the file of the track called ``name``, or an empty string if unknown."""
        filename = MUSIC_TRACKS.get(name)
        if filename is None:
            return ""
        return f"{self.music_dir}/{filename}"

    def select_track(self, name: str) -> str:
        """Switch to the track called ``name``; announce its file if the track changed."""
        if name not in MUSIC_TRACKS:
            raise KeyError(name)
        path = self.track_path(name)
        if name != self.track:
            self.track = name
            self.track_changed.emit(path)
        return path

    def set_volume(self, value: int) -> int:
        """Set the volume slider (kept in range); announce a change."""
        value = _clamp(value, VOLUME_RANGE)
        if value != self.volume:
            self.volume = value
            self.volume_changed.emit(value)
        return self.volume

    def set_muted(self, muted: bool) -> bool:
        """Tick or untick mute; announce a change."""
        muted = bool(muted)
        if muted != self.muted:
            self.muted = muted
            self.muted_changed.emit(muted)
        return self.muted