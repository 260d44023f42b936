"""The main window: page switching, settings forwarding, background music and reports."""

from __future__ import annotations

import argparse
import struct
import sys
from datetime import date
from enum import Enum
from pathlib import Path

from .album import Album
from .game import FramePlacement, GameWorld, gallery_layout
from .pet import DesktopPet
from .photoframes import PhotoFrameError, PhotoFrameManager
from .report import YearlyReport
from .settings import (
    DEFAULT_MUSIC_DIR,
    MUSIC_TRACKS,
    BackgroundSettings,
    CharacterSettings,
    GameSettings,
    MusicSettings,
    Signal,
)

NORMAL_WINDOW_SIZE = (400, 300)
SETTINGS_WINDOW_SIZE = (800, 600)
DEFAULT_DATA_PATH = f"{DEFAULT_MUSIC_DIR}/json/data.json"
SETTINGS_TABS = ("背景设置", "声音设置", "游戏设置", "角色设置", "桌宠设置")
NO_FRAMES_MESSAGE = "没有可用的相框数据！"

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def font_sizes(width: int) -> tuple[int, int]:
    """Return the title and button point sizes for a window ``width`` pixels wide."""
    return max(width // 15, 14), max(width // 25, 12)


def _png_size(path: str) -> tuple[int, int] | None:
    """Return the (width, height) of a PNG file, or None if it cannot be read."""
    try:
        with open(path, "rb") as handle:
            header = handle.read(24)
    except OSError:
        return None
    if len(header) < 24 or not header.startswith(_PNG_SIGNATURE) or header[12:16] != b"IHDR":
        return None
    width, height = struct.unpack(">II", header[16:24])
    return width, height


class SettingsPanel:
    """All settings tabs together, passing their changes on through one set of signals."""

    def __init__(self, music_dir: str = DEFAULT_MUSIC_DIR) -> None:
        self.character_image_changed = Signal()
        self.character_scale_changed = Signal()
        self.character_y_offset_changed = Signal()
        self.background_image_changed = Signal()
        self.bgm_track_changed = Signal()
        self.bgm_volume_changed = Signal()
        self.mute_toggled = Signal()
        self.character_speed_changed = Signal()

        self.tabs = list(SETTINGS_TABS)
        self.size = SETTINGS_WINDOW_SIZE
        self.visible = False

        self.background = BackgroundSettings()
        self.music = MusicSettings(music_dir)
        self.game = GameSettings()
        self.character = CharacterSettings()

        self.background.image_changed.connect(self.background_image_changed.emit)
        self.music.track_changed.connect(self.bgm_track_changed.emit)
        self.music.volume_changed.connect(self.bgm_volume_changed.emit)
        self.music.muted_changed.connect(self.mute_toggled.emit)
        self.game.speed_changed.connect(self.character_speed_changed.emit)
        self.character.image_changed.connect(self.character_image_changed.emit)
        self.character.size_changed.connect(self.character_scale_changed.emit)
        self.character.y_offset_changed.connect(self.character_y_offset_changed.emit)


class Page(Enum):
    """The pages of the main window, in stacking order."""

    MAIN_MENU = 0
    ALBUM = 1
    GAME = 2


class BgmPlayer:
    """Background music state: the looping track, its volume and mute."""

    def __init__(self) -> None:
        self.source: str | None = None
        self.playing = False
        self.loops_forever = False
        self.volume = 1.0
        self.muted = False

    def play(self, path: str) -> None:
        """Stop the current track and loop ``path`` forever."""
        self.playing = False
        self.loops_forever = True
        self.source = path
        self.playing = True

    def set_volume(self, volume: int) -> float:
        """Set the volume from a 0-100 slider value; return it as 0.0-1.0."""
        self.volume = max(0.0, min(volume / 100.0, 1.0))
        return self.volume

    def set_muted(self, muted: bool) -> None:
        """Mute or unmute the music."""
        self.muted = bool(muted)


class MainWindow:
    """The application: main menu, album and game pages, settings and music."""

    def __init__(
        self,
        data_path: str | Path = DEFAULT_DATA_PATH,
        music_dir: str = DEFAULT_MUSIC_DIR,
        today: date | None = None,
    ) -> None:
        self.data_path = Path(data_path)
        self.music_dir = music_dir
        self.today = today
        self.normal_size = NORMAL_WINDOW_SIZE
        self.size = NORMAL_WINDOW_SIZE
        self.fullscreen = False
        self.current_page = Page.MAIN_MENU
        self.settings: SettingsPanel | None = None

        self.album = Album()
        if self.data_path.exists():
            try:
                self.album.load(self.data_path)
            except PhotoFrameError:
                pass

        self.game = GameWorld()
        self.pet = DesktopPet()
        self.character_image: str | None = None
        self.background_image: str | None = None

        self.manager = PhotoFrameManager()
        self.gallery: list[FramePlacement] = []
        try:
            self.manager.load(self.data_path)
        except PhotoFrameError:
            self.frames_loaded = False
        else:
            self.frames_loaded = True
            self.gallery = gallery_layout(self.manager.frames)

        self.bgm = BgmPlayer()
        first_track = next(iter(MUSIC_TRACKS))
        self.bgm.play(MusicSettings(music_dir).track_path(first_track))

    def navigate(self, page: Page) -> Page:
        """Show ``page``; the game runs full screen, other pages in the normal window."""
        if page is self.current_page:
            return page
        self.current_page = page
        if page is Page.GAME:
            self.fullscreen = True
        else:
            self.fullscreen = False
            self.size = self.normal_size
        return page

    def open_settings(self) -> SettingsPanel:
        """Show the settings panel, creating and wiring it on first use."""
        if self.settings is None:
            panel = SettingsPanel(self.music_dir)
            panel.character_image_changed.connect(self._on_character_image)
            panel.character_scale_changed.connect(self.game.set_character_scale)
            panel.character_y_offset_changed.connect(self.game.set_character_y_offset)
            panel.background_image_changed.connect(self._on_background_image)
            panel.bgm_track_changed.connect(self.bgm.play)
            panel.bgm_volume_changed.connect(self.bgm.set_volume)
            panel.mute_toggled.connect(self.bgm.set_muted)
            panel.character_speed_changed.connect(self.game.set_character_speed)
            self.settings = panel
        self.settings.visible = True
        return self.settings

    def yearly_report(self) -> YearlyReport:
        """Return the yearly report of the loaded frames; raise if there are none."""
        if not self.manager.frames:
            raise PhotoFrameError(NO_FRAMES_MESSAGE)
        return YearlyReport(self.manager, today=self.today)

    def _on_character_image(self, path: str) -> None:
        self.character_image = path
        size = _png_size(path)
        if size is None:
            return
        try:
            self.game.load_sprite_sheet(*size)
        except ValueError:
            pass

    def _on_background_image(self, path: str) -> None:
        self.background_image = path


def main(argv: list[str] | None = None) -> int:
    """List the stored photo frames and optionally print a yearly report."""
    parser = argparse.ArgumentParser(prog="memory-corridor")
    parser.add_argument("--data", default=DEFAULT_DATA_PATH, help="photo frame JSON file")
    parser.add_argument("--music-dir", default=DEFAULT_MUSIC_DIR, help="folder of music tracks")
    parser.add_argument("--report", type=int, metavar="YEAR", help="print the report for YEAR")
    args = parser.parse_args(argv)

    window = MainWindow(data_path=args.data, music_dir=args.music_dir)
    if window.frames_loaded:
        print("Photo frames loaded successfully!")
        for frame in window.manager.frames:
            fields = frame.to_dict()
            print(
                f"Creation Time: {fields['creationTime']} Date: {fields['date']} "
                f"Description: {fields['description']} Image Path: {fields['imagePath']}"
            )
    else:
        print("Failed to load photo frames.")

    if args.report is not None:
        try:
            report = window.yearly_report()
        except PhotoFrameError as exc:
            print(exc, file=sys.stderr)
            return 1
        print(report.html(args.report))
    return 0