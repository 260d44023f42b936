import json
import struct

import pytest

from memory_corridor.app import (
    BgmPlayer,
    MainWindow,
    Page,
    SettingsPanel,
    font_sizes,
    main,
)
from memory_corridor.game import GameWorld
from memory_corridor.photoframes import PhotoFrameError
from memory_corridor.settings import DEFAULT_BACKGROUNDS, MusicSettings


def _write_png(path, width, height):
    header = b"\x89PNG\r\n\x1a\n" + struct.pack(">I", 13) + b"IHDR" + struct.pack(">II", width, height)
    path.write_bytes(header + b"\x08\x06\x00\x00\x00")


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(
        json.dumps(
            [
                {
                    "creationTime": "2024-05-01T10:00:00",
                    "date": "2024-05-01",
                    "description": "beach",
                    "imagePath": "",
                },
                {
                    "creationTime": "2024-06-01T10:00:00",
                    "date": "2024-06-02",
                    "description": "park",
                    "imagePath": "",
                },
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def window(tmp_path):
    return MainWindow(data_path=tmp_path / "missing.json", music_dir=str(tmp_path))


def test_font_sizes_minimums():
    assert font_sizes(0) == (14, 12)


def test_font_sizes_never_shrink_with_width():
    sizes = [font_sizes(width) for width in range(0, 3000, 50)]
    assert sizes == sorted(sizes)


def test_navigate_game_is_fullscreen_and_back_restores_size(window):
    assert window.navigate(Page.GAME) is Page.GAME
    assert window.fullscreen is True
    window.navigate(Page.MAIN_MENU)
    assert window.fullscreen is False
    assert window.size == (400, 300)
    assert window.current_page is Page.MAIN_MENU


def test_navigate_every_page_fullscreen_only_for_game(window):
    for page in Page:
        window.navigate(page)
        assert window.current_page is page
        assert window.fullscreen is (page is Page.GAME)


def test_default_track_plays_on_start(window, tmp_path):
    expected = MusicSettings(str(tmp_path)).track_path("BGM1 - 甜美的微笑")
    assert window.bgm.source == expected
    assert window.bgm.playing is True
    assert window.bgm.loops_forever is True


def test_open_settings_reuses_panel(window):
    first = window.open_settings()
    second = window.open_settings()
    assert first is second
    assert first.visible is True


def test_scale_forwarded_to_game(window):
    panel = window.open_settings()
    panel.character.set_size(150)
    expected = GameWorld()
    expected.set_character_scale(panel.character.scale)
    assert window.game.character_scale == expected.character_scale


def test_y_offset_forwarded_to_game(window):
    panel = window.open_settings()
    panel.character.set_y_offset(20)
    expected = GameWorld()
    expected.set_character_y_offset(20)
    assert window.game.character_y_offset == expected.character_y_offset


def test_speed_forwarded_to_game(window):
    window.open_settings().game.set_speed(70)
    assert window.game.normal_speed == 70


def test_music_controls_forwarded(window):
    panel = window.open_settings()
    panel.music.set_volume(30)
    panel.music.set_muted(True)
    name = "BGM2 - 蒙德的一日"
    panel.music.select_track(name)
    assert window.bgm.volume == pytest.approx(0.3)
    assert window.bgm.muted is True
    assert window.bgm.source == panel.music.track_path(name)


def test_background_forwarded(window):
    window.open_settings().background.choose_default(2)
    assert window.background_image == DEFAULT_BACKGROUNDS[2]


def test_character_image_loads_sprite_sheet(window, tmp_path):
    sheet = tmp_path / "sheet.png"
    _write_png(sheet, 256, 64)
    window.open_settings().character_image_changed.emit(str(sheet))
    assert window.character_image == str(sheet)
    assert window.game.has_character is True
    assert window.game.frame_height == 64


def test_unreadable_character_image_leaves_game_alone(window):
    window.open_settings().character.select_image(1)
    assert window.game.has_character is False
    assert window.character_image == ":/new/prefix1/Girl_2.png"


def test_settings_panel_tabs():
    panel = SettingsPanel()
    assert panel.tabs == ["背景设置", "声音设置", "游戏设置", "角色设置", "桌宠设置"]


def test_bgm_volume_is_clamped():
    player = BgmPlayer()
    assert player.set_volume(150) == 1.0
    assert player.set_volume(-5) == 0.0


def test_yearly_report_without_frames_raises(window):
    with pytest.raises(PhotoFrameError):
        window.yearly_report()


def test_yearly_report_with_frames(data_file):
    window = MainWindow(data_path=data_file)
    assert window.frames_loaded is True
    assert len(window.album) == 2
    html = window.yearly_report().html(2024)
    assert "beach" in html
    assert "park" in html


def test_main_prints_report(data_file, capsys):
    assert main(["--data", str(data_file), "--report", "2024"]) == 0
    out = capsys.readouterr().out
    assert "Photo frames loaded successfully!" in out
    assert "Description: beach" in out
    assert "2024 年度相框报告" in out


def test_main_without_data_reports_failure(tmp_path, capsys):
    assert main(["--data", str(tmp_path / "none.json"), "--report", "2024"]) == 1
    captured = capsys.readouterr()
    assert "Failed to load photo frames." in captured.out
    assert "没有可用的相框数据！" in captured.err