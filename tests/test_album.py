import datetime as dt
import json

import pytest

from memory_corridor.album import (
    MAX_FRAME_WIDTH,
    MIN_BUTTON_WIDTH,
    MIN_FRAME_WIDTH,
    Album,
    PhotoFrame,
    compute_frame_sizes,
)
from memory_corridor.photoframes import PhotoFrameError


@pytest.mark.parametrize("width", [0, 50, 100, 379, 380, 500, 1000, 2000])
def test_frame_sizes_stay_in_bounds(width):
    sizes = compute_frame_sizes(width)
    assert MIN_FRAME_WIDTH <= sizes.frame_width <= MAX_FRAME_WIDTH
    assert sizes.frame_height == sizes.frame_width + 30
    assert sizes.button_width >= MIN_BUTTON_WIDTH
    assert sizes.button_height == 30


def test_frame_sizes_clamped_at_extremes():
    assert compute_frame_sizes(10).frame_width == MIN_FRAME_WIDTH
    assert compute_frame_sizes(190).frame_width == MAX_FRAME_WIDTH


def test_date_label():
    frame = PhotoFrame()
    assert frame.date_label() == "日期"
    frame.date = dt.date(2024, 5, 1)
    assert frame.date_label() == "拍摄日期: 2024-05-01"


def test_json_round_trip():
    frame = PhotoFrame(
        date=dt.date(2023, 3, 4),
        description="海边",
        image_path="/pics/sea.png",
        creation_time=dt.datetime(2023, 3, 4, 10, 20, 30),
    )
    data = frame.to_json()
    assert data["date"] == "2023-03-04"
    assert data["creationTime"] == "2023-03-04T10:20:30"
    copy = PhotoFrame()
    copy.update_from_json(data)
    assert copy.to_json() == data


def test_update_from_json_ignores_invalid_fields():
    frame = PhotoFrame(date=dt.date(2020, 1, 1), description="keep", image_path="a.png")
    frame.update_from_json({"date": "not a date", "description": 5, "creationTime": "bad"})
    assert frame.date == dt.date(2020, 1, 1)
    assert frame.description == "keep"
    assert frame.image_path == "a.png"


def test_edit_changes_image_only_when_given():
    frame = PhotoFrame(image_path="old.png")
    frame.edit(dt.date(2022, 2, 2), "desc")
    assert frame.image_path == "old.png"
    assert frame.description == "desc"
    frame.edit(dt.date(2022, 2, 3), "desc2", "new.png")
    assert frame.image_path == "new.png"
    assert frame.date == dt.date(2022, 2, 3)


def test_add_keeps_date_order():
    album = Album(width=800)
    album.add(dt.date(2024, 6, 1))
    album.add(dt.date(2023, 1, 1))
    album.add(dt.date(2024, 1, 1))
    dates = [frame.date for frame in album]
    assert dates == sorted(dates)
    assert len(album.layout) == 3


def test_same_date_ordered_by_creation_time():
    album = Album()
    late = PhotoFrame(date=dt.date(2024, 1, 1), creation_time=dt.datetime(2024, 1, 2))
    early = PhotoFrame(date=dt.date(2024, 1, 1), creation_time=dt.datetime(2024, 1, 1))
    album.frames = [late, early]
    album.sort()
    assert album.frames == [early, late]


def test_remove_frame():
    album = Album()
    first = album.add(dt.date(2024, 1, 1))
    second = album.add(dt.date(2024, 2, 1))
    album.remove(first)
    assert album.frames == [second]
    assert len(album.layout) == 1


def test_resize_sets_frame_sizes():
    album = Album()
    assert album.resize(600) is None
    album.add(dt.date(2024, 1, 1))
    sizes = album.resize(1000)
    assert sizes == compute_frame_sizes(1000 - 20)
    assert album.frames[0].fixed_size.width == sizes.frame_width
    assert album.frames[0].fixed_size.height == sizes.frame_height


def test_save_and_load_round_trip(tmp_path):
    album = Album()
    frame = album.add(dt.date(2024, 3, 1))
    frame.edit(dt.date(2024, 3, 1), "生日", "cake.png")
    album.add(dt.date(2023, 7, 9))
    path = tmp_path / "album.json"
    album.save(path)

    loaded = Album(data_path=path)
    assert [f.to_json() for f in loaded] == [f.to_json() for f in album]


def test_load_sorts_and_skips_non_objects(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(
        json.dumps(
            [
                {"date": "2024-05-01", "description": "b"},
                3,
                {"date": "2021-05-01", "description": "a"},
            ]
        ),
        encoding="utf-8",
    )
    album = Album()
    album.load(path)
    assert [f.description for f in album] == ["a", "b"]


def test_load_rejects_non_array(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{"date": "2024-01-01"}', encoding="utf-8")
    with pytest.raises(PhotoFrameError):
        Album().load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(PhotoFrameError):
        Album().load(tmp_path / "absent.json")


def test_missing_default_path_gives_empty_album(tmp_path):
    album = Album(data_path=tmp_path / "absent.json")
    assert len(album) == 0