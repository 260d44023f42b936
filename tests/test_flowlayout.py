import pytest

from memory_corridor.flowlayout import FlowLayout, LayoutItem, Rect, Size


def _layout(count, width=50, height=20, spacing=10):
    layout = FlowLayout(margin=10, h_spacing=spacing, v_spacing=spacing)
    for _ in range(count):
        layout.add_item(LayoutItem(Size(width, height)))
    return layout


def test_rect_right_is_last_column():
    assert Rect(0, 0, 200, 0).right() == 199


def test_size_expanded_to():
    assert Size(5, 30).expanded_to(Size(10, 2)) == Size(10, 30)


def test_minimum_size_defaults_to_size_hint():
    item = LayoutItem(Size(4, 6))
    assert item.minimum_size == item.size_hint


def test_unset_spacing_without_parent():
    layout = FlowLayout()
    assert layout.horizontal_spacing() == -1
    assert layout.vertical_spacing() == -1


def test_unset_spacing_uses_parent():
    layout = FlowLayout(parent_spacing=7, v_spacing=3)
    assert layout.horizontal_spacing() == 7
    assert layout.vertical_spacing() == 3


def test_item_access_and_take():
    layout = _layout(3)
    first = layout.item_at(0)
    assert layout.item_at(5) is None
    assert layout.take_at(-1) is None
    assert layout.take_at(0) is first
    assert len(layout) == 2


def test_clear_returns_items():
    layout = _layout(4)
    items = list(layout)
    assert layout.clear() == items
    assert len(layout) == 0


def test_single_row_when_wide():
    layout = _layout(3)
    height = layout.set_geometry(Rect(0, 0, 10_000, 0))
    assert height == 20
    ys = {item.geometry.y for item in layout}
    assert ys == {0}
    xs = [item.geometry.x for item in layout]
    assert xs == sorted(xs)


def test_each_item_on_own_row_when_narrow():
    layout = _layout(4)
    layout.set_geometry(Rect(5, 7, 1, 0))
    assert all(item.geometry.x == 5 for item in layout)
    ys = [item.geometry.y for item in layout]
    assert ys[0] == 7
    assert ys == sorted(set(ys))


def test_height_for_width_matches_set_geometry():
    layout = _layout(7)
    predicted = layout.height_for_width(180)
    assert all(item.geometry is None for item in layout)
    assert layout.set_geometry(Rect(0, 0, 180, 0)) == predicted


@pytest.mark.parametrize("width", [1, 60, 130, 500])
def test_items_stay_within_width_except_first_in_row(width):
    layout = _layout(6)
    rect = Rect(0, 0, width, 0)
    layout.set_geometry(rect)
    for item in layout:
        g = item.geometry
        if g.x != rect.x:
            assert g.x + g.width - 1 <= rect.right()


def test_minimum_size_includes_margins():
    layout = FlowLayout(margin=4)
    layout.add_item(LayoutItem(Size(10, 5), minimum_size=Size(8, 3)))
    layout.add_item(LayoutItem(Size(2, 9)))
    assert layout.minimum_size() == Size(8 + 8, 9 + 8)
    assert layout.size_hint() == layout.minimum_size()


def test_empty_layout_has_zero_height():
    assert FlowLayout().height_for_width(300) == 0