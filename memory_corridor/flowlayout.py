"""A flow layout that places items left to right and wraps onto new rows."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    """A width and height; the default (-1, -1) marks an unset size."""

    width: int = -1
    height: int = -1

    def expanded_to(self, other: "Size") -> "Size":
        """Return the larger of each dimension of the two sizes."""
        return Size(max(self.width, other.width), max(self.height, other.height))


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in integer coordinates."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def right(self) -> int:
        """Return the x coordinate of the last column inside the rectangle."""
        return self.x + self.width - 1


@dataclass
class LayoutItem:
    """An item placed by the layout; ``geometry`` is set when laid out."""

    size_hint: Size
    minimum_size: Size | None = None
    geometry: Rect | None = None

    def __post_init__(self) -> None:
        if self.minimum_size is None:
            self.minimum_size = self.size_hint


_DEFAULT_SPACING = 10


class FlowLayout:
    """Arranges items in rows, wrapping when the next one would overflow."""

    def __init__(
        self,
        margin: int = -1,
        h_spacing: int = -1,
        v_spacing: int = -1,
        parent_spacing: int | None = None,
    ) -> None:
        # A negative margin means "default", which is zero without a style.
        self.margin = max(margin, 0)
        self._h_space = h_spacing
        self._v_space = v_spacing
        self._parent_spacing = parent_spacing
        self._items: list[LayoutItem] = []
        self.geometry: Rect | None = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def add_item(self, item: LayoutItem) -> None:
        """Append an item to the end of the flow."""
        self._items.append(item)

    def item_at(self, index: int) -> LayoutItem | None:
        """Return the item at ``index``, or None when out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def take_at(self, index: int) -> LayoutItem | None:
        """Remove and return the item at ``index``, or None when out of range."""
        if 0 <= index < len(self._items):
            return self._items.pop(index)
        return None

    def clear(self) -> list[LayoutItem]:
        """Remove every item and return them in order."""
        items, self._items = self._items, []
        return items

    def _smart_spacing(self) -> int:
        return self._parent_spacing if self._parent_spacing is not None else -1

    def horizontal_spacing(self) -> int:
        """Return the set horizontal spacing, or the parent's when unset."""
        return self._h_space if self._h_space >= 0 else self._smart_spacing()

    def vertical_spacing(self) -> int:
        """Return the set vertical spacing, or the parent's when unset."""
        return self._v_space if self._v_space >= 0 else self._smart_spacing()

    def height_for_width(self, width: int) -> int:
        """Return the height the items need when laid out in ``width``."""
        return self._do_layout(Rect(0, 0, width, 0), test_only=True)

    def minimum_size(self) -> Size:
        """Return the largest item minimum plus the margins."""
        size = Size()
        for item in self._items:
            size = size.expanded_to(item.minimum_size)
        extra = 2 * self.margin
        return Size(size.width + extra, size.height + extra)

    def size_hint(self) -> Size:
        """Return the preferred size, which equals the minimum size."""
        return self.minimum_size()

    def set_geometry(self, rect: Rect) -> int:
        """Lay the items out inside ``rect`` and return the height used."""
        self.geometry = rect
        return self._do_layout(rect, test_only=False)

    def _do_layout(self, rect: Rect, test_only: bool) -> int:
        x, y = rect.x, rect.y
        line_height = 0
        space_x = self.horizontal_spacing()
        if space_x == -1:
            space_x = _DEFAULT_SPACING
        space_y = self.vertical_spacing()
        if space_y == -1:
            space_y = _DEFAULT_SPACING

        for item in self._items:
            hint = item.size_hint
            next_x = x + hint.width + space_x
            if next_x - space_x > rect.right() and line_height > 0:
                x = rect.x
                y += line_height + space_y
                next_x = x + hint.width + space_x
                line_height = 0
            if not test_only:
                item.geometry = Rect(x, y, hint.width, hint.height)
            x = next_x
            line_height = max(line_height, hint.height)
        return y + line_height - rect.y