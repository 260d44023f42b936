"""Side-scrolling world: a walking, jumping character and a gallery of photo frames."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Iterable

from .flowlayout import Rect
from .photoframes import PhotoFrameData

SCENE_WIDTH = 50000
SCENE_HEIGHT = 600
BACKGROUND_Y_OFFSET = -500

MOVE_INTERVAL_MS = 30
ANIMATION_INTERVAL_MS = 100

GALLERY_START_X = 100
GALLERY_START_Y = 100
GALLERY_FRAME_SIZE = 150
GALLERY_GAP = 100
DESCRIPTION_GAP = 5
TIMESTAMP_RISE = 20


class Key(Enum):
    """Keys the world reacts to."""

    A = auto()
    LEFT = auto()
    D = auto()
    RIGHT = auto()
    W = auto()
    SPACE = auto()
    SHIFT = auto()
    OTHER = auto()


_LEFT_KEYS = {Key.A, Key.LEFT}
_RIGHT_KEYS = {Key.D, Key.RIGHT}
_JUMP_KEYS = {Key.W, Key.SPACE}


class Facing(Enum):
    """The direction the character looks in."""

    RIGHT = auto()
    LEFT = auto()


@dataclass(frozen=True)
class FramePlacement:
    """Where one photo frame, its description and its timestamp sit in the world."""

    image_path: str
    description: str
    timestamp: str
    x: int
    y: int
    size: int
    description_pos: tuple[int, int]
    timestamp_pos: tuple[int, int]


def gallery_layout(frames: Iterable[PhotoFrameData]) -> list[FramePlacement]:
    """Place frames in one row; frames whose image file is missing are skipped."""
    placements = []
    x = GALLERY_START_X
    y = GALLERY_START_Y
    for frame in frames:
        if not frame.image_path or not Path(frame.image_path).is_file():
            continue
        placements.append(
            FramePlacement(
                image_path=frame.image_path,
                description=frame.description,
                timestamp=frame.to_dict()["creationTime"],
                x=x,
                y=y,
                size=GALLERY_FRAME_SIZE,
                description_pos=(x, y + GALLERY_FRAME_SIZE + DESCRIPTION_GAP),
                timestamp_pos=(x, y - TIMESTAMP_RISE),
            )
        )
        x += GALLERY_FRAME_SIZE + GALLERY_GAP
    return placements


class GameWorld:
    """State of the scrolling scene, advanced one timer tick at a time."""

    def __init__(self) -> None:
        self.scene_width = SCENE_WIDTH
        self.scene_height = SCENE_HEIGHT
        self.ground_y = 600
        self.frame_width = 128
        self.frame_height = 0
        self.frames: list[Rect] = []
        self.current_frame = 0
        self.has_character = False
        self.x = 0.0
        self.y = 0.0
        self.transform = (1.0, 1.0)
        self.character_scale = 1.0
        self.character_y_offset = 0
        self.facing = Facing.RIGHT
        self.is_jumping = False
        self.vertical_velocity = 0.0
        self.gravity = 1.0
        self.jump_speed = 15.0
        self.moving_left = False
        self.moving_right = False
        self.is_speed_up = False
        self.normal_speed = 5
        self.accelerated_speed = 10

    def _standing_y(self) -> float:
        return self.ground_y - self.frame_height * self.character_scale + self.character_y_offset

    def _apply_transform(self) -> None:
        sign = 1.0 if self.facing is Facing.RIGHT else -1.0
        self.transform = (sign * self.character_scale, self.character_scale)

    def load_sprite_sheet(self, width: int, height: int) -> None:
        """Cut a sprite sheet of the given size into walking frames and stand the character up."""
        if width <= 0 or height <= 0:
            raise ValueError(f"sprite sheet has no image: {width}x{height}")
        count = width // self.frame_width
        if count == 0:
            raise ValueError("sprite sheet holds no frames")
        self.frame_height = height
        self.frames = [
            Rect(i * self.frame_width, 0, self.frame_width, height) for i in range(count)
        ]
        self.has_character = True
        self._apply_transform()
        self.x = 0.0
        self.y = self._standing_y()

    def set_character_scale(self, scale: float) -> None:
        """Scale the character (three times the setting) and keep its feet on the ground."""
        self.character_scale = scale * 3
        if self.has_character:
            self._apply_transform()
            self.y = self._standing_y()

    def set_character_y_offset(self, offset: int) -> None:
        """Shift the character vertically (three times the setting)."""
        self.character_y_offset = offset * 3
        if self.has_character:
            self.y = self._standing_y()

    def set_character_speed(self, speed: int) -> None:
        """Set the walking speed; running is twice as fast."""
        self.normal_speed = speed
        self.accelerated_speed = speed * 2

    def press_key(self, key: Key) -> bool:
        """Handle a key press; return False when the key is not one the world uses."""
        if key in _LEFT_KEYS:
            self.moving_left = True
        elif key in _RIGHT_KEYS:
            self.moving_right = True
        elif key in _JUMP_KEYS:
            if not self.is_jumping:
                self.is_jumping = True
                self.vertical_velocity = self.jump_speed
        elif key is Key.SHIFT:
            self.is_speed_up = True
        else:
            return False
        return True

    def release_key(self, key: Key) -> bool:
        """Handle a key release; return False when the key is not one the world uses."""
        if key in _LEFT_KEYS:
            self.moving_left = False
        elif key in _RIGHT_KEYS:
            self.moving_right = False
        elif key is Key.SHIFT:
            self.is_speed_up = False
        else:
            return False
        return True

    def ground_level(self) -> float:
        """Return the y the character stands at, using its whole-pixel height."""
        return self.ground_y - int(self.frame_height * self.character_scale) + self.character_y_offset

    def tick(self) -> None:
        """Move the character one step and apply gravity while jumping."""
        if not self.has_character:
            return
        speed = self.accelerated_speed if self.is_speed_up else self.normal_speed
        width = int(self.frame_width * self.character_scale)
        ground = self.ground_level()
        x, y = self.x, self.y

        if self.moving_left and not self.moving_right:
            x = max(x - speed, 0)
            if self.facing is not Facing.LEFT:
                self.facing = Facing.LEFT
                self._apply_transform()
                x += width
        elif self.moving_right and not self.moving_left:
            x = min(x + speed, self.scene_width - width)
            if self.facing is not Facing.RIGHT:
                self.facing = Facing.RIGHT
                self._apply_transform()
                x -= width

        if self.is_jumping:
            self.vertical_velocity -= self.gravity
            y -= self.vertical_velocity
            if abs(y - ground) < 1.0 or y > ground:
                y = ground
                self.is_jumping = False
                self.vertical_velocity = 0.0

        self.x, self.y = x, y

    def advance_animation(self) -> None:
        """Show the next walking frame, wrapping around."""
        if not self.frames or not self.has_character:
            return
        self.current_frame = (self.current_frame + 1) % len(self.frames)