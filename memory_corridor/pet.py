"""The desktop pet: an animated companion whose mood follows the chat, dragged by the mouse."""

from __future__ import annotations

from enum import Enum


class PetEmotion(Enum):
    """The moods the pet can show."""

    NORMAL = "normal"
    THINKING = "thinking"
    HAPPY = "happy"


ANIMATIONS = {
    PetEmotion.NORMAL: ":/characters/character/shime1.gif",
    PetEmotion.THINKING: ":/characters/character/thinking.gif",
    PetEmotion.HAPPY: ":/characters/character/happy.gif",
}


class DesktopPet:
    """Tracks the pet's mood, its current animation and its window position while dragged."""

    def __init__(self, window_x: int = 0, window_y: int = 0) -> None:
        self.emotion = PetEmotion.NORMAL
        self.animation = ""
        self.animation_loads = 0
        self.position = (window_x, window_y)
        self.dragging = False
        self._drag_offset = (0.0, 0.0)
        self._update_animation()

    def _update_animation(self) -> None:
        path = ANIMATIONS[self.emotion]
        # Only reload when the file actually changes.
        if path != self.animation:
            self.animation = path
            self.animation_loads += 1

    def set_emotion(self, emotion: PetEmotion) -> None:
        """Switch to ``emotion`` and its animation; nothing happens if it is unchanged."""
        if emotion is self.emotion:
            return
        self.emotion = emotion
        self._update_animation()

    def chat_started(self) -> None:
        """React to a chat request being sent: the pet thinks."""
        self.set_emotion(PetEmotion.THINKING)

    def chat_finished(self) -> None:
        """React to a chat reply arriving: the pet is happy."""
        self.set_emotion(PetEmotion.HAPPY)

    def press(self, x: float, y: float, window_x: int, window_y: int) -> None:
        """Start dragging from the global point (x, y) with the window at (window_x, window_y)."""
        self.position = (window_x, window_y)
        self.dragging = True
        self._drag_offset = (x - window_x, y - window_y)

    def drag_to(self, x: float, y: float) -> tuple[int, int]:
        """Move the window so it follows the mouse at (x, y); return the window position."""
        if self.dragging:
            dx, dy = self._drag_offset
            self.position = (round(x - dx), round(y - dy))
        return self.position

    def release(self) -> None:
        """Stop dragging."""
        self.dragging = False