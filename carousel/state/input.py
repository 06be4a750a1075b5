"""Input state - modifier keys held between events."""

from __future__ import annotations
from dataclasses import dataclass

from ..config import KEY_LEFT_SHIFT, KEY_RIGHT_SHIFT


@dataclass
class InputState:
    """Modifier state used to tell plain and shifted keys apart."""
    left_shift: bool = False
    right_shift: bool = False

    @property
    def shift(self) -> bool:
        """True while either shift key is held."""
        return self.left_shift or self.right_shift

    def update_modifier(self, key: int, down: bool) -> bool:
        """Record a modifier press or release. Returns True if key is a modifier."""
        if key == KEY_LEFT_SHIFT:
            self.left_shift = down
            return True
        if key == KEY_RIGHT_SHIFT:
            self.right_shift = down
            return True
        return False
