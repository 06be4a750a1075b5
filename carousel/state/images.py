"""Image list state - tracked image paths and the current index."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import SKIP_CHUNKS


def compute_skip_size(count: int) -> int:
    """Step size for skip navigation: about SKIP_CHUNKS stops across the set."""
    return max(1, count // SKIP_CHUNKS + 1)


@dataclass
class ImageListState:
    """Ordered image paths and the index of the one on screen.

    The index is always a valid position while the list is non-empty and 0
    once it is empty. All mutation goes through the methods below so the
    two can never drift apart.
    """
    images: List[str] = field(default_factory=list)
    index: int = 0

    @property
    def count(self) -> int:
        """Total number of images."""
        return len(self.images)

    @property
    def is_empty(self) -> bool:
        return not self.images

    @property
    def current_path(self) -> Optional[str]:
        """Current image path, or None when there are no images.

        Raises IndexError if the index points past the list.
        """
        if not self.images:
            return None
        if not 0 <= self.index < len(self.images):
            raise IndexError(
                f"image index {self.index} > max image index {len(self.images) - 1}"
            )
        return self.images[self.index]

    def increment(self, step: int = 1) -> bool:
        """Advance by step, stopping at the last image.

        Returns False without touching the index when there is nothing to
        move between.
        """
        n = len(self.images)
        if n <= 1:
            return False
        if self.index < n - step:
            self.index += step
        else:
            self.index = n - 1
        return True

    def decrement(self, step: int = 1) -> None:
        """Go back by step, stopping at the first image."""
        if self.index >= step:
            self.index -= step
        else:
            self.index = 0

    def skip_forward(self) -> bool:
        return self.increment(compute_skip_size(len(self.images)))

    def skip_backward(self) -> None:
        self.decrement(compute_skip_size(len(self.images)))

    def first(self) -> None:
        self.index = 0

    def last(self) -> None:
        self.index = len(self.images) - 1 if self.images else 0

    def remove(self, idx: int) -> str:
        """Stop tracking the image at idx and return its path.

        When the removed image was the last one the index steps back so it
        stays in range; otherwise the following image slides into place.

        Raises IndexError if idx is out of bounds.
        """
        if not 0 <= idx < len(self.images):
            raise IndexError(
                f"cannot remove image {idx}: {len(self.images)} images tracked"
            )
        path = self.images.pop(idx)
        if idx >= len(self.images) and self.index != 0:
            self.index -= 1
        return path
