"""Core data types for carousel."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, List, NamedTuple, Tuple

if TYPE_CHECKING:
    from .input_handler import InputEvent


class Action(Enum):
    """User intents produced by translating raw input events."""
    QUIT = auto()
    RE_RENDER = auto()
    NEXT = auto()
    PREV = auto()
    SKIP_FORWARD = auto()
    SKIP_BACK = auto()
    FIRST = auto()
    LAST = auto()
    COPY = auto()
    MOVE = auto()
    DELETE = auto()
    NOOP = auto()


class Rect(NamedTuple):
    """Placement of an image inside the viewport, in pixels."""
    x: int
    y: int
    width: int
    height: int


@dataclass
class TextureInfo:
    """Information about a loaded texture."""
    tex: Any  # rl.Texture2D - using Any to avoid raylib import
    w: int
    h: int
    path: str = ""


class RenderSurface(ABC):
    """Drawable window area the viewer presents frames on."""

    @abstractmethod
    def viewport_size(self) -> Tuple[int, int]:
        """Current drawable size as (width, height)."""

    @abstractmethod
    def clear(self) -> None:
        """Start a frame and clear it to the background colour."""

    @abstractmethod
    def draw_image(self, image: TextureInfo, rect: Rect) -> None:
        """Draw the whole image scaled into rect."""

    @abstractmethod
    def present(self) -> None:
        """Finish the frame and show it."""

    def set_title(self, title: str) -> None:
        """Update the window title. Optional for surfaces without one."""


class ImageDecoder(ABC):
    """Loads image files into drawable textures."""

    @abstractmethod
    def load(self, path: str) -> TextureInfo:
        """Decode path. Raises DecodeError on failure."""

    def unload(self, image: TextureInfo) -> None:
        """Release resources held by a loaded image."""


class EventSource(ABC):
    """Yields raw input events once per frame."""

    @abstractmethod
    def poll_events(self) -> List["InputEvent"]:
        """Events received since the previous poll, oldest first."""

    def close(self) -> None:
        """Release the underlying window, if any."""
