"""Exception types for carousel."""

from __future__ import annotations


class CarouselError(Exception):
    """Base class for recoverable and startup errors."""


class StartupError(CarouselError):
    """Window creation or argument validation failed before the main loop."""


class DecodeError(CarouselError):
    """A single image could not be loaded."""


class EmptyImageSetError(CarouselError):
    """A file operation was requested with no image on screen."""


class FileOpError(CarouselError):
    """A copy, move or delete failed on the filesystem."""
