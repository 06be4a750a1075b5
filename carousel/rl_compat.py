"""Raylib compatibility layer - cffi struct and string helpers for python-raylib."""

from __future__ import annotations
import os
from typing import Any

import raylib as rl

RL_VERSION = getattr(rl, "__version__", "python-raylib")


def c_str(text: str) -> bytes:
    """Encode a Python string for a raylib `const char *` argument."""
    return os.fsencode(text)


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle."""
    r = rl.ffi.new("Rectangle *")
    r[0].x = float(x)
    r[0].y = float(y)
    r[0].width = float(w)
    r[0].height = float(h)
    return r[0]


def make_vec2(x: float, y: float) -> Any:
    """Create a raylib Vector2."""
    v = rl.ffi.new("Vector2 *")
    v[0].x = float(x)
    v[0].y = float(y)
    return v[0]


def make_color(r: int, g: int, b: int, a: int = 255) -> Any:
    """Create a raylib Color."""
    c = rl.ffi.new("Color *")
    c[0].r = int(r)
    c[0].g = int(g)
    c[0].b = int(b)
    c[0].a = int(a)
    return c[0]


def load_image(path: str) -> Any:
    """Load image from disk. Returns an Image with no data on failure."""
    return rl.LoadImage(c_str(path))


def load_image_from_memory(file_type: str, data: bytes) -> Any:
    """Load an encoded image held in memory, e.g. ('.png', png_bytes)."""
    buf = rl.ffi.from_buffer("unsigned char[]", data)
    return rl.LoadImageFromMemory(c_str(file_type), buf, len(data))


def is_image_valid(img: Any) -> bool:
    """Check that an Image actually holds pixel data."""
    return img.data != rl.ffi.NULL and img.width > 0 and img.height > 0


def resize_image(img: Any, w: int, h: int) -> Any:
    """Resize an Image, returning the resized copy of the struct."""
    p = rl.ffi.new("Image *", img)
    rl.ImageResize(p, int(w), int(h))
    return p[0]


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, 'id', 0) or 0


def is_texture_valid(tex: Any) -> bool:
    """Check if texture is valid and loaded."""
    return get_texture_id(tex) > 0


__all__ = [
    'rl',
    'RL_VERSION',
    'c_str',
    'make_rect',
    'make_vec2',
    'make_color',
    'load_image',
    'load_image_from_memory',
    'is_image_valid',
    'resize_image',
    'get_texture_id',
    'is_texture_valid',
]
