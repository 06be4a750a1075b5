"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations

from .types import Rect


def fit_rect(src_w: int, src_h: int, dst_w: int, dst_h: int) -> Rect:
    """Place a source image inside the destination, keeping its aspect ratio.

    Images smaller than the destination in both dimensions are drawn 1:1 and
    centered. Anything else is scaled to touch the destination edges along
    its constraining dimension and centered along the other one. Equal
    aspect ratios are treated as height-constrained.

    Args:
        src_w: Image width in pixels.
        src_h: Image height in pixels.
        dst_w: Viewport width in pixels.
        dst_h: Viewport height in pixels.

    Returns:
        Rect in viewport coordinates. Offsets are truncated, so centering is
        exact to within one pixel.
    """
    if src_w < dst_w and src_h < dst_h:
        return _centered_rect(src_w, src_h, dst_w, dst_h)
    if src_w / src_h > dst_w / dst_h:
        return _fit_width_rect(src_w, src_h, dst_w, dst_h)
    return _fit_height_rect(src_w, src_h, dst_w, dst_h)


def _centered_rect(src_w: int, src_h: int, dst_w: int, dst_h: int) -> Rect:
    x = int((dst_w - src_w) / 2)
    y = int((dst_h - src_h) / 2)
    return Rect(x, y, src_w, src_h)


def _fit_width_rect(src_w: int, src_h: int, dst_w: int, dst_h: int) -> Rect:
    """Full width, centered vertically."""
    height = int((src_h / src_w) * dst_w)
    y = int((dst_h - height) / 2)
    return Rect(0, y, dst_w, height)


def _fit_height_rect(src_w: int, src_h: int, dst_w: int, dst_h: int) -> Rect:
    """Full height, centered horizontally."""
    width = int((src_w / src_h) * dst_h)
    x = int((dst_w - width) / 2)
    return Rect(x, 0, width, dst_h)
