"""Viewer - navigation, file operations and frame presentation.

The viewer owns the image list and the frame currently on screen. Every
navigation or file operation ends in a render request, which decodes the
current image and keeps it as the frame; present() then draws that frame
fitted to the viewport.
"""

from __future__ import annotations
import os
from typing import Optional

from . import file_ops
from .errors import CarouselError, DecodeError
from .fs import Filesystem
from .logging import log, log_error
from .state import ImageListState
from .types import ImageDecoder, RenderSurface, TextureInfo
from .view_math import fit_rect
from .config import WINDOW_TITLE


class Viewer:
    """Image carousel over an ordered list of paths."""

    def __init__(
        self,
        images: ImageListState,
        dest_folder: str,
        surface: RenderSurface,
        decoder: ImageDecoder,
        fs: Filesystem,
    ):
        self.images = images
        self.dest_folder = dest_folder
        self.surface = surface
        self.decoder = decoder
        self.fs = fs
        self.frame: Optional[TextureInfo] = None

    # ═══════════════════════════════════════════════════════════════════════
    # Rendering
    # ═══════════════════════════════════════════════════════════════════════

    def render(self) -> None:
        """Load the current image as the frame, or blank it if none is left.

        A decode failure is reported and leaves the previous frame up.
        """
        path = self.images.current_path
        if path is None:
            self._set_frame(None)
            self.surface.set_title(WINDOW_TITLE)
            return

        try:
            image = self.decoder.load(path)
        except DecodeError as e:
            log_error(f"[RENDER][ERR] failed to render image {path}: {e}")
            self._set_title(path, failed=True)
            return

        self._set_frame(image)
        self._set_title(path)

    def present(self) -> None:
        """Draw the current frame fitted to the viewport."""
        self.surface.clear()
        ti = self.frame
        if ti is not None:
            screen_w, screen_h = self.surface.viewport_size()
            if screen_w > 0 and screen_h > 0:
                self.surface.draw_image(ti, fit_rect(ti.w, ti.h, screen_w, screen_h))
        self.surface.present()

    def _set_title(self, path: str, failed: bool = False) -> None:
        name = os.path.basename(path)
        if failed:
            name += " [unreadable]"
        self.surface.set_title(
            f"{name} ({self.images.index + 1}/{self.images.count}) - {WINDOW_TITLE}"
        )

    def _set_frame(self, image: Optional[TextureInfo]) -> None:
        old = self.frame
        self.frame = image
        if old is not None and old is not image:
            self.decoder.unload(old)

    def close(self) -> None:
        """Release the frame texture."""
        self._set_frame(None)

    # ═══════════════════════════════════════════════════════════════════════
    # Navigation
    # ═══════════════════════════════════════════════════════════════════════

    def next_image(self) -> None:
        if self.images.increment(1):
            self.render()

    def prev_image(self) -> None:
        self.images.decrement(1)
        self.render()

    def skip_forward(self) -> None:
        if self.images.skip_forward():
            self.render()

    def skip_backward(self) -> None:
        self.images.skip_backward()
        self.render()

    def first(self) -> None:
        self.images.first()
        self.render()

    def last(self) -> None:
        self.images.last()
        self.render()

    # ═══════════════════════════════════════════════════════════════════════
    # File operations
    # ═══════════════════════════════════════════════════════════════════════

    def copy_current(self) -> bool:
        """Copy the current image to the destination folder."""
        try:
            dst = file_ops.copy_current(self.images, self.dest_folder, self.fs)
        except CarouselError as e:
            log_error(f"[COPY][ERR] Failed to copy file: {e}")
            return False
        log(f"[COPY] {self.images.current_path} -> {dst}")
        return True

    def move_current(self) -> bool:
        """Move the current image to the destination folder and show the next."""
        try:
            dst = file_ops.move_current(self.images, self.dest_folder, self.fs)
        except CarouselError as e:
            log_error(f"[MOVE][ERR] Failed to move file: {e}")
            return False
        log(f"[MOVE] -> {dst}, {self.images.count} images left")
        self.render()
        return True

    def delete_current(self) -> bool:
        """Delete the current image file and show the next."""
        try:
            path = file_ops.delete_current(self.images, self.fs)
        except CarouselError as e:
            log_error(f"[DELETE][ERR] {e}")
            return False
        log(f"[DELETE] {path}, {self.images.count} images left")
        self.render()
        return True
