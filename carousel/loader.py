"""Image loading - decode files into GPU textures.

raylib reads the common formats directly. Anything it rejects (WebP, TIFF,
or files with a misleading extension) and photos with an EXIF rotation go
through Pillow and are handed to raylib re-encoded as PNG.
"""

from __future__ import annotations
import io
import os
from typing import Any

from PIL import Image, ImageOps, UnidentifiedImageError

from .config import MAX_IMAGE_DIMENSION, MAX_FILE_SIZE_MB
from .errors import DecodeError
from .image_utils import get_file_size_mb
from .logging import log
from .rl_compat import (
    rl, load_image as rl_load_image, load_image_from_memory,
    is_image_valid, resize_image, is_texture_valid,
)
from .types import ImageDecoder, TextureInfo

EXIF_ORIENTATION = 0x0112


def pil_to_png_bytes(path: str) -> bytes:
    """Decode path with Pillow, apply EXIF orientation and re-encode as PNG."""
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        if img.mode not in ("RGB", "RGBA"):
            img = img.convert("RGBA")
        buf = io.BytesIO()
        img.save(buf, format="PNG")
    return buf.getvalue()


def has_exif_rotation(path: str) -> bool:
    """True when path carries an EXIF orientation other than upright.

    raylib ignores EXIF, so such files have to be decoded by Pillow.
    Unreadable files return False and are left to the normal load path.
    """
    try:
        with Image.open(path) as img:
            return img.getexif().get(EXIF_ORIENTATION, 1) != 1
    except (UnidentifiedImageError, Image.DecompressionBombError,
            OSError, ValueError):
        return False


def _load_with_pillow(path: str) -> Any:
    try:
        data = pil_to_png_bytes(path)
    except (UnidentifiedImageError, Image.DecompressionBombError,
            OSError, ValueError) as e:
        raise DecodeError(f"unsupported or corrupt image: {e}") from e
    log(f"[LOAD] Decoded with Pillow: {os.path.basename(path)}")
    img = load_image_from_memory(".png", data)
    if not is_image_valid(img):
        rl.UnloadImage(img)
        raise DecodeError("empty image")
    return img


def load_image_cpu_only(path: str) -> Any:
    """Load path into a CPU-side raylib Image, downscaled to the size limit."""
    try:
        file_size_mb = get_file_size_mb(path)
    except OSError as e:
        raise DecodeError(str(e)) from e
    if file_size_mb > MAX_FILE_SIZE_MB:
        raise DecodeError(f"file too large: {file_size_mb:.1f}MB")

    if has_exif_rotation(path):
        img = _load_with_pillow(path)
    else:
        img = rl_load_image(path)
        if not is_image_valid(img):
            rl.UnloadImage(img)
            img = _load_with_pillow(path)

    w, h = img.width, img.height
    if w > MAX_IMAGE_DIMENSION or h > MAX_IMAGE_DIMENSION:
        scale = min(MAX_IMAGE_DIMENSION / w, MAX_IMAGE_DIMENSION / h)
        new_w = max(1, int(w * scale))
        new_h = max(1, int(h * scale))
        log(f"[LOAD][RESIZE] {os.path.basename(path)}: {w}x{h} -> {new_w}x{new_h}")
        img = resize_image(img, new_w, new_h)

    return img


class RaylibDecoder(ImageDecoder):
    """Decoder producing raylib textures. Needs an open window (GL context)."""

    def load(self, path: str) -> TextureInfo:
        img = load_image_cpu_only(path)
        tex = rl.LoadTextureFromImage(img)
        w, h = img.width, img.height
        rl.UnloadImage(img)
        if not is_texture_valid(tex):
            raise DecodeError(f"texture upload failed for {w}x{h} image")
        rl.SetTextureFilter(tex, rl.TEXTURE_FILTER_BILINEAR)
        return TextureInfo(tex=tex, w=w, h=h, path=path)

    def unload(self, image: TextureInfo) -> None:
        if is_texture_valid(image.tex):
            rl.UnloadTexture(image.tex)
