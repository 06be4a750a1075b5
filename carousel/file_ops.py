"""Copy, move and delete the image currently on screen.

Every operation performs the filesystem side effect first and only updates
the tracked image list once it succeeded, so a failed move or delete leaves
the list and index exactly as they were.
"""

from __future__ import annotations
import os

from .errors import EmptyImageSetError, FileOpError
from .fs import Filesystem
from .state.images import ImageListState


def _require_current(images: ImageListState, verb: str) -> str:
    path = images.current_path
    if path is None:
        raise EmptyImageSetError(f"no image to {verb}")
    return path


def destination_for(src: str, dest_folder: str, fs: Filesystem) -> str:
    """Create dest_folder if needed and return where src should land in it."""
    try:
        fs.create_dir_all(dest_folder)
    except FileExistsError:
        pass
    except OSError as e:
        raise FileOpError(f"cannot create destination folder `{dest_folder}`: {e}") from e

    filename = os.path.basename(src)
    if not filename:
        raise FileOpError("failed to read filename for current image")
    return os.path.join(dest_folder, filename)


def copy_current(images: ImageListState, dest_folder: str, fs: Filesystem) -> str:
    """Copy the current image into dest_folder. Returns the new path."""
    path = _require_current(images, "copy")
    dst = destination_for(path, dest_folder, fs)
    try:
        fs.copy_file(path, dst)
    except OSError as e:
        raise FileOpError(f"failed to copy image `{path}`: {e}") from e
    return dst


def move_current(images: ImageListState, dest_folder: str, fs: Filesystem) -> str:
    """Move the current image into dest_folder and stop tracking it."""
    path = _require_current(images, "move")
    dst = destination_for(path, dest_folder, fs)
    try:
        fs.move_file(path, dst)
    except OSError as e:
        raise FileOpError(f"failed to move image `{path}`: {e}") from e
    images.remove(images.index)
    return dst


def delete_current(images: ImageListState, fs: Filesystem) -> str:
    """Delete the current image file and stop tracking it. Returns its path."""
    path = _require_current(images, "delete")
    try:
        fs.remove_file(path)
    except OSError as e:
        raise FileOpError(f"failed to remove image `{path}`: {e}") from e
    images.remove(images.index)
    return path
