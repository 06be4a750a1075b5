"""Filesystem access used by file operations."""

from __future__ import annotations
import errno
import os
import shutil
from abc import ABC, abstractmethod


class Filesystem(ABC):
    """Filesystem operations the viewer needs. Failures raise OSError."""

    @abstractmethod
    def copy_file(self, src: str, dst: str) -> None:
        pass

    @abstractmethod
    def move_file(self, src: str, dst: str) -> None:
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        pass

    @abstractmethod
    def create_dir_all(self, path: str) -> None:
        """Create path and any missing parents."""
        pass


class LocalFilesystem(Filesystem):
    """The real filesystem.

    Existing destination files are left alone unless overwrite is set.
    """

    def __init__(self, overwrite: bool = False):
        self.overwrite = overwrite

    def _check_dest(self, dst: str) -> None:
        if not self.overwrite and os.path.lexists(dst):
            raise FileExistsError(errno.EEXIST, "destination already exists", dst)

    def copy_file(self, src: str, dst: str) -> None:
        self._check_dest(dst)
        shutil.copy2(src, dst)

    def move_file(self, src: str, dst: str) -> None:
        if os.path.exists(dst) and os.path.samefile(src, dst):
            raise shutil.SameFileError(f"{src!r} and {dst!r} are the same file")
        self._check_dest(dst)
        shutil.move(src, dst)

    def remove_file(self, path: str) -> None:
        os.remove(path)

    def create_dir_all(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)
