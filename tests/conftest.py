"""Shared fakes for the viewer's collaborators.

Nothing here touches raylib or opens a window: the filesystem, decoder,
surface and event source are all in memory so failure paths can be forced.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from carousel.errors import DecodeError
from carousel.fs import Filesystem
from carousel.input_handler import EventKind, InputEvent
from carousel.state import ImageListState
from carousel.types import EventSource, ImageDecoder, Rect, RenderSurface, TextureInfo
from carousel.viewer import Viewer


class FakeFilesystem(Filesystem):
    """Files are a path -> bytes dict; `fail` maps an op name to the error it raises."""

    def __init__(self, files: Sequence[str] = ()):
        self.files: Dict[str, bytes] = {p: p.encode() for p in files}
        self.dirs: set = set()
        self.fail: Dict[str, OSError] = {}
        self.calls: List[Tuple[str, ...]] = []

    def _maybe_fail(self, op: str) -> None:
        if op in self.fail:
            raise self.fail[op]

    def _require(self, path: str) -> None:
        if path not in self.files:
            raise FileNotFoundError(2, "No such file", path)

    def copy_file(self, src: str, dst: str) -> None:
        self.calls.append(("copy", src, dst))
        self._maybe_fail("copy")
        self._require(src)
        self.files[dst] = self.files[src]

    def move_file(self, src: str, dst: str) -> None:
        self.calls.append(("move", src, dst))
        self._maybe_fail("move")
        self._require(src)
        self.files[dst] = self.files.pop(src)

    def remove_file(self, path: str) -> None:
        self.calls.append(("remove", path))
        self._maybe_fail("remove")
        self._require(path)
        del self.files[path]

    def create_dir_all(self, path: str) -> None:
        self.calls.append(("mkdir", path))
        self._maybe_fail("mkdir")
        self.dirs.add(path)


class FakeDecoder(ImageDecoder):
    """Every image is `size` unless listed in `sizes`; paths in `broken` fail."""

    def __init__(self, size: Tuple[int, int] = (400, 300)):
        self.size = size
        self.sizes: Dict[str, Tuple[int, int]] = {}
        self.broken: set = set()
        self.loaded: List[str] = []
        self.unloaded: List[str] = []

    def load(self, path: str) -> TextureInfo:
        if path in self.broken:
            raise DecodeError("corrupt")
        self.loaded.append(path)
        w, h = self.sizes.get(path, self.size)
        return TextureInfo(tex=object(), w=w, h=h, path=path)

    def unload(self, image: TextureInfo) -> None:
        self.unloaded.append(image.path)


class FakeSurface(RenderSurface):
    def __init__(self, size: Tuple[int, int] = (1000, 1000)):
        self.size = size
        self.ops: List[tuple] = []
        self.title: Optional[str] = None

    def viewport_size(self) -> Tuple[int, int]:
        return self.size

    def clear(self) -> None:
        self.ops.append(("clear",))

    def draw_image(self, image: TextureInfo, rect: Rect) -> None:
        self.ops.append(("draw", image.path, rect))

    def present(self) -> None:
        self.ops.append(("present",))

    def set_title(self, title: str) -> None:
        self.title = title


class FakeWindow(EventSource):
    """Hands out one scripted batch of events per poll, then a close event."""

    def __init__(self, batches: Sequence[Sequence[InputEvent]] = ()):
        self.batches = [list(b) for b in batches]
        self.polls = 0
        self.closed = False

    def poll_events(self) -> List[InputEvent]:
        self.polls += 1
        if self.batches:
            return self.batches.pop(0)
        return [InputEvent(EventKind.CLOSE)]

    def close(self) -> None:
        self.closed = True


def key(code: int) -> InputEvent:
    return InputEvent(EventKind.KEY_DOWN, code)


def key_up(code: int) -> InputEvent:
    return InputEvent(EventKind.KEY_UP, code)


@pytest.fixture
def paths() -> List[str]:
    return ["/photos/a.jpg", "/photos/b.jpg", "/photos/c.jpg"]


@pytest.fixture
def fs(paths) -> FakeFilesystem:
    return FakeFilesystem(paths)


@pytest.fixture
def decoder() -> FakeDecoder:
    return FakeDecoder()


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def viewer(paths, fs, decoder, surface) -> Viewer:
    return Viewer(ImageListState(list(paths)), "/sorted", surface, decoder, fs)
