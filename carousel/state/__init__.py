"""State management submodules for carousel."""

from .images import ImageListState, compute_skip_size
from .input import InputState

__all__ = [
    'ImageListState',
    'InputState',
    'compute_skip_size',
]
