"""Application configuration constants."""

from __future__ import annotations

# Performance
TARGET_FPS = 60

# Window
WINDOW_TITLE = "carousel"
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 800
FIT_TO_MONITOR = True  # Resize to the current monitor after creation
BG_COLOR = (0, 0, 0)

# Navigation
SKIP_CHUNKS = 10  # Skip jumps cover roughly 1/SKIP_CHUNKS of the set

# File operations
DEFAULT_DEST_FOLDER = "carousel_selected"

# Image limits
MAX_IMAGE_DIMENSION = 8192
MAX_FILE_SIZE_MB = 200

# Supported image extensions (raylib natively, the rest through Pillow)
IMG_EXTS = frozenset({
    ".png", ".jpg", ".jpeg", ".bmp", ".tga", ".gif", ".qoi",
    ".webp", ".tif", ".tiff",
})

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_LEFT_SHIFT = 340
KEY_RIGHT_SHIFT = 344

KEY_NEXT_IMAGE = 262        # KEY_RIGHT
KEY_NEXT_IMAGE_ALT = 68     # KEY_D
KEY_NEXT_IMAGE_VI = 74      # KEY_J
KEY_PREV_IMAGE = 263        # KEY_LEFT
KEY_PREV_IMAGE_ALT = 65     # KEY_A
KEY_PREV_IMAGE_VI = 75      # KEY_K
KEY_SKIP_FORWARD = 267      # KEY_PAGE_DOWN
KEY_SKIP_BACK = 266         # KEY_PAGE_UP
KEY_FIRST_IMAGE = 268       # KEY_HOME
KEY_LAST_IMAGE = 269        # KEY_END
KEY_JUMP = 71               # KEY_G (shift: last)
KEY_COPY_IMAGE = 67         # KEY_C
KEY_MOVE_IMAGE = 77         # KEY_M
KEY_DELETE_IMAGE = 261      # KEY_DELETE
KEY_DELETE_IMAGE_ALT = 88   # KEY_X
KEY_RERENDER = 82           # KEY_R
KEY_RERENDER_ALT = 294      # KEY_F5
KEY_CLOSE = 256             # KEY_ESCAPE
KEY_CLOSE_ALT = 81          # KEY_Q

NEXT_KEYS = frozenset({KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT, KEY_NEXT_IMAGE_VI})
PREV_KEYS = frozenset({KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT, KEY_PREV_IMAGE_VI})

# Keys that auto-repeat while held
REPEAT_KEYS = NEXT_KEYS | PREV_KEYS | {KEY_SKIP_FORWARD, KEY_SKIP_BACK}
