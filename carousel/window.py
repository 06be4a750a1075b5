"""Raylib window - render surface and input polling."""

from __future__ import annotations
from typing import List, Tuple

from .config import (
    TARGET_FPS, WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, FIT_TO_MONITOR,
    BG_COLOR, KEY_LEFT_SHIFT, KEY_RIGHT_SHIFT, REPEAT_KEYS,
)
from .errors import StartupError
from .input_handler import EventKind, InputEvent
from .logging import log
from .rl_compat import rl, RL_VERSION, c_str, make_rect, make_vec2, make_color
from .types import EventSource, Rect, RenderSurface, TextureInfo


class RaylibWindow(RenderSurface, EventSource):
    """A resizable raylib window the viewer draws into."""

    def __init__(self):
        self._bg = make_color(*BG_COLOR)
        self._tint = make_color(255, 255, 255)
        self._origin = make_vec2(0, 0)
        self._drawing = False

    @classmethod
    def open(cls, title: str = WINDOW_TITLE) -> "RaylibWindow":
        """Create the window. Raises StartupError if raylib cannot."""
        log("[INIT] Starting window initialization")
        rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE)
        rl.InitWindow(WINDOW_WIDTH, WINDOW_HEIGHT, c_str(title))
        if not rl.IsWindowReady():
            raise StartupError("failed to create window")

        if FIT_TO_MONITOR:
            mon = rl.GetCurrentMonitor()
            w, h = rl.GetMonitorWidth(mon), rl.GetMonitorHeight(mon)
            if w > 0 and h > 0:
                rl.SetWindowSize(w, h)
                rl.SetWindowPosition(0, 0)

        rl.SetExitKey(0)  # Escape is a regular binding
        rl.SetTargetFPS(TARGET_FPS)
        window = cls()
        log(f"[INIT] RL_VER={RL_VERSION} window={rl.GetScreenWidth()}x{rl.GetScreenHeight()}")
        return window

    # RenderSurface

    def viewport_size(self) -> Tuple[int, int]:
        return rl.GetScreenWidth(), rl.GetScreenHeight()

    def clear(self) -> None:
        rl.BeginDrawing()
        self._drawing = True
        rl.ClearBackground(self._bg)

    def draw_image(self, image: TextureInfo, rect: Rect) -> None:
        rl.DrawTexturePro(
            image.tex,
            make_rect(0, 0, image.w, image.h),
            make_rect(rect.x, rect.y, rect.width, rect.height),
            self._origin, 0.0, self._tint
        )

    def present(self) -> None:
        # EndDrawing also polls input and waits out the rest of the frame
        rl.EndDrawing()
        self._drawing = False

    def set_title(self, title: str) -> None:
        rl.SetWindowTitle(c_str(title))

    # Input

    def poll_events(self) -> List[InputEvent]:
        """Input gathered since the last frame, in arrival order."""
        events: List[InputEvent] = []
        if rl.WindowShouldClose():
            events.append(InputEvent(EventKind.CLOSE))
            return events
        if rl.IsWindowResized():
            events.append(InputEvent(EventKind.RESIZE))

        key = rl.GetKeyPressed()
        while key:
            events.append(InputEvent(EventKind.KEY_DOWN, key))
            key = rl.GetKeyPressed()

        for key in REPEAT_KEYS:
            if rl.IsKeyPressedRepeat(key):
                events.append(InputEvent(EventKind.KEY_DOWN, key))

        for key in (KEY_LEFT_SHIFT, KEY_RIGHT_SHIFT):
            if rl.IsKeyReleased(key):
                events.append(InputEvent(EventKind.KEY_UP, key))
        return events

    def close(self) -> None:
        if self._drawing:
            rl.EndDrawing()
            self._drawing = False
        log("[APP] Closing window")
        rl.CloseWindow()
