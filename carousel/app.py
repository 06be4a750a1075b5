"""Application - main loop orchestrator.

Each iteration presents the current frame, polls the window for input,
translates every event into an Action and dispatches it through a fixed
table. An action runs to completion, render request included, before the
next one is looked at.
"""

from __future__ import annotations
import traceback
from dataclasses import dataclass, field
from typing import Callable, Dict

from .input_handler import event_action
from .logging import log, log_error, increment_frame, get_frame
from .state import InputState
from .types import Action, EventSource
from .viewer import Viewer


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application(viewer, window)
        app.run()
    """

    viewer: Viewer
    window: EventSource
    input_state: InputState = field(default_factory=InputState)
    running: bool = False

    def __post_init__(self):
        v = self.viewer
        self._handlers: Dict[Action, Callable[[], object]] = {
            Action.QUIT: self.stop,
            Action.RE_RENDER: v.render,
            Action.NEXT: v.next_image,
            Action.PREV: v.prev_image,
            Action.SKIP_FORWARD: v.skip_forward,
            Action.SKIP_BACK: v.skip_backward,
            Action.FIRST: v.first,
            Action.LAST: v.last,
            Action.COPY: v.copy_current,
            Action.MOVE: v.move_current,
            Action.DELETE: v.delete_current,
            Action.NOOP: lambda: None,
        }

    def run(self) -> None:
        """Run the main loop until a QUIT action."""
        self.running = True
        log(f"[APP] Starting main loop with {self.viewer.images.count} images")

        try:
            self.viewer.render()
            while self.running:
                self._frame()
        except Exception as e:
            log_error(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log_error(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
            raise
        finally:
            self._cleanup()

    def _frame(self) -> None:
        """Execute a single frame."""
        self.viewer.present()

        for event in self.window.poll_events():
            self.dispatch(event_action(self.input_state, event))
            if not self.running:
                return

        increment_frame()

    def dispatch(self, action: Action) -> None:
        """Run the handler for one action."""
        if action is not Action.NOOP:
            log(f"[APP] {action.name}")
        self._handlers[action]()

    def stop(self) -> None:
        """Stop the main loop."""
        self.running = False

    def _cleanup(self) -> None:
        """Clean up resources."""
        log(f"[APP] Starting cleanup after {get_frame()} frames")
        self.viewer.close()
        self.window.close()
        log("[APP] Cleanup complete")
