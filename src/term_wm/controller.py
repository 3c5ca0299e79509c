"""
Window controller: the event loop that owns the windows and the terminal.
"""

import logging
import signal
import time
from typing import List, Optional

from blessed import Terminal

from .geometry import TerminalSize
from .manager import DefaultWindowManager, WindowManager
from .window import Window

logger = logging.getLogger(__name__)


class WindowController:
    """Helper that manages a window list and event loop.

    Subclasses are responsible for adding their initial windows (typically in
    ``__init__``) using :meth:`add_window`. The controller handles keyboard
    routing, terminal resize, and window lifecycle; the window manager decides
    where each window goes. Windows are kept bottom first, the last one has
    the keyboard focus.
    """

    def __init__(
        self,
        *,
        term: Optional[Terminal] = None,
        window_manager: Optional[WindowManager] = None,
        inkey_timeout: float = 0.1,
        idle_sleep: float = 0.01,
        register_resize_handler: bool = True,
    ):
        self.term = term or Terminal()
        self.window_manager = window_manager or DefaultWindowManager()
        self.inkey_timeout = inkey_timeout
        self.idle_sleep = idle_sleep
        self.windows: List[Window] = []
        self._resize_pending = False
        if register_resize_handler:
            signal.signal(signal.SIGWINCH, self._handle_sigwinch)

    @property
    def screen_size(self) -> TerminalSize:
        return TerminalSize(self.term.width, self.term.height)

    def _handle_sigwinch(self, signum, frame):
        """Refresh Terminal on resize and trigger a redraw."""
        self.term = Terminal()
        self._resize_pending = True

    def add_window(self, window: Window):
        """Add a window on top of the others and let the window manager place it."""
        if window.controller is self:
            return
        if window.controller is not None:
            raise ValueError(f"Window {window.title!r} already belongs to another controller")

        window.term = self.term
        window.controller = self
        self.window_manager.on_added(self, window, list(self.windows))
        self.windows.append(window)
        window.redraw = True
        logger.debug("Added window %r at %s size %s",
                     window.title, window.position, window.decorated_size)

    def remove_window(self, window: Window):
        """Remove a window; the window below it gets redrawn."""
        if window.controller is not self:
            return
        self.windows.remove(window)
        window.controller = None
        self.window_manager.on_removed(self, window, list(self.windows))
        for remaining in self.windows:
            remaining.redraw = True
        logger.debug("Removed window %r", window.title)

    def pop_window(self) -> Optional[Window]:
        """Remove and return the top-most window."""
        top = self.current_window()
        if top is not None:
            self.remove_window(top)
        return top

    def current_window(self) -> Optional[Window]:
        """Return the top-most window, if any."""
        return self.windows[-1] if self.windows else None

    def prepare(self):
        """Have the window manager lay out every window for the current terminal."""
        self.window_manager.prepare_windows(self, list(self.windows), self.screen_size)

    def on_tick(self):
        """Optional hook executed once per loop iteration after window ticks."""

    def run(self):
        """Enter the main event loop."""
        if not self.windows:
            raise RuntimeError(
                "WindowController.run() called with no windows. "
                "Call add_window() before run()."
            )

        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
            self._redraw(force=True)

            while self.windows:
                if self._resize_pending or self.window_manager.is_invalid():
                    self._process_resize()

                window = self.current_window()
                key = self.term.inkey(timeout=self.inkey_timeout)

                if key and window:
                    self._handle_key(window, key)
                    if not self.windows:
                        break

                self._redraw()

                if self.windows:
                    self.windows[-1].tick()
                    self.on_tick()

                time.sleep(self.idle_sleep)

    def _handle_key(self, window: Window, key):
        """Dispatch keyboard input to the active window."""
        window.handle_input(key)

        if window.closed:
            self.remove_window(window)
            return

        if window.child:
            child, window.child = window.child, None
            self.add_window(child)

    def _process_resize(self):
        """Re-layout and re-render windows after a terminal resize."""
        self._resize_pending = False
        logger.debug("Terminal resized to %s", self.screen_size)
        for win in self.windows:
            win.term = self.term
        self._redraw(force=True)

    def _redraw(self, force: bool = False):
        """Lay out and repaint all windows, bottom first, if any asked for it."""
        if not force and not any(win.redraw for win in self.windows):
            return
        self.prepare()
        print(self.term.clear(), end="")
        for win in self.windows:
            win.draw(self.window_manager.get_decoration_renderer(win))
