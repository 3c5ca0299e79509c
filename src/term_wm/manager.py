"""
Window managers decide where windows go and how big they are.

The controller owns the window list and the terminal; it calls into the
window manager when a window is added or removed and before every paint,
and the manager writes each window's position and decorated size.
"""

import logging
from typing import List, Optional

from .decorations import (
    DefaultWindowDecorationRenderer,
    EmptyWindowDecorationRenderer,
    WindowDecorationRenderer,
)
from .geometry import DEFAULT_SCREEN_SIZE, TerminalPosition, TerminalSize
from .window import Hint, Window

logger = logging.getLogger(__name__)


class WindowManager:
    """Placement policy invoked by the controller.

    Subclasses must implement get_decoration_renderer(), on_added() and
    prepare_windows().
    """

    def is_invalid(self) -> bool:
        """Whether the manager needs a full preparation pass before the next paint."""
        return False

    def get_decoration_renderer(self, window: Window) -> WindowDecorationRenderer:
        """Return the decoration renderer to use for window."""
        raise NotImplementedError

    def on_added(self, gui, window: Window, all_windows: List[Window]):
        """Called once when window joins the controller.

        Args:
            gui: The controller the window was added to
            window: The new window
            all_windows: The windows present before window was added, bottom first
        """
        raise NotImplementedError

    def on_removed(self, gui, window: Window, all_windows: List[Window]):
        """Called once when window leaves the controller.

        all_windows no longer contains window.
        """

    def prepare_windows(self, gui, all_windows: List[Window], screen_size: TerminalSize):
        """Set the position and decorated size of every window for screen_size."""
        raise NotImplementedError


class DefaultWindowManager(WindowManager):
    """Tiling window manager.

    New windows cascade from the top-left corner, each one two columns right
    of and one row below the previous window, starting over at (1, 1) when
    the next step would not fit. Hints on a window override this: it can
    keep its own position, be centered, fill the screen, or be kept inside
    the terminal.

    Attributes:
        last_known_screen_size: Terminal size of the latest preparation pass,
            or the initial size before the first one
    """

    def __init__(self, decoration_renderer: Optional[WindowDecorationRenderer] = None,
                 initial_screen_size: Optional[TerminalSize] = None):
        self.decoration_renderer = decoration_renderer or DefaultWindowDecorationRenderer()
        self.last_known_screen_size = initial_screen_size or DEFAULT_SCREEN_SIZE
        self._empty_renderer = EmptyWindowDecorationRenderer()

    def get_decoration_renderer(self, window):
        if Hint.NO_DECORATIONS in window.hints:
            return self._empty_renderer
        return self.decoration_renderer

    def on_added(self, gui, window, all_windows):
        renderer = self.get_decoration_renderer(window)
        expected_size = renderer.get_decorated_size(window, window.preferred_size)
        window.decorated_size = expected_size

        if Hint.FIXED_POSITION in window.hints:
            # The position was set by whoever created the window
            pass
        elif not all_windows:
            window.position = TerminalPosition.OFFSET_1x1
        elif Hint.CENTERED in window.hints:
            window.position = self._centered(expected_size)
        else:
            next_position = all_windows[-1].position.with_relative(2, 1)
            screen = self.last_known_screen_size
            if (next_position.column + expected_size.columns > screen.columns or
                    next_position.row + expected_size.rows > screen.rows):
                logger.debug("Cascade position %s does not fit %s, restarting at 1x1",
                             next_position, screen)
                next_position = TerminalPosition.OFFSET_1x1
            window.position = next_position

        # Let the usual preparation logic have its say on the initial placement
        self.prepare_window(self.last_known_screen_size, window)

    def on_removed(self, gui, window, all_windows):
        pass

    def prepare_windows(self, gui, all_windows, screen_size):
        if screen_size != self.last_known_screen_size:
            logger.debug("Screen size changed from %s to %s",
                         self.last_known_screen_size, screen_size)
        self.last_known_screen_size = screen_size
        for window in all_windows:
            self.prepare_window(screen_size, window)

    def prepare_window(self, screen_size: TerminalSize, window: Window):
        """Compute and set the position and decorated size of one window.

        Override this to customize placement for some windows. The window
        is sized from its fixed size when it has the FIXED_SIZE hint and
        from its preferred size otherwise; hints are then applied in order
        FULL_SCREEN, EXPANDED, FIT_TERMINAL_WINDOW/CENTERED.
        """
        renderer = self.get_decoration_renderer(window)
        hints = window.hints
        if Hint.FIXED_SIZE in hints:
            content_size = window.size
        else:
            content_size = window.preferred_size
        size = renderer.get_decorated_size(window, content_size)
        position = window.position

        if Hint.FULL_SCREEN in hints:
            position = TerminalPosition.TOP_LEFT_CORNER
            size = screen_size
        elif Hint.EXPANDED in hints:
            position = TerminalPosition.OFFSET_1x1
            size = screen_size.with_relative(
                -min(4, screen_size.columns),
                -min(3, screen_size.rows))
            if size != window.decorated_size:
                logger.debug("Expanded window %r resized to %s", window.title, size)
                window.invalidate()
        elif Hint.FIT_TERMINAL_WINDOW in hints or Hint.CENTERED in hints:
            # Move the window towards 0x0 first, shrink it if that is not enough
            while position.row > 0 and position.row + size.rows > screen_size.rows:
                position = position.with_relative_row(-1)
            while position.column > 0 and position.column + size.columns > screen_size.columns:
                position = position.with_relative_column(-1)
            if position.row + size.rows > screen_size.rows:
                size = size.with_rows(screen_size.rows - position.row)
            if position.column + size.columns > screen_size.columns:
                size = size.with_columns(screen_size.columns - position.column)
            if Hint.CENTERED in hints:
                position = self._centered(size)

        window.position = position
        window.decorated_size = size

    def _centered(self, size: TerminalSize) -> TerminalPosition:
        screen = self.last_known_screen_size
        # Rounds towards zero, so oversized windows end up at 0x0
        return TerminalPosition(
            _half(screen.columns - size.columns),
            _half(screen.rows - size.rows),
        )


def _half(value: int) -> int:
    return int(value / 2)
