"""
Window classes managed by the window manager.

A window owns its content and its hints. Its position and decorated size
are written by the window manager during a preparation pass and read back
by the controller when painting.
"""

import textwrap
from enum import Enum, auto
from typing import Iterable, Optional

from .geometry import DEFAULT_SCREEN_SIZE, TerminalPosition, TerminalSize


class Hint(Enum):
    """Placement and sizing requests a window can make of the window manager."""
    NO_DECORATIONS = auto()
    FIXED_POSITION = auto()
    FIXED_SIZE = auto()
    CENTERED = auto()
    FULL_SCREEN = auto()
    EXPANDED = auto()
    FIT_TERMINAL_WINDOW = auto()


class Window:
    """Base class for terminal windows.

    Windows can have a child window that the controller adds on top of them
    (modal dialogs).

    Attributes:
        title: Window title displayed in the top border
        status_bar: Status text displayed in the bottom border
        scroll_pos: Scroll position (0.0 to 1.0) for scrollbar display, or None
        closed: Whether the window has been closed
        child: Child window to display on top (for modals)
        controller: The WindowController the window is attached to, if any
        position: Top-left corner of the decorated window
        decorated_size: Size of the window including its decorations
        redraw: Whether the window needs to be redrawn
    """

    def __init__(self, title="", width=10, height=5, hints: Iterable[Hint] = (),
                 status_bar=None, x=None, y=None, term=None):
        self.title = title
        self.status_bar = status_bar or '[Esc=Close]'
        self.scroll_pos = None
        self.closed = False
        self.child = None
        self.controller = None
        self.redraw = True

        self._hints = frozenset(hints)
        self._preferred_size = TerminalSize(width, height)
        self._fixed_size: Optional[TerminalSize] = None
        self._content_area = None

        self.position = TerminalPosition(x or 0, y or 0)
        self.decorated_size = self.preferred_size

        self._term = None
        self.term = term  # Use setter to trigger handle_resize()

    @property
    def term(self):
        """Blessed Terminal instance, assigned by the controller."""
        return self._term

    @term.setter
    def term(self, value):
        """Set terminal and handle resize."""
        self._term = value
        if value is not None:
            self.handle_resize()

    @property
    def hints(self) -> frozenset:
        return self._hints

    def set_hints(self, hints: Iterable[Hint]):
        """Replace the window's hints; takes effect on the next preparation pass."""
        self._hints = frozenset(hints)
        self.invalidate()

    @property
    def preferred_size(self) -> TerminalSize:
        """Content size the window would like to have.

        Subclasses computing their size from their content override this.
        """
        return self._preferred_size

    @preferred_size.setter
    def preferred_size(self, value: TerminalSize):
        self._preferred_size = value
        self.invalidate()

    @property
    def size(self) -> TerminalSize:
        """Content size: the fixed size if one was set, else the preferred size."""
        if self._fixed_size is not None:
            return self._fixed_size
        return self.preferred_size

    def set_fixed_size(self, size: TerminalSize):
        """Pin the content size and add the FIXED_SIZE hint."""
        self._fixed_size = size
        self._hints = self._hints | {Hint.FIXED_SIZE}
        self.invalidate()

    @property
    def content_position(self) -> TerminalPosition:
        """Top-left cell of the content area as of the last draw."""
        if self._content_area is None:
            return self.position
        return self._content_area[0]

    @property
    def content_size(self) -> TerminalSize:
        """Size of the content area as of the last draw."""
        if self._content_area is None:
            return self.size
        return self._content_area[1]

    def invalidate(self):
        """Mark the window's rendered layout as stale."""
        self.redraw = True

    def draw(self, renderer):
        """Draw the window decorations and record the content area.

        Subclasses should call super().draw() first, then draw their content
        inside content_position/content_size.
        """
        self.redraw = False
        self._content_area = renderer.draw(self.term, self)

    def handle_input(self, key):
        """Handle keyboard input.

        Args:
            key: Blessed Keystroke object

        Subclasses should override this to handle their specific input.
        """
        if key.name == 'KEY_ESCAPE':
            self.close()

    def handle_resize(self):
        """Handle a change of the attached terminal.

        Placement is left to the window manager; subclasses whose preferred
        size depends on the terminal should recompute it here.
        """
        self.redraw = True

    def close(self):
        """Mark the window as closed.

        The controller removes closed windows from its window list.
        """
        self.closed = True

    def tick(self):
        """Called periodically to update window state.

        Subclasses can override this for animations or periodic updates.
        """
        pass


class TextWindow(Window):
    """A window that displays scrollable text content.

    Wraps text to 90% of the terminal and asks for just enough room to show
    it, providing keyboard scrolling when it does not fit.
    """

    MIN_SIZE = TerminalSize(8, 4)

    def __init__(self, text, *args, **kwargs):
        """Initialize a text window.

        Args:
            text: Text content (string, list, or tuple of lines)
            *args, **kwargs: Passed to Window.__init__()
        """
        self.text = "\n".join(text) if isinstance(text, (list, tuple)) else text
        self.scroll = 0
        self._lines = []
        self._text_size = self.MIN_SIZE
        self._size_limit: Optional[TerminalSize] = None
        super().__init__(*args, **kwargs)
        if self.term is None:
            self._wrap(DEFAULT_SCREEN_SIZE)

    @property
    def preferred_size(self) -> TerminalSize:
        """Room needed by the wrapped text.

        Assigning a size caps the window at that size and re-wraps the text
        to fit inside it. The cap never goes below MIN_SIZE, and short text
        still asks for less than the cap.
        """
        return self._text_size

    @preferred_size.setter
    def preferred_size(self, value: TerminalSize):
        self._size_limit = value
        if self.term is None:
            self._wrap(DEFAULT_SCREEN_SIZE)
        else:
            self._wrap(TerminalSize(self.term.width, self.term.height))
        self.invalidate()

    def _wrap(self, screen_size: TerminalSize):
        # One cell of padding on each side of the text, plus the border
        max_text_width = max(1, int(screen_size.columns * 0.9) - 4)
        max_rows = max(1, int(screen_size.rows * 0.9) - 2)
        if self._size_limit is not None:
            max_text_width = max(1, min(max_text_width, self._size_limit.columns - 2))
            max_rows = max(1, min(max_rows, self._size_limit.rows))

        self._lines = []
        for line in self.text.splitlines() or ['']:
            self._lines.extend(textwrap.wrap(line, max_text_width) or [''])

        longest = max(len(line) for line in self._lines)
        self._text_size = TerminalSize(
            max(self.MIN_SIZE.columns, min(max_text_width, longest) + 2),
            max(self.MIN_SIZE.rows, min(max_rows, len(self._lines))),
        )

    def draw(self, renderer):
        """Draw the window with text content."""
        _, content_size = renderer.get_content_area(self)
        max_content_height = content_size.rows
        total_lines = len(self._lines)
        below_the_fold = total_lines - max_content_height

        # Update scroll position indicator
        self.scroll_pos = None
        if below_the_fold > 0:
            self.scroll = min(self.scroll, below_the_fold)
            self.scroll_pos = self.scroll / below_the_fold
            self.status_bar = '[Arrows/PgUp/PgDn=Scroll, Esc=Close]'
        else:
            self.scroll = 0
            self.status_bar = '[Esc=Close]'

        super().draw(renderer)

        origin = self.content_position
        text_width = max(0, self.content_size.columns - 2)
        for i in range(max(0, self.content_size.rows)):
            line_idx = self.scroll + i
            line = self._lines[line_idx][:text_width] if line_idx < total_lines else ""
            print(
                self.term.move(origin.row + i, origin.column) +
                ' ' + line.ljust(text_width) + ' ',
                end=''
            )
        print('', end='', flush=True)

    def handle_input(self, key):
        """Handle scrolling input."""
        max_content_height = self.content_size.rows
        total_lines = len(self._lines)

        if total_lines > max_content_height:
            match key.name:
                case 'KEY_DOWN':
                    if self.scroll < total_lines - max_content_height:
                        self.scroll += 1
                        self.redraw = True
                case 'KEY_UP':
                    if self.scroll > 0:
                        self.scroll -= 1
                        self.redraw = True
                case 'KEY_PGDOWN':
                    if self.scroll < total_lines - max_content_height:
                        self.scroll = min(
                            self.scroll + max_content_height,
                            total_lines - max_content_height
                        )
                        self.redraw = True
                case 'KEY_PGUP':
                    if self.scroll > 0:
                        self.scroll = max(self.scroll - max_content_height, 0)
                        self.redraw = True
                case _:
                    super().handle_input(key)
        else:
            super().handle_input(key)

    def handle_resize(self):
        """Re-wrap text for the new terminal size."""
        super().handle_resize()
        self._wrap(TerminalSize(self.term.width, self.term.height))
