"""
Window decoration renderers.

A decoration renderer knows how much room a window's chrome (border,
title, status bar) takes and how to paint it. The window manager only uses
the sizing half; the controller uses the drawing half.
"""

from typing import Tuple

from .geometry import TerminalPosition, TerminalSize


class WindowDecorationRenderer:
    """Interface for window decoration renderers.

    get_decorated_size() must be pure: the window manager may call it any
    number of times during a preparation pass.
    """

    def get_decorated_size(self, window, content_size: TerminalSize) -> TerminalSize:
        """Return the size of the window once decorations are added around content_size."""
        raise NotImplementedError

    def get_content_area(self, window) -> Tuple[TerminalPosition, TerminalSize]:
        """Return the content area inside the window's current position and decorated size."""
        raise NotImplementedError

    def draw(self, term, window) -> Tuple[TerminalPosition, TerminalSize]:
        """Paint the decorations of window and return its content area."""
        raise NotImplementedError


class EmptyWindowDecorationRenderer(WindowDecorationRenderer):
    """Renderer for undecorated windows: the content fills the whole window."""

    def get_decorated_size(self, window, content_size):
        return content_size

    def get_content_area(self, window):
        return window.position, window.decorated_size

    def draw(self, term, window):
        return self.get_content_area(window)


class DefaultWindowDecorationRenderer(WindowDecorationRenderer):
    """Single-line ASCII border with the title on top and the status bar below.

    When the window reports a scroll position, the right-hand corners turn
    into ^/v arrows and a '=' marks the position on the right border.
    """

    BORDER = TerminalSize(2, 2)

    def get_decorated_size(self, window, content_size):
        columns = content_size.columns
        if window.title:
            # Room for the title and a space on either side of it
            columns = max(columns, len(window.title) + 2)
        return TerminalSize(columns + self.BORDER.columns, content_size.rows + self.BORDER.rows)

    def get_content_area(self, window):
        size = window.decorated_size
        return (
            window.position.with_relative(1, 1),
            TerminalSize(
                max(0, size.columns - self.BORDER.columns),
                max(0, size.rows - self.BORDER.rows),
            ),
        )

    def draw(self, term, window):
        content_position, content_size = self.get_content_area(window)
        position = window.position
        width = window.decorated_size.columns
        height = window.decorated_size.rows
        if width < 2 or height < 2:
            return content_position, content_size
        inner = width - 2

        # Top border with title
        title_text = f' {window.title} '.center(inner, '-')[:inner]
        corner = '+' if window.scroll_pos is None else '^'
        print(
            term.move(position.row, position.column) +
            '+' + title_text + corner,
            end=''
        )

        # Bottom border with status bar
        info = f' {window.status_bar} ' if window.status_bar else ''
        dashes = '-' * max(0, inner - len(info))
        corner = '+' if window.scroll_pos is None else 'v'
        print(
            term.move(position.row + height - 1, position.column) +
            '+' + (dashes + info)[:inner] + corner,
            end=''
        )

        # Left and right borders (with scrollbar indicator)
        scroll_row = None
        if window.scroll_pos is not None:
            scroll_row = min(content_size.rows - 1, int(window.scroll_pos * content_size.rows))
        for row in range(content_size.rows):
            right_char = '=' if row == scroll_row else '|'
            print(
                term.move(content_position.row + row, position.column) +
                '|' + (' ' * inner) +
                term.move(content_position.row + row, position.column + width - 1) +
                right_char,
                end=''
            )
        print('', end='', flush=True)
        return content_position, content_size
