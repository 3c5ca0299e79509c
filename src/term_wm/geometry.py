"""
Terminal geometry value types.

Sizes and positions are measured in character cells. Both types are
immutable; every ``with_*`` method returns a new instance.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class TerminalSize:
    """Size of a rectangle in columns and rows.

    No validation is done on the values: shrinking a window past the
    terminal bounds can produce zero or negative sizes and callers that
    paint the result are expected to cope with them.
    """
    columns: int
    rows: int

    def with_columns(self, columns: int) -> 'TerminalSize':
        return replace(self, columns=columns)

    def with_rows(self, rows: int) -> 'TerminalSize':
        return replace(self, rows=rows)

    def with_relative_columns(self, delta: int) -> 'TerminalSize':
        return self.with_columns(self.columns + delta)

    def with_relative_rows(self, delta: int) -> 'TerminalSize':
        return self.with_rows(self.rows + delta)

    def with_relative(self, delta_columns: int, delta_rows: int) -> 'TerminalSize':
        """Return a size offset by the given deltas on both axes."""
        return TerminalSize(self.columns + delta_columns, self.rows + delta_rows)


@dataclass(frozen=True)
class TerminalPosition:
    """Position of a cell, column first. May lie off-screen."""
    column: int
    row: int

    def with_column(self, column: int) -> 'TerminalPosition':
        return replace(self, column=column)

    def with_row(self, row: int) -> 'TerminalPosition':
        return replace(self, row=row)

    def with_relative_column(self, delta: int) -> 'TerminalPosition':
        return self.with_column(self.column + delta)

    def with_relative_row(self, delta: int) -> 'TerminalPosition':
        return self.with_row(self.row + delta)

    def with_relative(self, delta_columns: int, delta_rows: int) -> 'TerminalPosition':
        """Return a position offset by the given deltas on both axes."""
        return TerminalPosition(self.column + delta_columns, self.row + delta_rows)


TerminalSize.ZERO = TerminalSize(0, 0)
TerminalPosition.TOP_LEFT_CORNER = TerminalPosition(0, 0)
TerminalPosition.OFFSET_1x1 = TerminalPosition(1, 1)

# Assumed terminal size until the first real preparation pass
DEFAULT_SCREEN_SIZE = TerminalSize(80, 24)
