"""
Terminal Window Manager

Placement and sizing of windows in character-cell terminal UIs, with a
blessed-based controller that drives the window manager and paints the result.
"""

from .geometry import DEFAULT_SCREEN_SIZE, TerminalPosition, TerminalSize
from .window import Hint, Window, TextWindow
from .decorations import (
    WindowDecorationRenderer,
    EmptyWindowDecorationRenderer,
    DefaultWindowDecorationRenderer,
)
from .manager import WindowManager, DefaultWindowManager
from .controller import WindowController

__all__ = [
    'DEFAULT_SCREEN_SIZE',
    'TerminalPosition',
    'TerminalSize',
    'Hint',
    'Window',
    'TextWindow',
    'WindowDecorationRenderer',
    'EmptyWindowDecorationRenderer',
    'DefaultWindowDecorationRenderer',
    'WindowManager',
    'DefaultWindowManager',
    'WindowController',
]

__version__ = '0.1.0'
