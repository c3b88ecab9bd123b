"""Multipager - a terminal pager for one or more text buffers."""

__version__ = "0.1.0"

from .model import TextBuffer, DisplayFlags, NavigationState
from .navigation import Action, Resize, apply
from .view import Cell, Frame, render

__all__ = [
    'TextBuffer',
    'DisplayFlags',
    'NavigationState',
    'Action',
    'Resize',
    'apply',
    'Cell',
    'Frame',
    'render',
]
