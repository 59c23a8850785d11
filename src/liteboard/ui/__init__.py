"""Textual UI for liteboard."""

from liteboard.ui.app import LiteboardApp, LoadingScreen
from liteboard.ui.board import BoardScreen

__all__ = [
    "BoardScreen",
    "LiteboardApp",
    "LoadingScreen",
]
