"""Pilot helpers shared by the UI tests."""

from liteboard.ui.board import BoardScreen
from liteboard.ui.column import ColumnWidget


async def settle(pilot):
    """Let pending workers and messages run."""
    await pilot.pause()
    await pilot.app.workers.wait_for_complete()
    await pilot.pause()


async def wait_for_board(pilot):
    """Wait until startup has finished and the columns are on screen."""
    for _ in range(50):
        await settle(pilot)
        screen = pilot.app.screen
        if isinstance(screen, BoardScreen) and screen.query(ColumnWidget):
            return screen
    raise AssertionError("board screen never appeared")
