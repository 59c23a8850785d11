"""Fixtures for UI tests."""

import pytest

from liteboard.config import Settings
from liteboard.state import BoardState
from liteboard.storage import LocalStore
from liteboard.ui.app import LiteboardApp
from tests.helpers import make_board, make_card


@pytest.fixture
def settings(tmp_path):
    return Settings(store_path=tmp_path / "board.json")


@pytest.fixture
def board_state(settings):
    """State over a stored board: Backlog holds two cards, Doing and Done are empty."""
    store = LocalStore(settings.store_path)
    store.save(
        make_board(
            {"backlog": ["c1", "c2"], "doing": [], "done": []},
            cards={
                "c1": make_card("c1", "First card", "Description one.", labels=["docs"]),
                "c2": make_card("c2", "Second card"),
            },
        )
    )
    return BoardState(store)


@pytest.fixture
def app(settings, board_state):
    return LiteboardApp(settings, board_state)
