"""Shared fixtures for model tests."""

import pytest

from tests.helpers import make_board, make_card


@pytest.fixture
def board():
    """Three columns: todo=[c1, c2, c3], doing=[c4], done=[]."""
    return make_board(
        {"todo": ["c1", "c2", "c3"], "doing": ["c4"], "done": []},
        cards={
            "c1": make_card("c1", "Write docs", "User guide", labels=["docs"]),
            "c2": make_card("c2", "Fix login", "Session expires early", labels=["bug", "auth"]),
            "c3": make_card("c3", "Refactor"),
            "c4": make_card("c4", "Release", labels=["ops"]),
        },
    )
