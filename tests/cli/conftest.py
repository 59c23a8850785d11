"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest

from liteboard.ids import CardId, ColumnId
from liteboard.model.board import Board, Card, Column
from liteboard.storage import LocalStore


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's own config and environment out of CLI runs."""
    monkeypatch.setenv("LITEBOARD_CONFIG", str(tmp_path / "no-config.yaml"))
    monkeypatch.delenv("LITEBOARD_STORE", raising=False)
    monkeypatch.delenv("LITEBOARD_SEED", raising=False)


@pytest.fixture
def empty_store(tmp_path):
    """Path of a store with nothing saved yet."""
    return tmp_path / "board.json"


@pytest.fixture
def saved_store(empty_store):
    """A store holding a board with 3 columns and 2 cards, both in Backlog."""
    cards = {
        CardId("card_first001"): Card(
            id=CardId("card_first001"),
            title="First card",
            description="Description one.",
            labels=("docs",),
        ),
        CardId("card_second02"): Card(id=CardId("card_second02"), title="Second card"),
    }
    board = Board(
        columns=(
            Column(id=ColumnId("col_backlog1"), title="Backlog", card_ids=tuple(cards)),
            Column(id=ColumnId("col_doing001"), title="Doing"),
            Column(id=ColumnId("col_done0001"), title="Done"),
        ),
        cards=cards,
    )
    LocalStore(empty_store).save(board)
    return empty_store


@pytest.fixture
def make_args(saved_store):
    """Build handler arguments against the saved store."""

    def make(**kwargs):
        values = {"store": str(saved_store), "seed": None, "json": False, "verbose": 0}
        values.update(kwargs)
        return Namespace(**values)

    return make
