"""Column widgets for liteboard UI."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Rule, Static

from liteboard.model.board import Board, Column
from liteboard.ui.card import NAV_BINDINGS, CardWidget


class ColumnHeader(Static, can_focus=True):
    """Column title. Focusing it targets the column itself, e.g. as a drop target."""

    BINDINGS = NAV_BINDINGS

    DEFAULT_CSS = """
    ColumnHeader {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnHeader:focus {
        background: $primary;
    }
    """

    def __init__(self, column: Column, **kwargs):
        super().__init__(self.label_for(column), **kwargs)
        self.column_id = column.id

    @staticmethod
    def label_for(column: Column) -> Text:
        return Text(f"{column.title or '(untitled)'}  ({len(column.card_ids)})")

    def on_click(self, event) -> None:
        event.stop()
        self.focus()


class ColumnWidget(VerticalScroll, can_focus=False):
    """A single column on the board."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: 100%;
        min-width: 25;
        max-width: 32;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    ColumnWidget #column-empty {
        color: $text-muted;
        text-align: center;
    }
    """

    def __init__(self, column: Column, board: Board):
        super().__init__()
        self.column = column
        self.board = board
        self.column_id = column.id

    def compose(self) -> ComposeResult:
        yield ColumnHeader(self.column, id="column-title")
        yield Rule()
        for card_id in self.column.card_ids:
            card = self.board.cards.get(card_id)
            if card is not None:
                yield CardWidget(card)
        if not self.column.card_ids:
            yield Static("no cards", id="column-empty")
