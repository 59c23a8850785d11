"""Column mutation operations for liteboard boards."""

from dataclasses import replace

from liteboard.ids import ColumnId, new_column_id
from liteboard.model.board import Board, Column

DEFAULT_COLUMN_TITLE = "New List"


def get_column(board: Board, column_id: ColumnId) -> Column | None:
    """Find a column by id."""
    for col in board.columns:
        if col.id == column_id:
            return col
    return None


def add_column_with_id(board: Board, title: str | None = None) -> tuple[Board, ColumnId]:
    """Append a new empty column.

    Returns (new_board, column_id).
    """
    column_id = new_column_id({c.id for c in board.columns})
    col = Column(id=column_id, title=DEFAULT_COLUMN_TITLE if title is None else title)
    return replace(board, columns=(*board.columns, col)), column_id


def add_column(board: Board, title: str | None = None) -> Board:
    """Append a new empty column with the given or default title."""
    return add_column_with_id(board, title)[0]


def delete_column(board: Board, column_id: ColumnId) -> Board:
    """Remove a column and the cards only it references.

    Unknown ids are ignored, so deleting twice is harmless.
    """
    col = get_column(board, column_id)
    if col is None:
        return board
    remaining = tuple(c for c in board.columns if c.id != column_id)
    still_referenced = {card_id for c in remaining for card_id in c.card_ids}
    cards = {
        card_id: card
        for card_id, card in board.cards.items()
        if card_id not in col.card_ids or card_id in still_referenced
    }
    return replace(board, columns=remaining, cards=cards)


def rename_column(board: Board, column_id: ColumnId, title: str) -> Board:
    """Replace a column's title. Empty titles are allowed."""
    if get_column(board, column_id) is None:
        return board
    columns = tuple(replace(c, title=title) if c.id == column_id else c for c in board.columns)
    return replace(board, columns=columns)


def move_column(board: Board, column_id: ColumnId, new_index: int) -> Board:
    """Move a column to new_index, clamped to the valid range."""
    col = get_column(board, column_id)
    if col is None:
        return board
    columns = [c for c in board.columns if c.id != column_id]
    new_index = max(0, min(new_index, len(columns)))
    columns.insert(new_index, col)
    return replace(board, columns=tuple(columns))
