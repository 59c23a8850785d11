"""Resolve a completed drag-and-drop gesture into a new card order.

A drop lands either on a card (insert before it) or on a column's body
(append to that column). The two cases are kept apart as distinct target
types rather than guessing from the id.
"""

from dataclasses import dataclass, replace

from liteboard.ids import CardId, ColumnId
from liteboard.model.board import Board, Column
from liteboard.model.card import find_card_column
from liteboard.model.column import get_column


@dataclass(frozen=True)
class CardTarget:
    """Dropped onto a card."""

    card_id: CardId


@dataclass(frozen=True)
class ColumnTarget:
    """Dropped onto a column's body, not over any card."""

    column_id: ColumnId


DropTarget = CardTarget | ColumnTarget


def resolve_target(board: Board, over_id: str | None) -> DropTarget | None:
    """Classify the id under the pointer. Card ids win over column ids."""
    if over_id is None:
        return None
    if over_id in board.cards or find_card_column(board, CardId(over_id)) is not None:
        return CardTarget(CardId(over_id))
    if get_column(board, ColumnId(over_id)) is not None:
        return ColumnTarget(ColumnId(over_id))
    return None


def array_move(items: tuple, old_index: int, new_index: int) -> tuple:
    """Move one element, shifting the ones in between.

    array_move(("a", "b", "c"), 0, 2) → ("b", "c", "a")
    """
    moved = list(items)
    moved.insert(new_index, moved.pop(old_index))
    return tuple(moved)


def _with_column(board: Board, column: Column) -> Board:
    columns = tuple(column if c.id == column.id else c for c in board.columns)
    return replace(board, columns=columns)


def drop_card(board: Board, active_card_id: CardId, target: DropTarget | None) -> Board:
    """Apply a drop of active_card_id onto target.

    Returns the board unchanged when the gesture resolves to nothing:
    unknown card, drop outside any target, drop onto itself, or drop onto
    its own column's body.
    """
    source = find_card_column(board, active_card_id)
    if source is None or target is None:
        return board

    if isinstance(target, ColumnTarget):
        dest = get_column(board, target.column_id)
        if dest is None or dest.id == source.id:
            return board
    else:
        dest = find_card_column(board, target.card_id) or source

    if dest.id == source.id:
        if not isinstance(target, CardTarget) or target.card_id not in source.card_ids:
            return board
        old_index = source.card_ids.index(active_card_id)
        new_index = source.card_ids.index(target.card_id)
        if old_index == new_index:
            return board
        return _with_column(board, replace(source, card_ids=array_move(source.card_ids, old_index, new_index)))

    source_ids = tuple(i for i in source.card_ids if i != active_card_id)
    dest_ids = list(dest.card_ids)
    if isinstance(target, CardTarget):
        insert_index = dest_ids.index(target.card_id)
    else:
        insert_index = len(dest_ids)
    dest_ids.insert(insert_index, active_card_id)

    board = _with_column(board, replace(source, card_ids=source_ids))
    return _with_column(board, replace(dest, card_ids=tuple(dest_ids)))


def move_card(board: Board, active_card_id: CardId, over_id: str | None) -> Board:
    """Drop a card onto whatever over_id names (card, column or nothing)."""
    return drop_card(board, active_card_id, resolve_target(board, over_id))
