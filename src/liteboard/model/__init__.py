"""Board model and its pure mutation operations."""

from liteboard.model.board import Board, Card, ChecklistItem, Column
from liteboard.model.card import (
    add_card,
    add_card_with_id,
    add_checklist_item,
    checklist_progress,
    delete_card,
    find_card_column,
    new_checklist_item,
    parse_labels,
    remove_checklist_item,
    toggle_checklist_item,
    update_card,
)
from liteboard.model.column import (
    add_column,
    add_column_with_id,
    delete_column,
    get_column,
    move_column,
    rename_column,
)
from liteboard.model.reorder import CardTarget, ColumnTarget, drop_card, move_card, resolve_target
from liteboard.model.search import filter_board, match_card

__all__ = [
    "Board",
    "Card",
    "CardTarget",
    "ChecklistItem",
    "Column",
    "ColumnTarget",
    "add_card",
    "add_card_with_id",
    "add_checklist_item",
    "add_column",
    "add_column_with_id",
    "checklist_progress",
    "delete_card",
    "delete_column",
    "drop_card",
    "filter_board",
    "find_card_column",
    "get_column",
    "match_card",
    "move_card",
    "move_column",
    "new_checklist_item",
    "parse_labels",
    "remove_checklist_item",
    "rename_column",
    "resolve_target",
    "toggle_checklist_item",
    "update_card",
]
