"""Data model for liteboard boards.

All records are frozen. Operations in ``liteboard.model`` build new
records with ``dataclasses.replace`` and share whatever did not change.
"""

from dataclasses import dataclass, field

from liteboard.ids import CardId, ChecklistItemId, ColumnId


@dataclass(frozen=True)
class ChecklistItem:
    """A sub-task on a card."""

    id: ChecklistItemId
    text: str
    done: bool = False


@dataclass(frozen=True)
class Card:
    """A titled work item."""

    id: CardId
    title: str
    description: str = ""
    labels: tuple[str, ...] = ()
    checklist: tuple[ChecklistItem, ...] = ()


@dataclass(frozen=True)
class Column:
    """A named, ordered bucket of card references."""

    id: ColumnId
    title: str
    card_ids: tuple[CardId, ...] = ()


@dataclass(frozen=True)
class Board:
    """The full board state.

    ``columns`` is in display order. ``cards`` owns the card records;
    columns only reference them by id.
    """

    columns: tuple[Column, ...] = ()
    cards: dict[CardId, Card] = field(default_factory=dict)
