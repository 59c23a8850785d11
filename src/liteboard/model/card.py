"""Card mutation operations for liteboard boards."""

from dataclasses import replace

from liteboard.errors import ValidationError
from liteboard.ids import CardId, ChecklistItemId, ColumnId, new_card_id, new_checklist_item_id
from liteboard.model.board import Board, Card, ChecklistItem, Column
from liteboard.model.column import get_column


def find_card_column(board: Board, card_id: CardId) -> Column | None:
    """Find the column containing a card."""
    for col in board.columns:
        if card_id in col.card_ids:
            return col
    return None


def add_card_with_id(board: Board, column_id: ColumnId, title: str) -> tuple[Board, CardId | None]:
    """Create a card at the bottom of a column.

    Returns (new_board, card_id). An unknown column leaves the board as is
    and returns None for the id.
    """
    title = title.strip()
    if not title:
        raise ValidationError("Card title must not be empty")
    if get_column(board, column_id) is None:
        return board, None

    card_id = new_card_id(board.cards)
    card = Card(id=card_id, title=title)
    columns = tuple(
        replace(c, card_ids=(*c.card_ids, card_id)) if c.id == column_id else c for c in board.columns
    )
    return Board(columns=columns, cards={**board.cards, card_id: card}), card_id


def add_card(board: Board, column_id: ColumnId, title: str) -> Board:
    """Create a card with an empty description, labels and checklist."""
    return add_card_with_id(board, column_id, title)[0]


def update_card(board: Board, card: Card) -> Board:
    """Replace an existing card record. Cards that don't exist are not created."""
    if card.id not in board.cards:
        return board
    return replace(board, cards={**board.cards, card.id: card})


def delete_card(board: Board, card_id: CardId) -> Board:
    """Remove a card from the board and from every column that lists it."""
    if card_id not in board.cards and find_card_column(board, card_id) is None:
        return board
    cards = {k: v for k, v in board.cards.items() if k != card_id}
    columns = tuple(
        replace(c, card_ids=tuple(i for i in c.card_ids if i != card_id)) if card_id in c.card_ids else c
        for c in board.columns
    )
    return Board(columns=columns, cards=cards)


def parse_labels(text: str) -> tuple[str, ...]:
    """Split comma-separated label text, dropping blanks.

    "bug, ui,, " → ("bug", "ui")
    """
    return tuple(part.strip() for part in text.split(",") if part.strip())


def new_checklist_item(text: str, existing: tuple[ChecklistItem, ...] = ()) -> ChecklistItem:
    """Build an unchecked checklist item with a fresh id."""
    text = text.strip()
    if not text:
        raise ValidationError("Checklist item text must not be empty")
    item_id = new_checklist_item_id({item.id for item in existing})
    return ChecklistItem(id=item_id, text=text)


def add_checklist_item(card: Card, text: str) -> Card:
    """Return card with a new item appended to its checklist."""
    item = new_checklist_item(text, card.checklist)
    return replace(card, checklist=(*card.checklist, item))


def toggle_checklist_item(card: Card, item_id: ChecklistItemId) -> Card:
    """Return card with one item's done flag flipped."""
    if not any(item.id == item_id for item in card.checklist):
        return card
    checklist = tuple(replace(item, done=not item.done) if item.id == item_id else item for item in card.checklist)
    return replace(card, checklist=checklist)


def remove_checklist_item(card: Card, item_id: ChecklistItemId) -> Card:
    """Return card without the given checklist item."""
    checklist = tuple(item for item in card.checklist if item.id != item_id)
    if len(checklist) == len(card.checklist):
        return card
    return replace(card, checklist=checklist)


def checklist_progress(card: Card) -> tuple[int, int]:
    """Count (done, total) checklist items."""
    done = sum(1 for item in card.checklist if item.done)
    return done, len(card.checklist)
