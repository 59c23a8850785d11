"""Board builders shared by the test suites."""

from liteboard.ids import CardId, ChecklistItemId, ColumnId
from liteboard.model.board import Board, Card, ChecklistItem, Column


def make_card(card_id, title=None, description="", labels=(), checklist=()):
    """Build a Card; title defaults to the id upper-cased."""
    return Card(
        id=CardId(card_id),
        title=title or card_id.upper(),
        description=description,
        labels=tuple(labels),
        checklist=tuple(checklist),
    )


def make_item(item_id, text, done=False):
    return ChecklistItem(id=ChecklistItemId(item_id), text=text, done=done)


def make_board(columns, cards=None):
    """Build a Board from {column_id: [card_id, ...]}.

    Column titles equal their ids. Any referenced card missing from
    ``cards`` is created with make_card.
    """
    cards = dict(cards or {})
    built = []
    for column_id, card_ids in columns.items():
        for card_id in card_ids:
            cards.setdefault(card_id, make_card(card_id))
        built.append(Column(id=ColumnId(column_id), title=column_id, card_ids=tuple(CardId(i) for i in card_ids)))
    return Board(columns=tuple(built), cards={CardId(k): v for k, v in cards.items()})


def order(board, column_id):
    """A column's card ids as a plain list."""
    for col in board.columns:
        if col.id == column_id:
            return list(col.card_ids)
    raise KeyError(column_id)
