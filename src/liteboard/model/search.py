"""Free-text filtering of a board."""

from dataclasses import replace

from liteboard.model.board import Board, Card


def card_haystack(card: Card) -> str:
    """The lowercased text a query is matched against."""
    return f"{card.title} {card.description or ''} {' '.join(card.labels)}".lower()


def match_card(card: Card, query: str) -> bool:
    """Case-insensitive substring match over title, description and labels."""
    return query.lower() in card_haystack(card)


def filter_board(board: Board, query: str) -> Board:
    """Return a view of board holding only cards that match query.

    A blank query returns board itself. Columns are always kept, even
    when nothing in them matches. The input board is never modified.
    """
    if not query.strip():
        return board
    cards = {card_id: card for card_id, card in board.cards.items() if match_card(card, query)}
    columns = tuple(replace(c, card_ids=tuple(i for i in c.card_ids if i in cards)) for c in board.columns)
    return Board(columns=columns, cards=cards)
