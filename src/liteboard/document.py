"""Convert boards to and from portable JSON documents.

Document shape::

    {
      "columns": [{"id": ..., "title": ..., "cardIds": [...]}],
      "cards": {"<id>": {"id", "title", "description", "labels",
                         "checklist": [{"id", "text", "done"}]}}
    }

No timestamps or history are ever written.
"""

import json
from typing import Any, Callable

from liteboard.errors import ValidationError
from liteboard.ids import CardId, ChecklistItemId, ColumnId, new_card_id, new_checklist_item_id, new_column_id
from liteboard.model.board import Board, Card, ChecklistItem, Column

EXPORT_FILENAME = "board-no-dates.json"

_STARTER = [
    ("To Do", "Set up client board", "Create a clean, client-safe board.", "setup"),
    ("Doing", "Draft copy", "Hero, benefits, CTA.", "copy"),
    ("Done", "Share preview", "Send read-only link.", "share"),
]


def default_board() -> Board:
    """Three columns with one sample card each."""
    columns = []
    cards: dict[CardId, Card] = {}
    for column_title, title, description, label in _STARTER:
        card_id = new_card_id(cards)
        cards[card_id] = Card(id=card_id, title=title, description=description, labels=(label,))
        column_id = new_column_id({c.id for c in columns})
        columns.append(Column(id=column_id, title=column_title, card_ids=(card_id,)))
    return Board(columns=tuple(columns), cards=cards)


# --- export ---


def card_to_dict(card: Card) -> dict:
    """Serialize one card record."""
    return {
        "id": card.id,
        "title": card.title,
        "description": card.description,
        "labels": list(card.labels),
        "checklist": [{"id": item.id, "text": item.text, "done": item.done} for item in card.checklist],
    }


def board_to_document(board: Board) -> dict:
    """Build the export document for a board."""
    return {
        "columns": [{"id": c.id, "title": c.title, "cardIds": list(c.card_ids)} for c in board.columns],
        "cards": {card_id: card_to_dict(card) for card_id, card in board.cards.items()},
    }


def dumps(board: Board) -> str:
    """Render a board as indented JSON text."""
    return json.dumps(board_to_document(board), indent=2, ensure_ascii=False) + "\n"


# --- import ---


def _string(value: Any, what: str, default: str | None = None) -> str:
    if value is None and default is not None:
        return default
    if not isinstance(value, str):
        raise ValidationError(f"{what} must be a string")
    return value


def _flag(value: Any, what: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{what} must be true or false")
    return value


def _unique_id(
    raw_id: Any, what: str, taken: set[str], reserved: set[str], generate: Callable[[set[str]], str]
) -> str:
    """Keep raw_id unless it is missing or already used, else generate one.

    Generated ids also avoid everything in reserved, the ids still to come.
    """
    if raw_id is not None:
        raw_id = _string(raw_id, what)
    if not raw_id or raw_id in taken:
        raw_id = generate(taken | reserved)
    taken.add(raw_id)
    return raw_id


def _checklist_from_list(raw: Any, card_id: str) -> tuple[ChecklistItem, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ValidationError(f"Card {card_id}: checklist must be a list")
    items: list[ChecklistItem] = []
    taken: set[str] = set()
    reserved = {e["id"] for e in raw if isinstance(e, dict) and isinstance(e.get("id"), str)}
    for entry in raw:
        if not isinstance(entry, dict):
            raise ValidationError(f"Card {card_id}: checklist items must be objects")
        item_id = _unique_id(entry.get("id"), "Checklist item id", taken, reserved, new_checklist_item_id)
        items.append(
            ChecklistItem(
                id=ChecklistItemId(item_id),
                text=_string(entry.get("text"), "Checklist item text", default=""),
                done=_flag(entry.get("done", False), "Checklist item done"),
            )
        )
    return tuple(items)


def card_from_dict(key: str, raw: Any) -> Card:
    """Parse one card record. Missing optional fields get empty defaults."""
    if not isinstance(raw, dict):
        raise ValidationError(f"Card {key} must be an object")
    labels = raw.get("labels") or []
    if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
        raise ValidationError(f"Card {key}: labels must be a list of strings")
    return Card(
        id=CardId(key),
        title=_string(raw.get("title"), f"Card {key} title"),
        description=_string(raw.get("description"), f"Card {key} description", default=""),
        labels=tuple(labels),
        checklist=_checklist_from_list(raw.get("checklist"), key),
    )


def board_from_document(data: Any) -> Board:
    """Validate a parsed document and build a Board from it.

    Raises ValidationError unless ``columns`` is a list and ``cards`` is
    a mapping. Column references to cards that don't exist are dropped,
    as are repeat references to a card already placed. A column or
    checklist item whose id repeats an earlier one gets a fresh id.
    """
    if not isinstance(data, dict):
        raise ValidationError("Board document must be an object")
    raw_columns = data.get("columns")
    raw_cards = data.get("cards")
    if not isinstance(raw_columns, list):
        raise ValidationError("'columns' must be an array")
    if not isinstance(raw_cards, dict):
        raise ValidationError("'cards' must be an object")

    cards = {CardId(str(key)): card_from_dict(str(key), raw) for key, raw in raw_cards.items()}

    columns: list[Column] = []
    placed: set[str] = set()
    taken: set[str] = set()
    reserved = {c["id"] for c in raw_columns if isinstance(c, dict) and isinstance(c.get("id"), str)}
    for raw in raw_columns:
        if not isinstance(raw, dict):
            raise ValidationError("Columns must be objects")
        raw_ids = raw.get("cardIds") or []
        if not isinstance(raw_ids, list):
            raise ValidationError("'cardIds' must be an array")
        card_ids = []
        for card_id in map(str, raw_ids):
            if card_id in cards and card_id not in placed:
                card_ids.append(CardId(card_id))
                placed.add(card_id)
        column_id = _unique_id(raw.get("id"), "Column id", taken, reserved, new_column_id)
        columns.append(
            Column(
                id=ColumnId(column_id),
                title=_string(raw.get("title"), "Column title", default=""),
                card_ids=tuple(card_ids),
            )
        )

    return Board(columns=tuple(columns), cards=cards)


def loads(text: str | bytes) -> Board:
    """Parse JSON text or UTF-8 bytes into a Board, raising ValidationError on bad input."""
    try:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        data = json.loads(text)
    except UnicodeDecodeError as e:
        raise ValidationError(f"Not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}") from e
    return board_from_document(data)
