"""Identifier types and generation."""

import secrets
import string
from collections.abc import Container
from typing import NewType

ColumnId = NewType("ColumnId", str)
CardId = NewType("CardId", str)
ChecklistItemId = NewType("ChecklistItemId", str)

COLUMN_PREFIX = "col"
CARD_PREFIX = "card"
CHECKLIST_PREFIX = "chk"

_ALPHABET = string.ascii_lowercase + string.digits
_SUFFIX_LENGTH = 8


def new_id(prefix: str, existing: Container[str] = ()) -> str:
    """Generate a random id like "card_k3j9x0qa" that is not in existing.

    "col" → "col_0f7qz1mb"
    """
    while True:
        suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_SUFFIX_LENGTH))
        candidate = f"{prefix}_{suffix}"
        if candidate not in existing:
            return candidate


def new_column_id(existing: Container[str] = ()) -> ColumnId:
    """Generate a fresh column id."""
    return ColumnId(new_id(COLUMN_PREFIX, existing))


def new_card_id(existing: Container[str] = ()) -> CardId:
    """Generate a fresh card id."""
    return CardId(new_id(CARD_PREFIX, existing))


def new_checklist_item_id(existing: Container[str] = ()) -> ChecklistItemId:
    """Generate a fresh checklist item id."""
    return ChecklistItemId(new_id(CHECKLIST_PREFIX, existing))
