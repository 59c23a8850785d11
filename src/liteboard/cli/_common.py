"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from collections.abc import Iterable

from liteboard.config import Settings, load_settings
from liteboard.ids import CardId, ColumnId
from liteboard.model.board import Board, Card, Column
from liteboard.model.card import checklist_progress
from liteboard.state import BoardState
from liteboard.storage import LocalStore


def configure_logging(verbose: int) -> None:
    """Send log records to stderr; -v for INFO, -vv for DEBUG."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def settings_from_args(args) -> Settings:
    return load_settings(store=args.store, seed=args.seed)


def load_state(args) -> BoardState:
    """Open the configured store and run startup to completion."""
    configure_logging(args.verbose)
    settings = settings_from_args(args)
    state = BoardState(LocalStore(settings.store_path), settings.seed_url)
    state.start_blocking()
    return state


def match_id(given: str, candidates: Iterable[str]) -> str | None:
    """Resolve an id typed by the user.

    Exact matches win. Otherwise a unique prefix of the full id, or of the
    part after the kind prefix, is accepted ("k3j" for "card_k3j9x0qa").
    """
    candidates = list(candidates)
    if given in candidates:
        return given
    hits = [c for c in candidates if c.startswith(given) or c.partition("_")[2].startswith(given)]
    return hits[0] if len(hits) == 1 else None


def find_column(board: Board, col_id: str, json_mode: bool) -> Column:
    """Lookup column by id. Exit 1 listing available columns if not found."""
    found = match_id(col_id, [c.id for c in board.columns])
    for col in board.columns:
        if col.id == found:
            return col
    available = [f"  {c.id}  {c.title}" for c in board.columns]
    msg = f"Column '{col_id}' not found. Available:\n" + "\n".join(available)
    error(msg, json_mode)


def find_card(board: Board, card_id: str, json_mode: bool) -> Card:
    """Lookup card by id. Exit 1 if not found."""
    found = match_id(card_id, board.cards.keys())
    if found is not None:
        return board.cards[CardId(found)]
    error(f"Card '{card_id}' not found.", json_mode)


def find_target(board: Board, target: str, json_mode: bool) -> str:
    """Resolve a drop target that may name a card or a column."""
    found = match_id(target, [*board.cards.keys(), *(c.id for c in board.columns)])
    if found is None:
        error(f"No card or column matches '{target}'.", json_mode)
    return found


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def column_ref(col: Column) -> dict:
    return {"id": col.id, "title": col.title}


def build_column_summaries(board: Board) -> list[dict]:
    """Build column summary dicts from board."""
    return [{"id": col.id, "title": col.title, "cards": len(col.card_ids)} for col in board.columns]


def format_column_line(c: dict, indent: str = "") -> str:
    """Format a column summary dict as a text line."""
    cards = "card" if c["cards"] == 1 else "cards"
    return f"{indent}{c['id']}  {c['title']:<16} {c['cards']} {cards}"


def card_summary(card: Card) -> dict:
    done, total = checklist_progress(card)
    return {
        "id": card.id,
        "title": card.title,
        "labels": list(card.labels),
        "checklist": {"done": done, "total": total},
    }


def format_card_line(card: Card, indent: str = "  ") -> str:
    """One-line rendering: id, title, [labels], done/total."""
    parts = [f"{indent}{card.id}  {card.title}"]
    if card.labels:
        parts.append("[" + ", ".join(card.labels) + "]")
    if card.checklist:
        done, total = checklist_progress(card)
        parts.append(f"{done}/{total}")
    return "  ".join(parts)


def unplaced_cards(board: Board) -> list[Card]:
    """Cards that no column lists, e.g. from a hand-edited import."""
    placed = {card_id for col in board.columns for card_id in col.card_ids}
    return [card for card_id, card in board.cards.items() if card_id not in placed]


def print_board(board: Board, json_mode: bool, column_id: ColumnId | None = None) -> None:
    """Print cards grouped by column.

    Without a column filter, cards outside every column are listed last.
    """
    columns = [c for c in board.columns if column_id is None or c.id == column_id]
    loose = unplaced_cards(board) if column_id is None else []
    if json_mode:
        items = [
            {**card_summary(board.cards[card_id]), "column": column_ref(col)}
            for col in columns
            for card_id in col.card_ids
        ]
        items += [{**card_summary(card), "column": None} for card in loose]
        output_json(items)
        return
    for col in columns:
        print(f"{col.id}  {col.title}")
        for card_id in col.card_ids:
            print(format_card_line(board.cards[card_id]))
    if loose:
        print("(no column)")
        for card in loose:
            print(format_card_line(card))
