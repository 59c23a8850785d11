"""Handlers for 'liteboard card' commands."""

from dataclasses import replace

from liteboard.cli._common import (
    card_summary,
    column_ref,
    error,
    find_card,
    find_column,
    find_target,
    load_state,
    match_id,
    output_json,
    output_result,
    print_board,
)
from liteboard.document import card_to_dict
from liteboard.errors import ValidationError
from liteboard.model.card import (
    add_checklist_item,
    find_card_column,
    parse_labels,
    remove_checklist_item,
    toggle_checklist_item,
)


def card_list(args) -> int:
    """List cards grouped by column."""
    state = load_state(args)
    column_id = None
    if args.column:
        column_id = find_column(state.board, args.column, args.json).id
    print_board(state.board, args.json, column_id)
    return 0


def card_get(args) -> int:
    """Show one card in full."""
    state = load_state(args)
    card = find_card(state.board, args.id, args.json)
    col = find_card_column(state.board, card.id)

    if args.json:
        data = card_to_dict(card)
        if col:
            data["column"] = column_ref(col)
        output_json(data)
        return 0

    print(card.title)
    if col:
        print(f"column: {col.title}")
    if card.labels:
        print(f"labels: {', '.join(card.labels)}")
    if card.description:
        print()
        print(card.description)
    if card.checklist:
        print()
        for item in card.checklist:
            mark = "x" if item.done else " "
            print(f"[{mark}] {item.text}  ({item.id})")
    return 0


def card_add(args) -> int:
    """Create a new card at the bottom of a column."""
    state = load_state(args)
    if args.column:
        col = find_column(state.board, args.column, args.json)
    elif state.board.columns:
        col = state.board.columns[0]
    else:
        error("Board has no columns. Add one with 'liteboard column add'.", args.json)

    try:
        card_id = state.add_card(col.id, args.title)
    except ValidationError as e:
        error(str(e), args.json)

    title = state.board.cards[card_id].title
    output_result(
        {"id": card_id, "title": title, "column": column_ref(col)},
        f"Created card {card_id} in {col.title}",
        args.json,
    )
    return 0


def card_edit(args) -> int:
    """Change a card's title, description or labels."""
    state = load_state(args)
    card = find_card(state.board, args.id, args.json)

    changes = {}
    if args.title is not None:
        if not args.title.strip():
            error("Card title must not be empty", args.json)
        changes["title"] = args.title.strip()
    if args.description is not None:
        changes["description"] = args.description
    if args.labels is not None:
        changes["labels"] = parse_labels(args.labels)

    updated = replace(card, **changes)
    state.update_card(updated)
    output_result(card_summary(updated), f"Updated card {card.id}", args.json)
    return 0


def card_delete(args) -> int:
    """Delete a card."""
    state = load_state(args)
    card = find_card(state.board, args.id, args.json)
    state.delete_card(card.id)
    output_result({"id": card.id, "title": card.title}, f"Deleted card {card.id}", args.json)
    return 0


def card_move(args) -> int:
    """Drop a card onto another card (lands before it) or onto a column (lands at the end)."""
    state = load_state(args)
    card = find_card(state.board, args.id, args.json)
    if find_card_column(state.board, card.id) is None:
        error(f"Card {card.id} is not in any column and cannot be moved.", args.json)
    target = find_target(state.board, args.target, args.json)

    state.move_card(card.id, target)

    col = find_card_column(state.board, card.id)
    position = col.card_ids.index(card.id) + 1
    output_result(
        {"id": card.id, "column": column_ref(col), "position": position},
        f"Card {card.id} is now #{position} in {col.title}",
        args.json,
    )
    return 0


def item_add(args) -> int:
    """Append an unchecked item to a card's checklist."""
    state = load_state(args)
    card = find_card(state.board, args.id, args.json)
    try:
        updated = add_checklist_item(card, args.text)
    except ValidationError as e:
        error(str(e), args.json)
    state.update_card(updated)
    item = updated.checklist[-1]
    output_result(
        {"card": card.id, "id": item.id, "text": item.text, "done": item.done},
        f"Added checklist item {item.id} to {card.id}",
        args.json,
    )
    return 0


def _find_item(card, item_id: str, json_mode: bool):
    found = match_id(item_id, [item.id for item in card.checklist])
    for item in card.checklist:
        if item.id == found:
            return item
    error(f"Checklist item '{item_id}' not found on card {card.id}.", json_mode)


def item_toggle(args) -> int:
    """Flip a checklist item between done and not done."""
    state = load_state(args)
    card = find_card(state.board, args.id, args.json)
    item = _find_item(card, args.item, args.json)
    state.update_card(toggle_checklist_item(card, item.id))
    done = not item.done
    output_result(
        {"card": card.id, "id": item.id, "done": done},
        f"{'Checked' if done else 'Unchecked'} {item.text}",
        args.json,
    )
    return 0


def item_remove(args) -> int:
    """Remove a checklist item."""
    state = load_state(args)
    card = find_card(state.board, args.id, args.json)
    item = _find_item(card, args.item, args.json)
    state.update_card(remove_checklist_item(card, item.id))
    output_result({"card": card.id, "id": item.id}, f"Removed {item.text}", args.json)
    return 0
