"""Handlers for 'liteboard column' commands."""

from liteboard.cli._common import (
    build_column_summaries,
    find_column,
    format_column_line,
    load_state,
    output_json,
    output_result,
)


def column_list(args) -> int:
    """List all columns."""
    state = load_state(args)
    items = build_column_summaries(state.board)
    if args.json:
        output_json(items)
    else:
        for c in items:
            print(format_column_line(c))
    return 0


def column_add(args) -> int:
    """Create a new column at the right-hand end."""
    state = load_state(args)
    column_id = state.add_column(args.title)
    title = next(c.title for c in state.board.columns if c.id == column_id)
    output_result(
        {"id": column_id, "title": title},
        f'Created column "{title}" (id {column_id})',
        args.json,
    )
    return 0


def column_rename(args) -> int:
    """Rename a column."""
    state = load_state(args)
    col = find_column(state.board, args.id, args.json)
    state.rename_column(col.id, args.title)
    output_result(
        {"id": col.id, "old_title": col.title, "new_title": args.title},
        f'Renamed column "{col.title}" to "{args.title}"',
        args.json,
    )
    return 0


def column_move(args) -> int:
    """Move a column to a new position."""
    state = load_state(args)
    col = find_column(state.board, args.id, args.json)

    # CLI uses 1-indexed positions, model uses 0-indexed
    state.move_column(col.id, args.position - 1)

    position = next(i for i, c in enumerate(state.board.columns, start=1) if c.id == col.id)
    output_result(
        {"id": col.id, "title": col.title, "position": position},
        f'Moved column "{col.title}" to position {position}',
        args.json,
    )
    return 0


def column_delete(args) -> int:
    """Delete a column and the cards in it."""
    state = load_state(args)
    col = find_column(state.board, args.id, args.json)
    state.delete_column(col.id)
    cards = "card" if len(col.card_ids) == 1 else "cards"
    output_result(
        {"id": col.id, "title": col.title, "deleted_cards": list(col.card_ids)},
        f'Deleted column "{col.title}" and {len(col.card_ids)} {cards}',
        args.json,
    )
    return 0
