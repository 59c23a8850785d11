"""Handlers for board-wide commands: init, board, reset, search, export, import."""

import sys
from pathlib import Path

from liteboard.cli._common import (
    build_column_summaries,
    error,
    format_column_line,
    load_state,
    output_json,
    output_result,
    print_board,
    settings_from_args,
)
from liteboard.errors import ValidationError
from liteboard.model.search import filter_board


def init_board(args) -> int:
    """Create the board from the seed or defaults if none is stored."""
    state = load_state(args)
    titles = [c.title for c in state.board.columns]
    store = str(state.store.path)
    if args.json:
        output_json({"store": store, "columns": titles})
    else:
        print(f"Board ready at {store}")
        print(f"Columns: {', '.join(titles)}")
    return 0


def board_summary(args) -> int:
    """Show columns and card counts."""
    state = load_state(args)
    summaries = build_column_summaries(state.board)
    if args.json:
        output_json({"store": str(state.store.path), "columns": summaries, "cards": len(state.board.cards)})
    else:
        for c in summaries:
            print(format_column_line(c))
    return 0


def board_reset(args) -> int:
    """Discard the stored board and start again from the seed or defaults."""
    state = load_state(args)
    state.reset_blocking()
    titles = [c.title for c in state.board.columns]
    output_result({"columns": titles}, f"Board reset. Columns: {', '.join(titles)}", args.json)
    return 0


def search(args) -> int:
    """List cards matching a free-text query."""
    state = load_state(args)
    print_board(filter_board(state.board, args.query), args.json)
    return 0


def export_board(args) -> int:
    """Write the board document to a file or stdout."""
    state = load_state(args)
    text = state.export_document()
    if args.output in (None, "-"):
        sys.stdout.write(text)
        return 0
    path = Path(args.output)
    if path.is_dir():
        path = path / settings_from_args(args).export_filename
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        error(f"Cannot write {path}: {e}", args.json)
    output_result({"path": str(path)}, f"Exported board to {path}", args.json)
    return 0


def import_board(args) -> int:
    """Replace the board with a document read from a file or stdin."""
    state = load_state(args)
    try:
        data = sys.stdin.read() if args.path == "-" else Path(args.path).read_bytes()
    except UnicodeDecodeError as e:
        error(f"Invalid board file: {e}", args.json)
    except OSError as e:
        error(f"Cannot read {args.path}: {e}", args.json)
    try:
        board = state.import_document(data)
    except ValidationError as e:
        error(f"Invalid board file: {e}", args.json)
    output_result(
        {"columns": len(board.columns), "cards": len(board.cards)},
        f"Imported {len(board.columns)} columns and {len(board.cards)} cards",
        args.json,
    )
    return 0
