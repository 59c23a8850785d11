"""CLI argument parser and dispatch for liteboard."""

import argparse

from liteboard.cli.board import board_reset, board_summary, export_board, import_board, init_board, search
from liteboard.cli.card import (
    card_add,
    card_delete,
    card_edit,
    card_get,
    card_list,
    card_move,
    item_add,
    item_remove,
    item_toggle,
)
from liteboard.cli.column import column_add, column_delete, column_list, column_move, column_rename
from liteboard.cli.web import web


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--store", help="Path to the board file (default: from config)")
    common.add_argument("--seed", help="URL or path of a seed board used when no board is stored")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")

    parser = argparse.ArgumentParser(
        prog="liteboard",
        description="Single-user kanban board",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init / board / reset / search ---
    init_p = nouns.add_parser("init", help="Create the board if none is stored", parents=[common])
    init_p.set_defaults(func=init_board)

    board_p = nouns.add_parser("board", help="Show board summary", parents=[common])
    board_p.set_defaults(func=board_summary)

    reset_p = nouns.add_parser("reset", help="Discard the board and start from the seed/defaults", parents=[common])
    reset_p.set_defaults(func=board_reset)

    search_p = nouns.add_parser("search", help="List cards matching a query", parents=[common])
    search_p.add_argument("query", help="Text to look for in titles, descriptions and labels")
    search_p.set_defaults(func=search)

    # --- export / import ---
    export_p = nouns.add_parser("export", help="Write the board as JSON", parents=[common])
    export_p.add_argument("-o", "--output", help="File or directory to write (default: stdout)")
    export_p.set_defaults(func=export_board)

    import_p = nouns.add_parser("import", help="Replace the board with a JSON file", parents=[common])
    import_p.add_argument("path", help="Board JSON file, or - for stdin")
    import_p.set_defaults(func=import_board)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards", parents=[common])
    card_list_p.add_argument("--column", dest="column", help="Filter by column ID")
    card_list_p.set_defaults(func=card_list)

    card_get_p = card_verbs.add_parser("get", help="Show a card", parents=[common])
    card_get_p.add_argument("id", help="Card ID")
    card_get_p.set_defaults(func=card_get)

    card_add_p = card_verbs.add_parser("add", help="Create a card", parents=[common])
    card_add_p.add_argument("title", help="Card title")
    card_add_p.add_argument("--column", dest="column", help="Target column ID (default: first column)")
    card_add_p.set_defaults(func=card_add)

    card_edit_p = card_verbs.add_parser("edit", help="Edit a card", parents=[common])
    card_edit_p.add_argument("id", help="Card ID")
    card_edit_p.add_argument("--title", help="New title")
    card_edit_p.add_argument("--description", help="New description")
    card_edit_p.add_argument("--labels", help="Comma-separated labels (replaces existing)")
    card_edit_p.set_defaults(func=card_edit)

    card_move_p = card_verbs.add_parser("move", help="Move a card", parents=[common])
    card_move_p.add_argument("id", help="Card ID")
    card_move_p.add_argument("target", help="Card to land before, or column to append to")
    card_move_p.set_defaults(func=card_move)

    card_delete_p = card_verbs.add_parser("delete", help="Delete a card", parents=[common])
    card_delete_p.add_argument("id", help="Card ID")
    card_delete_p.set_defaults(func=card_delete)

    item_add_p = card_verbs.add_parser("item-add", help="Add a checklist item", parents=[common])
    item_add_p.add_argument("id", help="Card ID")
    item_add_p.add_argument("text", help="Checklist item text")
    item_add_p.set_defaults(func=item_add)

    item_toggle_p = card_verbs.add_parser("item-toggle", help="Check or uncheck a checklist item", parents=[common])
    item_toggle_p.add_argument("id", help="Card ID")
    item_toggle_p.add_argument("item", help="Checklist item ID")
    item_toggle_p.set_defaults(func=item_toggle)

    item_remove_p = card_verbs.add_parser("item-remove", help="Remove a checklist item", parents=[common])
    item_remove_p.add_argument("id", help="Card ID")
    item_remove_p.add_argument("item", help="Checklist item ID")
    item_remove_p.set_defaults(func=item_remove)

    # card with no verb = list
    card_p.set_defaults(func=card_list, column=None)

    # --- column ---
    col_p = nouns.add_parser("column", help="Column operations", parents=[common])
    col_verbs = col_p.add_subparsers(dest="verb")

    col_list_p = col_verbs.add_parser("list", help="List columns", parents=[common])
    col_list_p.set_defaults(func=column_list)

    col_add_p = col_verbs.add_parser("add", help="Create a column", parents=[common])
    col_add_p.add_argument("title", nargs="?", help="Column title (default: New List)")
    col_add_p.set_defaults(func=column_add)

    col_rename_p = col_verbs.add_parser("rename", help="Rename a column", parents=[common])
    col_rename_p.add_argument("id", help="Column ID")
    col_rename_p.add_argument("title", help="New column title")
    col_rename_p.set_defaults(func=column_rename)

    col_move_p = col_verbs.add_parser("move", help="Move a column", parents=[common])
    col_move_p.add_argument("id", help="Column ID")
    col_move_p.add_argument("--position", type=int, required=True, help="New position (1-indexed)")
    col_move_p.set_defaults(func=column_move)

    col_delete_p = col_verbs.add_parser("delete", help="Delete a column and its cards", parents=[common])
    col_delete_p.add_argument("id", help="Column ID")
    col_delete_p.set_defaults(func=column_delete)

    # column with no verb = list
    col_p.set_defaults(func=column_list)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve board in browser", parents=[common])
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8618, help="Port (default: 8618)")
    web_p.set_defaults(func=web)

    return parser
