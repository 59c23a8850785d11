"""Entry point for liteboard CLI."""

import argparse
import logging
import sys

NOUNS = {"init", "board", "reset", "search", "export", "import", "card", "column", "web"}


def run_tui(argv: list[str]) -> None:
    """Launch the terminal UI: liteboard [STORE] [--seed URL]."""
    from textual.logging import TextualHandler

    from liteboard.config import load_settings
    from liteboard.ui import LiteboardApp

    parser = argparse.ArgumentParser(prog="liteboard")
    parser.add_argument("store", nargs="?", help="Path to the board file")
    parser.add_argument("--seed", help="URL or path of a seed board")
    args = parser.parse_args(argv)

    # stderr belongs to the terminal UI; route records to the Textual devtools console
    logging.basicConfig(level=logging.INFO, handlers=[TextualHandler()])

    settings = load_settings(store=args.store, seed=args.seed)
    app = LiteboardApp(settings)
    app.run()


def main():
    # No subcommand or non-noun argument = TUI mode
    if len(sys.argv) < 2 or (sys.argv[1] not in NOUNS and not sys.argv[1].startswith("-")):
        run_tui(sys.argv[1:])
        return

    from liteboard.cli import build_parser

    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
