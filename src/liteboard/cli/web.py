"""Handler for 'liteboard web' command."""

import shlex
import shutil
import sys

from textual_serve.server import Server

from liteboard.cli._common import settings_from_args


def web(args) -> int:
    """Serve the terminal UI in a browser."""
    liteboard = shutil.which("liteboard")
    if liteboard is None:
        print("error: liteboard not found on PATH", file=sys.stderr)
        return 1

    settings = settings_from_args(args)
    command = [liteboard, str(settings.store_path)]
    if settings.seed_url:
        command += ["--seed", settings.seed_url]

    server = Server(
        shlex.join(command),
        host=args.host,
        port=args.port,
        title="liteboard",
    )

    print(f"serving {settings.store_path} at http://{args.host}:{args.port}")
    server.serve()
    return 0
