"""Local board store and the startup seed fetch."""

import asyncio
import logging
import os
import tempfile
from pathlib import Path

import requests

from liteboard.document import dumps, loads
from liteboard.errors import StorageError, ValidationError
from liteboard.model.board import Board

logger = logging.getLogger(__name__)

SEED_TIMEOUT = 10


class LocalStore:
    """One JSON file holding the whole board document."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Board | None:
        """Read the stored board.

        Returns None when nothing is stored or the stored document is
        corrupt. Raises StorageError if the file exists but can't be read.
        """
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        try:
            return loads(data)
        except ValidationError as e:
            logger.warning("stored board at %s is unusable: %s", self.path, e)
            return None

    def save(self, board: Board) -> None:
        """Write the board, replacing the file atomically."""
        text = dumps(board)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".board-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(text)
                os.replace(tmp, self.path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    def clear(self) -> None:
        """Delete the stored board, if any."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot remove {self.path}: {e}") from e

    def __repr__(self) -> str:
        return f"<LocalStore {self.path}>"


def _is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def fetch_seed(location: str, timeout: float = SEED_TIMEOUT) -> Board | None:
    """Fetch a seed document from a URL or a local path.

    Any failure (network, missing file, bad document) is logged and
    yields None so the caller can fall back to the default board.
    """
    try:
        if _is_url(location):
            response = requests.get(location, timeout=timeout, headers={"Cache-Control": "no-store"})
            response.raise_for_status()
            data = response.content
        else:
            data = Path(location).expanduser().read_bytes()
        return loads(data)
    except requests.RequestException as e:
        logger.warning("seed fetch from %s failed: %s", location, e)
    except OSError as e:
        logger.warning("seed read from %s failed: %s", location, e)
    except ValidationError as e:
        logger.warning("seed document from %s rejected: %s", location, e)
    return None


async def fetch_seed_async(location: str, timeout: float = SEED_TIMEOUT) -> Board | None:
    """Run fetch_seed in a worker thread."""
    return await asyncio.to_thread(fetch_seed, location, timeout)
