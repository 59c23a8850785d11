"""The session's board, its startup lifecycle, and change notification.

``BoardState`` is the only place the current board is replaced. Every
mutation goes through one of its methods, which apply a pure operation
from ``liteboard.model`` and notify watchers with ``(old, new)``.
Persistence is just another watcher (see ``persist_to``).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from liteboard.document import default_board, dumps, loads
from liteboard.errors import BoardNotReady, StorageError
from liteboard.ids import CardId, ColumnId
from liteboard.model import card as card_ops
from liteboard.model import column as column_ops
from liteboard.model import reorder
from liteboard.model.board import Board, Card
from liteboard.storage import LocalStore, fetch_seed, fetch_seed_async

logger = logging.getLogger(__name__)

Callback = Callable[[Board | None, Board | None], None]


class Lifecycle(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING_SEED = "loading-seed"
    READY = "ready"


def persist_to(store: LocalStore) -> Callback:
    """Build a watcher that saves every new board to store.

    Write failures are logged and otherwise ignored; the in-memory board
    stays authoritative for the session.
    """

    def save(old: Board | None, new: Board | None) -> None:
        if new is None:
            return
        try:
            store.save(new)
        except StorageError as e:
            logger.warning("board not saved: %s", e)

    return save


class BoardState:
    """Holds the current board and gates mutations until it is ready."""

    def __init__(self, store: LocalStore | None = None, seed_url: str | None = None):
        self.store = store
        self.seed_url = seed_url
        self.status = Lifecycle.UNINITIALIZED
        self._board: Board | None = None
        self._watchers: list[Callback] = []
        if store is not None:
            self.watch(persist_to(store))

    @property
    def board(self) -> Board | None:
        """The current board, or None until startup finishes."""
        return self._board

    @property
    def ready(self) -> bool:
        return self.status is Lifecycle.READY

    def watch(self, callback: Callback) -> Callable[[], None]:
        """Call callback(old, new) on every board change. Returns an unwatch callable."""
        self._watchers.append(callback)
        return lambda: callback in self._watchers and self._watchers.remove(callback)

    def _emit(self, old: Board | None, new: Board | None) -> None:
        for cb in list(self._watchers):
            cb(old, new)

    def _set_board(self, board: Board) -> None:
        old = self._board
        self._board = board
        self._emit(old, board)

    # -- startup --

    def _read_store(self) -> Board | None:
        if self.store is None:
            return None
        try:
            return self.store.load()
        except StorageError as e:
            logger.warning("stored board unavailable: %s", e)
            return None

    def _begin(self, use_store: bool = True) -> bool:
        """Load from the store. Returns True if that finished startup."""
        if self.status is not Lifecycle.UNINITIALIZED:
            return True
        stored = self._read_store() if use_store else None
        if stored is not None:
            logger.debug("loaded board from %s", self.store)
            self.status = Lifecycle.READY
            self._set_board(stored)
            return True
        self.status = Lifecycle.LOADING_SEED
        logger.debug("no stored board, seeding from %s", self.seed_url or "defaults")
        return False

    def _finish(self, seed: Board | None) -> None:
        self.status = Lifecycle.READY
        self._set_board(seed if seed is not None else default_board())

    async def _load(self, use_store: bool) -> None:
        if self._begin(use_store):
            return
        seed = await fetch_seed_async(self.seed_url) if self.seed_url else None
        self._finish(seed)

    def _load_blocking(self, use_store: bool) -> None:
        if self._begin(use_store):
            return
        seed = fetch_seed(self.seed_url) if self.seed_url else None
        self._finish(seed)

    async def start(self) -> None:
        """Load the stored board, or fetch the seed without blocking the caller's loop."""
        await self._load(use_store=True)

    def start_blocking(self) -> None:
        """Same as start() for synchronous callers such as the CLI."""
        self._load_blocking(use_store=True)

    def _clear(self) -> None:
        if self.store is not None:
            try:
                self.store.clear()
            except StorageError as e:
                logger.warning("could not clear store: %s", e)
        old = self._board
        self._board = None
        self.status = Lifecycle.UNINITIALIZED
        self._emit(old, None)

    async def reset(self) -> None:
        """Forget the stored board and start over from the seed or defaults.

        The store is not read again, so a file that could not be removed is
        still replaced by the fresh board on the next save.
        """
        self._clear()
        await self._load(use_store=False)

    def reset_blocking(self) -> None:
        self._clear()
        self._load_blocking(use_store=False)

    # -- mutations --

    def apply(self, operation: Callable[..., Board], *args: Any) -> Board:
        """Run operation(board, *args) and publish the result if it changed."""
        board = self._require_board()
        new = operation(board, *args)
        if new is not board:
            self._set_board(new)
        return new

    def _require_board(self) -> Board:
        if not self.ready or self._board is None:
            raise BoardNotReady(f"Board is {self.status.value}")
        return self._board

    def add_column(self, title: str | None = None) -> ColumnId:
        board, column_id = column_ops.add_column_with_id(self._require_board(), title)
        self._set_board(board)
        return column_id

    def delete_column(self, column_id: ColumnId) -> None:
        self.apply(column_ops.delete_column, column_id)

    def rename_column(self, column_id: ColumnId, title: str) -> None:
        self.apply(column_ops.rename_column, column_id, title)

    def move_column(self, column_id: ColumnId, new_index: int) -> None:
        self.apply(column_ops.move_column, column_id, new_index)

    def add_card(self, column_id: ColumnId, title: str) -> CardId | None:
        """Create a card. Raises ValidationError for a blank title."""
        board, card_id = card_ops.add_card_with_id(self._require_board(), column_id, title)
        if card_id is not None:
            self._set_board(board)
        return card_id

    def update_card(self, card: Card) -> None:
        self.apply(card_ops.update_card, card)

    def delete_card(self, card_id: CardId) -> None:
        self.apply(card_ops.delete_card, card_id)

    def move_card(self, card_id: CardId, over_id: str | None) -> None:
        """Apply one completed drag gesture."""
        self.apply(reorder.move_card, card_id, over_id)

    # -- documents --

    def export_document(self) -> str:
        return dumps(self._require_board())

    def import_document(self, text: str | bytes) -> Board:
        """Replace the board with a parsed document.

        Raises ValidationError, leaving the current board untouched, if
        the document is malformed.
        """
        self._require_board()
        board = loads(text)
        self._set_board(board)
        return board
