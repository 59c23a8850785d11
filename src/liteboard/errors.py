"""Exceptions raised by liteboard."""


class LiteboardError(Exception):
    """Base class for liteboard errors."""


class ValidationError(LiteboardError):
    """A document or user input failed validation. The board is left unchanged."""


class StorageError(LiteboardError):
    """Reading or writing the local store failed."""


class BoardNotReady(LiteboardError):
    """A mutation was attempted before the board finished loading."""
