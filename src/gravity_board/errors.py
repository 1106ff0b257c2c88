from __future__ import annotations

from typing import Optional


class MoveError(ValueError):
    """A move was rejected. The session it was aimed at is unchanged."""

    def __init__(self, message: str, column: Optional[int] = None) -> None:
        super().__init__(message)
        self.column = column


class InvalidColumn(MoveError):
    pass


class ColumnFull(MoveError):
    pass


class GameAlreadyOver(MoveError):
    pass
