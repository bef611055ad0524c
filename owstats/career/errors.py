"""
Exceptions raised by the assembler and fetcher.
Extraction helpers never raise; emptiness becomes NotFoundError in engine.py.
"""
from __future__ import annotations

from .constants import ERROR_NOT_FOUND, ERROR_PLAYER_NOT_FOUND


class CareerError(Exception):
    """Base class for everything the career pipeline raises on purpose."""


class FetchError(CareerError):
    """The career site or the search endpoint could not be reached or read."""


class NotFoundError(CareerError):
    def __init__(self, message: str = ERROR_NOT_FOUND):
        super().__init__(message)


class PlayerNotFoundError(NotFoundError):
    def __init__(self, message: str = ERROR_PLAYER_NOT_FOUND):
        super().__init__(message)


class InvalidParameterError(CareerError):
    """Carries every failed validation message, not only the first."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)
