"""Errors raised while planning boxes and starting leagues."""

from __future__ import annotations


class MatchlyError(Exception):
    """Base exception for all matchly errors."""


class BoxConfigurationError(MatchlyError, ValueError):
    """A player count or option set cannot be turned into boxes.

    Raised before any box or match is built, so callers never see partial
    results.
    """

    def __init__(self, message: str, *, player_count: int | None = None):
        super().__init__(message)
        self.message = message
        self.player_count = player_count

    @property
    def code(self) -> str:
        return type(self).__name__


class InvalidBoxCount(BoxConfigurationError):
    """Requested box count is not positive or exceeds the player count."""


class InsufficientPlayers(BoxConfigurationError):
    """Not enough players to fill a single box."""


class InvalidBounds(BoxConfigurationError):
    """Minimum/maximum players per box are inconsistent."""


class UnsatisfiableBounds(BoxConfigurationError):
    """The greedy search found no box sizes inside the requested bounds."""


class DuplicatePlayer(BoxConfigurationError):
    """The same player id appears more than once in a roster."""
