"""Catalogue domain exceptions.

Raised synchronously to the caller; nothing inside the catalogue retries
or recovers from them.
"""

from __future__ import annotations

from typing import Any

LEGACY_MESSAGE = "Bad Batch"


class CatalogueError(Exception):
    """Base class for all catalogue errors."""


class BadBatchError(CatalogueError):
    """A batch contains at least one id already present in the catalogue."""

    def __init__(self, clashing_ids: list[str], message: str = LEGACY_MESSAGE) -> None:
        super().__init__(message)
        self.clashing_ids = clashing_ids


class BadSearchError(CatalogueError):
    """Search criteria is neither a criteria variant nor a mapping."""

    def __init__(self, criteria: Any, message: str = LEGACY_MESSAGE) -> None:
        super().__init__(message)
        self.criteria = criteria
