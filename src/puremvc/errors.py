"""Exceptions raised by the PureMVC core."""
from __future__ import annotations


class PureMVCError(RuntimeError):
    """Base class for framework errors."""


class DuplicateCoreError(PureMVCError):
    """A Facade was constructed for a key that already has a live core."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Facade already constructed for key {key!r}")
        self.key = key


class NotifierNotInitializedError(PureMVCError):
    """A Notifier was used before a Facade was attached to it."""
