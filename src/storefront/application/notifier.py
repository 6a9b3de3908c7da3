"""Port for transient user-visible notifications."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Notifier(ABC):

    @abstractmethod
    def post(self, message: str) -> None:
        """Show *message*, replacing whatever is currently shown."""

    @property
    @abstractmethod
    def current(self) -> str:
        """The message currently shown, or an empty string."""
