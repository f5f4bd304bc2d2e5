"""Abstract interface for user notifications."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Abstract base class for surfacing messages to the user."""

    @abstractmethod
    def show_success(self, text: str) -> None:
        """Shows a success banner."""

    @abstractmethod
    def alert(self, text: str) -> None:
        """Shows an alert dialog."""
