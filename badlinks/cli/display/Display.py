"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Abstract base for display implementations."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status message.

        Args:
            message: Status text to display
            kwargs: Implementation-specific options
        """
        pass

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., details)
        """
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Print a command's output.

        Args:
            data: Output dict of a command
            kwargs: ``format`` is one of yaml, json or text
        """
        pass
