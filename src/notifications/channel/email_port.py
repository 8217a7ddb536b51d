"""Email channel port — abstract interface for email dispatch."""

from abc import ABC, abstractmethod


class NotificationError(Exception):
    """Raised by email adapters when the transport fails."""


class EmailPort(ABC):
    """Abstract interface for email dispatch adapters."""

    @abstractmethod
    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        """Send an email message.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)

        Raises:
            NotificationError: when the transport itself fails.
        """
        ...
