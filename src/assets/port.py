"""Asset store port — abstract interface for product image uploads."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class AssetStoreError(Exception):
    """Raised when an upload cannot be stored."""


@dataclass(frozen=True)
class Upload:
    filename: str
    content: bytes
    content_type: str | None = None


class AssetStore(ABC):
    """Abstract asset store interface."""

    @abstractmethod
    def upload(self, files: list[Upload]) -> list[str]:
        """Store the files and return their public URLs in upload order.

        Raises:
            AssetStoreError: if any file could not be stored.
        """
        ...
