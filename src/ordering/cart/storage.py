"""Cart slot port — where a client keeps its serialized cart between sessions.

A slot holds one opaque string under a fixed name and is overwritten
wholesale on every cart mutation.
"""

from abc import ABC, abstractmethod
from pathlib import Path

CART_SLOT_NAME = "cartItems"


class CartSlot(ABC):
    """Abstract interface for local cart persistence."""

    name: str = CART_SLOT_NAME

    @abstractmethod
    def load(self) -> str | None:
        """Return the stored payload, or None when the slot is empty."""
        ...

    @abstractmethod
    def save(self, payload: str) -> None:
        """Replace the stored payload."""
        ...

    @abstractmethod
    def discard(self) -> None:
        """Remove the slot entirely."""
        ...


class InMemoryCartSlot(CartSlot):
    """Slot backed by a dict, shared by every slot built on the same storage."""

    def __init__(self, storage: dict[str, str] | None = None, name: str = CART_SLOT_NAME):
        self.storage = storage if storage is not None else {}
        self.name = name

    def load(self) -> str | None:
        return self.storage.get(self.name)

    def save(self, payload: str) -> None:
        self.storage[self.name] = payload

    def discard(self) -> None:
        self.storage.pop(self.name, None)


class JsonFileCartSlot(CartSlot):
    """Slot stored as `<directory>/<name>.json`."""

    def __init__(self, directory: str | Path, name: str = CART_SLOT_NAME):
        self.name = name
        self.path = Path(directory) / f"{name}.json"

    def load(self) -> str | None:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def save(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(payload, encoding="utf-8")

    def discard(self) -> None:
        self.path.unlink(missing_ok=True)
