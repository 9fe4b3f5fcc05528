"""Abstract key-value store interface."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Opaque byte-string store keyed by name.

    Implementations raise PersistenceError when the medium itself fails.
    A missing key is not an error; ``get`` returns None.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the underlying medium."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Release the underlying medium."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Return the value stored under key, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value."""
        pass
