"""Byte store interface for attachment contents."""

from typing import Protocol


class ByteStore(Protocol):
    """Opaque blob storage addressed by a locator the store itself chooses."""

    async def put(self, data: bytes, suffix: str = "") -> str:
        """Persist ``data`` and return its locator."""
        ...

    async def get(self, locator: str) -> bytes:
        """Return the stored bytes. Raises FileNotFoundError if absent."""
        ...

    async def delete(self, locator: str) -> None:
        """Remove the stored bytes. Deleting a missing locator is a no-op."""
        ...
