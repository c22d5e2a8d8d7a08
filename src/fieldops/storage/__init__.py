"""Attachment byte storage."""

from functools import lru_cache

from src.fieldops.core.config import get_settings
from src.fieldops.storage.base import ByteStore
from src.fieldops.storage.local import LocalByteStore


@lru_cache
def get_byte_store() -> ByteStore:
    """The configured store, shared for the life of the process."""
    return LocalByteStore(get_settings().upload_dir)


__all__ = [
    "ByteStore",
    "LocalByteStore",
    "get_byte_store",
]
