"""Tests for the local filesystem byte store."""

from pathlib import Path

import pytest

from src.fieldops.storage import LocalByteStore

pytestmark = [pytest.mark.unit, pytest.mark.asyncio]


@pytest.fixture
def store(tmp_path: Path) -> LocalByteStore:
    return LocalByteStore(tmp_path / "blobs")


async def test_put_get_delete(store: LocalByteStore):
    locator = await store.put(b"contents", suffix=".pdf")

    assert locator.endswith(".pdf")
    assert await store.get(locator) == b"contents"

    await store.delete(locator)
    with pytest.raises(FileNotFoundError):
        await store.get(locator)


async def test_each_put_gets_its_own_locator(store: LocalByteStore):
    first = await store.put(b"a")
    second = await store.put(b"a")
    assert first != second


async def test_deleting_missing_locator_is_noop(store: LocalByteStore):
    await store.delete("does-not-exist.txt")


@pytest.mark.parametrize("locator", ["../outside.txt", "nested/file.txt", "/etc/passwd"])
async def test_locators_cannot_escape_base_dir(
    store: LocalByteStore, tmp_path: Path, locator: str
):
    (tmp_path / "outside.txt").write_bytes(b"secret")

    with pytest.raises(FileNotFoundError):
        await store.get(locator)
