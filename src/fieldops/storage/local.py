"""Local filesystem byte store."""

import asyncio
from pathlib import Path
from uuid import uuid4


class LocalByteStore:
    """Stores each blob as a uuid-named file under ``base_dir``.

    File I/O runs in a worker thread so the event loop is never blocked.
    Locators are bare file names; anything resolving outside ``base_dir``
    is rejected.
    """

    def __init__(self, base_dir: str | Path):
        self.base_dir = Path(base_dir)

    def _path(self, locator: str) -> Path:
        path = (self.base_dir / locator).resolve()
        if path.parent != self.base_dir.resolve():
            raise FileNotFoundError(locator)
        return path

    def _write(self, locator: str, data: bytes) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self._path(locator).write_bytes(data)

    def _unlink(self, locator: str) -> None:
        self._path(locator).unlink(missing_ok=True)

    async def put(self, data: bytes, suffix: str = "") -> str:
        locator = f"{uuid4()}{suffix}"
        await asyncio.to_thread(self._write, locator, data)
        return locator

    async def get(self, locator: str) -> bytes:
        return await asyncio.to_thread(lambda: self._path(locator).read_bytes())

    async def delete(self, locator: str) -> None:
        await asyncio.to_thread(self._unlink, locator)
