"""Local filesystem key-value storage."""

from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

import aiofiles
import aiofiles.os

from wellness_tracker.services.storage import KeyValueStorage


class StorageKeyError(ValueError):
    """Raised for keys that cannot be mapped to a file."""


@dataclass
class FileKeyValueStorage(KeyValueStorage):
    """Stores each key as a UTF-8 file below a base directory."""

    base_path: Path

    @classmethod
    def create(cls, base_path: str | Path) -> "FileKeyValueStorage":
        """Create storage rooted at base_path, creating the directory."""
        path = Path(base_path).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return cls(base_path=path)

    async def get_item(self, key: str) -> str | None:
        """Return the file contents for key, or None if it doesn't exist."""
        path = self._path_for(key)
        if not await aiofiles.os.path.exists(path):
            return None
        async with aiofiles.open(path, encoding="utf-8") as handle:
            return await handle.read()

    async def set_item(self, key: str, value: str) -> None:
        """Write value for key, replacing the file in one rename.

        Each write goes through its own temp file, so overlapping writes never
        share a partial file. The last rename to land wins.
        """
        path = self._path_for(key)
        tmp_path = path.with_name(f"{path.name}.{uuid4().hex}.tmp")
        async with aiofiles.open(tmp_path, "w", encoding="utf-8") as handle:
            await handle.write(value)
        await aiofiles.os.replace(tmp_path, path)

    def _path_for(self, key: str) -> Path:
        raw_key = key.strip()
        if not raw_key:
            raise StorageKeyError("Storage key cannot be empty.")
        if "/" in raw_key or "\\" in raw_key or "\x00" in raw_key:
            raise StorageKeyError(f"Unsafe storage key {key!r}.")
        if raw_key in {".", ".."}:
            raise StorageKeyError(f"Unsafe storage key {key!r}.")
        return self.base_path / f"{raw_key}.json"
