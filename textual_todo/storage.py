from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """Asynchronous string-keyed, string-valued storage."""

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""


class MemoryStorage(KeyValueStorage):
    """Dict-backed storage that lives as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class FileStorage(KeyValueStorage):
    """Keep every key in one JSON object file.

    The whole file is rewritten on each ``set_item``; the new content goes to a
    temporary file in the same directory and is renamed over the old one.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = asyncio.Lock()

    async def get_item(self, key: str) -> Optional[str]:
        items = await asyncio.to_thread(self._read_all)
        value = items.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Value for {key!r} in {self.path} is not a string")
        return value

    async def set_item(self, key: str, value: str) -> None:
        async with self._lock:
            await asyncio.to_thread(self._write_item, key, value)

    def _read_all(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not hold a JSON object")
        return data

    def _write_item(self, key: str, value: str) -> None:
        try:
            items = self._read_all()
        except ValueError as e:
            logger.warning(f"Discarding unreadable storage file {self.path}: {e}")
            items = {}
        items[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise
        logger.debug(f"Wrote {key!r} to {self.path}")


class StorageFactory:
    @staticmethod
    def create(kind: str, path: Optional[Path] = None) -> KeyValueStorage:
        lkind = kind.lower()
        if lkind == "memory":
            return MemoryStorage()
        if lkind == "file":
            if path is None:
                from .config import ConfigManager

                path = ConfigManager().storage_path
            return FileStorage(path)
        raise ValueError(f"Unknown storage: {kind}")
