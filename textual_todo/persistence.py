"""Translate the todo sequence to and from a single stored string.

The whole list is written under one key on every save. Failures never reach
the caller: reads fall back to an empty list and writes report ``False``,
both after logging the cause.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Iterable, List, Sequence

import pydantic

from .errors import PersistenceReadError, PersistenceWriteError
from .models import Record
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "@todos"

_records_adapter = pydantic.TypeAdapter(List[Record])


def encode_records(records: Iterable[Record]) -> str:
    return json.dumps([r.model_dump() for r in records], ensure_ascii=False)


def decode_records(blob: str) -> List[Record]:
    """Parse a stored blob, rejecting anything that is not a list of records."""
    try:
        records = _records_adapter.validate_json(blob)
    except pydantic.ValidationError as e:
        raise PersistenceReadError(f"Malformed todo data: {e}") from e

    seen = set()
    for record in records:
        if record.id in seen:
            raise PersistenceReadError(f"Duplicate todo id {record.id!r}")
        seen.add(record.id)
    return records


class PersistenceAdapter:
    def __init__(self, storage: KeyValueStorage, key: str = STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self._write_lock = asyncio.Lock()

    async def load(self) -> List[Record]:
        try:
            return await self._read()
        except PersistenceReadError as e:
            logger.warning(f"Error loading todos: {e}")
            return []

    async def save(self, records: Sequence[Record]) -> bool:
        blob = encode_records(records)
        # Saves finish in the order they were issued.
        async with self._write_lock:
            try:
                await self._write(blob)
            except PersistenceWriteError as e:
                logger.error(f"Error saving todos: {e}")
                return False
        logger.debug(f"Saved {len(records)} todos under {self.key!r}")
        return True

    async def _read(self) -> List[Record]:
        try:
            blob = await self.storage.get_item(self.key)
        except Exception as e:
            raise PersistenceReadError(f"Storage read failed: {e}") from e
        if not blob:
            return []
        return decode_records(blob)

    async def _write(self, blob: str) -> None:
        try:
            await self.storage.set_item(self.key, blob)
        except Exception as e:
            raise PersistenceWriteError(f"Storage write failed: {e}") from e
