from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, List, Optional, Set, Tuple

from .errors import ValidationError
from .models import Record
from .persistence import PersistenceAdapter

logger = logging.getLogger(__name__)

NAME_REQUIRED = "⚠️ Please Enter a Name"
AGE_REQUIRED = "⚠️ Please Enter an Age"

Snapshot = Tuple[Record, ...]
StoreListener = Callable[[Snapshot], None]


class TodoStore:
    """Authoritative, ordered list of todos (newest first).

    Every mutation updates memory first, tells listeners, then hands a
    snapshot of the full list to the persistence adapter without waiting for
    the write to finish.
    """

    def __init__(
        self,
        adapter: PersistenceAdapter,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._adapter = adapter
        self._clock = clock
        self._records: List[Record] = []
        self._listeners: List[StoreListener] = []
        self._pending: Set[asyncio.Task[bool]] = set()
        self._last_id = 0
        self._revision = 0

    async def load(self) -> Snapshot:
        revision = self._revision
        records = await self._adapter.load()
        changed_while_loading = self._revision != revision
        if changed_while_loading:
            # Keep what was added meanwhile in front of the stored todos.
            known = {r.id for r in self._records}
            self._records = self._records + [r for r in records if r.id not in known]
        else:
            self._records = list(records)
        for record in records:
            if record.id.isdigit():
                self._last_id = max(self._last_id, int(record.id))
        logger.debug(f"Loaded {len(records)} todos")
        if changed_while_loading:
            self._commit()
        else:
            self._notify()
        return self.list()

    def list(self) -> Snapshot:
        return tuple(self._records)

    def get(self, record_id: str) -> Optional[Record]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def add(self, name: str, age: str) -> Record:
        name = (name or "").strip()
        age = (age or "").strip()
        if not name:
            raise ValidationError(NAME_REQUIRED, field="name")
        if not age:
            raise ValidationError(AGE_REQUIRED, field="age")

        record = Record(id=self._next_id(), name=name, age=age)
        self._records.insert(0, record)
        self._commit()
        return record

    def remove(self, record_id: str) -> bool:
        """Drop the todo with ``record_id``. Unknown ids are ignored."""
        before = len(self._records)
        self._records = [r for r in self._records if r.id != record_id]
        self._commit()
        return len(self._records) != before

    def toggle(self, record_id: str) -> Optional[Record]:
        toggled: Optional[Record] = None
        updated: List[Record] = []
        for record in self._records:
            if record.id == record_id:
                record = toggled = record.toggled()
            updated.append(record)
        self._records = updated
        self._commit()
        return toggled

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def flush(self) -> None:
        """Wait until every write issued so far has settled."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    @property
    def pending_writes(self) -> int:
        return len(self._pending)

    def _next_id(self) -> str:
        # Millisecond timestamp, bumped when the clock has not moved on.
        now = int(self._clock() * 1000)
        self._last_id = max(now, self._last_id + 1)
        return str(self._last_id)

    def _commit(self) -> None:
        self._revision += 1
        self._notify()
        self._schedule_save(self.list())

    def _notify(self) -> None:
        snapshot = self.list()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.error(f"Todo listener failed: {e}")

    def _schedule_save(self, snapshot: Snapshot) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop (plain synchronous caller): write before returning.
            asyncio.run(self._adapter.save(snapshot))
            return
        task = loop.create_task(self._adapter.save(snapshot))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
