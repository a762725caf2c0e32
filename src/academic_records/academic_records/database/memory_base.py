from __future__ import annotations

import asyncio
import dataclasses
import logging
import threading
from typing import Any, Callable, Generic, Iterable, List, Mapping, Optional, TypeVar

from ..common.fields import canonicalize
from ..core import constants
from ..core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRecordStore(Generic[T]):
    """Owns the canonical collection for one entity kind.

    Records are frozen dataclasses carrying an integer ``id``. Every read hands
    out a fresh list, and records themselves are immutable, so callers can
    never reach into the collection. Each operation awaits a simulated
    remote-call delay scaled by ``latency_scale`` (0 disables it).
    """

    def __init__(
        self,
        model_cls: type,
        records: Iterable[T] = (),
        *,
        latency_scale: float = constants.DEFAULT_LATENCY_SCALE,
    ):
        self._model = model_cls
        self._records: List[T] = list(records)
        self._latency_scale = float(latency_scale)
        self._mutex = threading.Lock()

    @property
    def entity_name(self) -> str:
        return self._model.__name__

    async def _delay(self, seconds: float) -> None:
        if self._latency_scale > 0:
            await asyncio.sleep(seconds * self._latency_scale)

    def _next_id(self) -> int:
        return max((r.id for r in self._records), default=0) + 1

    def _index_of(self, record_id: int) -> Optional[int]:
        for i, r in enumerate(self._records):
            if r.id == record_id:
                return i
        return None

    def snapshot(self) -> List[T]:
        return list(self._records)

    def load(self, payloads: Iterable[Mapping[str, Any]]) -> int:
        """Bulk-insert raw records (e.g. a seed file), keeping their ids when present."""

        count = 0
        with self._mutex:
            for payload in payloads:
                fields = canonicalize(self._model, payload)
                record_id = fields.pop("id", None)
                if not isinstance(record_id, int) or self._index_of(record_id) is not None:
                    record_id = self._next_id()
                self._records.append(self._model(id=record_id, **fields))
                count += 1
        return count

    async def get_all(self) -> List[T]:
        await self._delay(constants.LATENCY_GET_ALL)
        return self.snapshot()

    async def get_by_id(self, record_id: int) -> T:
        await self._delay(constants.LATENCY_GET_BY_ID)
        idx = self._index_of(record_id)
        if idx is None:
            logger.warning("%s %s not found", self.entity_name, record_id)
            raise NotFoundError(self.entity_name, record_id)
        return self._records[idx]

    async def create(self, payload: Mapping[str, Any]) -> T:
        await self._delay(constants.LATENCY_WRITE)
        fields = canonicalize(self._model, payload)
        fields.pop("id", None)
        with self._mutex:
            record = self._model(id=self._next_id(), **fields)
            self._records.append(record)
        logger.info("Created %s %s", self.entity_name, record.id)
        return record

    async def update(self, record_id: int, payload: Mapping[str, Any]) -> T:
        await self._delay(constants.LATENCY_WRITE)
        fields = canonicalize(self._model, payload)
        fields.pop("id", None)
        with self._mutex:
            idx = self._index_of(record_id)
            if idx is None:
                logger.warning("Update of missing %s %s", self.entity_name, record_id)
                raise NotFoundError(self.entity_name, record_id)
            record = dataclasses.replace(self._records[idx], **fields)
            self._records[idx] = record
        logger.info("Updated %s %s", self.entity_name, record_id)
        return record

    async def delete(self, record_id: int) -> bool:
        await self._delay(constants.LATENCY_DELETE)
        with self._mutex:
            idx = self._index_of(record_id)
            if idx is None:
                logger.warning("Delete of missing %s %s", self.entity_name, record_id)
                raise NotFoundError(self.entity_name, record_id)
            del self._records[idx]
        logger.info("Deleted %s %s", self.entity_name, record_id)
        return True

    async def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        await self._delay(constants.LATENCY_QUERY)
        return [r for r in self._records if predicate(r)]
