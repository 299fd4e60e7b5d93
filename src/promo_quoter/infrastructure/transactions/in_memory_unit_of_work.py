"""All-or-nothing unit of work over the snapshot-capable stores.

Units of work are serialized on a shared re-entrant lock: entering one takes a
snapshot of every registered store, and leaving it with an exception restores
those snapshots. This gives the confirmation flow (quote, reserve, persist,
record key) the atomicity the core relies on.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from types import TracebackType
from typing import Any, Protocol

from promo_quoter.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("unit_of_work")


class SnapshotStore(Protocol):
    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...


class InMemoryUnitOfWork:

    def __init__(self, stores: Sequence[SnapshotStore], lock: threading.RLock) -> None:
        self._stores = tuple(stores)
        self._lock = lock
        self._snapshots: list[Any] = []

    def __enter__(self) -> InMemoryUnitOfWork:
        self._lock.acquire()
        try:
            self._snapshots = [store.snapshot() for store in self._stores]
        except BaseException:
            self._lock.release()
            raise
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if exc_type is not None:
                for store, state in zip(self._stores, self._snapshots, strict=True):
                    store.restore(state)
                logger.warning("Unit of work rolled back", error_type=exc_type.__name__, error_details=str(exc))
        finally:
            self._snapshots = []
            self._lock.release()
