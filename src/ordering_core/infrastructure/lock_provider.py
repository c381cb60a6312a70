from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import TYPE_CHECKING

from ordering_core.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator


class InMemoryLockProvider(LockProvider):
    """Process-local lock provider keyed by resource ID.

    A registry lock protects lookup and creation of per-resource locks and
    is held only briefly; the per-resource lock is then held for the body
    of the context. Locks are never evicted.
    """

    def __init__(self) -> None:
        self._locks: dict[str, Lock] = {}
        self._registry_lock = Lock()

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        with self._registry_lock:
            lock = self._locks.setdefault(resource_id, Lock())

        with lock:
            yield


class NoOpLockProvider(LockProvider):
    """Lock provider that performs no locking.

    For single-threaded tests, or hosts that promise a single writer.
    """

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:  # noqa: ARG002
        yield
