"""Tests for LockProvider implementations.

Tests cover:
- Port conformance
- Lock release on exception
- Serialization of a shared resource
- Independence of distinct resources
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait

import pytest

from ordering_core.application.ports import LockProvider
from ordering_core.infrastructure.lock_provider import (
    InMemoryLockProvider,
    NoOpLockProvider,
)


@pytest.mark.parametrize("provider_type", [InMemoryLockProvider, NoOpLockProvider])
def test_implements_lock_provider_port(provider_type: type[LockProvider]) -> None:
    provider = provider_type()

    assert isinstance(provider, LockProvider)
    with provider.acquire("payment-collaborator"):
        pass


# =============================================================================
# InMemoryLockProvider Tests
# =============================================================================


class TestInMemoryLockProvider:
    """Test per-resource locking."""

    def test_lock_released_on_exception(self) -> None:
        provider = InMemoryLockProvider()

        with pytest.raises(RuntimeError), provider.acquire("payment-collaborator"):
            raise RuntimeError("payment call failed")

        lock = provider._locks["payment-collaborator"]
        assert not lock.locked()

    def test_same_lock_reused_for_same_resource(self) -> None:
        provider = InMemoryLockProvider()

        with provider.acquire("payment-collaborator"):
            first_lock = provider._locks["payment-collaborator"]
        with provider.acquire("payment-collaborator"):
            second_lock = provider._locks["payment-collaborator"]

        assert first_lock is second_lock

    def test_distinct_resources_can_be_held_together(self) -> None:
        provider = InMemoryLockProvider()

        with provider.acquire("resource-a"), provider.acquire("resource-b"):
            assert provider._locks["resource-a"].locked()
            assert provider._locks["resource-b"].locked()

    def test_same_resource_serializes_access(self) -> None:
        provider = InMemoryLockProvider()
        inside = 0
        max_inside = 0
        counter_lock = threading.Lock()

        def worker() -> None:
            nonlocal inside, max_inside
            with provider.acquire("payment-collaborator"):
                with counter_lock:
                    inside += 1
                    max_inside = max(max_inside, inside)
                time.sleep(0.01)
                with counter_lock:
                    inside -= 1

        with ThreadPoolExecutor(max_workers=4) as executor:
            wait([executor.submit(worker) for _ in range(8)], timeout=10)

        assert max_inside == 1


# =============================================================================
# NoOpLockProvider Tests
# =============================================================================


class TestNoOpLockProvider:
    """Test that NoOpLockProvider never blocks."""

    def test_reentrant_acquire_does_not_block(self) -> None:
        provider = NoOpLockProvider()

        with provider.acquire("payment-collaborator"), provider.acquire("payment-collaborator"):
            pass

    def test_exception_propagates(self) -> None:
        provider = NoOpLockProvider()

        with pytest.raises(RuntimeError, match="boom"), provider.acquire("resource"):
            raise RuntimeError("boom")
