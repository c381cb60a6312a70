"""Shared pytest fixtures for the test suite."""

import pytest

from ordering_core.infrastructure.lock_provider import NoOpLockProvider
from ordering_core.infrastructure.payment_collaborator import InMemoryPaymentCollaborator


@pytest.fixture
def lock_provider() -> NoOpLockProvider:
    """Use NoOpLockProvider for unit tests (single-threaded)."""
    return NoOpLockProvider()


@pytest.fixture
def payment_collaborator() -> InMemoryPaymentCollaborator:
    """A collaborator that records every amount it is asked to collect."""
    return InMemoryPaymentCollaborator()
