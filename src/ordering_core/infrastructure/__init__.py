"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Payment: In-process payment collaborator
- Locking: Guards for shared mutable references

Infrastructure adapters implement the ports defined in the application layer.
"""

from ordering_core.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from ordering_core.infrastructure.payment_collaborator import InMemoryPaymentCollaborator

__all__ = [
    "InMemoryLockProvider",
    "InMemoryPaymentCollaborator",
    "NoOpLockProvider",
]
