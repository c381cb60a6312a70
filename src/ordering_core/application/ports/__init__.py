"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from ordering_core.application.ports.lock_provider import LockProvider
from ordering_core.application.ports.payment_collaborator import PaymentCollaborator

__all__ = [
    "LockProvider",
    "PaymentCollaborator",
]
