from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockProvider(ABC):
    """Port guarding shared mutable references such as the bound collaborator.

    Contract:
    - Holders of the same resource_id are mutually exclusive and block until free
    - The lock is released when the context exits, also on exception
    - Holders of different resource_ids do not block each other

    OrderFacade holds the lock only while reading or replacing its
    collaborator reference, never across process_payment().
    """

    @abstractmethod
    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        """Hold the lock for one guarded reference.

        Args:
            resource_id: Name of the guarded reference. OrderFacade uses
                "payment-collaborator" (COLLABORATOR_RESOURCE_ID).

        Yields:
            None. Reads and writes of the reference happen inside the context.
        """
        ...
