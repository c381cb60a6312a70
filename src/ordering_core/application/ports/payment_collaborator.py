from __future__ import annotations

from abc import ABC, abstractmethod


class PaymentCollaborator(ABC):
    """Port for collecting payment on behalf of an order.

    Contract:
    - process_payment() blocks until the payment is collected or fails
    - Failure modes belong to the implementation; PaymentError is the
      conventional base, but callers must not assume it
    - The collaborator is owned by the composition root, not by its callers
    """

    @abstractmethod
    def process_payment(self, amount: int) -> None:
        """Collect a payment.

        Args:
            amount: Amount to collect, in whole currency units.

        Raises:
            PaymentError: If the payment cannot be collected.
        """
