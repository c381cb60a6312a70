from __future__ import annotations

import logging

from ordering_core.application.ports import PaymentCollaborator

logger = logging.getLogger(__name__)


class InMemoryPaymentCollaborator(PaymentCollaborator):
    """In-process payment collaborator that records collected amounts.

    Implementation notes:
    - Every successful call appends the amount to `payments`
    - If `failure` is set, it is raised instead and nothing is recorded
    - NOT thread-safe for mutation of `failure`
    """

    def __init__(self, failure: Exception | None = None) -> None:
        self.payments: list[int] = []
        self.failure = failure

    @property
    def call_count(self) -> int:
        return len(self.payments)

    def process_payment(self, amount: int) -> None:
        if self.failure is not None:
            logger.warning("Payment of %d rejected: %s", amount, self.failure)
            raise self.failure

        self.payments.append(amount)
        logger.info("Payment processed: amount=%d", amount)
