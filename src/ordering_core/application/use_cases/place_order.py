from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ordering_core.domain.exceptions import CollaboratorUnavailableError, InvalidAmountError

if TYPE_CHECKING:
    from ordering_core.application.ports import LockProvider, PaymentCollaborator

logger = logging.getLogger(__name__)

DEFAULT_ORDER_AMOUNT = 10
COLLABORATOR_RESOURCE_ID = "payment-collaborator"


class OrderFacade:
    """Places orders by delegating payment collection to a collaborator.

    Responsibilities:
    - Hold a non-owning, replaceable reference to a PaymentCollaborator
    - Guard that reference with the LockProvider
    - Issue exactly one process_payment() call per placed order

    The lock covers reads and writes of the reference only. The payment
    call itself runs outside the lock, so a slow collaborator never blocks
    reassignment or other orders.
    """

    def __init__(
        self,
        payment_collaborator: PaymentCollaborator | None,
        lock_provider: LockProvider,
        order_amount: int = DEFAULT_ORDER_AMOUNT,
    ) -> None:
        # bool is an int subclass but never a meaningful amount
        if isinstance(order_amount, bool) or not isinstance(order_amount, int):
            raise InvalidAmountError(f"Order amount must be an int, got {order_amount!r}")
        if order_amount <= 0:
            raise InvalidAmountError(f"Order amount must be greater than 0, got {order_amount}")

        self._payment_collaborator = payment_collaborator
        self._lock_provider = lock_provider
        self._order_amount = order_amount

    @property
    def order_amount(self) -> int:
        return self._order_amount

    @property
    def payment_collaborator(self) -> PaymentCollaborator | None:
        with self._lock_provider.acquire(COLLABORATOR_RESOURCE_ID):
            return self._payment_collaborator

    def set_payment_collaborator(self, payment_collaborator: PaymentCollaborator | None) -> None:
        """Replace the collaborator used by subsequent place_order() calls.

        None is accepted; place_order() will then raise
        CollaboratorUnavailableError until a collaborator is bound again.
        """
        with self._lock_provider.acquire(COLLABORATOR_RESOURCE_ID):
            previous = self._payment_collaborator
            self._payment_collaborator = payment_collaborator

        logger.info(
            "Payment collaborator replaced: %s -> %s",
            type(previous).__name__,
            type(payment_collaborator).__name__,
        )

    def place_order(self) -> None:
        """Place an order by collecting the configured amount.

        Raises:
            CollaboratorUnavailableError: No collaborator is bound.
            Exception: Whatever process_payment() raises, unchanged.
        """
        with self._lock_provider.acquire(COLLABORATOR_RESOURCE_ID):
            collaborator = self._payment_collaborator

        if collaborator is None:
            raise CollaboratorUnavailableError(
                "Cannot place order: no payment collaborator is bound"
            )

        logger.debug(
            "Placing order for amount=%d via %s", self._order_amount, type(collaborator).__name__
        )
        collaborator.process_payment(self._order_amount)
