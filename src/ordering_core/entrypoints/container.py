"""Composition root for dependency injection.

Builds exactly one payment collaborator and exactly one OrderFacade bound
to it. Dependencies are passed explicitly; there is no reflective container.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ordering_core.application.use_cases import OrderFacade
from ordering_core.config import get_settings
from ordering_core.infrastructure import InMemoryLockProvider, InMemoryPaymentCollaborator
from ordering_core.logging_config import configure_logging

if TYPE_CHECKING:
    from ordering_core.application.ports import PaymentCollaborator
    from ordering_core.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Container:
    """Process-wide instances owned by the host."""

    payment_collaborator: PaymentCollaborator
    order_facade: OrderFacade


def build_container(
    settings: Settings | None = None,
    payment_collaborator: PaymentCollaborator | None = None,
) -> Container:
    """Wire the ordering components.

    Args:
        settings: Runtime settings; defaults to get_settings().
        payment_collaborator: Collaborator to bind; defaults to a new
            InMemoryPaymentCollaborator.

    Returns:
        Container holding the collaborator and the facade bound to it.
    """
    settings = settings or get_settings()
    collaborator = payment_collaborator
    if collaborator is None:
        collaborator = InMemoryPaymentCollaborator()

    facade = OrderFacade(
        payment_collaborator=collaborator,
        lock_provider=InMemoryLockProvider(),
        order_amount=settings.order_amount,
    )
    logger.info(
        "Order facade wired: collaborator=%s order_amount=%d",
        type(collaborator).__name__,
        settings.order_amount,
    )
    return Container(payment_collaborator=collaborator, order_facade=facade)


def bootstrap(settings: Settings | None = None) -> Container:
    """Configure logging from settings, then wire the ordering components."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return build_container(settings)
