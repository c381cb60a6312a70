"""Use cases - Application workflows."""

from ordering_core.application.use_cases.place_order import OrderFacade

__all__ = [
    "OrderFacade",
]
