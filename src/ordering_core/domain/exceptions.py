"""Domain exceptions for ordering-core.

Exception hierarchy:
    DomainException (base)
    ├── CollaboratorUnavailableError
    ├── InvalidAmountError
    └── PaymentError (raised by payment collaborators)

OrderFacade never catches or wraps these; they reach the caller unchanged.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


class CollaboratorUnavailableError(DomainException):
    """Raised when an order is placed while no payment collaborator is bound.

    The facade accepts None at construction and on reassignment. The
    failure only surfaces here, before any payment call is attempted.
    """


class InvalidAmountError(DomainException):
    """Raised when the order amount is not a positive integer."""


class PaymentError(DomainException):
    """Base class for failures raised by a payment collaborator.

    Collaborators are free to raise anything; this type exists so adapters
    have a domain-level error to raise. OrderFacade propagates it as-is.
    """
