"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each subclass is a distinct, reportable failure kind.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """The request is malformed or a business invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InactiveDiscountError(DomainException):
    """The discount code exists but has been switched off."""


class ProductsUnavailableError(DomainException):
    """One or more requested products are missing or inactive."""

    def __init__(self, product_ids: list[str]) -> None:
        self.product_ids = list(product_ids)
        super().__init__(
            "One or more products not found or inactive: "
            + ", ".join(self.product_ids)
        )


class InvalidTransitionError(DomainException):
    """The order workflow does not allow the requested status change."""


class ConflictError(DomainException):
    """The change clashes with data already in storage."""


class ConcurrentUpdateError(ConflictError):
    """The order was modified by someone else between read and write."""
