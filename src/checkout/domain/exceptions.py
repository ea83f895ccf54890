"""Domain-level exceptions.

All pricing and cart rule violations are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidQuantity(ValidationError):
    """A quantity mutation would make an item quantity negative."""


class DuplicateItem(ValidationError):
    """The SKU is already in the cart."""


class ProductNotFound(EntityNotFoundError):
    """The product lookup could not resolve a SKU."""


class ItemNotFound(EntityNotFoundError):
    """The SKU is not in the cart."""


class SelfReferenceError(DomainException):
    """A cart item was priced against a sibling list containing itself."""
