"""Domain-level exceptions.

Every rule violation in the freight document engine is a subclass of
DomainException, so the CLI can turn any of them into a readable error
without knowing which rule fired.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input data breaks a business rule or an invariant."""


class EntityNotFoundError(DomainException):
    """A consignment or document that was asked for does not exist."""
