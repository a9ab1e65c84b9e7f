"""Domain-level exceptions.

Invalid catalog data and unknown product references are reported as
subclasses of DomainException so the CLI can turn them into readable
messages. Cart and quote operations recover locally and do not raise these.
"""


class DomainException(Exception):
    """Base class for all storefront domain errors."""


class ValidationError(DomainException):
    """A value or entity failed its invariants."""


class EntityNotFoundError(DomainException):
    """A referenced product does not exist in the catalog."""
