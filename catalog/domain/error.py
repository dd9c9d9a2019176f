"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for every rejected input: blank or oversized titles and tag names,
    nil identifiers, too many distinct tags, missing required collections.
    Never retryable.
    """

    pass
