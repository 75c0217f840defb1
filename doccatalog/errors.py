"""
Exception types raised by the document catalog.

Every failure the library reports is a ``CatalogError`` subclass so that a
host program can catch the whole family at once. Errors are raised to the
immediate caller; nothing in the library logs and carries on.
"""


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    pass


class ValidationError(CatalogError, ValueError):
    """A document or user could not be built from the given fields."""

    pass


class DuplicateError(CatalogError):
    """The same document was added to a catalog twice."""

    pass


class DocumentNotFoundError(CatalogError, LookupError):
    """No document in the catalog matches the request."""

    pass


class NotBorrowedError(CatalogError):
    """A user tried to return a document they do not hold."""

    pass


class CatalogUnavailableError(CatalogError):
    """The catalog is missing or closed and cannot produce a snapshot."""

    pass


class IndexerTimeoutError(CatalogError):
    """The indexer thread did not finish before its deadline."""

    pass
