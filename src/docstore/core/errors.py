"""Exceptions raised by the document store"""


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument it cannot act on (e.g. save(None))."""
