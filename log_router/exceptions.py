"""Exceptions raised by the log router."""


class InvalidArgumentError(ValueError):
    """Raised when a level, sender, backend handle or option is invalid."""
