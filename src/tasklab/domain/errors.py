"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section cannot be parsed into its typed
    model. Typically caught at CLI boundaries to provide user-friendly
    error messages.

    Example:
        >>> from tasklab.domain.errors import ConfigurationError
        >>> err = ConfigurationError("email_separator must not be empty")
        >>> str(err)
        'email_separator must not be empty'
    """


class SelectorError(ValueError):
    """Base class for selector builder failures.

    Inherits from ValueError so callers validating user input can catch
    every builder failure with a single ``except ValueError``.
    """


class DuplicateError(SelectorError):
    """Element, id or pseudo-element added a second time to one selector.

    Example:
        >>> from tasklab.domain.errors import DuplicateError
        >>> isinstance(DuplicateError("twice"), SelectorError)
        True
    """


class OrderError(SelectorError):
    """Fragment added after a fragment of higher rank.

    Example:
        >>> from tasklab.domain.errors import OrderError
        >>> isinstance(OrderError("late id"), ValueError)
        True
    """


class CombinatorError(SelectorError):
    """Combinator token outside of ``' '``, ``'+'``, ``'~'`` and ``'>'``."""


__all__ = [
    "CombinatorError",
    "ConfigurationError",
    "DuplicateError",
    "OrderError",
    "SelectorError",
]
