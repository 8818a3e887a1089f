"""Built-in validators for wren schemas.

Each validator is a callable with the signature::

    def rule(value: T) -> str | None:
        '''Return error message, or None if valid.'''

Parameterized validators are factory functions that return a validator::

    def one_of(*options: T) -> Callable[[T], str | None]:
        def check(value: T) -> str | None:
            ...
        return check

Custom validators follow the same protocol — any callable matching
``(T) -> str | None`` works with ``must()``.
"""

from collections.abc import Callable, Sized

# Type alias for a validator function
type Validator[T] = Callable[[T], str | None]


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def positive(value: int) -> str | None:
    """Integer must be greater than zero."""
    if value <= 0:
        return f"expected positive integer (> 0), got: {value}"
    return None


def non_negative(value: int) -> str | None:
    """Integer must be zero or greater."""
    if value < 0:
        return f"expected non-negative integer (>= 0), got: {value}"
    return None


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


def not_blank(value: str) -> str | None:
    """String must contain something other than whitespace."""
    if not value.strip():
        return f"expected non-blank string, got: '{value}'"
    return None


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


def not_empty(value: Sized) -> str | None:
    """List must have at least one element."""
    if len(value) == 0:
        return "expected not empty list"
    return None


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of[T](*options: T) -> Validator[T]:
    """Value must equal one of *options* exactly (case-sensitive)."""
    allowed = tuple(options)

    def check(value: T) -> str | None:
        if value not in allowed:
            return f"expected one of {list(allowed)}, got: {value}"
        return None

    return check
