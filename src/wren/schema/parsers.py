"""Built-in parsers.

Each factory returns a fresh ``RequiredView`` over a new schema, ready for
``must()`` and the view conversions::

    limit = integer().must(positive).optional(25)
"""

import re

from wren.errors import ConfigurationError
from wren.schema.core import RequiredView, new_schema

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_BOOL_TOKENS: dict[str, bool] = {
    "1": True,
    "t": True,
    "T": True,
    "true": True,
    "TRUE": True,
    "True": True,
    "0": False,
    "f": False,
    "F": False,
    "false": False,
    "FALSE": False,
    "False": False,
}


def _to_str(raw: str) -> str:
    return raw


def _to_int(raw: str) -> int:
    # int() alone would accept whitespace, underscores and non-ASCII digits
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"expected valid integer, got: '{raw}'")
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"expected valid integer, got: '{raw}'")
    return value


def _to_bool(raw: str) -> bool:
    try:
        return _BOOL_TOKENS[raw]
    except KeyError:
        raise ValueError(f"expected valid boolean, got: '{raw}'") from None


def string() -> RequiredView[str]:
    """Any string, including the empty string."""
    return new_schema(_to_str)


def integer() -> RequiredView[int]:
    """A base-10 signed 64-bit integer such as ``"42"`` or ``"-7"``."""
    return new_schema(_to_int)


def boolean() -> RequiredView[bool]:
    """One of ``1 t T true TRUE True`` or ``0 f F false FALSE False``."""
    return new_schema(_to_bool)


def str_list(delimiter: str) -> RequiredView[list[str]]:
    """Split on *delimiter*. Elements are not trimmed.

    The empty string yields ``[]``, not ``[""]``.
    """
    if not delimiter:
        msg = "List delimiter must not be empty."
        raise ConfigurationError(msg)

    def split(raw: str) -> list[str]:
        if raw == "":
            return []
        return raw.split(delimiter)

    return new_schema(split)
