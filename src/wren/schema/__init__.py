"""Schemas — typed, validated values from raw strings.

Usage::

    from wren.schema import SchemaError, integer, one_of, positive, string

    page = integer().must(positive).optional(1).parse(params.query["page"])

    try:
        state = string().must(one_of("open", "closed")).parse(params.query["state"])
    except SchemaError as exc:
        ...
"""

from wren.errors import ParseError, SchemaError, ValidationError
from wren.schema.core import (
    CriticalView,
    FallbackListener,
    OptionalView,
    Parser,
    RequiredView,
    Schema,
    View,
    new_schema,
)
from wren.schema.parsers import boolean, integer, str_list, string
from wren.schema.validators import (
    Validator,
    non_negative,
    not_blank,
    not_empty,
    one_of,
    positive,
)

__all__ = [
    "CriticalView",
    "FallbackListener",
    "OptionalView",
    "ParseError",
    "Parser",
    "RequiredView",
    "Schema",
    "SchemaError",
    "ValidationError",
    "Validator",
    "View",
    "boolean",
    "integer",
    "new_schema",
    "non_negative",
    "not_blank",
    "not_empty",
    "one_of",
    "positive",
    "str_list",
    "string",
]
