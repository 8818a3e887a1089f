"""Wren exception hierarchy.

Shared across the template matcher, the schema engine, and the
environment accessors so every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a component is set up with invalid arguments.

    Typically raised at startup, while templates and schemas are built.
    """


class CriticalValueError(ConfigurationError):
    """A critical schema could not produce a value.

    Raised by ``CriticalView.parse()``. Nothing downstream is expected to
    recover from it; the original ``SchemaError`` is chained as ``__cause__``.
    """

    def __init__(self, error: "SchemaError") -> None:
        self.error = error
        super().__init__(f"critical value rejected: {error}")


# ---------------------------------------------------------------------------
# URI templates
# ---------------------------------------------------------------------------


class UriTemplateError(WrenError):
    """Base for template compilation and matching failures."""


class TemplateError(UriTemplateError, ConfigurationError):
    """The template string cannot be parsed as a URI."""

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"invalid template: {reason}")


class UriError(UriTemplateError):
    """The candidate URI cannot be parsed."""

    def __init__(self, uri: str, reason: str) -> None:
        self.uri = uri
        self.reason = reason
        super().__init__(f"invalid URI: {reason}")


class MatchError(UriTemplateError):
    """The candidate URI parses but does not fit the template.

    ``expected`` and ``actual`` hold the compared parts.
    """

    label = "mismatch"

    def __init__(self, expected: object, actual: object) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"{self.label}: expected {expected}, got {actual}")


class SchemeMismatch(MatchError):  # noqa: N818
    """Schemes differ (compared case-insensitively)."""

    label = "scheme mismatch"


class HostMismatch(MatchError):  # noqa: N818
    """Hosts differ (compared exactly, port included)."""

    label = "host mismatch"


class PathSegmentCountMismatch(MatchError):  # noqa: N818
    """Template and URI paths have a different number of segments."""

    label = "path segment count mismatch"


class PathSegmentLiteralMismatch(MatchError):  # noqa: N818
    """A literal template segment differs from the URI segment at ``index``."""

    def __init__(self, index: int, expected: str, actual: str) -> None:
        self.index = index
        self.label = f"path segment mismatch at position {index}"
        super().__init__(expected, actual)


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------


class SchemaError(WrenError, ValueError):
    """Base for failures while turning a raw string into a typed value."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ParseError(SchemaError):
    """The parser rejected the raw string."""

    def __init__(self, message: str, raw: str) -> None:
        self.raw = raw
        super().__init__(message)


class ValidationError(SchemaError):
    """A validator rejected the parsed value."""

    def __init__(self, message: str, value: object) -> None:
        self.value = value
        super().__init__(message)
