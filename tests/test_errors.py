"""Tests for wren.errors — exception hierarchy and error messages."""

import pytest

from wren.errors import (
    ConfigurationError,
    CriticalValueError,
    HostMismatch,
    MatchError,
    ParseError,
    PathSegmentCountMismatch,
    PathSegmentLiteralMismatch,
    SchemaError,
    SchemeMismatch,
    TemplateError,
    UriError,
    UriTemplateError,
    ValidationError,
    WrenError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [ConfigurationError, UriTemplateError, SchemaError, CriticalValueError],
    )
    def test_rooted_at_wren_error(self, cls: type[Exception]) -> None:
        assert issubclass(cls, WrenError)

    def test_template_error_is_configuration_error(self) -> None:
        assert issubclass(TemplateError, ConfigurationError)
        assert issubclass(TemplateError, UriTemplateError)

    def test_uri_error_is_not_configuration_error(self) -> None:
        assert not issubclass(UriError, ConfigurationError)

    @pytest.mark.parametrize(
        "cls",
        [SchemeMismatch, HostMismatch, PathSegmentCountMismatch, PathSegmentLiteralMismatch],
    )
    def test_mismatches_are_match_errors(self, cls: type[Exception]) -> None:
        assert issubclass(cls, MatchError)

    def test_schema_errors_are_value_errors(self) -> None:
        assert issubclass(ParseError, SchemaError)
        assert issubclass(ValidationError, SchemaError)
        assert issubclass(SchemaError, ValueError)


class TestMessages:
    def test_template_error(self) -> None:
        err = TemplateError("://x", "missing protocol scheme")
        assert str(err) == "invalid template: missing protocol scheme"
        assert err.template == "://x"
        assert err.reason == "missing protocol scheme"

    def test_uri_error(self) -> None:
        err = UriError("://x", "missing protocol scheme")
        assert str(err) == "invalid URI: missing protocol scheme"
        assert err.uri == "://x"

    def test_scheme_mismatch(self) -> None:
        err = SchemeMismatch("http", "https")
        assert str(err) == "scheme mismatch: expected http, got https"
        assert (err.expected, err.actual) == ("http", "https")

    def test_host_mismatch(self) -> None:
        assert str(HostMismatch("x.com", "y.com")) == "host mismatch: expected x.com, got y.com"

    def test_segment_count_mismatch(self) -> None:
        assert str(PathSegmentCountMismatch(3, 2)) == "path segment count mismatch: expected 3, got 2"

    def test_segment_literal_mismatch(self) -> None:
        err = PathSegmentLiteralMismatch(2, "issues", "pulls")
        assert str(err) == "path segment mismatch at position 2: expected issues, got pulls"
        assert err.index == 2

    def test_parse_error(self) -> None:
        err = ParseError("expected valid integer, got: 'x'", "x")
        assert str(err) == "expected valid integer, got: 'x'"
        assert err.message == str(err)
        assert err.raw == "x"

    def test_validation_error(self) -> None:
        err = ValidationError("expected positive integer (> 0), got: 0", 0)
        assert err.value == 0

    def test_critical_value_error(self) -> None:
        cause = ValidationError("expected non-blank string, got: ''", "")
        err = CriticalValueError(cause)
        assert err.error is cause
        assert str(err) == "critical value rejected: expected non-blank string, got: ''"
