"""Matching concrete URIs against compiled templates.

Matching is a pure function of the compiled template and the URI string,
safe to call from any number of threads once the template is compiled.
"""

from urllib.parse import parse_qs

from wren.errors import (
    HostMismatch,
    PathSegmentCountMismatch,
    PathSegmentLiteralMismatch,
    SchemeMismatch,
    UriError,
)
from wren.routing.template import CompiledTemplate, Literal, MatchResult, Placeholder
from wren.routing.uri import split_path, split_uri


def match(template: CompiledTemplate, uri: str) -> MatchResult:
    """Match *uri* against *template* and extract its raw parameters.

    The URI must agree with the template in:

    - scheme, compared case-insensitively
    - host, compared exactly (case and port included)
    - path, segment by segment after percent-decoding

    Query placeholders missing from *uri* are bound to ``""``; query keys
    the template does not declare are ignored.

    Raises ``UriError`` if *uri* cannot be parsed, or a ``MatchError``
    subclass naming the first part that disagrees.
    """
    try:
        parts = split_uri(uri)
    except ValueError as exc:
        raise UriError(uri, str(exc)) from exc

    if parts.scheme != template.scheme:
        raise SchemeMismatch(template.scheme, parts.scheme)
    if parts.host != template.host:
        raise HostMismatch(template.host, parts.host)

    return MatchResult(
        path=_match_path(template, split_path(parts.path)),
        query=_match_query(template, parts.raw_query),
    )


def _match_path(template: CompiledTemplate, segments: list[str]) -> dict[str, str]:
    expected = template.path_segments
    if len(expected) != len(segments):
        raise PathSegmentCountMismatch(len(expected), len(segments))

    params: dict[str, str] = {}
    for i, (part, segment) in enumerate(zip(expected, segments, strict=True)):
        match part:
            case Placeholder(name=name):
                params[name] = segment
            case Literal(value=value):
                if value != segment:
                    raise PathSegmentLiteralMismatch(i, value, segment)
    return params


def _match_query(template: CompiledTemplate, raw_query: str) -> dict[str, str]:
    values = parse_qs(raw_query, keep_blank_values=True)
    params: dict[str, str] = {}
    for key, part in template.query_template:
        if isinstance(part, Placeholder):
            found = values.get(key)
            params[part.name] = found[0] if found else ""
    return params
