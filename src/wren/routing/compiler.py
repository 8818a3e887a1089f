"""Template compilation.

A template is parsed once, at startup, into a frozen ``CompiledTemplate``
that the matcher reuses for every request.
"""

import re
from urllib.parse import unquote_plus

from wren.errors import TemplateError
from wren.routing.template import CompiledTemplate, Literal, Part, Placeholder
from wren.routing.uri import split_path, split_uri

# Path segments must be a placeholder as a whole; query values only need to
# contain one. Literal text around a query placeholder is dropped.
_SEGMENT_PARAM_RE = re.compile(r"^\{([^}]+)\}$")
_QUERY_PARAM_RE = re.compile(r"\{([^}]+)\}")


def parse_segment(segment: str) -> Part:
    """Classify a single path segment.

    Examples::

        "repos"    -> Literal("repos")
        "{owner}"  -> Placeholder("owner")
        "v{n}"     -> Literal("v{n}")
    """
    if m := _SEGMENT_PARAM_RE.match(segment):
        return Placeholder(m.group(1))
    return Literal(segment)


def parse_query(raw_query: str) -> tuple[tuple[str, Part], ...]:
    """Parse a raw template query string into ordered key/value parts.

    Pairs without ``=`` are skipped. Keys are decoded the same way the
    matcher decodes candidate query keys.

        "state={state}&sort=asc&q=x{term}y"
        -> (("state", Placeholder("state")),
            ("sort", Literal("asc")),
            ("q", Placeholder("term")))
    """
    pairs: list[tuple[str, Part]] = []
    if not raw_query:
        return ()
    for pair in raw_query.split("&"):
        key, sep, value = pair.partition("=")
        if not sep:
            continue
        if m := _QUERY_PARAM_RE.search(value):
            pairs.append((unquote_plus(key), Placeholder(m.group(1))))
        else:
            pairs.append((unquote_plus(key), Literal(value)))
    return tuple(pairs)


def compile_template(template: str) -> CompiledTemplate:
    """Compile a URI template string.

    Template syntax::

        scheme://host[:port]/literal/{name}/...?key={name}&key=literal

    Placeholders are not allowed in the scheme, host, or port.

    Raises ``TemplateError`` if *template* cannot be parsed as a URI.
    """
    try:
        parts = split_uri(template)
    except ValueError as exc:
        raise TemplateError(template, str(exc)) from exc

    if not parts.scheme:
        raise TemplateError(template, f"missing protocol scheme in {template!r}")

    return CompiledTemplate(
        template=template,
        scheme=parts.scheme,
        host=parts.host,
        path_segments=tuple(parse_segment(s) for s in split_path(parts.path)),
        query_template=parse_query(parts.raw_query),
    )
