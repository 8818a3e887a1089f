"""Wren — URI template matching and typed parameter schemas.

Compile a template once, match concrete URIs against it, and turn the
raw strings it yields into typed, validated values.

Basic usage::

    from wren import compile_template
    from wren.schema import boolean, not_blank, string

    template = compile_template("mcp://bitbucket/{namespace}/repositories/{repo}?readme={readme}")

    params = template.match(uri)
    repo = string().must(not_blank).parse(params.path["repo"])
    readme = boolean().optional(False).parse(params.query["readme"])

Environment configuration::

    from wren import env
    from wren.schema import integer, positive

    port = env.get_optional("SERVER_PORT", integer().must(positive).optional(8080))
"""

__version__ = "0.1.0"
__all__ = [
    "CompiledTemplate",
    "ConfigurationError",
    "CriticalValueError",
    "MatchError",
    "MatchResult",
    "SchemaError",
    "TemplateError",
    "UriError",
    "WrenError",
    "compile_template",
    "new_schema",
    "parse_uri_params",
]

_ERRORS = frozenset(
    {
        "ConfigurationError",
        "CriticalValueError",
        "MatchError",
        "SchemaError",
        "TemplateError",
        "UriError",
        "WrenError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name in _ERRORS:
        from wren import errors as _errors

        return getattr(_errors, name)

    if name in ("CompiledTemplate", "MatchResult", "compile_template", "parse_uri_params"):
        from wren import routing as _routing

        return getattr(_routing, name)

    if name == "new_schema":
        from wren.schema import new_schema

        return new_schema

    if name == "env":
        import importlib

        return importlib.import_module("wren.env")

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
