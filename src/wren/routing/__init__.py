"""Routing — URI templates compiled once, matched per request.

Usage::

    from wren.routing import compile_template

    template = compile_template(
        "https://api.example.com/repos/{owner}/{repo}/issues?state={state}"
    )
    result = template.match("https://api.example.com/repos/golang/go/issues?state=open")
    # result.path == {"owner": "golang", "repo": "go"}
    # result.query == {"state": "open"}
"""

from wren.routing.compiler import compile_template
from wren.routing.matcher import match
from wren.routing.template import CompiledTemplate, Literal, MatchResult, Placeholder

__all__ = [
    "CompiledTemplate",
    "Literal",
    "MatchResult",
    "Placeholder",
    "compile_template",
    "match",
    "parse_uri_params",
]


def parse_uri_params(template: str, uri: str) -> MatchResult:
    """Compile *template* and match *uri* against it in one call.

    Prefer ``compile_template()`` once at startup when the same template
    is matched repeatedly.
    """
    return compile_template(template).match(uri)
