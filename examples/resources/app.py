"""Resources — typed handlers behind templated resource URIs.

Each resource pairs a compiled template with a handler that runs the raw
path and query strings through schemas. ``read()`` finds the resource
whose template matches the URI; a bad parameter becomes an "invalid
params" error, the way a resource server reports it to its client.

Run:
    cd examples/resources && python app.py
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wren import CompiledTemplate, MatchError, SchemaError, UriError, compile_template
from wren.routing import MatchResult
from wren.schema import boolean, integer, not_blank, one_of, positive, string

log = logging.getLogger("example.resources")

# JSON-RPC error codes
INVALID_PARAMS = -32602
RESOURCE_NOT_FOUND = -32002


@dataclass(frozen=True, slots=True)
class Resource:
    name: str
    template: CompiledTemplate
    handler: Callable[[MatchResult], dict[str, Any]]


# ---------------------------------------------------------------------------
# Schemas — built once, frozen before use
# ---------------------------------------------------------------------------

slug = string().must(not_blank).freeze()
pr_id = integer().must(positive).freeze()
flag = boolean().optional(False).freeze()
page = integer().must(positive).optional(1).freeze()
page_len = integer().must(positive).optional(10).freeze()
pr_state = (
    string()
    .must(one_of("OPEN", "MERGED", "DECLINED"))
    .optional("OPEN")
    .on_fallback(lambda fallback, error: log.info("state fallback %s: %s", fallback, error))
    .freeze()
)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def list_repositories(params: MatchResult) -> dict[str, Any]:
    return {
        "namespace": slug.parse(params.path["namespace"]),
        "page": page.parse(params.query["page"]),
        "pagelen": page_len.parse(params.query["pagelen"]),
    }


def get_repository(params: MatchResult) -> dict[str, Any]:
    return {
        "namespace": slug.parse(params.path["namespace"]),
        "repository": slug.parse(params.path["repository"]),
        "src": flag.parse(params.query["src"]),
        "readme": flag.parse(params.query["readme"]),
    }


def get_pull_request(params: MatchResult) -> dict[str, Any]:
    return {
        "namespace": slug.parse(params.path["namespace"]),
        "repository": slug.parse(params.path["repository"]),
        "id": pr_id.parse(params.path["id"]),
        "state": pr_state.parse(params.query["state"]),
    }


RESOURCES = (
    Resource(
        "repositories",
        compile_template("mcp://bitbucket/{namespace}/repositories?page={page}&pagelen={pagelen}"),
        list_repositories,
    ),
    Resource(
        "repository",
        compile_template("mcp://bitbucket/{namespace}/repositories/{repository}?src={src}&readme={readme}"),
        get_repository,
    ),
    Resource(
        "pull_request",
        compile_template("mcp://bitbucket/{namespace}/repositories/{repository}/pullrequests/{id}?state={state}"),
        get_pull_request,
    ),
)


def _error(code: int, message: str) -> dict[str, Any]:
    return {"error": {"code": code, "message": message}}


def read(uri: str) -> dict[str, Any]:
    """Dispatch *uri* to the first resource whose template matches."""
    for resource in RESOURCES:
        try:
            params = resource.template.match(uri)
        except MatchError:
            continue
        except UriError as exc:
            return _error(INVALID_PARAMS, str(exc))

        try:
            return {"resource": resource.name, "data": resource.handler(params)}
        except SchemaError as exc:
            return _error(INVALID_PARAMS, str(exc))

    return _error(RESOURCE_NOT_FOUND, f"No resource matches {uri!r}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    for uri in (
        "mcp://bitbucket/acme/repositories?page=2",
        "mcp://bitbucket/acme/repositories/web?readme=true",
        "mcp://bitbucket/acme/repositories/web/pullrequests/17?state=MERGED",
        "mcp://bitbucket/acme/repositories/web/pullrequests/-1",
    ):
        print(uri)
        print(json.dumps(read(uri), indent=2))
