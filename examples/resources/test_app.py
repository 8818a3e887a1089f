"""Tests for the resources example — dispatch, typed params, error mapping."""

import logging

import pytest


class TestRead:
    def test_repositories_defaults(self, example_module) -> None:
        result = example_module.read("mcp://bitbucket/acme/repositories")
        assert result == {
            "resource": "repositories",
            "data": {"namespace": "acme", "page": 1, "pagelen": 10},
        }

    def test_repositories_paging(self, example_module) -> None:
        result = example_module.read("mcp://bitbucket/acme/repositories?page=3&pagelen=50")
        assert result["data"]["page"] == 3
        assert result["data"]["pagelen"] == 50

    def test_invalid_page_falls_back(self, example_module) -> None:
        result = example_module.read("mcp://bitbucket/acme/repositories?page=-2")
        assert result["data"]["page"] == 1

    def test_repository_flags(self, example_module) -> None:
        result = example_module.read("mcp://bitbucket/acme/repositories/web?readme=true&src=yes")
        assert result == {
            "resource": "repository",
            "data": {"namespace": "acme", "repository": "web", "src": False, "readme": True},
        }

    def test_pull_request(self, example_module) -> None:
        result = example_module.read("mcp://bitbucket/acme/repositories/web/pullrequests/17?state=MERGED")
        assert result["resource"] == "pull_request"
        assert result["data"]["id"] == 17
        assert result["data"]["state"] == "MERGED"

    def test_pull_request_state_fallback_logged(self, example_module, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="example.resources"):
            result = example_module.read("mcp://bitbucket/acme/repositories/web/pullrequests/17?state=open")
        assert result["data"]["state"] == "OPEN"
        assert "state fallback OPEN" in caplog.text


class TestErrors:
    def test_invalid_id(self, example_module) -> None:
        result = example_module.read("mcp://bitbucket/acme/repositories/web/pullrequests/-1")
        assert result["error"]["code"] == example_module.INVALID_PARAMS
        assert result["error"]["message"] == "expected positive integer (> 0), got: -1"

    def test_blank_namespace(self, example_module) -> None:
        result = example_module.read("mcp://bitbucket/%20/repositories")
        assert result["error"]["code"] == example_module.INVALID_PARAMS
        assert "expected non-blank string" in result["error"]["message"]

    def test_unknown_resource(self, example_module) -> None:
        result = example_module.read("mcp://bitbucket/acme/projects")
        assert result["error"]["code"] == example_module.RESOURCE_NOT_FOUND

    def test_other_host(self, example_module) -> None:
        result = example_module.read("mcp://github/acme/repositories")
        assert result["error"]["code"] == example_module.RESOURCE_NOT_FOUND

    def test_unparseable_uri(self, example_module) -> None:
        result = example_module.read("://nowhere")
        assert result["error"]["code"] == example_module.INVALID_PARAMS
        assert result["error"]["message"].startswith("invalid URI")


class TestSchemasFrozen:
    def test_cannot_extend_shared_schema(self, example_module) -> None:
        with pytest.raises(RuntimeError):
            example_module.page.must(lambda value: None)
