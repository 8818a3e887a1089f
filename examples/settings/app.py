"""Settings — startup configuration from environment variables.

Optional values fall back to defaults and log at info; the auth type is
required and logs an error on fallback; credentials are critical and
stop startup when missing.

Environment variables:

- ``SERVER_PORT``: HTTP server port (default: 8080)
- ``BITBUCKET_URL``: API base URL (default: https://api.bitbucket.org/2.0)
- ``BITBUCKET_TIMEOUT``: request timeout in seconds (default: 5)
- ``BITBUCKET_AUTH``: ``oauth`` or ``basic`` (default: oauth)
- ``BITBUCKET_EMAIL`` / ``BITBUCKET_API_TOKEN``: basic auth credentials
- ``SERVER_URL``: public URL of this server, for OAuth
- ``OAUTH_ISSUER``: OAuth issuer (default: https://bitbucket.org)
- ``OAUTH_SCOPES``: semicolon-separated scopes (default: repository;pullrequest)

Run:
    cd examples/settings && SERVER_URL=http://localhost:8080 python app.py
"""

import logging
from dataclasses import dataclass

from wren import env
from wren.schema import integer, not_blank, not_empty, one_of, positive, str_list, string


@dataclass(frozen=True, slots=True)
class BasicAuth:
    username: str
    password: str


@dataclass(frozen=True, slots=True)
class OAuth:
    server_url: str
    issuer: str
    scopes: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Settings:
    port: int
    bitbucket_url: str
    timeout: int
    auth: BasicAuth | OAuth


def load_settings() -> Settings:
    """Read settings from the environment (and ``.env``, if present)."""
    env.load_env_file()

    auth_type = env.get_required(
        "BITBUCKET_AUTH", string().must(one_of("oauth", "basic")), "oauth"
    )

    auth: BasicAuth | OAuth
    if auth_type == "basic":
        auth = BasicAuth(
            username=env.get_critical("BITBUCKET_EMAIL", string().must(not_blank).critical()),
            password=env.get_critical("BITBUCKET_API_TOKEN", string().must(not_blank).critical()),
        )
    else:
        scopes = env.get_optional(
            "OAUTH_SCOPES",
            str_list(";").must(not_empty).optional(["repository", "pullrequest"]),
        )
        auth = OAuth(
            server_url=env.get_critical("SERVER_URL", string().must(not_blank).critical()),
            issuer=env.get_optional(
                "OAUTH_ISSUER", string().must(not_blank).optional("https://bitbucket.org")
            ),
            scopes=tuple(scopes),
        )

    return Settings(
        port=env.get_optional("SERVER_PORT", integer().must(positive).optional(8080)),
        bitbucket_url=env.get_optional(
            "BITBUCKET_URL", string().must(not_blank).optional("https://api.bitbucket.org/2.0")
        ),
        timeout=env.get_optional("BITBUCKET_TIMEOUT", integer().must(positive).optional(5)),
        auth=auth,
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print(load_settings())
