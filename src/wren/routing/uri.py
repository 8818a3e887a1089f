"""Generic URI splitting shared by the template compiler and the matcher.

Both sides of a match are parsed by the same rules, so a template and a
concrete URI always disagree for the same reasons.
"""

import re
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_HOST_PORT_RE = re.compile(r"^(\[[^\]]*\]|[^:]*)(?::(.*))?$")


@dataclass(frozen=True, slots=True)
class UriParts:
    """The pieces of a URI that take part in matching.

    ``scheme`` is lower-cased, ``host`` keeps its port and case, ``path``
    is percent-decoded, ``raw_query`` is left encoded.
    """

    scheme: str
    host: str
    path: str
    raw_query: str


def split_uri(text: str) -> UriParts:
    """Split *text* into ``UriParts``.

    Raises ``ValueError`` with a short reason if *text* is not a URI.
    """
    if not text or not text.strip():
        raise ValueError("empty URI")
    if _CONTROL_RE.search(text):
        raise ValueError(f"invalid control character in {text!r}")
    if text.startswith(":"):
        raise ValueError(f"missing protocol scheme in {text!r}")

    # A colon before the first slash must terminate a valid scheme
    head = text.split("#", 1)[0].split("?", 1)[0].split("/", 1)[0]
    if ":" in head and not _SCHEME_RE.match(head.split(":", 1)[0]):
        raise ValueError(f"first path segment cannot contain colon: {head!r}")

    parts = urlsplit(text)

    host = parts.netloc.rpartition("@")[2]
    if "{" in host or "}" in host:
        raise ValueError(f"invalid character in host {host!r}")
    host_match = _HOST_PORT_RE.match(host)
    if host_match is None:
        raise ValueError(f"invalid host {host!r}")
    port = host_match.group(2)
    if port and not (port.isascii() and port.isdigit()):
        raise ValueError(f"invalid port {port!r} after host")

    if _BAD_ESCAPE_RE.search(parts.path):
        raise ValueError(f"invalid escape in path {parts.path!r}")

    return UriParts(
        scheme=parts.scheme.lower(),
        host=host,
        path=unquote(parts.path),
        raw_query=parts.query,
    )


def split_path(path: str) -> list[str]:
    """Split a decoded path into segments, ignoring outer slashes.

    The root path yields a single empty segment, so ``""`` and ``"/"``
    compare equal.
    """
    return path.strip("/").split("/")
