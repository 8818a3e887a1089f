"""CompiledTemplate, MatchResult, and segment frozen dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Literal:
    """A fixed path segment or query value that is compared, not captured."""

    value: str


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A named slot, written ``{name}`` in the template."""

    name: str


type Part = Literal | Placeholder


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Raw string parameters extracted from a matched URI.

    ``path`` holds one entry per path placeholder. ``query`` holds one
    entry per query placeholder; placeholders absent from the URI map
    to ``""``.
    """

    path: dict[str, str]
    query: dict[str, str]


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """A frozen, pre-parsed URI template.

    Created once by ``compile_template()`` and reused for every match.

        "https://api.example.com/repos/{owner}?page={page}"
        -> scheme="https", host="api.example.com",
           path_segments=(Literal("repos"), Placeholder("owner")),
           query_template=(("page", Placeholder("page")),)
    """

    template: str
    scheme: str
    host: str
    path_segments: tuple[Part, ...]
    query_template: tuple[tuple[str, Part], ...] = ()

    @property
    def path_names(self) -> tuple[str, ...]:
        """Placeholder names in path order."""
        return tuple(p.name for p in self.path_segments if isinstance(p, Placeholder))

    @property
    def query_names(self) -> tuple[str, ...]:
        """Placeholder names in query order."""
        return tuple(v.name for _, v in self.query_template if isinstance(v, Placeholder))

    def match(self, uri: str) -> MatchResult:
        """Match *uri* against this template. See ``wren.routing.match``."""
        from wren.routing.matcher import match

        return match(self, uri)
