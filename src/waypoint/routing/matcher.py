"""Path pattern compilation and matching.

Grammar, one pattern segment at a time::

    "/users"            literal segment
    "/users/:id"        named parameter, one path segment
    "/files/*path"      rest wildcard, the remainder of the path
    "/files/*"          rest wildcard bound to ``"wildcard"``

Matching is anchored: a pattern matches the whole normalized path or
nothing. Compiled matchers are immutable and safe to share.
"""

import re
from dataclasses import dataclass

from waypoint.errors import ConfigurationError

WILDCARD_NAME = "wildcard"

# (regex fragment) per segment kind
_PARAM_PATTERN = r"([^/]+)"
_REST_PATTERN = r"(.+)"

_BRACE_RE = re.compile(r"^\{[^}]*\}$")


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Literal:  ``/users``  (kind="literal")
    Param:    ``/:id``    (kind="param", param_name="id")
    Rest:     ``/*path``  (kind="rest", param_name="path")
    """

    value: str
    kind: str = "literal"
    param_name: str | None = None

    @property
    def is_param(self) -> bool:
        return self.kind != "literal"


def normalize_path(path: str) -> str:
    """Give *path* a leading separator and drop any trailing one.

    The root path stays ``"/"``::

        normalize_path("")          -> "/"
        normalize_path("users/")    -> "/users"
        normalize_path("/")         -> "/"
    """
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def join_paths(parent: str, child: str) -> str:
    """Join a relative child pattern onto its parent's full pattern."""
    if child.startswith("/"):
        return normalize_path(child)
    base = normalize_path(parent)
    if base == "/":
        return normalize_path(child)
    return normalize_path(f"{base}/{child}")


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route pattern into segments.

    Examples::

        "/users"          -> [PathSegment("users")]
        "/users/:id"      -> [PathSegment("users"), PathSegment(":id", "param", "id")]
        "/docs/*rest"     -> [PathSegment("docs"), PathSegment("*rest", "rest", "rest")]
        "/"               -> []

    Raises ``ConfigurationError`` for an empty parameter name, a rest
    wildcard that is not the last segment, a repeated parameter name,
    or a ``{param}``-style segment.
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    parts = [p for p in normalize_path(path).split("/") if p]
    for index, part in enumerate(parts):
        if _BRACE_RE.match(part):
            msg = (
                f"Route pattern {path!r} uses {{param}} syntax. "
                f"Use :param instead, e.g. {':' + part[1:-1].split(':')[0]!r}."
            )
            raise ConfigurationError(msg)

        if part.startswith(":"):
            name = part[1:]
            if not name:
                msg = f"Route pattern {path!r} has a parameter without a name."
                raise ConfigurationError(msg)
            segment = PathSegment(value=part, kind="param", param_name=name)
        elif part.startswith("*"):
            if index != len(parts) - 1:
                msg = f"Route pattern {path!r}: rest wildcard {part!r} must be the last segment."
                raise ConfigurationError(msg)
            segment = PathSegment(value=part, kind="rest", param_name=part[1:] or WILDCARD_NAME)
        else:
            segments.append(PathSegment(value=part))
            continue

        if segment.param_name in seen:
            msg = f"Route pattern {path!r} declares {segment.param_name!r} more than once."
            raise ConfigurationError(msg)
        seen.add(segment.param_name)
        segments.append(segment)
    return segments


class PathMatcher:
    """A compiled route pattern.

    Usage::

        matcher = PathMatcher("/blog/:category/:id")
        matcher.match("/blog/tech/42")   # {"category": "tech", "id": "42"}
        matcher.match("/blog/tech")      # None
    """

    __slots__ = ("_regex", "param_names", "pattern", "segments")

    def __init__(self, pattern: str) -> None:
        self.pattern = normalize_path(pattern)
        self.segments = tuple(parse_path(self.pattern))
        self.param_names = tuple(s.param_name for s in self.segments if s.param_name)
        self._regex = re.compile(_to_regex(self.segments))

    def __repr__(self) -> str:
        return f"PathMatcher({self.pattern!r})"

    def match(self, path: str) -> dict[str, str] | None:
        """Return the captured parameters, or ``None`` when *path* does not match.

        *path* is normalized before matching. Captured values are the raw
        path text (no percent-decoding).
        """
        found = self._regex.fullmatch(normalize_path(path))
        if found is None:
            return None
        return dict(zip(self.param_names, found.groups(), strict=True))


def compile_path(pattern: str) -> PathMatcher:
    """Compile *pattern* into a reusable :class:`PathMatcher`."""
    return PathMatcher(pattern)


def _to_regex(segments: tuple[PathSegment, ...]) -> str:
    if not segments:
        return r"^/$"
    pieces: list[str] = []
    for segment in segments:
        if segment.kind == "param":
            pieces.append(_PARAM_PATTERN)
        elif segment.kind == "rest":
            pieces.append(_REST_PATTERN)
        else:
            pieces.append(re.escape(segment.value))
    return "^/" + "/".join(pieces) + "$"
