"""Filesystem route discovery for a pages directory.

Walks the pages directory tree and builds a route tree:

- Files with a page suffix become routes; the stem is the last segment.
- ``index`` is the enclosing directory's own route.
- A directory with an index becomes a parent route whose children are
  the rest of its contents. A directory without one contributes its
  routes to the enclosing level.
- ``[name]`` becomes ``:name``; ``[...name]`` becomes ``*name``.
- Entries starting with ``_`` are ignored.

Within a directory, literal names are registered before dynamic ones,
so ``/blog/new`` wins over ``/blog/:slug`` under first-match resolution.
"""

import re
from pathlib import Path

from waypoint.routing.route import Route

INDEX_STEM = "index"

# [...name] -> rest wildcard, [name] -> parameter
_REST_RE = re.compile(r"^\[\.\.\.(\w+)\]$")
_PARAM_RE = re.compile(r"^\[(\w+)\]$")

_WORD_SPLIT_RE = re.compile(r"[-_.\s]+")


def discover_routes(
    pages_dir: str | Path,
    *,
    suffixes: tuple[str, ...] = (".html",),
) -> list[Route]:
    """Walk a pages directory and build its route tree.

    Args:
        pages_dir: Path to the pages directory.
        suffixes: File suffixes that count as pages.

    Returns:
        Top-level routes, root route (``/``) first.

    Raises:
        FileNotFoundError: If *pages_dir* is not a directory.
    """
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Pages directory not found: {root}")

    index, routes = _walk(root, root, url_parts=[], suffixes=suffixes)
    if index is not None:
        routes.insert(0, index)
    return routes


def segment_for(name: str) -> str:
    """Convert a file or directory name to a route pattern segment."""
    rest = _REST_RE.match(name)
    if rest:
        return f"*{rest.group(1)}"
    param = _PARAM_RE.match(name)
    if param:
        return f":{param.group(1)}"
    return name


def route_name(parts: list[str]) -> str | None:
    """PascalCase name from relative path parts (``["blog", "[slug]"]`` -> ``BlogSlug``)."""
    words: list[str] = []
    for part in parts:
        cleaned = part.strip("[]").removeprefix("...")
        words.extend(w for w in _WORD_SPLIT_RE.split(cleaned) if w)
    if not words:
        return None
    return "".join(w[:1].upper() + w[1:] for w in words)


def _walk(
    directory: Path,
    root: Path,
    *,
    url_parts: list[str],
    suffixes: tuple[str, ...],
) -> tuple[Route | None, list[Route]]:
    """Scan one directory.

    Returns the directory's own (index) route, if any, and the routes
    for everything else in it.
    """
    index: Route | None = None
    routes: list[Route] = []

    for item in sorted(directory.iterdir(), key=_sort_key):
        if item.name.startswith("_"):
            continue

        if item.is_dir():
            sub_parts = [*url_parts, item.name]
            sub_index, sub_routes = _walk(item, root, url_parts=sub_parts, suffixes=suffixes)
            if sub_index is None:
                routes.extend(sub_routes)
            else:
                routes.append(
                    Route(
                        path=sub_index.path,
                        component=sub_index.component,
                        name=sub_index.name,
                        children=tuple(sub_routes),
                    )
                )
            continue

        if item.suffix not in suffixes:
            continue

        component = item.relative_to(root).as_posix()
        if item.stem == INDEX_STEM:
            index = Route(
                path=_to_path(url_parts),
                component=component,
                name=route_name(url_parts),
            )
        else:
            parts = [*url_parts, item.stem]
            routes.append(
                Route(path=_to_path(parts), component=component, name=route_name(parts))
            )

    return index, routes


def _to_path(parts: list[str]) -> str:
    if not parts:
        return "/"
    return "/" + "/".join(segment_for(p) for p in parts)


def _sort_key(item: Path) -> tuple[int, str]:
    """Literal names first, then parameters, then rest wildcards."""
    name = item.stem if item.is_file() else item.name
    if _REST_RE.match(name):
        return (2, name)
    if _PARAM_RE.match(name):
        return (1, name)
    return (0, name)
