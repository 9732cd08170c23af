"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(base_path="/app", debug=True)
    """

    # Mount prefix stripped from incoming paths and re-added to reflected URLs
    base_path: str = "/"

    # Log aborted navigations (no match, guard rejection, concurrent call) at INFO
    debug: bool = False

    def strip_base(self, path: str) -> str:
        """Remove ``base_path`` from the front of *path* when present."""
        base = self.base_path.rstrip("/")
        if not base:
            return path
        if path == base:
            return "/"
        if path.startswith(base + "/"):
            return path[len(base):]
        return path

    def with_base(self, url: str) -> str:
        """Prefix *url* (which starts with ``/``) with ``base_path``."""
        base = self.base_path.rstrip("/")
        if not base:
            return url
        if url == "/":
            return base
        return base + url
