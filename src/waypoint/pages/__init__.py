"""Filesystem route discovery.

Turns a pages directory into a ``Route`` list ready for ``Router``::

    pages/
        index.html          -> /
        about.html          -> /about
        blog/
            index.html      -> /blog          (parent of the routes below)
            [slug].html     -> /blog/:slug
        docs/
            [...rest].html  -> /docs/*rest
"""

from waypoint.pages.discovery import discover_routes

__all__ = ["discover_routes"]
