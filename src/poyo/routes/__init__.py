"""Routes — the registry data model, naming rules, and ``routes.json`` I/O."""

from poyo.routes.naming import leaf_identifier, name_from_page, normalize, resolve_paths
from poyo.routes.registry import RouteRegistry, read_routes, write_routes
from poyo.routes.route import Route, RouteFiles, default_seo

__all__ = [
    "Route",
    "RouteFiles",
    "RouteRegistry",
    "default_seo",
    "leaf_identifier",
    "name_from_page",
    "normalize",
    "read_routes",
    "resolve_paths",
    "write_routes",
]
