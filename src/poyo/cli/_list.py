"""``poyo route list`` — list registered routes.

Prints PATH, ACCESS, CONTROLLER and PAGE for every route in
``routes.json``, in registry order (sorted by path).
"""

from poyo.config import ProjectConfig
from poyo.routes import Route, RouteRegistry


def _access(route: Route) -> str:
    if route.is_guest_only:
        return "guest"
    if route.is_public:
        return "public"
    return "auth"


def list_routes(config: ProjectConfig) -> None:
    """Print a table of the registered routes."""
    registry = RouteRegistry.load(config.registry_path)
    routes = sorted(registry, key=lambda r: r.path)
    if not routes:
        print("No routes registered.")
        return

    # Build rows: (path, access, controller.action, page)
    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        target = f"{route.controller}.{route.action}" if route.controller else "-"
        rows.append((route.path, _access(route), target, route.files.page))

    # Column widths
    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_access = 6  # "ACCESS" header, longest value is "public"
    max_target = max(max(len(r[2]) for r in rows), 10)  # "CONTROLLER" header

    fmt = f"{{:<{max_path}}}  {{:<{max_access}}}  {{:<{max_target}}}  {{}}"
    print(fmt.format("PATH", "ACCESS", "CONTROLLER", "PAGE"))
    sep_len = max_path + max_access + max_target + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
