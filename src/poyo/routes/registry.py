"""Route registry — ``routes.json`` persistence and the in-memory collection.

The registry file is a JSON array, 2-space indented, sorted by ``path``,
ending with a newline::

    [
      {
        "path": "/Admin/Users",
        "name": "Admin/Users",
        "files": {
          "react": "src/pages/Admin/Users/index.page.tsx",
          "view": "Views/Admin/Users/Index.cshtml"
        },
        "isPublic": true,
        "seo": {
          "title": "Admin/Users",
          "description": "Page for Admin/Users"
        }
      }
    ]

False flags, an empty controller/action, and an empty ``seo`` map are
omitted.  Every command reads the whole file, and writes the whole file
back only if it changed something.
"""

import json
import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

from poyo._internal.fs import atomic_write
from poyo.errors import NotFoundError, PersistenceError, ValidationError
from poyo.routes.route import Route, RouteFiles

logger = logging.getLogger("poyo.registry")


def route_to_dict(route: Route) -> dict[str, Any]:
    """Serialize a route with stable field order."""
    data: dict[str, Any] = {
        "path": route.path,
        "name": route.name,
        "files": {"react": route.files.page, "view": route.files.view},
    }
    if route.is_public:
        data["isPublic"] = True
    if route.is_guest_only:
        data["isGuestOnly"] = True
    if route.controller:
        data["controller"] = route.controller
    if route.action:
        data["action"] = route.action
    if route.seo:
        data["seo"] = dict(route.seo)
    return data


def route_from_dict(data: Any) -> Route:
    """Parse one registry entry.

    Raises:
        PersistenceError: If required fields are missing or mistyped.
    """
    if not isinstance(data, dict):
        msg = f"registry entry must be an object, got {type(data).__name__}"
        raise PersistenceError(msg)

    try:
        files = data["files"]
        route = Route(
            path=_require_str(data, "path"),
            name=_require_str(data, "name"),
            files=RouteFiles(
                page=_require_str(files, "react"),
                view=_require_str(files, "view"),
            ),
            is_public=bool(data.get("isPublic", False)),
            is_guest_only=bool(data.get("isGuestOnly", False)),
            controller=data.get("controller") or None,
            action=data.get("action") or None,
            seo={str(k): str(v) for k, v in (data.get("seo") or {}).items()},
        )
    except (KeyError, TypeError, AttributeError) as exc:
        msg = f"malformed registry entry {data.get('path', '?')!r}: {exc}"
        raise PersistenceError(msg) from exc
    except ValidationError as exc:
        raise PersistenceError(str(exc)) from exc
    return route


def _require_str(data: Any, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        msg = f"field {key!r} must be a string"
        raise TypeError(msg)
    return value


def read_routes(path: Path) -> list[Route]:
    """Read every route from the registry file.

    A missing file is an empty registry, not an error.

    Raises:
        PersistenceError: If the file cannot be read or is not a JSON
            array of route objects.
    """
    if not path.exists():
        return []

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:  # JSONDecodeError, UnicodeDecodeError
        msg = f"Error reading {path.name}: {exc}"
        raise PersistenceError(msg) from exc

    if not isinstance(raw, list):
        msg = f"Error reading {path.name}: expected a JSON array"
        raise PersistenceError(msg)

    return [route_from_dict(entry) for entry in raw]


def serialize_routes(routes: Iterable[Route]) -> str:
    """Render routes as registry text, sorted by path (ordinal)."""
    ordered = sorted(routes, key=lambda r: r.path)
    return json.dumps([route_to_dict(r) for r in ordered], indent=2, ensure_ascii=False) + "\n"


def write_routes(path: Path, routes: Iterable[Route]) -> None:
    """Write the full registry by atomic replacement.

    Raises:
        FileOperationError: If the file cannot be written.
    """
    text = serialize_routes(routes)
    atomic_write(path, text)
    logger.debug("wrote %s", path)


class RouteRegistry:
    """Ordered in-memory route collection bound to its registry file.

    Usage::

        registry = RouteRegistry.load(config.registry_path)
        registry.add(route)
        registry.save()
    """

    __slots__ = ("_path", "_routes")

    def __init__(self, path: Path, routes: Iterable[Route] = ()) -> None:
        self._path = path
        self._routes: list[Route] = []
        for route in routes:
            self.add(route)

    @classmethod
    def load(cls, path: Path) -> "RouteRegistry":
        """Read the registry file.

        Raises:
            PersistenceError: If the file is malformed or lists the same
                path twice.
        """
        routes = read_routes(path)
        try:
            return cls(path, routes)
        except ValidationError as exc:
            msg = f"Error reading {path.name}: {exc}"
            raise PersistenceError(msg) from exc

    @property
    def path(self) -> Path:
        return self._path

    @property
    def routes(self) -> tuple[Route, ...]:
        return tuple(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(tuple(self._routes))

    def __len__(self) -> int:
        return len(self._routes)

    def find(self, raw: str) -> Route | None:
        """Return the route named by *raw* (any case, slash optional)."""
        for route in self._routes:
            if route.matches(raw):
                return route
        return None

    def get(self, raw: str) -> Route:
        """Like :meth:`find` but raises :class:`NotFoundError` on a miss."""
        route = self.find(raw)
        if route is None:
            raise NotFoundError(raw)
        return route

    def add(self, route: Route) -> None:
        """Append a route.

        Raises:
            ValidationError: If a route with the same path (ignoring
                case) is already registered.
        """
        for existing in self._routes:
            if existing.key == route.key:
                msg = f"route already exists: {route.path}"
                raise ValidationError(msg)
        self._routes.append(route)

    def replace(self, route: Route) -> None:
        """Swap in an updated copy of an existing route."""
        for i, existing in enumerate(self._routes):
            if existing.key == route.key:
                self._routes[i] = route
                return
        raise NotFoundError(route.path)

    def remove(self, route: Route) -> None:
        before = len(self._routes)
        self._routes = [r for r in self._routes if r.key != route.key]
        if len(self._routes) == before:
            raise NotFoundError(route.path)

    def remove_where(self, predicate: Callable[[Route], bool]) -> list[Route]:
        """Drop every route matching *predicate*; return the dropped ones."""
        dropped = [r for r in self._routes if predicate(r)]
        self._routes = [r for r in self._routes if not predicate(r)]
        return dropped

    def tracked_pages(self) -> frozenset[str]:
        return frozenset(r.files.page.replace("\\", "/") for r in self._routes)

    def tracked_views(self) -> frozenset[str]:
        return frozenset(r.files.view.replace("\\", "/") for r in self._routes)

    def save(self) -> None:
        write_routes(self._path, self._routes)
