"""Poyo — route registry and scaffolding for Poyo web projects.

``routes.json`` is the source of truth for every page of a Poyo app:
each route maps a PascalCase URL path to a React page under
``<name>.client/src/pages`` and a Razor view under ``<Name>.Server/Views``,
optionally bound to a controller action.

Basic usage::

    from poyo import ProjectConfig, RouteRegistry

    config = ProjectConfig.discover()
    registry = RouteRegistry.load(config.registry_path)

Command line::

    poyo route add /admin/users --controller Admin --action Users
    poyo route sync
"""

__version__ = "0.1.0"
__all__ = [
    "ActionExistsError",
    "ConfigurationError",
    "FileOperationError",
    "IdempotentConflict",
    "NotFoundError",
    "PersistenceError",
    "PoyoError",
    "ProjectConfig",
    "Reconciler",
    "Route",
    "RouteFiles",
    "RouteRegistry",
    "ValidationError",
]

_ERRORS = frozenset(
    {
        "ActionExistsError",
        "ConfigurationError",
        "FileOperationError",
        "IdempotentConflict",
        "NotFoundError",
        "PersistenceError",
        "PoyoError",
        "ValidationError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import poyo`` fast; kida and rich load only when needed.
    """
    if name in _ERRORS:
        from poyo import errors

        return getattr(errors, name)

    if name == "ProjectConfig":
        from poyo.config import ProjectConfig

        return ProjectConfig

    if name in ("Route", "RouteFiles", "RouteRegistry"):
        from poyo import routes

        return getattr(routes, name)

    if name == "Reconciler":
        from poyo.sync import Reconciler

        return Reconciler

    msg = f"module 'poyo' has no attribute {name!r}"
    raise AttributeError(msg)
