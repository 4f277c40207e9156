"""Builders shared by the test modules."""

from pathlib import Path

from poyo.config import ProjectConfig
from poyo.routes import Route, RouteRegistry, default_seo, normalize, resolve_paths
from poyo.scaffold import scaffold_route


def make_route(raw: str, *, flat: bool = False, **kwargs: object) -> Route:
    path, name = normalize(raw)
    kwargs.setdefault("seo", default_seo(name))
    return Route(
        path=path,
        name=name,
        files=resolve_paths(name, flat),
        **kwargs,  # type: ignore[arg-type]
    )


def register(config: ProjectConfig, *routes: Route, scaffold: bool = True) -> RouteRegistry:
    """Write *routes* to the registry and (optionally) scaffold their files."""
    registry = RouteRegistry(config.registry_path, routes)
    registry.save()
    if scaffold:
        for route in routes:
            scaffold_route(config, route.name, route.files)
    return registry


def write(path: Path, text: str = "x\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path
