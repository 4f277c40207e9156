"""Drift detection between ``routes.json`` and the filesystem.

Two passes:

- **Forward** (registry -> disk): every route whose page or view file is
  gone is reported with the set of missing artifact kinds.
- **Reverse** (disk -> registry): every file under the page root or view
  root that looks generated (``*.page.tsx`` / ``*.cshtml``, minus shared
  and ``_``-prefixed views) but is not referenced by any route.
"""

import logging
from dataclasses import dataclass

from poyo._internal.fs import find_files
from poyo.config import ProjectConfig
from poyo.routes.registry import RouteRegistry
from poyo.routes.route import Route
from poyo.scaffold.engine import ArtifactKind

logger = logging.getLogger("poyo.sync")


@dataclass(frozen=True, slots=True)
class MissingRoute:
    """A registered route with one or both artifacts absent from disk."""

    route: Route
    missing: frozenset[ArtifactKind]

    def labels(self) -> list[str]:
        return [kind.value for kind in ArtifactKind if kind in self.missing]


@dataclass(frozen=True, slots=True)
class DriftReport:
    """Outcome of both detection passes."""

    route_count: int
    missing: tuple[MissingRoute, ...] = ()
    untracked_pages: tuple[str, ...] = ()
    untracked_views: tuple[str, ...] = ()

    @property
    def healthy(self) -> bool:
        return not (self.missing or self.untracked_pages or self.untracked_views)

    @property
    def has_untracked(self) -> bool:
        return bool(self.untracked_pages or self.untracked_views)

    def summary_lines(self) -> list[str]:
        if self.healthy:
            return [
                f"[OK] All {self.route_count} routes indicate valid files, "
                "and no untracked files found."
            ]
        lines = ["[WARN] Discrepancies found:"]
        if self.missing:
            lines.append(f"  - {len(self.missing)} routes have missing files.")
            lines.extend(
                f"      {m.route.path}: missing {', '.join(m.labels())}" for m in self.missing
            )
        if self.untracked_pages:
            lines.append(f"  - {len(self.untracked_pages)} untracked React pages found.")
        if self.untracked_views:
            lines.append(f"  - {len(self.untracked_views)} untracked MVC views found.")
        return lines


def find_missing(config: ProjectConfig, registry: RouteRegistry) -> list[MissingRoute]:
    """Forward pass: routes whose artifacts do not exist."""
    missing: list[MissingRoute] = []
    for route in registry:
        kinds: set[ArtifactKind] = set()
        if not config.page_file(route.files.page).exists():
            kinds.add(ArtifactKind.PAGE)
        if not config.view_file(route.files.view).exists():
            kinds.add(ArtifactKind.VIEW)
        if kinds:
            missing.append(MissingRoute(route=route, missing=frozenset(kinds)))
    return missing


def scan_pages(config: ProjectConfig) -> list[str]:
    """All page-looking files, relative to the client app directory."""
    suffix = config.conventions.page_suffix
    return find_files(config.page_root, config.client_dir, lambda p: p.endswith(suffix))


def scan_views(config: ProjectConfig) -> list[str]:
    """All route-view-looking files, relative to the server directory."""
    c = config.conventions

    def is_route_view(relative: str) -> bool:
        filename = relative.rpartition("/")[2]
        return (
            relative.endswith(c.view_ext)
            and c.shared_view_marker not in relative
            and not filename.startswith(c.partial_prefix)
        )

    return find_files(config.view_root, config.server_dir, is_route_view)


def detect_drift(config: ProjectConfig, registry: RouteRegistry) -> DriftReport:
    """Run both passes against the current registry."""
    missing = find_missing(config, registry)

    tracked_pages = registry.tracked_pages()
    tracked_views = registry.tracked_views()
    untracked_pages = [p for p in scan_pages(config) if p not in tracked_pages]
    untracked_views = [v for v in scan_views(config) if v not in tracked_views]

    logger.debug(
        "drift: %d missing, %d untracked pages, %d untracked views",
        len(missing),
        len(untracked_pages),
        len(untracked_views),
    )
    return DriftReport(
        route_count=len(registry),
        missing=tuple(missing),
        untracked_pages=tuple(untracked_pages),
        untracked_views=tuple(untracked_views),
    )
