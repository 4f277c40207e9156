"""Idempotent page/view generation for a route.

Each artifact is written only if it does not exist yet, so running the
scaffolder again for an unchanged route is a no-op.  Existing files are
never overwritten, even if their content differs from the template.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from poyo._internal.fs import create_exclusive
from poyo.config import ProjectConfig
from poyo.routes.naming import leaf_identifier
from poyo.routes.route import RouteFiles
from poyo.scaffold._templates import render_page, render_view

logger = logging.getLogger("poyo.scaffold")


class ArtifactKind(StrEnum):
    PAGE = "page"
    VIEW = "view"


class ArtifactStatus(StrEnum):
    CREATED = "created"
    EXISTS = "exists"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class ArtifactResult:
    """What happened to one generated file."""

    kind: ArtifactKind
    relative: str
    path: Path
    status: ArtifactStatus


@dataclass(frozen=True, slots=True)
class ScaffoldReport:
    """Result of scaffolding one route."""

    name: str
    artifacts: tuple[ArtifactResult, ...]

    @property
    def created(self) -> tuple[ArtifactResult, ...]:
        return tuple(a for a in self.artifacts if a.status is ArtifactStatus.CREATED)

    @property
    def changed(self) -> bool:
        return bool(self.created)

    def lines(self) -> list[str]:
        """Human-readable status lines, one per artifact."""
        labels = {ArtifactKind.PAGE: "React Page", ArtifactKind.VIEW: "MVC View"}
        out: list[str] = []
        for artifact in self.artifacts:
            label = labels[artifact.kind]
            if artifact.status is ArtifactStatus.SKIPPED:
                out.append(f"[SKIP] {label} generation skipped (--no-view)")
            else:
                out.append(f"[{artifact.status.upper()}] {label}: {artifact.relative}")
        return out


def scaffold_route(
    config: ProjectConfig,
    name: str,
    files: RouteFiles,
    *,
    no_view: bool = False,
) -> ScaffoldReport:
    """Create whichever of a route's page and view files are missing.

    Args:
        config: Project locations.
        name: Route name (``"Admin/Users"``); the only template input
            besides the page component name derived from its last segment.
        files: Registry-relative artifact locations.
        no_view: Skip the view file entirely.

    Raises:
        FileOperationError: If a missing file cannot be created.
    """
    results = [
        _ensure(
            ArtifactKind.PAGE,
            files.page,
            config.page_file(files.page),
            render_page(name, leaf_identifier(name)),
        )
    ]

    if no_view:
        results.append(
            ArtifactResult(
                kind=ArtifactKind.VIEW,
                relative=files.view,
                path=config.view_file(files.view),
                status=ArtifactStatus.SKIPPED,
            )
        )
    else:
        results.append(
            _ensure(
                ArtifactKind.VIEW,
                files.view,
                config.view_file(files.view),
                render_view(name),
            )
        )

    return ScaffoldReport(name=name, artifacts=tuple(results))


def scaffold_view(config: ProjectConfig, name: str, relative: str) -> ArtifactResult:
    """Create a single missing view file (used when adopting a page)."""
    return _ensure(ArtifactKind.VIEW, relative, config.view_file(relative), render_view(name))


def _ensure(kind: ArtifactKind, relative: str, path: Path, content: str) -> ArtifactResult:
    if create_exclusive(path, content):
        logger.debug("created %s %s", kind, path)
        status = ArtifactStatus.CREATED
    else:
        status = ArtifactStatus.EXISTS
    return ArtifactResult(kind=kind, relative=relative, path=path, status=status)
