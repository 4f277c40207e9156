"""Drift remediation.

:class:`Reconciler` turns a :class:`DriftReport` into a menu of remedies,
asks the prompter which one to apply, and applies it.  Each remedy can
be run again on its own; none of them renders anything.  They return
status lines for the caller to print.

Remedies:

- ``rescaffold``: recreate only the missing artifacts of broken routes
- ``prune``: drop broken routes from the registry (files untouched)
- ``adopt``: register untracked pages, pairing each with a view
- ``delete``: delete untracked files, then their empty parent folders
- ``ignore``: do nothing
"""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from poyo._internal.fs import delete_empty_parents, delete_file
from poyo.config import ProjectConfig
from poyo.errors import ActionExistsError
from poyo.prompts import Choice, Prompter
from poyo.routes.naming import name_from_page, normalize
from poyo.routes.registry import RouteRegistry
from poyo.routes.route import Route, RouteFiles, default_seo
from poyo.scaffold.controllers import ensure_action
from poyo.scaffold.engine import ArtifactStatus, scaffold_route, scaffold_view
from poyo.sync.detect import DriftReport, detect_drift

logger = logging.getLogger("poyo.sync")

RESOLVE_TITLE = "How should we resolve these discrepancies?"
ADOPT_TITLE = "Select routes to add:"
DELETE_TITLE = "Select files to PERMANENTLY DELETE:"


class Remedy(StrEnum):
    RESCAFFOLD = "rescaffold"
    PRUNE = "prune"
    ADOPT = "add_untracked"
    DELETE = "delete_untracked"
    IGNORE = "ignore"


_REMEDY_LABELS = {
    Remedy.RESCAFFOLD: "Rescaffold: Re-create missing files for broken routes",
    Remedy.PRUNE: "Prune: Remove broken routes from routes.json",
    Remedy.ADOPT: "Add: Add untracked files to routes.json",
    Remedy.DELETE: "Delete: Delete untracked files from disk",
    Remedy.IGNORE: "Ignore: Do nothing for now",
}


def available_remedies(report: DriftReport) -> list[Remedy]:
    """Remedies that make sense for *report*, in menu order."""
    remedies: list[Remedy] = []
    if report.missing:
        remedies += [Remedy.RESCAFFOLD, Remedy.PRUNE]
    if report.has_untracked:
        remedies += [Remedy.ADOPT, Remedy.DELETE]
    remedies.append(Remedy.IGNORE)
    return remedies


@dataclass(frozen=True, slots=True)
class AdoptionCandidate:
    """An untracked page proposed as a new route."""

    route: Route
    view_on_disk: bool

    @property
    def label(self) -> str:
        return f"{self.route.path} ({self.route.files.page})"


@dataclass(frozen=True, slots=True)
class UntrackedFile:
    """An untracked file offered for deletion."""

    path: Path
    root: Path
    display: str


@dataclass(slots=True)
class SyncOutcome:
    """What a sync run found and did."""

    report: DriftReport
    remedy: Remedy | None = None
    lines: list[str] = field(default_factory=list)
    registry_changed: bool = False


def pair_view(name: str, untracked_views: frozenset[str], config: ProjectConfig) -> str:
    """Pick the view path for an adopted page named *name*.

    Tries the nested convention first, then the flat one, against the
    untracked views; with no match it falls back to nested.  A page can
    therefore claim a nested view of the same name even when that page
    is itself flat.
    """
    c = config.conventions
    nested = f"{c.view_dir}/{name}/{c.view_index}{c.view_ext}"
    flat = f"{c.view_dir}/{name}{c.view_ext}"
    if nested in untracked_views:
        return nested
    if flat in untracked_views:
        return flat
    return nested


def adoption_candidates(
    config: ProjectConfig, report: DriftReport
) -> tuple[list[AdoptionCandidate], list[str]]:
    """Build route candidates from untracked pages.

    Returns:
        ``(candidates, unpaired_views)`` where ``unpaired_views`` are the
        untracked views no candidate claimed.  Those are reported, never
        adopted.
    """
    views = frozenset(report.untracked_views)
    candidates: list[AdoptionCandidate] = []
    claimed: set[str] = set()

    for page in report.untracked_pages:
        name = name_from_page(page, config.conventions)
        path, name = normalize(name)
        view = pair_view(name, views, config)
        claimed.add(view)
        route = Route(
            path=path,
            name=name,
            files=RouteFiles(page=page, view=view),
            seo=default_seo(name),
        )
        candidates.append(AdoptionCandidate(route=route, view_on_disk=view in views))

    unpaired = [v for v in report.untracked_views if v not in claimed]
    return candidates, unpaired


class Reconciler:
    """Detects drift and applies the remedy the user picks.

    Usage::

        reconciler = Reconciler(config, prompter)
        outcome = reconciler.run()
        for line in outcome.lines:
            print(line)
    """

    def __init__(
        self,
        config: ProjectConfig,
        prompter: Prompter,
        registry: RouteRegistry | None = None,
    ) -> None:
        self.config = config
        self.prompter = prompter
        self.registry = (
            registry if registry is not None else RouteRegistry.load(config.registry_path)
        )

    def detect(self) -> DriftReport:
        return detect_drift(self.config, self.registry)

    def run(self) -> SyncOutcome:
        return self.resolve(self.detect())

    def resolve(self, report: DriftReport) -> SyncOutcome:
        """Ask which remedy to apply to *report* and apply it."""
        outcome = SyncOutcome(report=report)
        if report.healthy:
            return outcome

        choices = [Choice(_REMEDY_LABELS[r], r) for r in available_remedies(report)]
        picked = self.prompter.select(RESOLVE_TITLE, choices)
        remedy = Remedy(picked) if picked is not None else Remedy.IGNORE
        outcome.remedy = remedy

        match remedy:
            case Remedy.RESCAFFOLD:
                outcome.lines = self.rescaffold(report)
            case Remedy.PRUNE:
                outcome.lines = self.prune(report)
                outcome.registry_changed = True
            case Remedy.ADOPT:
                lines, added = self.adopt(report)
                outcome.lines = lines
                outcome.registry_changed = added > 0
            case Remedy.DELETE:
                outcome.lines = self.delete_untracked(report)
            case _:
                outcome.lines = ["[INFO] No changes made."]
        return outcome

    # -- remedies ------------------------------------------------------------

    def rescaffold(self, report: DriftReport) -> list[str]:
        """Recreate missing artifacts for broken routes only."""
        lines = ["Re-scaffolding files..."]
        for item in report.missing:
            route = item.route
            result = scaffold_route(self.config, route.name, route.files)
            lines.extend(
                line
                for artifact, line in zip(result.artifacts, result.lines(), strict=True)
                if artifact.status is ArtifactStatus.CREATED
            )
            if route.controller and route.action:
                try:
                    change = ensure_action(
                        self.config.controllers_dir,
                        route.controller,
                        route.action,
                        route.files.view,
                        self.config.conventions,
                    )
                except ActionExistsError:
                    continue
                lines.append(change.line())
        lines.append("[DONE] All files restored.")
        return lines

    def prune(self, report: DriftReport) -> list[str]:
        """Remove broken routes from the registry and persist it."""
        broken = {item.route.key for item in report.missing}
        dropped = self.registry.remove_where(lambda r: r.key in broken)
        self.registry.save()
        lines = ["Pruning routes from JSON..."]
        lines.extend(f"[REMOVED] {route.path}" for route in dropped)
        lines.append(f"[DONE] Removed {len(dropped)} routes from {self.config.registry_name}.")
        return lines

    def adopt(self, report: DriftReport) -> tuple[list[str], int]:
        """Register confirmed untracked pages; generate their missing views.

        Returns:
            ``(lines, number_of_routes_added)``.
        """
        lines = ["Analyzing untracked files..."]
        candidates, unpaired = adoption_candidates(self.config, report)

        if unpaired:
            lines.append(
                "[INFO] Found untracked Views with no corresponding React page. "
                "Skipping automatic addition (manual intervention needed):"
            )
            lines.extend(f"  - {view}" for view in unpaired)

        if not candidates:
            return lines, 0

        lines.append(f"Probe found {len(candidates)} potential new routes.")
        confirmed = self.prompter.multi_select(
            ADOPT_TITLE, [Choice(c.label, c) for c in candidates]
        )

        added: list[AdoptionCandidate] = []
        for candidate in confirmed:
            if self.registry.find(candidate.route.path) is not None:
                lines.append(
                    f"[SKIP] {candidate.route.path} is already registered "
                    f"({candidate.route.files.page} not added)"
                )
                continue
            self.registry.add(candidate.route)
            added.append(candidate)
            lines.append(f"[ADDED] {candidate.route.path}")

        if not added:
            return lines, 0

        self.registry.save()
        for candidate in added:
            route = candidate.route
            result = scaffold_view(self.config, route.name, route.files.view)
            if result.status is ArtifactStatus.CREATED:
                lines.append(f"[CREATED] Missing View for {route.name}: {route.files.view}")
        return lines, len(added)

    def delete_untracked(self, report: DriftReport) -> list[str]:
        """Delete confirmed untracked files and their emptied folders."""
        files = [
            UntrackedFile(
                path=self.config.page_file(page),
                root=self.config.page_root,
                display=self.config.display(self.config.page_file(page)),
            )
            for page in report.untracked_pages
        ] + [
            UntrackedFile(
                path=self.config.view_file(view),
                root=self.config.view_root,
                display=self.config.display(self.config.view_file(view)),
            )
            for view in report.untracked_views
        ]

        confirmed = self.prompter.multi_select(DELETE_TITLE, [Choice(f.display, f) for f in files])
        lines: list[str] = []
        for item in confirmed:
            lines.extend(remove_artifact(self.config, item.path, item.root))
        if not confirmed:
            lines.append("[INFO] No files deleted.")
        return lines


def remove_artifact(config: ProjectConfig, path: Path, root: Path) -> list[str]:
    """Delete one generated file, then prune empty folders below *root*.

    Raises:
        FileOperationError: If the file exists but cannot be deleted.
            Folder cleanup failures are swallowed.
    """
    if not path.exists():
        return []
    delete_file(path)
    lines = [f"[DELETED] {config.display(path)}"]
    lines.extend(
        f"[CLEANUP] Removed empty directory: {config.display(d)}"
        for d in delete_empty_parents(path, root)
    )
    return lines
