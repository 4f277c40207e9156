"""Scaffolding — idempotent page/view generation and controller injection."""

from poyo.scaffold.controllers import (
    ControllerChange,
    ControllerOutcome,
    canonical_controller,
    controller_file,
    ensure_action,
)
from poyo.scaffold.engine import (
    ArtifactKind,
    ArtifactResult,
    ArtifactStatus,
    ScaffoldReport,
    scaffold_route,
    scaffold_view,
)

__all__ = [
    "ArtifactKind",
    "ArtifactResult",
    "ArtifactStatus",
    "ControllerChange",
    "ControllerOutcome",
    "ScaffoldReport",
    "canonical_controller",
    "controller_file",
    "ensure_action",
    "scaffold_route",
    "scaffold_view",
]
