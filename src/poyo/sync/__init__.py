"""Reconciliation — drift detection and remediation between registry and disk."""

from poyo.sync.detect import DriftReport, MissingRoute, detect_drift
from poyo.sync.remedy import (
    AdoptionCandidate,
    Reconciler,
    Remedy,
    SyncOutcome,
    adoption_candidates,
    available_remedies,
    pair_view,
    remove_artifact,
)

__all__ = [
    "AdoptionCandidate",
    "DriftReport",
    "MissingRoute",
    "Reconciler",
    "Remedy",
    "SyncOutcome",
    "adoption_candidates",
    "available_remedies",
    "detect_drift",
    "pair_view",
    "remove_artifact",
]
