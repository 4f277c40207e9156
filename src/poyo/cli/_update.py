"""``poyo route update`` — change a route's access flags."""

import argparse

from poyo.config import ProjectConfig
from poyo.errors import ValidationError
from poyo.routes import RouteRegistry


def parse_flag(value: str, option: str) -> bool:
    """Parse ``true``/``false`` (any case) for *option*."""
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    msg = f"{option} expects true or false, got {value!r}"
    raise ValidationError(msg)


def update_route(args: argparse.Namespace, config: ProjectConfig) -> None:
    """Apply ``--public`` / ``--guest`` to an existing route.

    Writes the registry only if a flag actually changed.

    Raises:
        NotFoundError: If no route matches ``args.path``.
        ValidationError: If a flag value is not true/false.
    """
    public = parse_flag(args.public, "--public") if args.public is not None else None
    guest = parse_flag(args.guest, "--guest") if args.guest is not None else None

    registry = RouteRegistry.load(config.registry_path)
    route = registry.get(args.path)

    updated = route.with_flags(is_public=public, is_guest_only=guest)
    if updated == route:
        print("[INFO] No changes made.")
        return

    if updated.is_public != route.is_public:
        print(f"[UPDATE] Set isPublic to {str(updated.is_public).lower()}")
    if updated.is_guest_only != route.is_guest_only:
        print(f"[UPDATE] Set isGuestOnly to {str(updated.is_guest_only).lower()}")

    registry.replace(updated)
    registry.save()
