"""``poyo route add`` — register a route and scaffold its files."""

import argparse

from poyo.config import ProjectConfig
from poyo.errors import ActionExistsError, ValidationError
from poyo.routes import Route, RouteRegistry, default_seo, normalize, resolve_paths
from poyo.scaffold import ensure_action, scaffold_route


def add_route(args: argparse.Namespace, config: ProjectConfig) -> None:
    """Add ``args.path`` to the registry.

    Order matters: the controller is resolved first so the registry
    stores the suffixed controller name, then the registry is written,
    then the page and view are scaffolded.

    Raises:
        ValidationError: Bad path, duplicate route, or a controller
            without an action (or the reverse).
    """
    if bool(args.controller) != bool(args.action):
        msg = "if --controller is specified, --action must also be specified"
        raise ValidationError(msg)

    path, name = normalize(args.path)

    registry = RouteRegistry.load(config.registry_path)
    if registry.find(path) is not None:
        msg = f"route already exists: {path}"
        raise ValidationError(msg)

    files = resolve_paths(name, args.flat, config.conventions)

    controller: str | None = None
    if args.controller:
        try:
            change = ensure_action(
                config.controllers_dir,
                args.controller,
                args.action,
                files.view,
                config.conventions,
            )
        except ActionExistsError as exc:
            controller = exc.controller
            print(f"[INFO] Action '{args.action}' already exists in {exc.controller}.cs")
        else:
            controller = change.controller
            print(change.line())

    route = Route(
        path=path,
        name=name,
        files=files,
        is_public=args.public,
        is_guest_only=args.guest,
        controller=controller,
        action=args.action if controller else None,
        seo=default_seo(name),
    )
    registry.add(route)
    registry.save()
    print(f"[SUCCESS] Updated {config.registry_name} with {len(registry)} routes.")

    report = scaffold_route(config, name, files, no_view=args.no_view)
    for line in report.lines():
        print(line)

    print(f"[SUCCESS] Added route {path}")
