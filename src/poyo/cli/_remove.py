"""``poyo route remove`` — unregister a route, optionally deleting its files."""

import argparse

from poyo._internal.fs import delete_file
from poyo.config import ProjectConfig
from poyo.prompts import Prompter
from poyo.routes import RouteRegistry
from poyo.scaffold import controller_file
from poyo.sync import remove_artifact


def remove_route(args: argparse.Namespace, config: ProjectConfig, prompter: Prompter) -> None:
    """Remove ``args.path`` from the registry.

    Asks (1) whether to delete the route's controller file, when it has
    one on disk, and (2) whether to delete the page and view files.
    Declined files are listed as orphans.

    Raises:
        NotFoundError: If no route matches ``args.path``.
    """
    registry = RouteRegistry.load(config.registry_path)
    route = registry.get(args.path)

    delete_controller = False
    controller_path = None
    if route.controller:
        controller_path = controller_file(
            config.controllers_dir, route.controller, config.conventions
        )
        if controller_path.is_file():
            sharing = [
                r.path for r in registry if r.controller == route.controller and r.key != route.key
            ]
            question = (
                f"Route uses custom controller '{route.controller}'. "
                "Delete this controller file?"
            )
            if sharing:
                question += f" (also used by {', '.join(sharing)})"
            delete_controller = prompter.confirm(question)

    delete_files = prompter.confirm(
        "Do you want to DELETE the physical files and folders related to this route?"
    )

    if delete_controller and controller_path is not None:
        delete_file(controller_path)
        print(f"[DELETED] Controller: {controller_path.name}")

    if delete_files:
        for line in remove_artifact(config, config.page_file(route.files.page), config.page_root):
            print(line)
        for line in remove_artifact(config, config.view_file(route.files.view), config.view_root):
            print(line)

    registry.remove(route)
    registry.save()
    print(f"[REMOVED] Route '{route.path}' removed from {config.registry_name}")

    if not delete_files:
        print("[INFO] Orphaned files (not deleted):")
        print(f"  - {config.display(config.page_file(route.files.page))}")
        print(f"  - {config.display(config.view_file(route.files.view))}")
