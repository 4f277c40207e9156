"""Controller action injection.

Adds an action method to a shared controller file, creating the file if
needed.  This is a textual merge, not a C# parse: the new method goes
right before the last ``}`` in the file, which is assumed to close the
controller class.  A file with content after that brace, or with more
than one top-level declaration, gets the method in the wrong scope.
"""

import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from poyo._internal.fs import atomic_write, create_exclusive
from poyo.config import DEFAULT_CONVENTIONS, Conventions
from poyo.errors import ActionExistsError, FileOperationError
from poyo.scaffold._templates import render_action, render_controller

logger = logging.getLogger("poyo.scaffold")


class ControllerOutcome(StrEnum):
    CREATED = "created"
    INJECTED = "injected"


@dataclass(frozen=True, slots=True)
class ControllerChange:
    """A controller file that was created or extended."""

    controller: str
    action: str
    path: Path
    outcome: ControllerOutcome

    def line(self) -> str:
        if self.outcome is ControllerOutcome.CREATED:
            return f"[CREATED] Controller: {self.path.name}"
        return f"[UPDATED] Controller: {self.path.name} (Injected action '{self.action}')"


def canonical_controller(name: str, conventions: Conventions = DEFAULT_CONVENTIONS) -> str:
    """``"Blog"`` -> ``"BlogController"``; already-suffixed names pass through."""
    suffix = conventions.controller_suffix
    return name if name.endswith(suffix) else name + suffix


def controller_file(
    controllers_dir: Path,
    controller: str,
    conventions: Conventions = DEFAULT_CONVENTIONS,
) -> Path:
    return controllers_dir / f"{controller}{conventions.controller_ext}"


def _action_pattern(action: str) -> re.Pattern[str]:
    return re.compile(
        rf"IActionResult>?\s+{re.escape(action)}\s*\(",
        re.IGNORECASE,
    )


def has_action(content: str, action: str) -> bool:
    """True if *content* declares an ``IActionResult`` method named *action*.

    Case-insensitive.  Access modifiers are not checked, so ``private``,
    ``virtual`` and ``override`` declarations count, as does
    ``Task<IActionResult>``.
    """
    return _action_pattern(action).search(content) is not None


def inject_action(content: str, action: str, view_path: str) -> str:
    """Insert an action snippet before the last ``}`` of *content*.

    Raises:
        FileOperationError: If *content* has no closing brace at all.
    """
    brace = content.rfind("}")
    if brace == -1:
        msg = "could not locate class body (no closing brace)"
        raise FileOperationError(msg)
    return content[:brace] + render_action(action, view_path) + content[brace:]


def ensure_action(
    controllers_dir: Path,
    controller: str,
    action: str,
    view_path: str,
    conventions: Conventions = DEFAULT_CONVENTIONS,
) -> ControllerChange:
    """Make sure *controller* has an action *action* returning *view_path*.

    Args:
        controllers_dir: Directory holding the ``*.cs`` controller files.
        controller: Controller class name, with or without the
            ``Controller`` suffix.
        action: Action method name.
        view_path: Server-relative view the action renders
            (``Views/Blog/Posts/Index.cshtml``).

    Returns:
        The change made; ``change.controller`` is the suffixed name.

    Raises:
        ActionExistsError: If the action is already declared.  Carries
            the resolved controller name; callers treat it as a no-op.
        FileOperationError: If the file cannot be read, written, or has
            no closing brace.
    """
    resolved = canonical_controller(controller, conventions)
    path = controller_file(controllers_dir, resolved, conventions)

    if create_exclusive(path, render_controller(resolved, action, view_path)):
        logger.debug("created controller %s", path)
        return ControllerChange(resolved, action, path, ControllerOutcome.CREATED)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"could not read {path}: {exc}"
        raise FileOperationError(msg) from exc

    if has_action(content, action):
        raise ActionExistsError(resolved, action)

    try:
        updated = inject_action(content, action, view_path)
    except FileOperationError as exc:
        msg = f"{path.name}: {exc}"
        raise FileOperationError(msg) from exc

    atomic_write(path, updated)
    logger.debug("injected %s into %s", action, path)
    return ControllerChange(resolved, action, path, ControllerOutcome.INJECTED)
