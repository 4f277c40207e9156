"""Poyo exception hierarchy.

Shared across the registry, scaffolder, reconciler, and CLI so every
module raises and catches the same types.  The CLI turns any
:class:`PoyoError` into ``Error: <message>`` on stderr and exit code 1.
"""


class PoyoError(Exception):
    """Base for all poyo-specific errors."""


class ConfigurationError(PoyoError):
    """Raised when the project layout cannot be resolved.

    Typically raised by ``ProjectConfig.discover()`` when no directory
    above the working directory holds a ``routes.json``.
    """


class ValidationError(PoyoError):
    """Raised for malformed input.

    Covers bad route paths, duplicate routes, and a controller given
    without an action (or the reverse).
    """


class NotFoundError(PoyoError):
    """Raised when a route lookup by path finds nothing."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"route not found: {path}")


class PersistenceError(PoyoError):
    """Raised when the registry file cannot be read or parsed."""


class FileOperationError(PoyoError):
    """Raised when creating, writing, or deleting a project file fails.

    Wraps the underlying ``OSError`` as ``__cause__``.
    """


class IdempotentConflict(PoyoError):  # noqa: N818
    """The requested change is already present on disk.

    Never fatal: every caller catches it and reports it as information.
    """


class ActionExistsError(IdempotentConflict):
    """A controller already declares the action being injected."""

    def __init__(self, controller: str, action: str) -> None:
        self.controller = controller
        self.action = action
        super().__init__(f"action '{action}' already exists in {controller}.cs")
