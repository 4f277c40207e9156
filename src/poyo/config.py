"""Project configuration.

ProjectConfig is a frozen dataclass built once at startup and passed
explicitly into every registry, scaffold, and sync call.  Nothing in
poyo looks up directories through module-level globals.

Layout of a Poyo project (the app directories are found by suffix, so a
project generated as ``MyApp`` has ``myapp.client`` and ``MyApp.Server``)::

    <root>/
        routes.json
        <name>.client/src/pages/...   page files
        <Name>.Server/Views/...        view files
        <Name>.Server/Controllers/...  controller files
"""

from dataclasses import dataclass, field
from pathlib import Path

from poyo.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Conventions:
    """Naming conventions for generated artifacts.

    Registry page paths start with ``page_dir`` and are relative to the
    client directory; view paths start with ``view_dir`` and are relative
    to the server directory.
    """

    # Client pages
    page_dir: str = "src/pages"
    page_suffix: str = ".page.tsx"
    page_index: str = "index"

    # Server views
    view_dir: str = "Views"
    view_ext: str = ".cshtml"
    view_index: str = "Index"
    shared_view_marker: str = "Shared"  # Layout/partial folder, never a route
    partial_prefix: str = "_"  # _Layout.cshtml, _ViewStart.cshtml, ...

    # Controllers
    controllers_dir: str = "Controllers"
    controller_suffix: str = "Controller"
    controller_ext: str = ".cs"


DEFAULT_CONVENTIONS = Conventions()

# Generated projects rename the template's app directories to
# <name>.client / <Name>.Server; only the suffix is stable.
CLIENT_SUFFIX = ".client"
SERVER_SUFFIX = ".Server"


def find_app_dir(root: Path, suffix: str) -> str | None:
    """Name of the first subdirectory of *root* ending in *suffix*.

    Entries are checked in name order.  Returns None if there is none or
    *root* cannot be listed.
    """
    try:
        entries = sorted(root.iterdir())
    except OSError:
        return None
    for entry in entries:
        if entry.name.endswith(suffix) and entry.is_dir():
            return entry.name
    return None


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Resolved project locations. Immutable after creation.

    Only ``root`` is required; the directory names default to the Poyo
    template's.  Use :meth:`for_root` to pick up renamed app directories::

        config = ProjectConfig.for_root(Path("/work/my-app"))
        config.registry_path  # /work/my-app/routes.json
        config.client_dir     # /work/my-app/my-app.client
    """

    root: Path
    registry_name: str = "routes.json"
    client_dir_name: str = "poyo.client"
    server_dir_name: str = "Poyo.Server"
    conventions: Conventions = field(default=DEFAULT_CONVENTIONS)

    @property
    def registry_path(self) -> Path:
        return self.root / self.registry_name

    @property
    def client_dir(self) -> Path:
        """Base directory that registry page paths are relative to."""
        return self.root / self.client_dir_name

    @property
    def server_dir(self) -> Path:
        """Base directory that registry view paths are relative to."""
        return self.root / self.server_dir_name

    @property
    def page_root(self) -> Path:
        return self.client_dir / self.conventions.page_dir

    @property
    def view_root(self) -> Path:
        return self.server_dir / self.conventions.view_dir

    @property
    def controllers_dir(self) -> Path:
        return self.server_dir / self.conventions.controllers_dir

    def page_file(self, relative: str) -> Path:
        """Absolute location of a registry page path (``src/pages/...``)."""
        return self.client_dir / relative

    def view_file(self, relative: str) -> Path:
        """Absolute location of a registry view path (``Views/...``)."""
        return self.server_dir / relative

    def display(self, path: Path) -> str:
        """Render an absolute project path relative to the root, ``/``-separated."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    @classmethod
    def for_root(cls, root: str | Path) -> "ProjectConfig":
        """Config for the project at *root*, app directories found by suffix.

        The first subdirectory ending in ``.client`` is the client app, the
        first ending in ``.Server`` the server app.  A missing one falls
        back to the template name (``poyo.client`` / ``Poyo.Server``).
        """
        root = Path(root).resolve()
        names: dict[str, str] = {}
        client = find_app_dir(root, CLIENT_SUFFIX)
        if client is not None:
            names["client_dir_name"] = client
        server = find_app_dir(root, SERVER_SUFFIX)
        if server is not None:
            names["server_dir_name"] = server
        return cls(root=root, **names)

    @classmethod
    def discover(cls, start: str | Path | None = None) -> "ProjectConfig":
        """Locate the project root by walking upward from *start*.

        The first directory holding ``routes.json`` wins.  Failing that,
        the first directory holding both a ``*.client`` and a ``*.Server``
        app directory is used (a fresh project with no routes yet).  The
        result comes from :meth:`for_root`.

        Raises:
            ConfigurationError: If neither marker is found up to the
                filesystem root.
        """
        origin = Path(start) if start is not None else Path.cwd()
        origin = origin.resolve()
        registry_name = cls(root=origin).registry_name

        candidates = [origin, *origin.parents]
        for directory in candidates:
            if (directory / registry_name).is_file():
                return cls.for_root(directory)

        for directory in candidates:
            if find_app_dir(directory, CLIENT_SUFFIX) and find_app_dir(directory, SERVER_SUFFIX):
                return cls.for_root(directory)

        msg = (
            f"Could not find {registry_name} in {origin} or any parent "
            "directory. Run poyo from inside a Poyo project or pass --root."
        )
        raise ConfigurationError(msg)
