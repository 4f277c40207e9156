"""Route name normalization and artifact path resolution.

Pure functions, no filesystem access::

    normalize("/admin/users")        # ("/Admin/Users", "Admin/Users")
    resolve_paths("Admin/Users")     # src/pages/Admin/Users/index.page.tsx, ...
    resolve_paths("Admin/Users", flat=True)
                                     # src/pages/Admin/users.page.tsx, ...
"""

from poyo.config import DEFAULT_CONVENTIONS, Conventions
from poyo.errors import ValidationError
from poyo.routes.route import RouteFiles


def _title(segment: str) -> str:
    return segment[:1].upper() + segment[1:].lower()


def normalize(raw: str) -> tuple[str, str]:
    """Convert a user-supplied path to its canonical ``(path, name)`` pair.

    Splits on ``/`` only.  Empty segments are dropped and every segment
    is title-cased, so ``"//admin///USERS/"`` becomes
    ``("/Admin/Users", "Admin/Users")``.

    Raises:
        ValidationError: If *raw* contains a colon, or has no segments.
    """
    if ":" in raw:
        msg = (
            f"invalid path detected '{raw}'.\n\n"
            "If you are using Git Bash, it automatically converts paths matching "
            "root directories.\nPlease use a double slash to escape it: "
            "//User/Profile\nOr use a relative path: User/Profile"
        )
        raise ValidationError(msg)

    segments = [_title(part) for part in raw.split("/") if part]
    if not segments:
        msg = f"invalid path '{raw}': at least one segment is required"
        raise ValidationError(msg)

    name = "/".join(segments)
    return "/" + name, name


def resolve_paths(
    name: str,
    flat: bool = False,
    conventions: Conventions = DEFAULT_CONVENTIONS,
) -> RouteFiles:
    """Resolve the page and view locations for a route name.

    Nested (default) puts each route in its own folder; flat names the
    files after the last segment.  Only the flat page file name is
    lowercased.
    """
    c = conventions
    if flat:
        parent, _, leaf = name.rpartition("/")
        base = f"{parent}/" if parent else ""
        return RouteFiles(
            page=f"{c.page_dir}/{base}{leaf.lower()}{c.page_suffix}",
            view=f"{c.view_dir}/{base}{leaf}{c.view_ext}",
        )
    return RouteFiles(
        page=f"{c.page_dir}/{name}/{c.page_index}{c.page_suffix}",
        view=f"{c.view_dir}/{name}/{c.view_index}{c.view_ext}",
    )


def name_from_page(page: str, conventions: Conventions = DEFAULT_CONVENTIONS) -> str:
    """Derive a route name from a page path found on disk.

    ``src/pages/About/index.page.tsx`` and ``src/pages/about.page.tsx`` both
    yield ``"About"``.  The result goes through :func:`normalize`, the
    same rule ``route add`` applies.
    """
    c = conventions
    relative = page.replace("\\", "/")
    prefix = f"{c.page_dir}/"
    if relative.startswith(prefix):
        relative = relative[len(prefix) :]

    index_suffix = f"/{c.page_index}{c.page_suffix}"
    if relative.endswith(index_suffix):
        relative = relative[: -len(index_suffix)]
    elif relative.endswith(c.page_suffix):
        relative = relative[: -len(c.page_suffix)]

    _, name = normalize(relative)
    return name


def leaf_identifier(name: str) -> str:
    """Last segment of a route name, used as the page component name."""
    return name.rpartition("/")[2]
