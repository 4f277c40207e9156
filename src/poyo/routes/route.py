"""Route and RouteFiles frozen dataclasses."""

from dataclasses import dataclass, field, replace

from poyo.errors import ValidationError


@dataclass(frozen=True, slots=True)
class RouteFiles:
    """Relative locations of the two generated artifacts.

    ``page`` is relative to the client app directory
    (``src/pages/Admin/Users/index.page.tsx``), ``view`` to the server
    directory (``Views/Admin/Users/Index.cshtml``).
    """

    page: str
    view: str


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route.

    ``path`` and ``files`` never change after creation.  Flag updates
    go through :meth:`with_flags`, which returns a new value.
    """

    path: str
    name: str
    files: RouteFiles
    is_public: bool = False
    is_guest_only: bool = False
    controller: str | None = None
    action: str | None = None
    seo: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if bool(self.controller) != bool(self.action):
            msg = f"route {self.path}: controller and action must be set together"
            raise ValidationError(msg)

    @property
    def key(self) -> str:
        """Case-insensitive identity used for uniqueness checks."""
        return self.path.lower()

    def matches(self, raw: str) -> bool:
        """True if *raw* names this route.

        Accepts the path with or without its leading slash, in any case.
        """
        lowered = raw.lower()
        return self.key == lowered or self.key == "/" + lowered.lstrip("/")

    def with_flags(
        self,
        *,
        is_public: bool | None = None,
        is_guest_only: bool | None = None,
    ) -> "Route":
        """Return a copy with the given access flags changed."""
        changes: dict[str, bool] = {}
        if is_public is not None:
            changes["is_public"] = is_public
        if is_guest_only is not None:
            changes["is_guest_only"] = is_guest_only
        return replace(self, **changes)


def default_seo(name: str) -> dict[str, str]:
    """SEO metadata given to routes created by ``add`` or adoption."""
    return {"title": name, "description": f"Page for {name}"}
