"""Tests for poyo.routes.registry — routes.json persistence and RouteRegistry."""

import json
from pathlib import Path

import pytest

from helpers import make_route
from poyo.errors import NotFoundError, PersistenceError, ValidationError
from poyo.routes.registry import (
    RouteRegistry,
    read_routes,
    route_from_dict,
    route_to_dict,
    serialize_routes,
    write_routes,
)
from poyo.routes.route import Route, RouteFiles


class TestReadWrite:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert read_routes(tmp_path / "routes.json") == []

    def test_round_trip(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.json"
        routes = [
            make_route("/zeta"),
            make_route("/admin/users", is_public=True),
            make_route("/blog/posts", controller="BlogController", action="List"),
            make_route("/login", flat=True, is_guest_only=True),
        ]
        write_routes(target, routes)

        loaded = read_routes(target)
        assert sorted(loaded, key=lambda r: r.path) == sorted(routes, key=lambda r: r.path)

    def test_sorted_by_path_ordinal(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.json"
        write_routes(target, [make_route("/zeta"), make_route("/Admin"), make_route("/beta")])

        paths = [entry["path"] for entry in json.loads(target.read_text())]
        assert paths == ["/Admin", "/Beta", "/Zeta"]

    def test_trailing_newline_and_indent(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.json"
        write_routes(target, [make_route("/home")])

        text = target.read_text()
        assert text.endswith("]\n")
        assert '\n  {\n    "path": "/Home",' in text

    def test_empty_registry(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.json"
        write_routes(target, [])
        assert target.read_text() == "[]\n"

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.json"
        write_routes(target, [make_route("/home")])
        write_routes(target, [make_route("/home"), make_route("/about")])
        assert [p.name for p in tmp_path.iterdir()] == ["routes.json"]

    def test_invalid_json(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.json"
        target.write_text("[{not json")
        with pytest.raises(PersistenceError, match="routes.json"):
            read_routes(target)

    def test_not_an_array(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.json"
        target.write_text('{"path": "/Home"}')
        with pytest.raises(PersistenceError):
            read_routes(target)

    def test_entry_missing_files(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.json"
        target.write_text('[{"path": "/Home", "name": "Home"}]')
        with pytest.raises(PersistenceError):
            read_routes(target)


class TestSerialization:
    def test_false_flags_and_empty_fields_omitted(self) -> None:
        data = route_to_dict(make_route("/home", seo={}))
        assert list(data) == ["path", "name", "files"]
        assert data["files"] == {
            "react": "src/pages/Home/index.page.tsx",
            "view": "Views/Home/Index.cshtml",
        }

    def test_full_field_order(self) -> None:
        route = make_route(
            "/blog/posts",
            is_public=True,
            is_guest_only=True,
            controller="BlogController",
            action="List",
        )
        assert list(route_to_dict(route)) == [
            "path",
            "name",
            "files",
            "isPublic",
            "isGuestOnly",
            "controller",
            "action",
            "seo",
        ]

    def test_explicit_false_flags_read(self) -> None:
        route = route_from_dict(
            {
                "path": "/Home",
                "name": "Home",
                "files": {"react": "src/pages/Home/index.page.tsx", "view": "Views/Home/Index.cshtml"},
                "isPublic": False,
                "controller": "",
            }
        )
        assert route.is_public is False
        assert route.controller is None

    def test_controller_without_action_is_persistence_error(self) -> None:
        with pytest.raises(PersistenceError):
            route_from_dict(
                {
                    "path": "/Home",
                    "name": "Home",
                    "files": {"react": "a", "view": "b"},
                    "controller": "HomeController",
                }
            )

    def test_serialize_is_stable(self) -> None:
        routes = [make_route("/b"), make_route("/a")]
        assert serialize_routes(routes) == serialize_routes(list(reversed(routes)))


class TestRouteRegistry:
    def test_load_missing(self, tmp_path: Path) -> None:
        registry = RouteRegistry.load(tmp_path / "routes.json")
        assert len(registry) == 0

    def test_add_and_find(self, tmp_path: Path) -> None:
        registry = RouteRegistry(tmp_path / "routes.json")
        registry.add(make_route("/admin/users"))

        assert registry.find("admin/users") is not None
        assert registry.find("/ADMIN/USERS") is not None
        assert registry.find("/admin") is None

    def test_duplicate_is_case_insensitive(self, tmp_path: Path) -> None:
        registry = RouteRegistry(tmp_path / "routes.json", [make_route("/admin/users")])
        duplicate = Route(path="/ADMIN/users", name="ADMIN/users", files=make_route("/other").files)
        with pytest.raises(ValidationError, match="already exists"):
            registry.add(duplicate)

    def test_get_missing_raises(self, tmp_path: Path) -> None:
        registry = RouteRegistry(tmp_path / "routes.json")
        with pytest.raises(NotFoundError, match="route not found: /nope"):
            registry.get("/nope")

    def test_replace(self, tmp_path: Path) -> None:
        registry = RouteRegistry(tmp_path / "routes.json", [make_route("/home")])
        registry.replace(registry.get("/home").with_flags(is_public=True))
        assert registry.get("/home").is_public is True

    def test_remove(self, tmp_path: Path) -> None:
        registry = RouteRegistry(tmp_path / "routes.json", [make_route("/a"), make_route("/b")])
        registry.remove(registry.get("/a"))
        assert [r.path for r in registry] == ["/B"]

    def test_remove_where(self, tmp_path: Path) -> None:
        registry = RouteRegistry(
            tmp_path / "routes.json", [make_route("/a"), make_route("/b"), make_route("/c")]
        )
        dropped = registry.remove_where(lambda r: r.path in ("/A", "/C"))
        assert [r.path for r in dropped] == ["/A", "/C"]
        assert [r.path for r in registry] == ["/B"]

    def test_tracked_paths_use_forward_slashes(self, tmp_path: Path) -> None:
        route = Route(
            path="/Home",
            name="Home",
            files=RouteFiles(
                page="src\\pages\\Home\\index.page.tsx", view="Views\\Home\\Index.cshtml"
            ),
        )
        registry = RouteRegistry(tmp_path / "routes.json", [route])
        assert registry.tracked_pages() == {"src/pages/Home/index.page.tsx"}
        assert registry.tracked_views() == {"Views/Home/Index.cshtml"}

    def test_duplicate_in_file_is_persistence_error(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.json"
        entry = route_to_dict(make_route("/home"))
        target.write_text(json.dumps([entry, {**entry, "path": "/HOME"}]))
        with pytest.raises(PersistenceError):
            RouteRegistry.load(target)

    def test_save(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.json"
        registry = RouteRegistry(target)
        registry.add(make_route("/home"))
        registry.save()
        assert [r.path for r in read_routes(target)] == ["/Home"]
