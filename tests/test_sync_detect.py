"""Tests for poyo.sync.detect — forward and reverse drift passes."""

import json
from pathlib import Path

from helpers import make_route, register, write
from poyo.config import ProjectConfig
from poyo.routes import RouteRegistry
from poyo.scaffold import ArtifactKind
from poyo.sync import detect_drift
from poyo.sync.detect import scan_pages, scan_views


class TestForwardPass:
    def test_healthy_project(self, config: ProjectConfig) -> None:
        registry = register(config, make_route("/home"), make_route("/blog/posts"))
        report = detect_drift(config, registry)

        assert report.healthy
        assert report.route_count == 2
        assert report.summary_lines() == [
            "[OK] All 2 routes indicate valid files, and no untracked files found."
        ]

    def test_empty_registry_is_healthy(self, config: ProjectConfig) -> None:
        report = detect_drift(config, RouteRegistry.load(config.registry_path))
        assert report.healthy

    def test_deleted_page_only_affects_its_route(self, config: ProjectConfig) -> None:
        home, posts = make_route("/home"), make_route("/blog/posts")
        registry = register(config, home, posts)
        config.page_file(posts.files.page).unlink()

        report = detect_drift(config, registry)

        assert [m.route.path for m in report.missing] == ["/Blog/Posts"]
        assert report.missing[0].missing == {ArtifactKind.PAGE}
        assert report.untracked_pages == ()
        assert report.untracked_views == ()

    def test_both_missing(self, config: ProjectConfig) -> None:
        registry = register(config, make_route("/home"), scaffold=False)
        report = detect_drift(config, registry)

        assert report.missing[0].missing == {ArtifactKind.PAGE, ArtifactKind.VIEW}
        assert report.missing[0].labels() == ["page", "view"]

    def test_summary_lists_missing_routes(self, config: ProjectConfig) -> None:
        registry = register(config, make_route("/home"), scaffold=False)
        lines = detect_drift(config, registry).summary_lines()

        assert lines[0] == "[WARN] Discrepancies found:"
        assert "  - 1 routes have missing files." in lines
        assert "      /Home: missing page, view" in lines


class TestReversePass:
    def test_untracked_page_and_view(self, config: ProjectConfig) -> None:
        registry = register(config, make_route("/home"))
        write(config.page_root / "About" / "index.page.tsx")
        write(config.view_root / "About" / "Index.cshtml")

        report = detect_drift(config, registry)

        assert report.untracked_pages == ("src/pages/About/index.page.tsx",)
        assert report.untracked_views == ("Views/About/Index.cshtml",)
        assert report.missing == ()
        assert not report.healthy

    def test_only_generated_names_count(self, config: ProjectConfig) -> None:
        write(config.page_root / "components" / "Button.tsx")
        write(config.page_root / "About" / "index.page.tsx")
        write(config.view_root / "About" / "notes.txt")

        assert scan_pages(config) == ["src/pages/About/index.page.tsx"]
        assert scan_views(config) == []

    def test_shared_and_partial_views_excluded(self, config: ProjectConfig) -> None:
        write(config.view_root / "Shared" / "Layout.cshtml")
        write(config.view_root / "_ViewStart.cshtml")
        write(config.view_root / "_ViewImports.cshtml")
        write(config.view_root / "Admin" / "_Partial.cshtml")
        write(config.view_root / "Admin" / "Index.cshtml")

        assert scan_views(config) == ["Views/Admin/Index.cshtml"]

    def test_missing_roots_scan_empty(self, tmp_path: Path) -> None:
        config = ProjectConfig(root=tmp_path)
        assert scan_pages(config) == []
        assert scan_views(config) == []

    def test_flat_tracked_files_not_untracked(self, config: ProjectConfig) -> None:
        registry = register(config, make_route("/admin/users", flat=True))
        report = detect_drift(config, registry)
        assert report.healthy


class TestRegistryFormat:
    def test_client_relative_page_paths_resolve(self, config: ProjectConfig) -> None:
        config.registry_path.write_text(
            json.dumps(
                [
                    {
                        "path": "/Home",
                        "name": "Home",
                        "files": {
                            "react": "src/pages/Home/index.page.tsx",
                            "view": "Views/Home/Index.cshtml",
                        },
                    }
                ]
            )
        )
        write(config.client_dir / "src" / "pages" / "Home" / "index.page.tsx")
        write(config.server_dir / "Views" / "Home" / "Index.cshtml")

        report = detect_drift(config, RouteRegistry.load(config.registry_path))

        assert report.healthy
        assert not (config.client_dir / "src" / "src").exists()

    def test_renamed_project(self, renamed_project: Path) -> None:
        config = ProjectConfig.for_root(renamed_project)
        registry = register(config, make_route("/home"))

        assert (renamed_project / "myapp.client" / "src" / "pages" / "Home").is_dir()
        assert (renamed_project / "MyApp.Server" / "Views" / "Home").is_dir()
        assert detect_drift(config, registry).healthy
        assert not (renamed_project / "poyo.client").exists()
