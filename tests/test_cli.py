"""Tests for waypoint.cli — CLI entrypoint, ``routes`` and ``discover``."""

import json
import sys
import types
from pathlib import Path

import pytest

from waypoint.cli import main
from waypoint.router import Router
from waypoint.routing.route import Route


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_discover_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["discover", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_router(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_discover_missing_dir(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["discover"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "waypoint" in capsys.readouterr().out


class TestRoutesCommand:
    @pytest.fixture
    def _fake_router_module(self, monkeypatch: pytest.MonkeyPatch) -> None:
        mod = types.ModuleType("_fake_waypoint_routes")
        mod.router = Router([  # type: ignore[attr-defined]
            Route("/", "pages/index", name="Home"),
            Route("/admin", "pages/admin", children=[Route("users", "pages/admin/users", name="AdminUsers")]),
        ])
        mod.empty = Router()  # type: ignore[attr-defined]
        monkeypatch.setitem(sys.modules, "_fake_waypoint_routes", mod)

    @pytest.mark.usefixtures("_fake_router_module")
    def test_prints_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_waypoint_routes:router"])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["PATH", "NAME", "COMPONENT"]
        assert "Home" in out
        assert any(line.startswith("  /admin/users") for line in lines)
        assert not any(line.startswith("users") for line in lines)
        assert "-  " in out  # unnamed /admin

    @pytest.mark.usefixtures("_fake_router_module")
    def test_empty_router(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_waypoint_routes:empty"])
        assert "No routes registered." in capsys.readouterr().out

    def test_unresolvable(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "nonexistent_module_xyz:router"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestDiscoverCommand:
    def _pages(self, root: Path) -> Path:
        (root / "blog").mkdir()
        (root / "index.html").write_text("")
        (root / "blog" / "index.html").write_text("")
        (root / "blog" / "[slug].html").write_text("")
        return root

    def test_table(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["discover", str(self._pages(tmp_path))])
        out = capsys.readouterr().out
        assert "/blog/:slug" in out
        assert "BlogSlug" in out

    def test_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["discover", str(self._pages(tmp_path)), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data[0] == {"path": "/", "component": "index.html", "name": None}
        assert data[1]["children"][0]["path"] == "/blog/:slug"

    def test_custom_suffix(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "index.page").write_text("")
        main(["discover", str(tmp_path), "--suffix", ".page", "--json"])
        assert json.loads(capsys.readouterr().out)[0]["component"] == "index.page"

    def test_no_pages(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["discover", str(tmp_path)])
        assert "No pages found." in capsys.readouterr().out

    def test_missing_dir(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["discover", str(tmp_path / "missing")])
        assert exc_info.value.code == 1
        assert "Pages directory not found" in capsys.readouterr().err

    def test_invalid_discovered_pattern(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "[id]").mkdir()
        (tmp_path / "[id]" / "index.html").write_text("")
        (tmp_path / "[id]" / "[id].html").write_text("")
        with pytest.raises(SystemExit) as exc_info:
            main(["discover", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
