"""Tests for treeroute.cli — argument parsing and subcommands."""

import json
import sys
import textwrap
from pathlib import Path

import pytest

from treeroute.cli import main
from treeroute.cli._resolve import resolve_registry
from treeroute.cli._url import parse_params
from treeroute.routing.registry import RouteRegistry

APP_MODULE = "_treeroute_cli_app"

APP_SOURCE = textwrap.dedent(
    """
    from treeroute import registry as new_registry, route_factory, signal

    registry = new_registry()
    route = route_factory(registry)

    route("/users", {"name": "users", "handler": signal("listUsers")}, [
        route("/:id?tab=:tab", {"name": "user", "handler": signal("showUser", {"full": True})}),
    ])

    empty = new_registry()

    def make_registry():
        return registry

    def broken_factory():
        raise RuntimeError("boom")

    not_a_registry = 42
    """
)


@pytest.fixture
def app_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    (tmp_path / f"{APP_MODULE}.py").write_text(APP_SOURCE)
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, APP_MODULE, raising=False)
    return APP_MODULE


class TestCLIHelp:
    @pytest.mark.parametrize("command", [[], ["routes"], ["match"], ["url"]])
    def test_help_exits_zero(self, command: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([*command, "--help"])
        assert exc_info.value.code == 0

    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "treeroute" in capsys.readouterr().out


class TestCLIMissingArgs:
    @pytest.mark.parametrize(
        "argv",
        [["routes"], ["match"], ["match", "app"], ["url"], ["url", "app"]],
    )
    def test_missing_args_exit_two(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2


class TestResolveRegistry:
    def test_default_attribute(self, app_module: str) -> None:
        assert isinstance(resolve_registry(app_module), RouteRegistry)

    def test_factory_called(self, app_module: str) -> None:
        registry = resolve_registry(f"{app_module}:make_registry")
        assert registry.by_name("user") is not None

    def test_failing_factory(self, app_module: str) -> None:
        with pytest.raises(TypeError, match="boom"):
            resolve_registry(f"{app_module}:broken_factory")

    def test_wrong_type(self, app_module: str) -> None:
        with pytest.raises(TypeError, match="not a RouteRegistry"):
            resolve_registry(f"{app_module}:not_a_registry")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_registry("_treeroute_no_such_module")


class TestRoutesCommand:
    def test_lists_routes(self, app_module: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", app_module])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["NAME", "PATH", "SIGNAL"]
        assert lines[2].split() == ["user", "/users/:id?tab=:tab", "showUser"]
        assert lines[3].split() == ["users", "/users", "listUsers"]

    def test_empty_registry(self, app_module: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", f"{app_module}:empty"])
        assert "No routes registered." in capsys.readouterr().out

    def test_bad_import_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_treeroute_no_such_module"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestMatchCommand:
    def test_prints_resolved_match(
        self, app_module: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["match", app_module, "http://host/users/42?tab=posts"])
        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "signal": "showUser",
            "args": {"routeName": "user", "id": "42", "tab": "posts", "full": True},
        }

    def test_no_match_exits_one(self, app_module: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", app_module, "/orders"])
        assert exc_info.value.code == 1
        assert "No route matches" in capsys.readouterr().err


class TestUrlCommand:
    def test_named(self, app_module: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["url", app_module, "user", "id=42", "tab=posts"])
        assert capsys.readouterr().out.strip() == "/users/42?tab=posts"

    def test_parent(self, app_module: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["url", app_module, "user", "id=42", "--parent"])
        assert capsys.readouterr().out.strip() == "/users"

    def test_strict(self, app_module: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["url", app_module, "user", "id=:tab", "tab=x", "--strict"])
        assert capsys.readouterr().out.strip() == "/users/:tab?tab=x"

    def test_unknown_name_exits_one(
        self, app_module: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["url", app_module, "missing"])
        assert exc_info.value.code == 1
        assert "No route named 'missing'" in capsys.readouterr().err

    def test_no_parent_exits_one(self, app_module: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["url", app_module, "users", "--parent"])
        assert exc_info.value.code == 1
        assert "No parent of route named 'users'" in capsys.readouterr().err


class TestParseParams:
    def test_pairs(self) -> None:
        assert parse_params(["id=42", "q=a=b"]) == {"id": "42", "q": "a=b"}

    def test_invalid_pair_exits_two(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_params(["oops"])
        assert exc_info.value.code == 2
