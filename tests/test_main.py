"""
Tests for the stimulus-viz command-line interface.

Commands are driven through Typer's CliRunner against throwaway projects on
disk. Rich wraps long lines, so output assertions stick to short fragments.
"""

import json

import pytest
from typer.testing import CliRunner

from main import app

runner = CliRunner()


@pytest.fixture
def cache_file(presence_project, tmp_path):
    cache = tmp_path / "cache.json"
    result = runner.invoke(app, ["scan", "--root", str(presence_project), "--out", str(cache)])
    assert result.exit_code == 0, result.output
    return cache


@pytest.fixture
def broken_cache(rails_project, tmp_path):
    root = rails_project(
        views={"a.html.erb": '<div data-controller="ghost" data-action="oops">'}
    )
    cache = tmp_path / "broken.json"
    result = runner.invoke(app, ["scan", "--root", str(root), "--out", str(cache)])
    assert result.exit_code == 0, result.output
    return cache


# ============================================================================
# scan
# ============================================================================


@pytest.mark.unit
def test_scan_writes_cache(cache_file):
    data = json.loads(cache_file.read_text(encoding="utf-8"))

    assert [c["name"] for c in data["controllers"]] == ["presence"]
    assert [b["id"] for b in data["bindings"]] == ["el_0001", "el_0002"]
    assert data["lint"] == []


@pytest.mark.unit
def test_scan_prints_summary(presence_project, tmp_path):
    result = runner.invoke(
        app, ["scan", "--root", str(presence_project), "--out", str(tmp_path / "c.json")]
    )

    assert result.exit_code == 0
    assert "Scan completed" in result.output
    assert "1 controllers" in result.output


@pytest.mark.unit
def test_scan_custom_directories(rails_project, tmp_path):
    root = rails_project()
    (root / "js").mkdir()
    (root / "js" / "menu_controller.js").write_text("", encoding="utf-8")
    (root / "tpl").mkdir()
    (root / "tpl" / "a.html.erb").write_text(
        '<div data-controller="menu" data-menu-target="x">', encoding="utf-8"
    )
    cache = tmp_path / "c.json"

    result = runner.invoke(
        app,
        [
            "scan",
            "--root", str(root),
            "--out", str(cache),
            "--controllers-dir", "js",
            "--views-dir", "tpl",
        ],
    )

    assert result.exit_code == 0, result.output
    data = json.loads(cache.read_text(encoding="utf-8"))
    assert data["controllers"][0]["elements"] == 1


@pytest.mark.unit
def test_scan_verbose(presence_project, tmp_path):
    result = runner.invoke(
        app,
        ["scan", "--root", str(presence_project), "--out", str(tmp_path / "c.json"), "-v"],
    )

    assert result.exit_code == 0
    assert "DEBUG:" in result.output


@pytest.mark.unit
def test_scan_missing_root(tmp_path):
    result = runner.invoke(app, ["scan", "--root", str(tmp_path / "nowhere")])
    assert result.exit_code != 0


@pytest.mark.unit
def test_scan_unwritable_output(presence_project, tmp_path):
    out = tmp_path / "missing-dir" / "c.json"

    result = runner.invoke(app, ["scan", "--root", str(presence_project), "--out", str(out)])

    assert result.exit_code == 1
    assert "File I/O Error" in result.output
    assert not out.exists()


@pytest.mark.unit
def test_scan_unreadable_template_writes_nothing(rails_project, tmp_path):
    root = rails_project(views={"a.html.erb": ""})
    (root / "app" / "views" / "a.html.erb").write_bytes(b"\xff\xfe")
    cache = tmp_path / "c.json"

    result = runner.invoke(app, ["scan", "--root", str(root), "--out", str(cache)])

    assert result.exit_code == 1
    assert not cache.exists()


@pytest.mark.mock
def test_scan_unexpected_error(presence_project, tmp_path, mocker):
    mocker.patch("main.scan_project", side_effect=RuntimeError("kaboom"))

    result = runner.invoke(
        app, ["scan", "--root", str(presence_project), "--out", str(tmp_path / "c.json")]
    )

    assert result.exit_code == 1
    assert "Unexpected Error" in result.output
    assert "kaboom" in result.output


# ============================================================================
# list / bindings
# ============================================================================


@pytest.mark.unit
def test_list(cache_file):
    result = runner.invoke(app, ["list", "--cache", str(cache_file)])

    assert result.exit_code == 0
    assert "Controllers:" in result.output
    assert "presence" in result.output
    assert "Elements: 1" in result.output
    assert "Values: fadeMs" in result.output


@pytest.mark.unit
def test_bindings(cache_file):
    result = runner.invoke(app, ["bindings", "--cache", str(cache_file)])

    assert result.exit_code == 0
    assert "el_0001" in result.output
    assert "el_0002" in result.output
    assert "presence.item" in result.output


@pytest.mark.unit
def test_bindings_filtered_by_controller(cache_file):
    result = runner.invoke(
        app, ["bindings", "--cache", str(cache_file), "--controller", "presence"]
    )

    assert result.exit_code == 0
    assert "el_0001" in result.output
    assert "el_0002" not in result.output


@pytest.mark.unit
@pytest.mark.parametrize("command", ["list", "bindings", "lint"])
def test_missing_cache(tmp_path, command):
    result = runner.invoke(app, [command, "--cache", str(tmp_path / "none.json")])

    assert result.exit_code == 1
    assert "stimulus-viz scan" in result.output


@pytest.mark.unit
def test_corrupt_cache(tmp_path):
    cache = tmp_path / "c.json"
    cache.write_text("not json", encoding="utf-8")

    result = runner.invoke(app, ["list", "--cache", str(cache)])

    assert result.exit_code == 1
    assert "Re-run" in result.output


# ============================================================================
# lint
# ============================================================================


@pytest.mark.unit
def test_lint_clean(cache_file):
    result = runner.invoke(app, ["lint", "--cache", str(cache_file), "--fail-on", "info"])

    assert result.exit_code == 0
    assert "Lint Results:" in result.output


@pytest.mark.unit
def test_lint_reports_findings(broken_cache):
    result = runner.invoke(app, ["lint", "--cache", str(broken_cache)])

    assert result.exit_code == 0
    assert "Unknown controller" in result.output
    assert "Suspicious action format" in result.output


@pytest.mark.unit
@pytest.mark.parametrize(
    "fail_on,expected",
    [("none", 0), ("info", 1), ("warn", 1), ("error", 0)],
)
def test_lint_fail_on(broken_cache, fail_on, expected):
    result = runner.invoke(
        app, ["lint", "--cache", str(broken_cache), "--fail-on", fail_on]
    )
    assert result.exit_code == expected


@pytest.mark.unit
def test_lint_rejects_unknown_level(broken_cache):
    result = runner.invoke(app, ["lint", "--cache", str(broken_cache), "--fail-on", "fatal"])
    assert result.exit_code == 2


# ============================================================================
# export
# ============================================================================


@pytest.mark.unit
def test_export_json(cache_file, tmp_path):
    out = tmp_path / "out.json"

    result = runner.invoke(
        app, ["export", "--cache", str(cache_file), "--format", "json", "--out", str(out)]
    )

    assert result.exit_code == 0
    assert "Exported to" in result.output
    assert json.loads(out.read_text(encoding="utf-8")) == json.loads(
        cache_file.read_text(encoding="utf-8")
    )


@pytest.mark.unit
def test_export_dot(cache_file, tmp_path):
    out = tmp_path / "out.dot"

    result = runner.invoke(
        app, ["export", "--cache", str(cache_file), "--format", "dot", "--out", str(out)]
    )

    assert result.exit_code == 0
    dot = out.read_text(encoding="utf-8")
    assert dot.startswith("digraph stimulus {")
    assert '"turbo:before-stream-render" -> "presence"' in dot


@pytest.mark.mock
def test_export_prompts_for_format(cache_file, tmp_path, mocker):
    prompt = mocker.patch("main.inquirer.prompt", return_value={"format": "dot"})
    out = tmp_path / "out.dot"

    result = runner.invoke(app, ["export", "--cache", str(cache_file), "--out", str(out)])

    assert result.exit_code == 0
    prompt.assert_called_once()
    assert out.read_text(encoding="utf-8").startswith("digraph")


@pytest.mark.mock
def test_export_prompt_cancelled(cache_file, tmp_path, mocker):
    mocker.patch("main.inquirer.prompt", return_value=None)
    out = tmp_path / "out.dot"

    result = runner.invoke(app, ["export", "--cache", str(cache_file), "--out", str(out)])

    assert result.exit_code == 1
    assert not out.exists()


@pytest.mark.unit
def test_export_requires_out(cache_file):
    result = runner.invoke(app, ["export", "--cache", str(cache_file), "--format", "json"])
    assert result.exit_code == 2
