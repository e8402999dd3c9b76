import subprocess
from pathlib import Path

import pytest

from launcher_plugins.errors import SetupError
from launcher_plugins.plugins.kicad import KicadPlugin, get_search_path
from launcher_plugins.services import projects
from launcher_plugins.services.projects import KicadProject, get_projects, parse_projects


@pytest.fixture
def kicad_projects():
    return parse_projects(
        "/home/user/pcb/keyboard/keyboard.kicad_pro\n"
        "/home/user/pcb/amp/amplifier.kicad_pro\n"
    )


@pytest.fixture
def plugin(kicad_projects, spawner, responder):
    return KicadPlugin(kicad_projects, spawner=spawner, responder=responder)


def test_parse_projects():
    assert parse_projects("/a/b/board.kicad_pro\n\n/c/d.kicad_pro\n") == [
        KicadProject(Path("/a/b/board.kicad_pro"), "board"),
        KicadProject(Path("/c/d.kicad_pro"), "d"),
    ]


def test_unclaimed_query_is_an_empty_pass(plugin, output):
    plugin.search("keyboard")

    assert output.responses() == ["Clear", "Finished"]


def test_search_matches_project_names(plugin, output):
    plugin.search("kicad amp")

    assert output.appended() == [
        {
            "id": 0,
            "name": "amplifier",
            "description": "/home/user/pcb/amp",
            "keywords": None,
            "icon": {"Name": "kicad"},
            "exec": None,
            "window": None,
        }
    ]


def test_activate_opens_project_and_closes(plugin, spawner, output):
    plugin.search("kicad key")
    output.reset()

    plugin.activate(0)

    assert spawner.calls == [["kicad", "/home/user/pcb/keyboard/keyboard.kicad_pro"]]
    assert output.responses() == ["Close"]


def test_activate_closes_when_kicad_cannot_start(kicad_projects, failing_spawner, responder, output):
    plugin = KicadPlugin(kicad_projects, spawner=failing_spawner, responder=responder)
    plugin.search("kicad key")
    output.reset()

    plugin.activate(0)

    assert output.responses() == ["Close"]


def test_stale_id_is_ignored(plugin, spawner, output):
    plugin.search("kicad key")
    output.reset()

    plugin.activate(4)

    assert spawner.calls == []
    assert output.responses() == []


def test_search_path_from_config(tmp_path):
    assert get_search_path({"path": str(tmp_path)}, home_dir=None) == str(tmp_path)


def test_search_path_falls_back_to_home(tmp_path):
    missing = tmp_path / "missing"

    assert get_search_path({"path": str(missing)}, home_dir=str(tmp_path)) == str(tmp_path)
    assert get_search_path({}, home_dir=str(tmp_path)) == str(tmp_path)


def test_search_path_without_home_is_a_setup_error(tmp_path):
    with pytest.raises(SetupError):
        get_search_path({"path": str(tmp_path / "missing")}, home_dir=None)


def test_get_projects_runs_fd(monkeypatch):
    calls = []

    def fake_run(argv, **kwargs):
        calls.append(argv)
        return subprocess.CompletedProcess(argv, 0, stdout="/pcb/board.kicad_pro\n", stderr="")

    monkeypatch.setattr(projects.subprocess, "run", fake_run)

    assert get_projects("/pcb") == [KicadProject(Path("/pcb/board.kicad_pro"), "board")]
    assert calls == [["fd", "kicad_pro", "/pcb"]]


def test_get_projects_without_fd(monkeypatch):
    def fake_run(argv, **kwargs):
        raise FileNotFoundError("fd")

    monkeypatch.setattr(projects.subprocess, "run", fake_run)

    assert get_projects("/pcb") == []
