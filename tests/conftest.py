import io
import json
import sys

import pytest
from loguru import logger

from launcher_plugins.errors import MediaError
from launcher_plugins.protocol import Responder


class Output(io.StringIO):
    """Captures what a plugin writes to the launcher."""

    def responses(self):
        return [json.loads(line) for line in self.getvalue().splitlines()]

    def appended(self):
        return [r["Append"] for r in self.responses() if isinstance(r, dict) and "Append" in r]

    def names(self):
        return [result["name"] for result in self.appended()]

    def reset(self):
        self.seek(0)
        self.truncate()


class RecordingSpawner:
    def __init__(self, succeed=True):
        self.calls = []
        self.succeed = succeed

    def spawn(self, argv):
        self.calls.append(list(argv))
        return self.succeed

    def xdg_open(self, target):
        return self.spawn(["xdg-open", str(target)])


class FakePlayer:
    def __init__(self, identity, volume=0.5, fail=False):
        self.identity = identity
        self.volume = volume
        self.fail = fail
        self.commands = []

    def _check(self, command):
        self.commands.append(command)
        if self.fail:
            raise MediaError(f"{self.identity} refused {command}")

    def get_volume(self):
        self._check("get_volume")
        return self.volume

    def set_volume(self, volume):
        self._check("set_volume")
        self.volume = volume

    def play(self):
        self._check("play")

    def pause(self):
        self._check("pause")

    def __repr__(self):
        return f"FakePlayer({self.identity!r})"


class FakeRegistry:
    def __init__(self, players=(), fail=False):
        self.players = list(players)
        self.fail = fail
        self.calls = 0

    def find_all(self):
        self.calls += 1
        if self.fail:
            raise MediaError("no session bus")
        return list(self.players)


@pytest.fixture
def output():
    return Output()


@pytest.fixture
def responder(output):
    return Responder(output)


@pytest.fixture
def spawner():
    return RecordingSpawner()


@pytest.fixture
def failing_spawner():
    return RecordingSpawner(succeed=False)


@pytest.fixture
def make_player():
    return FakePlayer


@pytest.fixture
def make_registry():
    return FakeRegistry


@pytest.fixture
def config_dirs(tmp_path, monkeypatch):
    """Point XDG config lookups at a temporary user dir and system dir."""
    home = tmp_path / "home-config"
    system = tmp_path / "system-config"
    home.mkdir()
    system.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(system))
    return home, system


@pytest.fixture(autouse=True)
def reset_logging():
    """Entry points replace the loguru sinks; put a plain stderr sink back."""
    yield
    logger.remove()
    logger.configure(extra={})
    logger.add(lambda message: sys.stderr.write(message))
