"""Pytest fixtures for git-signing-key tests."""

from collections import deque

import pytest

from git_signing_key.types import KeyEvent, KeyRecord


class FakeTerminal:
    """TerminalSurface that replays scripted key events and records calls.

    Scripted items may be key strings, KeyEvents, or exceptions to raise
    from ``read_event``.
    """

    def __init__(self, events=(), fail_enter=None, fail_render=None):
        self.events = deque(events)
        self.fail_enter = fail_enter
        self.fail_render = fail_render
        self.calls = []
        self.renders = []
        self.visible = False

    def enter(self):
        self.calls.append("enter")
        if self.fail_enter is not None:
            raise self.fail_enter

    def leave(self):
        self.calls.append("leave")

    def render(self, renderable):
        self.calls.append("render")
        if self.fail_render is not None:
            raise self.fail_render
        self.renders.append(renderable)
        self.visible = True

    def read_event(self):
        self.calls.append("read")
        if not self.events:
            raise AssertionError("picker read past the end of the scripted input")
        event = self.events.popleft()
        if isinstance(event, BaseException):
            raise event
        if isinstance(event, str):
            return KeyEvent(event)
        return event

    def clear(self):
        self.calls.append("clear")
        self.visible = False

    @property
    def last_lines(self):
        return self.renders[-1].plain.splitlines()


class FakeStore:
    """In-memory ConfigStore."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.writes = []

    def get(self, name):
        return self.values.get(name)

    def set(self, name, value):
        self.writes.append((name, value))
        self.values[name] = value


class FakeProvider:
    def __init__(self, keys):
        self.keys = list(keys)

    def list_keys(self):
        return list(self.keys)


@pytest.fixture
def sample_keys():
    """The three-key list used throughout the picker tests."""
    return [
        KeyRecord("AAAA", "Alice"),
        KeyRecord("BBBB", "Bob"),
        KeyRecord("CCCC", "Carol"),
    ]


@pytest.fixture
def fake_terminal():
    """Factory for scripted terminals."""

    def _create(*events, **kwargs):
        return FakeTerminal(events, **kwargs)

    return _create


@pytest.fixture
def fake_store():
    return FakeStore


@pytest.fixture
def fake_provider():
    return FakeProvider


@pytest.fixture
def temp_config_home(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temp dir and clear env overrides."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("GIT_SIGNING_KEY_GPG", raising=False)
    monkeypatch.delenv("GIT_SIGNING_KEY_DEBUG", raising=False)
    config_dir = tmp_path / "git-signing-key"
    config_dir.mkdir()
    return config_dir
