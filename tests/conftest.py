"""Shared fixtures for the cleandeploy test suite."""

import subprocess

import pytest

from cleandeploy.ui.console import Console, set_console


@pytest.fixture(autouse=True)
def fresh_console():
    """Every test starts with a quiet, non-debug console."""
    console = Console()
    set_console(console)
    yield console
    set_console(Console())


class FakeRun:
    """
    Stand-in for subprocess.run that records each invocation.

    `codes` maps a tool invocation (the joined argv) to its return code;
    anything unlisted exits 0. A code that is an exception instance is raised.
    """

    def __init__(self, codes=None):
        self.codes = dict(codes or {})
        self.calls = []

    def __call__(self, argv, **kwargs):
        self.calls.append(list(argv))
        outcome = self.codes.get(" ".join(argv), 0)
        if isinstance(outcome, BaseException):
            raise outcome
        return subprocess.CompletedProcess(argv, outcome)

    @property
    def commands(self):
        return [" ".join(c) for c in self.calls]


@pytest.fixture
def fake_run(monkeypatch):
    """Patch the runner's subprocess.run; returns a factory taking return codes."""

    def install(codes=None):
        fake = FakeRun(codes)
        monkeypatch.setattr("cleandeploy.runner.subprocess.run", fake)
        return fake

    return install
