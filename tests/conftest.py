"""
Shared fakes for the process, network, console and input ports.
"""

import io

import pytest

from toolchain_audit.console import Console
from toolchain_audit.runner import CommandError


class FakeRunner:
    """Command runner answering from a table of (program, *args) -> output.

    Missing entries behave like a missing executable (None). Values that are
    exceptions are raised.
    """

    def __init__(self, outputs=None):
        self.outputs = dict(outputs or {})
        self.calls = []

    def run(self, program, args=()):
        key = (program, *args)
        self.calls.append(key)
        value = self.outputs.get(key)
        if isinstance(value, Exception):
            raise value
        return value

    def exists(self, program):
        return self.run(program, ("--version",)) is not None


class FakeFetcher:
    """Release fetcher answering from a table of (owner, repo) -> body."""

    def __init__(self, bodies=None):
        self.bodies = dict(bodies or {})
        self.calls = []

    def latest_release(self, owner, repo):
        self.calls.append((owner, repo))
        value = self.bodies[(owner, repo)]
        if isinstance(value, Exception):
            raise value
        return value


class FakeReader:
    """Input reader returning a scripted answer."""

    def __init__(self, answer=""):
        self.answer = answer
        self.reads = 0

    def read_char(self):
        self.reads += 1
        return self.answer.strip().lower()


class CapturedConsole(Console):
    """Console writing to in-memory buffers without color."""

    def __init__(self, use_emoji=True):
        super().__init__(io.StringIO(), io.StringIO(), use_color=False, use_emoji=use_emoji)

    @property
    def out(self):
        return self.stream.getvalue()

    @property
    def err(self):
        return self.err_stream.getvalue()


def command_error(program, *args, returncode=1, stderr="boom"):
    return CommandError(program, args, returncode=returncode, stderr=stderr)


@pytest.fixture
def console():
    return CapturedConsole()


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def reader():
    return FakeReader()
