"""
Pytest configuration and shared fixtures for emu-shell tests.

This module provides reusable test fixtures for:
- A scratch working directory on the real filesystem
- Sessions and dispatchers rooted in it
- Output sinks and shells writing to in-memory streams
"""

import io
import os

import pytest

from emu_shell.config import ShellConfig
from emu_shell.dispatcher import Dispatcher
from emu_shell.output import OutputSink
from emu_shell.session import Session
from emu_shell.shell import Shell


# ============================================================================
# Filesystem Fixtures
# ============================================================================

@pytest.fixture
def workdir(tmp_path):
    """
    Canonical path of an empty scratch directory.

    Resolved so comparisons with `pwd` hold on systems where the temp
    directory sits behind a symlink.
    """
    return str(tmp_path.resolve())


@pytest.fixture
def populated_dir(workdir):
    """
    Scratch directory with a small tree:

        a.txt        "alpha\\n"
        b.txt        "bravo\\n"
        sub/         (empty)
        full/c.txt   "charlie\\n"
    """
    with open(os.path.join(workdir, 'a.txt'), 'w') as f:
        f.write('alpha\n')
    with open(os.path.join(workdir, 'b.txt'), 'w') as f:
        f.write('bravo\n')
    os.mkdir(os.path.join(workdir, 'sub'))
    os.mkdir(os.path.join(workdir, 'full'))
    with open(os.path.join(workdir, 'full', 'c.txt'), 'w') as f:
        f.write('charlie\n')
    return workdir


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def session(workdir):
    """Session rooted in the scratch directory."""
    return Session(cwd=workdir)


@pytest.fixture
def dispatcher():
    """Dispatcher over the host filesystem."""
    return Dispatcher()


@pytest.fixture
def run(dispatcher, session):
    """
    Dispatch a line against the shared session.

    Example:
        def test_echo(run):
            assert run('echo hi').output == 'hi'
    """
    def _run(line):
        return dispatcher.dispatch(session, line)
    return _run


@pytest.fixture
def output():
    """In-memory text stream standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def sink(output):
    """OutputSink writing to the in-memory stream."""
    return OutputSink(output, name='emu-shell')


@pytest.fixture
def make_shell(workdir, output):
    """
    Build a Shell reading the given text and writing to `output`.

    Exit handlers record their codes in `shell.exit_codes` instead of
    ending the test run.
    """
    def _make_shell(script='', interactive=False, **config):
        exit_codes = []
        shell = Shell(
            config=ShellConfig(initial_cwd=workdir, **config),
            stdin=io.StringIO(script),
            stdout=output,
            interactive=interactive,
            exit_handler=exit_codes.append,
            background_exit_handler=exit_codes.append,
        )
        shell.exit_codes = exit_codes
        return shell
    return _make_shell


# ============================================================================
# Helper Functions
# ============================================================================

def read_file(directory: str, name: str) -> str:
    with open(os.path.join(directory, name)) as f:
        return f.read()


def write_file(directory: str, name: str, content: str) -> str:
    path = os.path.join(directory, name)
    with open(path, 'w') as f:
        f.write(content)
    return path
