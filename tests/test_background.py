"""
Tests for background execution.

Tests cover:
- Detecting and stripping the trailing marker
- Running against a forked session
- Non-blocking submission
- Output delivery without interleaving
- exit inside a job
"""

import os
import threading

import pytest

from emu_shell.background import BackgroundManager, BackgroundMarker, parse_background


@pytest.fixture
def exit_codes():
    return []


@pytest.fixture
def jobs(dispatcher, sink, exit_codes):
    return BackgroundManager(dispatcher, sink, on_exit=exit_codes.append)


class TestParseBackground:
    """Test the background marker."""

    def test_trailing_marker(self):
        """Test ' &' at the end is detected and removed."""
        assert parse_background('sleep 5 &') == BackgroundMarker('sleep 5')

    def test_surrounding_whitespace(self):
        """Test the line is trimmed before looking for the marker."""
        assert parse_background('  echo hi &  ') == BackgroundMarker('echo hi')

    def test_interior_not_retrimmed(self):
        """Test only the marker is stripped from the command."""
        assert parse_background('echo hi  &') == BackgroundMarker('echo hi ')

    @pytest.mark.parametrize('line', ['echo hi', 'echo a&', '&', 'echo & more', ''])
    def test_not_background(self, line):
        """Test lines without a trailing ' &' are left alone."""
        assert parse_background(line) is None


class TestBackgroundManager:
    """Test BackgroundManager."""

    def test_foreground_line_not_consumed(self, jobs, session):
        """Test ordinary lines are not taken."""
        assert jobs.maybe_background(session, 'pwd') is False
        assert jobs.active_count() == 0

    def test_result_is_printed(self, jobs, session, output):
        """Test the job's result lands on the output stream."""
        assert jobs.maybe_background(session, 'echo from job &') is True
        jobs.wait(timeout=5)
        assert output.getvalue() == 'from job\n'

    def test_failure_is_printed_with_prefix(self, jobs, session, output):
        """Test a failing job prints the prefixed error line."""
        jobs.maybe_background(session, 'nonsense &')
        jobs.wait(timeout=5)
        assert 'emu-shell: command not found' in output.getvalue()

    def test_returns_before_job_finishes(self, jobs, session, output, monkeypatch):
        """Test submission does not wait for the result."""
        release = threading.Event()
        monkeypatch.setattr(
            'emu_shell.commands.sleep.time.sleep',
            lambda seconds: release.wait(5),
        )

        assert jobs.maybe_background(session, 'sleep 1 &') is True
        assert jobs.active_count() == 1
        assert output.getvalue() == ''

        release.set()
        jobs.wait(timeout=5)
        assert jobs.active_count() == 0
        assert output.getvalue() == '\n'

    def test_job_runs_on_forked_session(self, jobs, session, populated_dir):
        """Test cd and history inside a job do not reach the caller."""
        session.history.record('pwd')

        jobs.maybe_background(session, 'cd sub &')
        jobs.wait(timeout=5)

        assert session.cwd == populated_dir
        assert session.history.entries() == ['pwd']

    def test_job_sees_callers_directory(self, jobs, session, populated_dir, output):
        """Test the fork starts from the caller's current state."""
        session.change_directory('full')
        jobs.maybe_background(session, 'ls &')
        jobs.wait(timeout=5)
        assert output.getvalue() == 'c.txt\n'

    def test_job_history_includes_parent_history(self, jobs, session, output):
        """Test the job's own history starts from a copy of the caller's."""
        session.history.record('pwd')
        jobs.maybe_background(session, 'history &')
        jobs.wait(timeout=5)
        assert output.getvalue() == 'pwd\nhistory\n'

    def test_redirection_in_background(self, jobs, session, workdir):
        """Test a background job can redirect to a file."""
        jobs.maybe_background(session, 'echo later > later.txt &')
        jobs.wait(timeout=5)
        with open(os.path.join(workdir, 'later.txt')) as f:
            assert f.read() == 'later\n'

    def test_exit_in_job_ends_process(self, jobs, session, exit_codes):
        """Test exit in a job calls the process-wide exit handler."""
        jobs.maybe_background(session, 'exit &')
        jobs.wait(timeout=5)
        assert exit_codes == [0]

    def test_concurrent_results_do_not_interleave(self, jobs, session, output):
        """Test many concurrent jobs each print one whole line."""
        expected = set()
        for i in range(40):
            text = f'job-{i}-' + 'x' * 200
            expected.add(text)
            jobs.maybe_background(session, f'echo {text} &')

        jobs.wait(timeout=10)

        lines = output.getvalue().split('\n')
        assert lines[-1] == ''
        assert set(lines[:-1]) == expected
