"""
Background execution - `command &`.

A line ending in ` &` is run on its own thread against a forked copy of
the session. The caller gets control back at once; the job's result is
written to the shared OutputSink whenever it is ready. There is no job
control: a started job runs to completion.
"""

import itertools
import logging
import os
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .dispatcher import Dispatcher
    from .output import OutputSink
    from .session import Session

from .control_flow import ShellExit
from .exceptions import FatalIOError

logger = logging.getLogger(__name__)

BACKGROUND_SUFFIX = ' &'


@dataclass(frozen=True)
class BackgroundMarker:
    """A line that asked to run in the background, with the marker removed"""

    command: str


def parse_background(command_line: str) -> Optional[BackgroundMarker]:
    """
    Detect a trailing ` &`.

    Only the marker is removed; the text before it is kept as typed.

    Examples:
        >>> parse_background('sleep 5 &')
        BackgroundMarker(command='sleep 5')
        >>> parse_background('echo a&') is None
        True
    """
    line = command_line.strip()
    if not line.endswith(BACKGROUND_SUFFIX):
        return None
    return BackgroundMarker(line[:-len(BACKGROUND_SUFFIX)])


def _terminate_process(exit_code: int) -> None:
    # sys.exit() would only end the worker thread
    os._exit(exit_code)


class BackgroundManager:
    """
    Starts background jobs and delivers their results.

    Attributes:
        dispatcher: Dispatcher the jobs run through
        output: Shared sink every job writes its result to
        on_exit: Called with an exit code when a job runs `exit` or loses
            the output stream; ends the whole process by default
    """

    def __init__(self, dispatcher: 'Dispatcher', output: 'OutputSink',
                 on_exit: Optional[Callable[[int], None]] = None):
        self.dispatcher = dispatcher
        self.output = output
        self.on_exit = on_exit or _terminate_process
        self._threads: List[threading.Thread] = []
        self._ids = itertools.count(1)

    def maybe_background(self, session: 'Session', command_line: str) -> bool:
        """
        Run command_line in the background if it ends with ` &`.

        Args:
            session: Foreground session; the job gets a fork of it
            command_line: Raw line as typed

        Returns:
            True if the line was taken as a background job
        """
        marker = parse_background(command_line)
        if marker is None:
            return False
        self.submit(session.fork(), marker.command)
        return True

    def submit(self, session: 'Session', command: str) -> threading.Thread:
        """Start a job running command against session (which the job owns)"""
        job_id = next(self._ids)
        thread = threading.Thread(
            target=self._run,
            args=(job_id, session, command),
            name=f"emu-shell-job-{job_id}",
            daemon=True,
        )
        self._threads = [t for t in self._threads if t.is_alive()]
        self._threads.append(thread)
        logger.info("job %d started: %r", job_id, command)
        thread.start()
        return thread

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until every job started so far has finished"""
        for thread in list(self._threads):
            thread.join(timeout)

    def active_count(self) -> int:
        return sum(1 for t in self._threads if t.is_alive())

    def _run(self, job_id: int, session: 'Session', command: str) -> None:
        try:
            result = self.dispatcher.dispatch(session, command)
            if result.ok and not result.output:
                self.output.write('\n')
            else:
                self.output.write_result(result)
        except ShellExit as e:
            logger.info("job %d ran exit, terminating", job_id)
            self._exit(e.exit_code)
            return
        except FatalIOError as e:
            logger.critical("job %d: %s", job_id, e)
            self._exit(1)
            return
        logger.info("job %d finished (%s)", job_id, 'ok' if result.ok else 'failed')

    def _exit(self, exit_code: int) -> None:
        try:
            self.output.flush()
        except FatalIOError:
            exit_code = exit_code or 1
        self.on_exit(exit_code)
