"""Interactive shell driver for emu-shell"""

import logging
import sys
from typing import Callable, Optional, TextIO

from . import __version__
from .background import BackgroundManager
from .config import ShellConfig
from .control_flow import ShellExit
from .dispatcher import Dispatcher
from .exceptions import FatalIOError
from .filesystem_interface import FileSystemInterface
from .output import OutputSink
from .result import ExecutionResult
from .session import Session

logger = logging.getLogger(__name__)


class Shell:
    """Line-at-a-time shell with redirection and background jobs"""

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        filesystem: Optional[FileSystemInterface] = None,
        interactive: Optional[bool] = None,
        exit_handler: Callable[[int], None] = sys.exit,
        background_exit_handler: Optional[Callable[[int], None]] = None,
    ):
        self.config = config or ShellConfig()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.session = Session(self.config.initial_cwd, self.config.history_size)
        self.dispatcher = Dispatcher(filesystem)
        self.output = OutputSink(stdout, name=self.config.name)
        self.jobs = BackgroundManager(self.dispatcher, self.output, on_exit=background_exit_handler)
        self.exit_handler = exit_handler
        self.running = True

        if interactive is None:
            isatty = getattr(self.stdin, 'isatty', None)
            interactive = bool(isatty and isatty())
        self.interactive = interactive

    @property
    def cwd(self) -> str:
        return self.session.cwd

    def prompt(self) -> str:
        return self.config.format_prompt(self.session.cwd)

    def run_line(self, command_line: str) -> Optional[ExecutionResult]:
        """
        Run one REPL turn.

        Args:
            command_line: Line as read, without its line terminator

        Returns:
            The foreground result, or None if the line went to the
            background or ended the shell
        """
        if self.jobs.maybe_background(self.session, command_line):
            return None

        try:
            result = self.dispatcher.dispatch(self.session, command_line)
        except ShellExit as e:
            self.running = False
            self.output.flush()
            self.exit_handler(e.exit_code)
            return None

        if not result.ok:
            logger.warning("%r failed: %s", command_line.strip(), result.error)
        self.output.write_result(result)
        return result

    def read_line(self) -> Optional[str]:
        """
        Read the next input line.

        Returns:
            The line without its terminator, or None at end of input

        Raises:
            FatalIOError: If the input stream cannot be read
        """
        try:
            line = self.stdin.readline()
        except (OSError, ValueError) as e:
            raise FatalIOError('input stream', e)
        if line == '':
            return None
        return line.rstrip('\r\n')

    def run(self) -> int:
        """
        Run the REPL until `exit` or end of input.

        Returns:
            Exit code (0)

        Raises:
            FatalIOError: If input or output is lost
        """
        if self.interactive:
            self.output.announce(f"[bold cyan]{self.config.name}[/bold cyan] v{__version__}")
            self.output.announce("Type [cyan]'exit'[/cyan] or press [cyan]Ctrl+D[/cyan] to quit")

        while self.running:
            if self.interactive:
                self.output.write(self.prompt())

            try:
                line = self.read_line()
            except KeyboardInterrupt:
                self.output.write('\n')
                continue

            if line is None:
                break

            try:
                self.run_line(line)
            except KeyboardInterrupt:
                self.output.write('^C\n')

        if self.interactive:
            self.output.write('\n')
            self.output.announce("[cyan]Goodbye![/cyan]")
        else:
            # Scripted input: let pending jobs report before the process ends
            self.jobs.wait()
        return 0
