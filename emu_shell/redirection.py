"""
Redirection layer - `cmd > file`, `cmd >> file` and `cmd < file`.

A line holds at most one redirection. parse_redirection() turns it into
a RedirectionSpec, rejecting anything with the wrong number of operator
characters or an empty side. Redirector then runs the command half
through the dispatcher and moves data to or from the file half.
"""

import logging
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .dispatcher import Dispatcher
    from .session import Session

from .commands import get_builtin, reads_input
from .exceptions import CommandNotFoundError, IOFailureError, ShellError, UsageError
from .process import Process
from .result import ExecutionResult

logger = logging.getLogger(__name__)

OUTPUT_USAGE = "`command > file` OR `command >> file`"
INPUT_USAGE = "`command < file`"


@dataclass(frozen=True)
class RedirectionSpec:
    """
    One parsed redirection.

    Attributes:
        operator: '>', '>>' or '<'
        command: Left-hand side, trimmed (the operation)
        target: Right-hand side, trimmed (the filename)
    """

    operator: str
    command: str
    target: str

    @property
    def is_output(self) -> bool:
        return self.operator in ('>', '>>')

    @property
    def append(self) -> bool:
        return self.operator == '>>'


def _split(line: str, operator: str, usage: str) -> RedirectionSpec:
    command, _, target = line.partition(operator)
    command = command.strip()
    target = target.strip()
    if not command or not target:
        raise UsageError(operator, usage)
    return RedirectionSpec(operator, command, target)


def parse_output_redirection(line: str) -> RedirectionSpec:
    """
    Parse a line containing `>` characters.

    Exactly one `>` means truncate, exactly two adjacent (`>>`) mean
    append; any other count is a usage error.

    Raises:
        UsageError: On a bad operator count or an empty side

    Examples:
        >>> parse_output_redirection('echo hi > out.txt')
        RedirectionSpec(operator='>', command='echo hi', target='out.txt')
        >>> parse_output_redirection('ls >> log').append
        True
    """
    count = line.count('>')
    if count == 1:
        operator = '>'
    elif count == 2 and '>>' in line:
        operator = '>>'
    else:
        raise UsageError('>', OUTPUT_USAGE)
    return _split(line, operator, OUTPUT_USAGE)


def parse_input_redirection(line: str) -> RedirectionSpec:
    """
    Parse a line containing `<` characters.

    Raises:
        UsageError: Unless there is exactly one `<` with both sides non-empty
    """
    if line.count('<') != 1:
        raise UsageError('<', INPUT_USAGE)
    return _split(line, '<', INPUT_USAGE)


def parse_redirection(line: str) -> Optional[RedirectionSpec]:
    """
    Parse the redirection in a line, if it has one.

    Output operators take precedence over `<`, so `sort < a > b` is an
    output redirection whose command is `sort < a`.

    Returns:
        RedirectionSpec, or None when the line has no operator
    """
    if '>' in line:
        return parse_output_redirection(line)
    if '<' in line:
        return parse_input_redirection(line)
    return None


class Redirector:
    """Executes redirections on behalf of a Dispatcher"""

    def __init__(self, dispatcher: 'Dispatcher'):
        self.dispatcher = dispatcher

    @property
    def filesystem(self):
        return self.dispatcher.filesystem

    def apply(self, session: 'Session', command_line: str) -> ExecutionResult:
        """
        Run a redirected command line.

        Args:
            session: Session the inner command runs in
            command_line: Line containing a redirection operator

        Returns:
            Empty success for output redirection, the command's output for
            input redirection, or a failure
        """
        try:
            spec = parse_redirection(command_line.strip())
            if spec is None:
                raise UsageError('>', OUTPUT_USAGE)
            if spec.is_output:
                return self._redirect_output(session, spec)
            return self._redirect_input(session, spec)
        except ShellError as e:
            logger.debug("redirection failed: %s", e)
            return ExecutionResult.failure(e.message, e.exit_code)

    def _redirect_output(self, session: 'Session', spec: RedirectionSpec) -> ExecutionResult:
        result = self.dispatcher.dispatch(session, spec.command)
        if not result.ok:
            return result

        path = session.resolve_path(spec.target)
        try:
            self.filesystem.write_text(path, result.output + '\n', append=spec.append)
        except OSError as e:
            raise IOFailureError(f"failed to open/write file: {spec.target}: {e.strerror or e}", spec.target)

        logger.debug("wrote %d chars to %s (%s)", len(result.output) + 1, path, spec.operator)
        return ExecutionResult.success('')

    def _redirect_input(self, session: 'Session', spec: RedirectionSpec) -> ExecutionResult:
        path = session.resolve_path(spec.target)
        try:
            text = self.filesystem.read_text(path)
        except OSError as e:
            raise IOFailureError(f"failed to open/read file: {spec.target}: {e.strerror or e}", spec.target)
        except UnicodeDecodeError:
            raise IOFailureError(f"failed to open/read file: {spec.target}: not a text file", spec.target)

        if not reads_input(spec.command):
            raise CommandNotFoundError(spec.command)

        process = Process(
            spec.command,
            '',
            session,
            self.filesystem,
            executor=get_builtin(spec.command),
            stdin=text,
        )
        return process.execute()
