"""
Command dispatcher - decides what one line of input means.

Classification walks ROUTES top to bottom and stops at the first match.
The order is significant: exact verbs win over redirection, and `rmdir`
is tried before `rm` because both share a prefix.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .filesystem_interface import FileSystemInterface
    from .session import Session

from .commands import get_builtin, load_all_commands
from .exceptions import CommandNotFoundError
from .filesystem import LocalFileSystem
from .process import Process
from .redirection import Redirector
from .result import ExecutionResult

logger = logging.getLogger(__name__)


class MatchKind(enum.Enum):
    EXACT = 'exact'
    CONTAINS = 'contains'
    PREFIX = 'prefix'


@dataclass(frozen=True)
class Route:
    """One row of the classification table"""

    pattern: str
    kind: MatchKind

    def matches(self, line: str) -> bool:
        if self.kind is MatchKind.EXACT:
            return line == self.pattern
        if self.kind is MatchKind.CONTAINS:
            return self.pattern in line
        return line.startswith(self.pattern)

    @property
    def is_redirection(self) -> bool:
        return self.kind is MatchKind.CONTAINS


ROUTES = (
    Route('exit', MatchKind.EXACT),
    Route('history', MatchKind.EXACT),
    Route('pwd', MatchKind.EXACT),
    Route('>', MatchKind.CONTAINS),
    Route('<', MatchKind.CONTAINS),
    Route('ls', MatchKind.PREFIX),
    Route('echo', MatchKind.PREFIX),
    Route('cd', MatchKind.PREFIX),
    Route('sleep', MatchKind.PREFIX),
    Route('cat', MatchKind.PREFIX),
    Route('rmdir', MatchKind.PREFIX),
    Route('rm', MatchKind.PREFIX),
)


def classify(line: str) -> Optional[Route]:
    """
    Find the route for a trimmed command line.

    Returns:
        The first matching Route, or None if nothing matches

    Examples:
        >>> classify('rmdir old').pattern
        'rmdir'
        >>> classify('echo a > b').pattern
        '>'
        >>> classify('make') is None
        True
    """
    for route in ROUTES:
        if route.matches(line):
            return route
    return None


class Dispatcher:
    """
    Routes command lines to builtins or the redirection layer.

    The dispatcher itself is stateless apart from the filesystem it hands
    to builtins; all mutable state lives in the Session passed to
    dispatch(), so one Dispatcher can serve the foreground loop and any
    number of background workers at once.
    """

    def __init__(self, filesystem: Optional['FileSystemInterface'] = None):
        load_all_commands()
        self.filesystem = filesystem or LocalFileSystem()
        self.redirector = Redirector(self)

    def dispatch(self, session: 'Session', command_line: str) -> ExecutionResult:
        """
        Execute one command line.

        Args:
            session: Session to run in (history and cwd are mutated here)
            command_line: Raw line as typed

        Returns:
            ExecutionResult of the command

        Raises:
            ShellExit: When the line is `exit`
        """
        line = command_line.strip()
        session.history.record(line)

        if not line:
            return ExecutionResult.success('')

        route = classify(line)
        if route is None:
            logger.debug("no route for %r", line)
            error = CommandNotFoundError(line.split()[0])
            return ExecutionResult.failure(error.message, error.exit_code)

        logger.debug("routing %r via %s %r", line, route.kind.value, route.pattern)

        if route.is_redirection:
            return self.redirector.apply(session, line)

        process = Process(
            route.pattern,
            line[len(route.pattern):],
            session,
            self.filesystem,
            executor=get_builtin(route.pattern),
        )
        return process.execute()
