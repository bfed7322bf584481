"""Process class for a single builtin invocation"""

import logging
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .filesystem_interface import FileSystemInterface
    from .session import Session

from .control_flow import ShellExit
from .exceptions import ShellError, CommandNotFoundError, translate_os_error
from .result import ExecutionResult

logger = logging.getLogger(__name__)


class Process:
    """Represents one builtin run against a session"""

    def __init__(
        self,
        command: str,
        operand: str,
        session: 'Session',
        filesystem: 'FileSystemInterface',
        executor: Optional[Callable[['Process'], str]] = None,
        stdin: Optional[str] = None,
    ):
        """
        Initialize a process

        Args:
            command: Builtin name (the verb)
            operand: Raw text after the verb ('' when the verb stands
                alone); each builtin checks its own argument shape
            session: Session the builtin reads and mutates
            filesystem: Filesystem the builtin operates on
            executor: Builtin function; returns the success payload and
                raises a ShellError on failure
            stdin: Redirected input text, if any
        """
        self.command = command
        self.operand = operand
        self.session = session
        self.filesystem = filesystem
        self.executor = executor
        self.stdin = stdin

    def resolve_path(self, path: str) -> str:
        """Resolve path against the session's working directory"""
        return self.session.resolve_path(path)

    def execute(self) -> ExecutionResult:
        """
        Execute the process

        Returns:
            ExecutionResult with the builtin's payload, or its failure message.
            ShellExit is not caught and reaches the caller.
        """
        if self.executor is None:
            error = CommandNotFoundError(self.command)
            return ExecutionResult.failure(error.message, error.exit_code)

        try:
            output = self.executor(self)
        except ShellExit:
            # Let exit reach the owner of this execution unit
            raise
        except ShellError as e:
            logger.debug("%s failed: %s", self.command, e)
            return ExecutionResult.failure(e.message, e.exit_code)
        except OSError as e:
            error = translate_os_error(e, e.filename or self.operand.strip())
            logger.debug("%s failed: %s", self.command, error)
            return ExecutionResult.failure(error.message, error.exit_code)
        except Exception as e:
            logger.exception("unexpected error in %s", self.command)
            return ExecutionResult.failure(f"error executing '{self.command}': {e}")

        return ExecutionResult.success(output or '')

    def __repr__(self):
        if self.operand:
            return f"Process({self.command} {self.operand})"
        return f"Process({self.command})"
