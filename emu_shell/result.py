"""ExecutionResult - outcome of dispatching one command line"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExecutionResult:
    """
    Either a success payload or a failure message, never both.

    Results are built by a builtin (through Process.execute) or by the
    redirection layer and consumed immediately by whoever prints or
    writes them.

    Example:
        >>> ExecutionResult.success('hello').output
        'hello'
        >>> ExecutionResult.failure('command not found').ok
        False
    """

    output: Optional[str] = None
    error: Optional[str] = None
    exit_code: int = 0

    def __post_init__(self):
        if (self.output is None) == (self.error is None):
            raise ValueError("ExecutionResult needs exactly one of output or error")

    @classmethod
    def success(cls, output: str = '') -> 'ExecutionResult':
        return cls(output=output)

    @classmethod
    def failure(cls, message: str, exit_code: int = 1) -> 'ExecutionResult':
        return cls(error=message, exit_code=exit_code or 1)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"ExecutionResult(success={self.output!r})"
        return f"ExecutionResult(failure={self.error!r})"
