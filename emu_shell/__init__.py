"""emu-shell - a small line-oriented command interpreter"""

__version__ = "0.1.0"

from .result import ExecutionResult  # noqa: E402
from .session import Session  # noqa: E402
from .dispatcher import Dispatcher  # noqa: E402
from .shell import Shell  # noqa: E402

__all__ = ['ExecutionResult', 'Session', 'Dispatcher', 'Shell', '__version__']
