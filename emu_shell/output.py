"""
OutputSink - the one output stream shared by the REPL and background jobs.

Every write takes the sink's lock for exactly the duration of that write
and its flush, so a result is never interleaved with another unit's.
A failure to write or flush is fatal (FatalIOError).
"""

import sys
import threading
from typing import Optional, TextIO

from rich.console import Console

from .exceptions import FatalIOError
from .result import ExecutionResult


class OutputSink:
    """
    Lock-guarded writer over a text stream.

    Plain results are written verbatim; failures and announcements go
    through a rich Console bound to the same stream, so they pick up
    color on a terminal and stay plain text everywhere else.

    Example:
        >>> import io
        >>> sink = OutputSink(io.StringIO(), name='emu-shell')
        >>> sink.write_result(ExecutionResult.failure('command not found'))
        >>> sink.stream.getvalue()
        'emu-shell: command not found\\n'
    """

    def __init__(self, stream: Optional[TextIO] = None, name: str = 'emu-shell'):
        self.stream = stream if stream is not None else sys.stdout
        self.name = name
        self.console = Console(file=self.stream, highlight=False, emoji=False, soft_wrap=True)
        self._lock = threading.Lock()

    def write(self, text: str) -> None:
        """Write text as one indivisible unit and flush it"""
        with self._lock:
            self._write(text)

    def write_line(self, text: str) -> None:
        """Write text followed by a newline, unless it already ends with one"""
        if not text.endswith('\n'):
            text += '\n'
        self.write(text)

    def write_result(self, result: ExecutionResult) -> None:
        """
        Deliver a command's result.

        Successful output is written followed by a newline (empty output
        writes nothing). Failures become one `<name>: <message>` line.
        """
        if result.ok:
            if result.output:
                self.write_line(result.output)
            return
        self.error(result.error)

    def error(self, message: str) -> None:
        """Write one prefixed error line"""
        self.announce(f"{self.name}: {message}", style='red', markup=False)

    def announce(self, text: str, style: Optional[str] = None, markup: bool = True) -> None:
        """Print a rich-rendered line (banner, goodbye, errors)"""
        with self._lock:
            try:
                self.console.print(text, style=style, markup=markup)
                self.stream.flush()
            except (OSError, ValueError) as e:
                raise FatalIOError('output stream', e)

    def flush(self) -> None:
        with self._lock:
            try:
                self.stream.flush()
            except (OSError, ValueError) as e:
                raise FatalIOError('output stream', e)

    def _write(self, text: str) -> None:
        try:
            self.stream.write(text)
            self.stream.flush()
        except (OSError, ValueError) as e:
            raise FatalIOError('output stream', e)
