"""Command history for emu-shell.

This module provides the HistoryBuffer class which handles:
- Recording non-blank command lines in the order they were entered
- Bounding the number of remembered lines (oldest evicted first)
- Rendering the remembered lines for the `history` builtin
"""

from collections import deque
from typing import Deque, List

DEFAULT_HISTORY_SIZE = 10


class HistoryBuffer:
    """Bounded FIFO of recent command lines.

    Example:
        >>> history = HistoryBuffer(capacity=2)
        >>> history.record('pwd')
        >>> history.record('ls')
        >>> history.record('echo hi')
        >>> history.render()
        'ls\\necho hi'

    Attributes:
        capacity: Maximum number of remembered lines
        _entries: Remembered lines, oldest first
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE):
        """Initialize an empty history.

        Args:
            capacity: Maximum number of lines kept (must be positive)
        """
        if capacity < 1:
            raise ValueError(f"history capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: Deque[str] = deque(maxlen=capacity)

    def record(self, command: str) -> None:
        """Record a command line.

        Blank or whitespace-only lines are ignored. When the buffer is full
        the oldest line is dropped to make room.

        Args:
            command: Command line to remember (stored trimmed)
        """
        command = command.strip()
        if not command:
            return
        self._entries.append(command)

    def render(self) -> str:
        """Join the remembered lines, oldest first, without a trailing newline."""
        return '\n'.join(self._entries)

    def entries(self) -> List[str]:
        """Get a copy of the remembered lines, oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        """Forget every remembered line."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    def __repr__(self):
        return f"HistoryBuffer(capacity={self.capacity}, entries={len(self._entries)})"
