"""
Session - the mutable state owned by one interpreter instance.

A Session bundles the working directory and the command history. The
dispatcher receives it explicitly on every call; nothing in emu-shell
keeps session state in module globals.
"""

import copy
import os
from typing import Optional

from .history import DEFAULT_HISTORY_SIZE, HistoryBuffer
from .path_manager import PathManager


class Session:
    """
    Working directory and history for one interpreter.

    Example:
        >>> session = Session(cwd='/tmp')
        >>> session.history.record('pwd')
        >>> background = session.fork()
        >>> background.history.record('ls')
        >>> session.history.entries()
        ['pwd']
    """

    def __init__(self, cwd: Optional[str] = None, history_size: int = DEFAULT_HISTORY_SIZE):
        self.paths = PathManager(cwd or os.getcwd())
        self.history = HistoryBuffer(history_size)

    @property
    def cwd(self) -> str:
        return self.paths.cwd

    def resolve_path(self, path: str) -> str:
        """Resolve path against the current working directory."""
        return self.paths.resolve_path(path)

    def change_directory(self, path: str) -> str:
        """
        Move the working directory.

        Raises:
            NotADirectoryError: If path is not an existing directory, in
                which case the session is unchanged
        """
        return self.paths.change_directory(path)

    def fork(self) -> 'Session':
        """
        Duplicate this session for a detached execution unit.

        The copy shares nothing mutable with the original: a `cd` or a
        new history entry in one is never visible in the other.
        """
        return copy.deepcopy(self)

    def __repr__(self):
        return f"Session(cwd={self.cwd!r}, history={len(self.history)})"
