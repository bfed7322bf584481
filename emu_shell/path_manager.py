"""Path and working directory management for emu-shell.

This module provides the PathManager class which handles:
- Current working directory tracking
- Path resolution (relative to absolute)
- Validation before the working directory changes
"""

import errno
import os


class PathManager:
    """Manages paths and working directory.

    The working directory always names an existing directory on the host:
    it is checked at construction and before every change.

    Attributes:
        cwd: Current working directory (absolute, canonical)
    """

    def __init__(self, initial_cwd: str):
        """Initialize the path manager.

        Args:
            initial_cwd: Initial working directory (must exist)

        Raises:
            NotADirectoryError: If initial_cwd is not an existing directory
        """
        self.cwd = self._validated(initial_cwd)

    def resolve_path(self, path: str) -> str:
        """Resolve a relative or absolute path to an absolute path.

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Normalized absolute path

        Examples:
            resolve_path('/foo/bar') -> '/foo/bar'
            resolve_path('bar') with cwd='/foo' -> '/foo/bar'
            resolve_path('../baz') with cwd='/foo/bar' -> '/foo/baz'
        """
        if not path:
            return self.cwd

        if os.path.isabs(path):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(self.cwd, path))

    def change_directory(self, path: str) -> str:
        """Change the current working directory.

        Args:
            path: New directory path (can be relative or absolute)

        Returns:
            The new working directory

        Raises:
            NotADirectoryError: If the target is missing or not a directory;
                the working directory is left unchanged
        """
        self.cwd = self._validated(self.resolve_path(path))
        return self.cwd

    def get_cwd(self) -> str:
        """Get the current working directory."""
        return self.cwd

    @staticmethod
    def _validated(path: str) -> str:
        real_path = os.path.realpath(path)
        if not os.path.isdir(real_path):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), real_path)
        return real_path
