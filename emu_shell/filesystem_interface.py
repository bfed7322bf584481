"""
FileSystemInterface - Abstract interface for filesystem operations.

This module provides the FileSystemInterface abstract base class that
builtins use instead of touching the os module directly, so tests and
embedders can swap the backing store.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class FileSystemInterface(ABC):
    """
    Abstract interface for the filesystem capabilities builtins need.

    All paths handed to these methods are absolute. Implementations raise
    OSError subclasses (FileNotFoundError, IsADirectoryError, ...) the way
    the os module does; callers translate them with translate_os_error().
    """

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a whole file as text, line endings untouched.

        Raises:
            UnicodeDecodeError: If the bytes are not valid text
            FileNotFoundError: If file doesn't exist
            IsADirectoryError: If path is a directory
            PermissionError: If access denied
        """
        pass

    @abstractmethod
    def write_text(self, path: str, text: str, append: bool = False) -> None:
        """
        Write text to a file, creating it if needed.

        Args:
            path: File path
            text: Text to write
            append: If True, append to file; else truncate first

        Raises:
            IsADirectoryError: If path is a directory
            PermissionError: If access denied
        """
        pass

    @abstractmethod
    def list_directory(self, path: str) -> List[Dict[str, Any]]:
        """
        List directory contents.

        Returns:
            List of metadata dicts (see get_metadata), sorted by name

        Raises:
            FileNotFoundError: If directory doesn't exist
            NotADirectoryError: If path is not a directory
        """
        pass

    @abstractmethod
    def get_metadata(self, path: str) -> Dict[str, Any]:
        """
        Get file or directory metadata without following symlinks.

        Returns:
            Metadata dict with keys:
            - name: Entry name
            - path: Full path
            - type: 'directory', 'file' or 'symlink'
            - size: Size in bytes
            - mode: Raw st_mode
            - mtime: Modification time (timestamp)

        Raises:
            FileNotFoundError: If path doesn't exist
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a file or directory exists."""
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Check if path exists and is a directory."""
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """
        Delete a file.

        Raises:
            FileNotFoundError: If path doesn't exist
            IsADirectoryError: If path is a directory
        """
        pass

    @abstractmethod
    def delete_directory(self, path: str) -> None:
        """
        Delete an empty directory.

        Raises:
            FileNotFoundError: If path doesn't exist
            NotADirectoryError: If path is not a directory
            OSError: If the directory is not empty (ENOTEMPTY)
        """
        pass
