"""
Custom exception hierarchy for emu-shell.

Every recoverable failure a builtin or the redirection layer can hit is a
ShellError subclass. Process.execute() turns them into failed
ExecutionResults, so none of them ever escapes a dispatch.

Usage:
    from emu_shell.exceptions import NotFoundError, UsageError

    if not operand:
        raise UsageError("cd", "cd <directory>")
"""

import errno
from typing import Optional


class ShellError(Exception):
    """
    Base class for all recoverable shell errors.

    Attributes:
        message: Error message shown to the user
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Usage Errors
# =============================================================================

class UsageError(ShellError):
    """
    Raised when a builtin is invoked with the wrong argument shape.

    The message always names the correct usage.

    Example:
        raise UsageError("ls", "ls OR ls -l")
    """

    def __init__(self, command: str, usage: str, message: Optional[str] = None):
        if message is None:
            message = f"invalid command, correct usage {usage}"
        super().__init__(message, exit_code=2)
        self.command = command
        self.usage = usage


# =============================================================================
# Not Found Errors
# =============================================================================

class NotFoundError(ShellError):
    """Base class for anything that names something that is not there."""

    def __init__(self, message: str, path: Optional[str] = None, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.path = path


class CommandNotFoundError(NotFoundError):
    """
    Raised when a line matches no builtin.

    Example:
        raise CommandNotFoundError("frobnicate")
    """

    def __init__(self, command: str):
        super().__init__("command not found", exit_code=127)
        self.command = command


class FileNotFoundError(NotFoundError):
    """
    Raised when a file or directory does not exist.

    Example:
        raise FileNotFoundError("/path/to/file")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: No such file or directory"
        super().__init__(message, path)


class DirectoryNotEmptyError(NotFoundError):
    """
    Raised when rmdir targets a directory that still has entries.

    Example:
        raise DirectoryNotEmptyError("/path/to/dir")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: Directory not empty"
        super().__init__(message, path)


# =============================================================================
# Type Mismatch Errors
# =============================================================================

class TypeMismatchError(ShellError):
    """Raised when an operation targets the wrong kind of filesystem entry."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class IsADirectoryError(TypeMismatchError):
    """
    Raised when a file operation is attempted on a directory.

    Example:
        raise IsADirectoryError("/path/to/dir", hint="use rmdir")
    """

    def __init__(self, path: str, hint: Optional[str] = None):
        message = f"{path}: Is a directory"
        if hint:
            message = f"{message}, {hint}"
        super().__init__(message, path)
        self.hint = hint


class NotADirectoryError(TypeMismatchError):
    """
    Raised when a directory operation is attempted on a file.

    Example:
        raise NotADirectoryError("/path/to/file")
    """

    def __init__(self, path: str):
        super().__init__(f"{path}: Not a directory", path)


# =============================================================================
# I/O and Parse Errors
# =============================================================================

class IOFailureError(ShellError):
    """
    Raised when opening, reading or writing a file fails.

    Example:
        raise IOFailureError("failed to open/read file", "/path/to/file")
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ParseFailureError(ShellError):
    """
    Raised when an operand cannot be parsed into the value a builtin needs.

    Example:
        raise ParseFailureError("sleep", "abc", "a non-negative number of seconds")
    """

    def __init__(self, command: str, value: str, expected: str):
        message = f"{command}: {value!r} is not {expected}"
        super().__init__(message, exit_code=2)
        self.command = command
        self.value = value


# =============================================================================
# Fatal Errors
# =============================================================================

class FatalIOError(Exception):
    """
    Raised when the shell loses one of its own I/O channels.

    Not a ShellError: nothing recovers from it. The driver aborts the
    process when it reaches the top of the loop.
    """

    def __init__(self, channel: str, error: BaseException):
        super().__init__(f"cannot use {channel}: {error}")
        self.channel = channel
        self.error = error


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


# =============================================================================
# Utility Functions
# =============================================================================

def translate_os_error(error: OSError, path: str) -> ShellError:
    """
    Translate an OSError from the host filesystem to a ShellError.

    Args:
        error: The OSError raised by the os / io call
        path: Path that caused the error (as the user typed it)

    Returns:
        Specific ShellError subclass

    Example:
        try:
            os.rmdir(real_path)
        except OSError as e:
            raise translate_os_error(e, path)
    """
    code = error.errno

    if code == errno.ENOENT:
        return FileNotFoundError(path)
    if code == errno.EISDIR:
        return IsADirectoryError(path)
    if code == errno.ENOTDIR:
        return NotADirectoryError(path)
    if code in (errno.ENOTEMPTY, errno.EEXIST):
        return DirectoryNotEmptyError(path)

    reason = error.strerror or str(error)
    return IOFailureError(f"{path}: {reason}", path)
