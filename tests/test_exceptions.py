"""Tests for the exception hierarchy and OSError translation."""

import errno

import pytest

from emu_shell import exceptions
from emu_shell.exceptions import (
    CommandNotFoundError,
    DirectoryNotEmptyError,
    FileNotFoundError,
    IOFailureError,
    IsADirectoryError,
    NotADirectoryError,
    NotFoundError,
    ParseFailureError,
    ShellError,
    TypeMismatchError,
    UsageError,
    translate_os_error,
)


class TestHierarchy:
    """Test the taxonomy."""

    @pytest.mark.parametrize('error,category', [
        (UsageError('ls', '`ls`'), UsageError),
        (CommandNotFoundError('x'), NotFoundError),
        (FileNotFoundError('f'), NotFoundError),
        (DirectoryNotEmptyError('d'), NotFoundError),
        (IsADirectoryError('d'), TypeMismatchError),
        (NotADirectoryError('f'), TypeMismatchError),
        (IOFailureError('failed'), IOFailureError),
        (ParseFailureError('sleep', 'x', 'a number'), ParseFailureError),
    ])
    def test_categories(self, error, category):
        """Test every error is a ShellError in its category."""
        assert isinstance(error, ShellError)
        assert isinstance(error, category)

    def test_usage_message(self):
        """Test usage errors name the correct usage."""
        assert str(UsageError('cd', '`cd <directory>`')) == 'invalid command, correct usage `cd <directory>`'

    def test_is_a_directory_hint(self):
        """Test the optional hint is appended."""
        error = IsADirectoryError('sub', hint='use `rmdir` to remove directories')
        assert str(error) == 'sub: Is a directory, use `rmdir` to remove directories'

    def test_command_not_found_exit_code(self):
        assert CommandNotFoundError('x').exit_code == 127

    def test_fatal_is_not_recoverable(self):
        """Test FatalIOError is outside the ShellError tree."""
        assert not issubclass(exceptions.FatalIOError, ShellError)


class TestTranslateOsError:
    """Test translate_os_error."""

    @pytest.mark.parametrize('code,expected', [
        (errno.ENOENT, FileNotFoundError),
        (errno.EISDIR, IsADirectoryError),
        (errno.ENOTDIR, NotADirectoryError),
        (errno.ENOTEMPTY, DirectoryNotEmptyError),
        (errno.EACCES, IOFailureError),
    ])
    def test_mapping(self, code, expected):
        error = translate_os_error(OSError(code, 'whatever'), 'p')
        assert type(error) is expected
        assert error.path == 'p'

    def test_generic_message(self):
        """Test unknown errors keep the host's reason."""
        error = translate_os_error(OSError(errno.EACCES, 'Permission denied'), 'secret')
        assert str(error) == 'secret: Permission denied'
