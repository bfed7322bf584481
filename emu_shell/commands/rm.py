"""
RM command - remove a file.
"""

from ..exceptions import FileNotFoundError, IsADirectoryError, translate_os_error
from ..process import Process
from . import register_command
from .base import require_operand


@register_command('rm')
def cmd_rm(process: Process) -> str:
    """
    Remove a file

    Usage: rm <file>

    Directories are refused; remove them with rmdir.
    """
    filename = require_operand(process, "`rm <file>`")
    path = process.resolve_path(filename)

    if not process.filesystem.exists(path):
        raise FileNotFoundError(filename)
    if process.filesystem.is_directory(path):
        raise IsADirectoryError(filename, hint="use `rmdir` to remove directories")

    try:
        process.filesystem.delete_file(path)
    except OSError as e:
        raise translate_os_error(e, filename)
    return ''
