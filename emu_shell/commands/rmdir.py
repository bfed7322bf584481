"""
RMDIR command - remove an empty directory.
"""

from ..exceptions import translate_os_error
from ..process import Process
from . import register_command
from .base import require_operand


@register_command('rmdir')
def cmd_rmdir(process: Process) -> str:
    """
    Remove an empty directory

    Usage: rmdir <directory>

    Whether a non-empty directory can go is up to the host filesystem;
    the refusal is reported as-is.
    """
    dirname = require_operand(process, "`rmdir <directory>`")
    path = process.resolve_path(dirname)

    try:
        process.filesystem.delete_directory(path)
    except OSError as e:
        raise translate_os_error(e, dirname)
    return ''
