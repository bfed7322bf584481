"""
CD command - change the working directory.
"""

from ..exceptions import FileNotFoundError, NotADirectoryError
from ..process import Process
from . import register_command
from .base import require_operand


@register_command('cd')
def cmd_cd(process: Process) -> str:
    """
    Change the session's working directory

    Usage: cd <directory>

    The target is resolved relative to the current directory. On any
    failure the working directory stays where it was.
    """
    dirname = require_operand(process, "`cd <directory>`")
    path = process.resolve_path(dirname)

    if not process.filesystem.exists(path):
        raise FileNotFoundError(dirname)
    if not process.filesystem.is_directory(path):
        raise NotADirectoryError(dirname)

    process.session.change_directory(path)
    return ''
