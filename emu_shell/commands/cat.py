"""
CAT command - print a file.
"""

from ..exceptions import IOFailureError, IsADirectoryError, translate_os_error
from ..process import Process
from . import register_command
from .base import require_operand


@register_command('cat')
def cmd_cat(process: Process) -> str:
    """
    Print the full contents of a file

    Usage: cat <file>
    """
    filename = require_operand(process, "`cat <file>`")
    path = process.resolve_path(filename)

    if process.filesystem.is_directory(path):
        raise IsADirectoryError(filename)

    try:
        return process.filesystem.read_text(path)
    except OSError as e:
        raise translate_os_error(e, filename)
    except UnicodeDecodeError:
        raise IOFailureError(f"failed to open/read file: {filename}: not a text file", filename)
