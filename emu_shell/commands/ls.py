"""
LS command - list directory contents.
"""

from ..exceptions import UsageError
from ..process import Process
from ..utils.formatters import format_mtime, mode_to_rwx
from . import register_command

USAGE = "`ls` OR `ls -l`"

LONG_HEADER = "type\tmode\tsize\tmtime\tname"

TYPE_LETTERS = {
    'directory': 'd',
    'symlink': 'l',
    'file': 'f',
}


def format_long_row(file_info: dict) -> str:
    """Format one entry as a `type mode size mtime name` row"""
    return '\t'.join([
        TYPE_LETTERS.get(file_info['type'], 'f'),
        mode_to_rwx(file_info['mode']),
        str(file_info['size']),
        format_mtime(file_info['mtime']),
        file_info['name'],
    ])


@register_command('ls')
def cmd_ls(process: Process) -> str:
    """
    List the current directory

    Usage: ls [-l]

    Options:
        -l    One row per entry: type, mode, size, mtime, name
    """
    if process.operand == '':
        long_format = False
    elif process.operand.startswith(' ') and process.operand.strip() == '-l':
        long_format = True
    else:
        raise UsageError('ls', USAGE)

    files = process.filesystem.list_directory(process.session.cwd)

    if not long_format:
        return '\t'.join(file_info['name'] for file_info in files)

    rows = [LONG_HEADER]
    rows.extend(format_long_row(file_info) for file_info in files)
    return '\n'.join(rows)
