"""
SORT command - sort redirected input line by line.
"""

from ..process import Process
from . import register_command
from .base import require_no_operand


@register_command('sort', reads_input=True)
def cmd_sort(process: Process) -> str:
    """
    Sort the lines of redirected input lexicographically

    Usage: sort < file
    """
    require_no_operand(process, "`sort < file`")
    lines = (process.stdin or '').split('\n')
    if lines[-1] == '':
        lines.pop()
    return '\n'.join(sorted(lines))
