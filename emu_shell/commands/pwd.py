"""
PWD command - print working directory.
"""

from ..process import Process
from . import register_command
from .base import require_no_operand


@register_command('pwd')
def cmd_pwd(process: Process) -> str:
    """
    Print working directory

    Usage: pwd
    """
    require_no_operand(process, "`pwd`")
    return process.session.cwd
