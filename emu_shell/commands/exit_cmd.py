"""
EXIT command - leave the shell.
"""

from ..control_flow import ShellExit
from ..process import Process
from . import register_command
from .base import require_no_operand


@register_command('exit')
def cmd_exit(process: Process) -> str:
    """
    Terminate the shell process with exit code 0

    Usage: exit

    Note:
        Raises ShellExit, which Process.execute lets through so the owner
        of the execution unit can end the process.
    """
    require_no_operand(process, "`exit`")
    raise ShellExit(0)
