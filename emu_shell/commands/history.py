"""
HISTORY command - show recent command lines.
"""

from ..process import Process
from . import register_command
from .base import require_no_operand


@register_command('history')
def cmd_history(process: Process) -> str:
    """
    Show the remembered command lines, oldest first

    Usage: history
    """
    require_no_operand(process, "`history`")
    return process.session.history.render()
