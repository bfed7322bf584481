"""
ECHO command - print text.
"""

from ..exceptions import UsageError
from ..process import Process
from . import register_command


@register_command('echo')
def cmd_echo(process: Process) -> str:
    """
    Print the text after `echo ` exactly as typed

    Usage: echo [text]
    """
    if process.operand == '':
        return ''
    if not process.operand.startswith(' '):
        raise UsageError('echo', "`echo <text>`")
    return process.operand[1:]
