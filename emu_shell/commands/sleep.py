"""
SLEEP command - block the calling execution unit.
"""

import re
import threading
import time

from ..exceptions import ParseFailureError
from ..process import Process
from . import register_command
from .base import require_operand

_SECONDS = re.compile(r'[0-9]+')


@register_command('sleep')
def cmd_sleep(process: Process) -> str:
    """
    Wait for a whole number of seconds

    Usage: sleep <seconds>
    """
    operand = require_operand(process, "`sleep <seconds>`")
    if not _SECONDS.fullmatch(operand):
        raise ParseFailureError('sleep', operand, "a non-negative number of seconds")

    seconds = int(operand)
    # time.sleep overflows past the platform's timeout limit
    if seconds > threading.TIMEOUT_MAX:
        raise ParseFailureError('sleep', operand, "a supported number of seconds")

    time.sleep(seconds)
    return ''
