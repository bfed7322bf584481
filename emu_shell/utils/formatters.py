"""
Formatting helpers shared by listing commands.
"""

import stat
import time


def mode_to_rwx(mode: int) -> str:
    """
    Convert a raw st_mode to its nine-character permission string.

    Example:
        >>> mode_to_rwx(0o100644)
        'rw-r--r--'
    """
    return stat.filemode(mode)[1:]


def format_mtime(timestamp: float) -> str:
    """Format a modification timestamp as YYYY-MM-DD HH:MM:SS (local time)"""
    return time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(timestamp))
