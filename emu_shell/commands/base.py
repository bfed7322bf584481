"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and keep argument checking consistent.
"""

from ..exceptions import UsageError
from ..process import Process


def require_operand(process: Process, usage: str) -> str:
    """
    Extract the single operand of a `verb <operand>` builtin.

    The raw text after the verb must start with a space and contain
    something other than whitespace.

    Args:
        process: The process object
        usage: Usage string to name in the error

    Returns:
        The operand with surrounding whitespace removed

    Raises:
        UsageError: If the operand is missing or glued to the verb

    Example:
        >>> require_operand(Process('cd', ' /tmp', ...), 'cd <directory>')
        '/tmp'
    """
    raw = process.operand
    if not raw.startswith(' ') or not raw.strip():
        raise UsageError(process.command, usage)
    return raw.strip()


def require_no_operand(process: Process, usage: str) -> None:
    """
    Check that an exact-form builtin was invoked without any text after it.

    Raises:
        UsageError: If anything follows the verb
    """
    if process.operand.strip():
        raise UsageError(process.command, usage)


__all__ = [
    'require_operand',
    'require_no_operand',
]
