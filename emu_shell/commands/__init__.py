"""
Command registry for emu-shell builtin commands.

This module provides the command registration and discovery mechanism.
Each command is implemented in a separate module file under this directory.
"""

import importlib
import logging
import os
import pkgutil
from typing import Callable, Dict, Optional, Set

from ..process import Process

logger = logging.getLogger(__name__)

# Global command registry
_COMMANDS: Dict[str, Callable[[Process], str]] = {}

# Commands that only make sense with redirected input (`sort < file`)
_INPUT_COMMANDS: Set[str] = set()


def register_command(*names: str, reads_input: bool = False):
    """
    Decorator to register a command function.

    Args:
        *names: One or more command names
        reads_input: The command consumes redirected input (process.stdin)

    Example:
        @register_command('echo')
        def cmd_echo(process: Process) -> str:
            ...

        @register_command('sort', reads_input=True)
        def cmd_sort(process: Process) -> str:
            ...
    """
    def decorator(func: Callable[[Process], str]):
        for name in names:
            _COMMANDS[name] = func
            if reads_input:
                _INPUT_COMMANDS.add(name)
        return func
    return decorator


def get_builtin(command: str) -> Optional[Callable[[Process], str]]:
    """
    Get a built-in command executor by name.

    Args:
        command: The command name to look up

    Returns:
        The command function, or None if not found
    """
    return _COMMANDS.get(command)


def reads_input(command: str) -> bool:
    """Check whether a command was registered as an input consumer"""
    return command in _INPUT_COMMANDS


def load_all_commands():
    """
    Import all command modules to populate the registry.

    Importing a module runs its @register_command decorators.
    """
    package_dir = os.path.dirname(__file__)

    for _, module_name, _ in pkgutil.iter_modules([package_dir]):
        if module_name == 'base':
            continue
        importlib.import_module(f'.{module_name}', package=__name__)

    logger.debug("loaded %d builtin commands", len(_COMMANDS))


BUILTINS = _COMMANDS


__all__ = ['register_command', 'get_builtin', 'reads_input', 'load_all_commands', 'BUILTINS']
