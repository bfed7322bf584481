"""
Shell configuration.

Settings come from defaults, then EMU_SHELL_* environment variables,
then command-line flags (see cli.py).
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from .exceptions import ConfigError
from .history import DEFAULT_HISTORY_SIZE

ENV_PREFIX = 'EMU_SHELL_'


@dataclass(frozen=True)
class ShellConfig:
    """
    Everything a Shell needs to start.

    Example:
        >>> config = ShellConfig.from_env({'EMU_SHELL_HISTORY_SIZE': '20'})
        >>> config.history_size
        20
    """

    name: str = 'emu-shell'
    history_size: int = DEFAULT_HISTORY_SIZE
    initial_cwd: str = field(default_factory=os.getcwd)
    prompt: str = '{name}:{cwd}> '
    log_level: str = 'WARNING'

    def __post_init__(self):
        if self.history_size < 1:
            raise ConfigError(f"history size must be at least 1, got {self.history_size}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"unknown log level: {self.log_level}")
        try:
            self.format_prompt('/')
        except (KeyError, IndexError, ValueError) as e:
            raise ConfigError(f"bad prompt template {self.prompt!r}: {e!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ShellConfig':
        """Build a config from EMU_SHELL_* variables (os.environ by default)"""
        if environ is None:
            environ = os.environ

        values = {}
        if f'{ENV_PREFIX}NAME' in environ:
            values['name'] = environ[f'{ENV_PREFIX}NAME']
        if f'{ENV_PREFIX}HISTORY_SIZE' in environ:
            raw = environ[f'{ENV_PREFIX}HISTORY_SIZE']
            try:
                values['history_size'] = int(raw)
            except ValueError:
                raise ConfigError(f"{ENV_PREFIX}HISTORY_SIZE must be an integer, got {raw!r}")
        if f'{ENV_PREFIX}CWD' in environ:
            values['initial_cwd'] = environ[f'{ENV_PREFIX}CWD']
        if f'{ENV_PREFIX}PROMPT' in environ:
            values['prompt'] = environ[f'{ENV_PREFIX}PROMPT']
        if f'{ENV_PREFIX}LOG_LEVEL' in environ:
            values['log_level'] = environ[f'{ENV_PREFIX}LOG_LEVEL']

        return cls(**values)

    def with_overrides(self, **overrides) -> 'ShellConfig':
        """Return a copy with every non-None override applied"""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def format_prompt(self, cwd: str) -> str:
        return self.prompt.format(name=self.name, cwd=cwd)
