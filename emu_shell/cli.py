"""Command-line entry point for emu-shell"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import ShellConfig
from .exceptions import ConfigError, FatalIOError
from .shell import Shell

logger = logging.getLogger('emu_shell')


def setup_logging(level: str) -> None:
    """Send emu_shell logs to stderr through rich"""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.handlers[:] = [handler]
    logger.setLevel(level.upper())
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='emu-shell',
        description='Line-oriented shell with builtins, redirection and background jobs',
    )
    parser.add_argument('-c', '--command', help='run one command line and exit')
    parser.add_argument('--cwd', dest='initial_cwd', help='starting working directory')
    parser.add_argument('--history-size', type=int, help='number of command lines kept by `history`')
    parser.add_argument('--name', help='shell name used in prompts and error messages')
    parser.add_argument('--log-level', help='DEBUG, INFO, WARNING, ERROR or CRITICAL')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ShellConfig.from_env().with_overrides(
            initial_cwd=args.initial_cwd,
            history_size=args.history_size,
            name=args.name,
            log_level=args.log_level,
        )
    except ConfigError as e:
        print(f"emu-shell: {e}", file=sys.stderr)
        return 2

    setup_logging(config.log_level)

    try:
        shell = Shell(config)
    except NotADirectoryError as e:
        print(f"{config.name}: {e.filename}: Not a directory", file=sys.stderr)
        return 2

    try:
        if args.command is not None:
            result = shell.run_line(args.command)
            shell.jobs.wait()
            return result.exit_code if result is not None and not result.ok else 0
        return shell.run()
    except FatalIOError as e:
        logger.critical("%s", e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
