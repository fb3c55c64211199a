from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

logger = logging.getLogger(__name__)

from myshell.config import load_config
from myshell.errors import ShellError
from myshell.shell.builtins import get_registry
from myshell.shell.interpreter import ExecutionContext
from myshell.shell.repl import report_error, run_command, run_repl, run_script


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging.

    Log records share the terminal with command output, so only warnings
    are shown unless asked otherwise.

    Args:
        verbose: Enable debug logging
        quiet: Show errors only
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog='myshell',
        description='Interactive command interpreter',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    modes = parser.add_argument_group('Modes', 'Interactive by default')
    modes.add_argument(
        '--command', '-c',
        metavar='COMMAND',
        help='Execute a single command line and exit'
    )
    modes.add_argument(
        '--script',
        type=Path,
        metavar='PATH',
        help='Execute each line of a file and exit'
    )
    modes.add_argument(
        '--list-builtins',
        action='store_true',
        help='List built-in commands and exit'
    )

    settings = parser.add_argument_group('Settings')
    settings.add_argument(
        '--config',
        type=Path,
        help='Path to a YAML configuration file'
    )
    settings.add_argument(
        '--history-file',
        type=Path,
        help='History log location (default: history.txt)'
    )
    settings.add_argument(
        '--prompt',
        help='Prompt string (default: "myshell> ")'
    )
    settings.add_argument(
        '--shell-path',
        help='Interpreter used when a program cannot be executed directly (default: /bin/sh)'
    )

    general = parser.add_argument_group('General Options')
    general.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (debug) logging'
    )
    general.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Only log errors'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.quiet)

    if args.list_builtins:
        for cmd in get_registry().list_commands():
            print(f"  {cmd.name:<15} {cmd.description}")
        return 0

    try:
        config = load_config(
            args.config,
            history_file=args.history_file,
            prompt=args.prompt,
            shell_path=args.shell_path,
        )
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    context = ExecutionContext(config)

    try:
        if args.command is not None:
            run_command(args.command, context)
            return 0
        if args.script is not None:
            run_script(args.script, context)
            return 0
    except ShellError as e:
        if args.command is not None:
            report_error(e)
        return 1
    except OSError as e:
        logger.error(f"Cannot read script: {e}")
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    logger.info("Starting interactive shell...")
    return run_repl(context)


if __name__ == "__main__":
    sys.exit(main())
