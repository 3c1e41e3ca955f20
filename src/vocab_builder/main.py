#!/usr/bin/env python3
"""
RDF Vocabulary Constant Generator - CLI Entry Point

Usage:
    vocab-builder generate <input> --output <file> [options]
    vocab-builder terms <input> [options]
    vocab-builder targets

For detailed help on each command:
    vocab-builder <command> --help
"""

import sys
from typing import List, Optional

from .app.cli import create_argument_parser
from .app.cli.commands import GenerateCommand, TermsCommand, TargetsCommand
from .constants import ExitCode


COMMANDS = {
    'generate': GenerateCommand,
    'terms': TermsCommand,
    'targets': TargetsCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.ERROR

    command_class = COMMANDS[args.command]
    command = command_class(config_path=getattr(args, 'config', None))

    try:
        return int(command.execute(args))
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.")
        return 130


if __name__ == '__main__':
    sys.exit(main())
