"""
Command-line interface.

- parsers: argparse parser factory and shared flag groups
- helpers: logging setup, configuration loading, console output
- commands: one command object per sub-command
"""

from .parsers import create_argument_parser
from .commands import GenerateCommand, TermsCommand, TargetsCommand

__all__ = [
    'create_argument_parser',
    'GenerateCommand',
    'TermsCommand',
    'TargetsCommand',
]
