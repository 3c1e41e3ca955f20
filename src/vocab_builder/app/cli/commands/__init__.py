"""
CLI command implementations.

- base.py: BaseCommand, exit-code mapping and summary printing
- generate.py: GenerateCommand
- terms.py: TermsCommand
- targets.py: TargetsCommand
"""

from .base import (
    BaseCommand,
    exit_code_for,
    print_generation_summary,
)
from .generate import GenerateCommand
from .terms import TermsCommand
from .targets import TargetsCommand


__all__ = [
    'BaseCommand',
    'exit_code_for',
    'print_generation_summary',
    'GenerateCommand',
    'TermsCommand',
    'TargetsCommand',
]
