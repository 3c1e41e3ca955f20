"""
Targets command: list registered emitters.
"""

import argparse

from .base import BaseCommand
from ..helpers import print_header, print_footer
from ....constants import ExitCode
from ....emitters import list_emitters


class TargetsCommand(BaseCommand):
    """List the target languages and the output extensions mapped to them."""

    def execute(self, args: argparse.Namespace) -> int:
        failed = self.prepare(args)
        if failed is not None:
            return failed

        print_header("Available targets")
        for emitter in list_emitters():
            print(f"  {emitter.target:<12} {emitter.display_name:<24} {', '.join(emitter.file_extensions)}")
        print_footer()
        return ExitCode.SUCCESS
