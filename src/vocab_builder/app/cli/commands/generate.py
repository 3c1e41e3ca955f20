"""
Generate command: vocabulary document -> constants source file.
"""

import argparse
import logging

from .base import BaseCommand, print_generation_summary
from ....constants import ExitCode
from ....core.exceptions import GenerationException, ParseFailure
from ....generator.pipeline import VocabularyGenerator


logger = logging.getLogger(__name__)


class GenerateCommand(BaseCommand):
    """
    Generate a source file of vocabulary constants.

    Usage:
        generate <input> --output <file> [--target <tag>] [options]
    """

    def execute(self, args: argparse.Namespace) -> int:
        failed = self.prepare(args)
        if failed is not None:
            return failed

        try:
            config = self.generation_config(args)
        except GenerationException as e:
            return self.report_failure(e)

        print(f"✓ Generating constants from: {args.input}")
        generator = VocabularyGenerator(config)
        try:
            result = generator.generate_file(
                args.input,
                args.output,
                target=args.target,
                rdf_format=args.rdf_format,
                class_name=args.class_name,
                force_large_file=args.force_memory,
            )
        except MemoryError as e:
            print(f"✗ {e}")
            return ExitCode.ERROR
        except (GenerationException, ParseFailure, OSError, ValueError) as e:
            return self.report_failure(e)

        print()
        print_generation_summary(result)
        for collision in result.table.collisions:
            print(f"  ⚠ {collision.iri} dropped: local name '{collision.key}' already used by {collision.existing}")
        print(f"\nSaved to: {result.output_path}")
        return ExitCode.SUCCESS
