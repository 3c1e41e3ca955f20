"""
Terms command: show what a vocabulary document would generate.
"""

import argparse
import logging

from .base import BaseCommand
from ..helpers import print_header, print_footer
from ....constants import ExitCode
from ....core.exceptions import GenerationException, ParseFailure
from ....core.validators import InputValidator
from ....generator.pipeline import VocabularyGenerator
from ....rdf.triple_store import TripleStore


logger = logging.getLogger(__name__)


class TermsCommand(BaseCommand):
    """
    Print the term table: local names, IRIs, labels and collisions.

    Usage:
        terms <input> [--namespace <iri>] [--language <tag>]
    """

    def execute(self, args: argparse.Namespace) -> int:
        failed = self.prepare(args)
        if failed is not None:
            return failed

        try:
            config = self.generation_config(args)
            source = InputValidator.validate_input_path(args.input)
            store = TripleStore.from_file(source, args.rdf_format, force_large_file=args.force_memory)
            table = VocabularyGenerator(config).build_table(store, source.stem)
        except MemoryError as e:
            print(f"✗ {e}")
            return ExitCode.ERROR
        except (GenerationException, ParseFailure, OSError, ValueError) as e:
            return self.report_failure(e)

        print_header(f"Terms in {source.name}")
        print(table.get_summary())
        if table.vocabulary.title:
            print(f"  Title: {table.vocabulary.title.normalized()}")
        print()

        width = max((len(key) for key in table.keys), default=0)
        for term in table:
            label = f"  \"{term.label.normalized()}\"" if term.label else ""
            print(f"  {term.local_name:<{width}}  {term.iri}{label}")

        if table.collisions:
            print("\nDiscarded (local-name collisions):")
            for collision in table.collisions:
                print(f"  {collision.key}: {collision.iri} (kept {collision.existing})")
        print_footer()
        return ExitCode.SUCCESS
