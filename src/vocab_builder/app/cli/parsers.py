"""
CLI argument parser configuration.

This module defines the argument parser structure for all CLI commands.

Command Structure:
    - generate <input> --output <file> [--target ...] [naming options]
    - terms    <input> [--namespace ...]
    - targets
"""

import argparse

from ...constants import RDFFormats
from ...shared.models import CaseFormat


# ============================================================================
# Shared Flag Group Builders
# ============================================================================

def add_input_flags(parser: argparse.ArgumentParser) -> None:
    """Add the input document argument and its parsing flags."""
    parser.add_argument('input', help='Vocabulary document (Turtle, RDF/XML, N-Triples, JSON-LD, ...)')
    parser.add_argument(
        '--format',
        dest='rdf_format',
        choices=list(RDFFormats.SUPPORTED),
        default=RDFFormats.AUTO,
        help='RDF serialization of the input (default: auto-detect)'
    )
    parser.add_argument(
        '--force-memory',
        action='store_true',
        help='Skip memory safety checks for very large files (use with caution)'
    )


def add_namespace_flags(parser: argparse.ArgumentParser) -> None:
    """Add namespace selection flags."""
    parser.add_argument(
        '--namespace', '-p',
        help='Namespace prefix of the vocabulary terms (default: detected from the document)'
    )
    parser.add_argument(
        '--alias',
        dest='namespace_aliases',
        action='append',
        metavar='IRI',
        help='Additional namespace prefix scanned after --namespace (repeatable)'
    )
    parser.add_argument(
        '--language', '-l',
        dest='preferred_language',
        help='Preferred language tag for labels and comments (default: en)'
    )


def add_naming_flags(parser: argparse.ArgumentParser) -> None:
    """Add identifier naming flags."""
    case_choices = [case.value for case in CaseFormat]
    parser.add_argument(
        '--name', '-n',
        dest='vocabulary_name',
        help='Vocabulary name (default: vann:preferredNamespacePrefix or the class name)'
    )
    parser.add_argument(
        '--constant-case',
        choices=case_choices,
        help='Case convention for term constants (default: unmodified local names)'
    )
    parser.add_argument(
        '--string-case',
        choices=case_choices,
        help='Case convention for string constants; enables the string block'
    )
    parser.add_argument(
        '--string-prefix',
        help='Prefix for string constant names; enables the string block'
    )
    parser.add_argument(
        '--string-suffix',
        help='Suffix for string constant names; enables the string block'
    )
    parser.add_argument(
        '--strict-collisions',
        action='store_true',
        help='Fail instead of warning when two IRIs share a local name'
    )


def add_config_flags(parser: argparse.ArgumentParser) -> None:
    """Add configuration and verbosity flags."""
    parser.add_argument(
        '--config', '-c',
        help='Path to configuration file (default: ./vocab_builder.json if present)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )


# ============================================================================
# Main Parser Factory
# ============================================================================

def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser with all subcommands.
    """
    parser = argparse.ArgumentParser(
        prog='vocab-builder',
        description="Generate source-code constants from RDF vocabularies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Python class with upper-case constants
    %(prog)s generate foaf.rdf --output FOAF.py --constant-case upper_underscore

    # JavaScript module with an extra string block
    %(prog)s generate schema.ttl -o Schema.js --namespace http://schema.org/ --string-suffix _STR

    # Inspect the terms a document would produce
    %(prog)s terms foaf.rdf --language de

    # List available targets
    %(prog)s targets
        """,
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    _add_generate_parser(subparsers)
    _add_terms_parser(subparsers)
    _add_targets_parser(subparsers)

    return parser


# ============================================================================
# Command Parsers
# ============================================================================

def _add_generate_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the generate command parser."""
    parser = subparsers.add_parser(
        'generate',
        help='Generate a constants source file from a vocabulary'
    )
    add_input_flags(parser)
    parser.add_argument(
        '--output', '-o',
        required=True,
        help='Output source file; its stem becomes the class name'
    )
    parser.add_argument(
        '--target', '-t',
        help='Target language (default: inferred from the output extension)'
    )
    parser.add_argument(
        '--class-name',
        help='Generated class/object name (default: output file stem)'
    )
    parser.add_argument(
        '--package',
        dest='package_name',
        help='Package declaration for targets that use one (Java)'
    )
    add_namespace_flags(parser)
    add_naming_flags(parser)
    add_config_flags(parser)


def _add_terms_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the terms command parser."""
    parser = subparsers.add_parser(
        'terms',
        help='List the terms, labels and collisions found in a vocabulary'
    )
    add_input_flags(parser)
    add_namespace_flags(parser)
    add_config_flags(parser)


def _add_targets_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the targets command parser."""
    parser = subparsers.add_parser(
        'targets',
        help='List the available target languages'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
