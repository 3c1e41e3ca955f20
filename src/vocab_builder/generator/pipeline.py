"""
Generation pipeline.

Composes namespace resolution, term extraction, metadata resolution and a
target emitter:

    generator = VocabularyGenerator(GenerationConfig(constant_case="upper_underscore"))
    result = generator.generate_file("foaf.rdf", "FOAF.py")

Rendering happens entirely in memory; the output file is opened only after
the source text is complete, so a failed run leaves no file behind.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.validators import InputValidator
from ..emitters import Target, get_emitter, infer_target_from_path
from ..emitters.common import Emitter, build_render_context
from ..rdf.triple_store import TripleStore
from ..shared.models import GenerationConfig, GenerationResult, TermTable
from .extractor import extract_terms
from .metadata import MetadataResolver
from .namespace import detect_vocabulary_name, resolve_namespace

logger = logging.getLogger(__name__)


class VocabularyGenerator:
    """
    Turns a vocabulary document into per-language constant source files.

    A generator holds only its immutable configuration, so one instance can
    serve any number of runs.
    """

    def __init__(self, config: Optional[GenerationConfig] = None):
        self.config = config or GenerationConfig()

    def build_table(self, store: TripleStore, class_name: Optional[str] = None) -> TermTable:
        """
        Resolve the namespace, extract the terms and resolve their metadata.

        Raises:
            ConfigurationError: If no namespace is configured or detectable.
            LocalNameCollision: On a collision under the ``fail`` policy.
        """
        config = self.config
        # Namespace first: a missing prefix must fail before any metadata work
        namespace = resolve_namespace(config.namespace, store, infer=config.infer_namespace)

        detected = None if (config.vocabulary_name or "").strip() else detect_vocabulary_name(store)
        name = detected or config.resolved_name(class_name or "")
        if not name:
            name = namespace.rstrip("#/").rsplit("/", 1)[-1] or "Vocabulary"
        logger.debug(f"Vocabulary name: {name}")

        extracted = extract_terms(
            store,
            namespace,
            aliases=config.namespace_aliases,
            policy=config.collision_policy,
        )
        resolver = MetadataResolver(store, config.preferred_language)
        keys = extracted.sorted_keys
        return TermTable(
            vocabulary=resolver.resolve_vocabulary(namespace, name),
            terms=resolver.resolve_terms(extracted.iris, keys),
            collisions=list(extracted.collisions),
        )

    def render(self, table: TermTable, emitter: Emitter, class_name: str) -> GenerationResult:
        """
        Render an already built table.

        Raises:
            IdentifierCollision: If two constants format to the same identifier.
        """
        context = build_render_context(class_name, self.config, table, emitter)
        source = emitter.render(context)
        logger.info(f"Rendered {len(context.term_constants)} {emitter.display_name} constants for {context.class_name}")
        return GenerationResult(
            target=emitter.target,
            class_name=context.class_name,
            source=source,
            table=table,
            identifiers=list(context.identifiers),
        )

    def generate(self, store: TripleStore, target: Union[Target, str], class_name: str) -> GenerationResult:
        """Build the term table from ``store`` and render it for ``target``."""
        emitter = get_emitter(target)
        table = self.build_table(store, class_name)
        return self.render(table, emitter, class_name)

    def generate_file(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        target: Union[Target, str, None] = None,
        rdf_format: Optional[str] = None,
        class_name: Optional[str] = None,
        force_large_file: bool = False,
    ) -> GenerationResult:
        """
        Generate ``output_path`` from the document at ``input_path``.

        Args:
            input_path: Vocabulary document.
            output_path: Source file to write (UTF-8).
            target: Target tag; inferred from the output extension if None.
            rdf_format: rdflib format token, or None/``auto`` to detect.
            class_name: Generated class name; defaults to the output file stem.
            force_large_file: Skip the memory pre-flight limits.

        Raises:
            GenerationException: Configuration or identifier problems.
            ParseFailure: If the document cannot be parsed.
            OSError: Propagated from reading or writing files.
        """
        source_path = InputValidator.validate_input_path(input_path)
        emitter = get_emitter(target) if target else infer_target_from_path(output_path)
        destination = InputValidator.validate_output_file_path(output_path)
        class_name = class_name or destination.stem

        logger.info(f"Generating {emitter.display_name} vocabulary {class_name} from {source_path}")
        store = TripleStore.from_file(source_path, rdf_format, force_large_file=force_large_file)
        result = self.generate(store, emitter.target, class_name)

        with open(destination, "w", encoding="utf-8", newline="\n") as out:
            out.write(result.source)
        result.output_path = destination
        logger.info(f"Wrote {destination}")
        return result
