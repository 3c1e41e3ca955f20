"""
Integration tests for the generation pipeline.

These tests run the full flow (parse, namespace, extraction, metadata,
rendering, writing) against temporary files.
"""

import pytest
from rdflib import URIRef

from vocab_builder.core.exceptions import (
    ConfigurationError,
    IdentifierCollision,
    LocalNameCollision,
    ParseFailure,
)
from vocab_builder.generator.namespace import NO_PREFIX_MESSAGE
from vocab_builder.generator.pipeline import VocabularyGenerator
from vocab_builder.rdf import TripleStore
from vocab_builder.shared.models import CaseFormat, CollisionPolicy, GenerationConfig

from fixtures import (
    ALIAS_TTL,
    EXAMPLE_KEYS,
    EXAMPLE_NAMESPACE,
    EXAMPLE_RDFXML,
    MALFORMED_TTL,
    UNDECLARED_TTL,
)


def load_class(path, class_name):
    namespace = {}
    exec(compile(path.read_text(encoding="utf-8"), str(path), "exec"), namespace)
    return namespace[class_name]


@pytest.mark.integration
class TestGenerateFile:
    """Tests for VocabularyGenerator.generate_file."""

    def test_python_round_trip(self, example_ttl_file, tmp_path):
        """Every constant of the generated class is a subject of the graph."""
        output = tmp_path / "ExampleVocab.py"
        result = VocabularyGenerator().generate_file(example_ttl_file, output)

        assert output.exists()
        assert result.output_path == output.resolve()
        assert result.target == "python"
        assert result.class_name == "ExampleVocab"

        cls = load_class(output, "ExampleVocab")
        store = TripleStore.from_file(example_ttl_file)
        subjects = set(store.subjects())
        assert cls.NAMESPACE == EXAMPLE_NAMESPACE
        for key in EXAMPLE_KEYS:
            value = getattr(cls, key)
            assert value == EXAMPLE_NAMESPACE + key
            assert URIRef(value) in subjects

    def test_rerun_is_byte_identical(self, example_ttl_file, tmp_path):
        """Generation is deterministic."""
        first = tmp_path / "First.js"
        second = tmp_path / "Second.js"
        generator = VocabularyGenerator(GenerationConfig(constant_case=CaseFormat.UPPER_UNDERSCORE))
        generator.generate_file(example_ttl_file, first, class_name="Vocab")
        generator.generate_file(example_ttl_file, second, class_name="Vocab")
        assert first.read_bytes() == second.read_bytes()

    def test_output_is_utf8_with_unix_newlines(self, example_ttl_file, tmp_path):
        output = tmp_path / "Vocab.java"
        VocabularyGenerator().generate_file(example_ttl_file, output)
        data = output.read_bytes()
        assert b"\r\n" not in data
        data.decode("utf-8")

    def test_prefix_from_vann(self, example_ttl_file, tmp_path):
        """The vann prefix names the vocabulary; the class keeps the file stem."""
        output = tmp_path / "ExampleVocab.py"
        result = VocabularyGenerator().generate_file(example_ttl_file, output)
        cls = load_class(output, "ExampleVocab")
        assert cls.PREFIX == "ex"
        assert result.table.vocabulary.name == "ex"
        assert "Namespace ex." in cls.__doc__
        assert "Example Vocabulary." in cls.__doc__

    def test_configured_name_wins(self, example_ttl_file, tmp_path):
        output = tmp_path / "ExampleVocab.py"
        VocabularyGenerator(GenerationConfig(vocabulary_name="Sample")).generate_file(example_ttl_file, output)
        assert load_class(output, "ExampleVocab").PREFIX == "sample"

    def test_name_falls_back_to_class_name(self, tmp_path):
        source = tmp_path / "undeclared.ttl"
        source.write_text(UNDECLARED_TTL, encoding="utf-8")
        output = tmp_path / "Things.py"
        config = GenerationConfig(namespace="http://example.org/x#")
        VocabularyGenerator(config).generate_file(source, output)
        cls = load_class(output, "Things")
        assert cls.PREFIX == "things"
        assert cls.Thing == "http://example.org/x#Thing"

    def test_target_inferred_from_extension(self, example_ttl_file, tmp_path):
        output = tmp_path / "vocab.ts"
        result = VocabularyGenerator().generate_file(example_ttl_file, output, class_name="Vocab")
        assert result.target == "typescript"
        assert "} as const;" in output.read_text(encoding="utf-8")

    def test_explicit_target_overrides_extension(self, example_ttl_file, tmp_path):
        output = tmp_path / "vocab.txt"
        result = VocabularyGenerator().generate_file(example_ttl_file, output, target="javascript", class_name="Vocab")
        assert result.target == "javascript"
        assert output.read_text(encoding="utf-8").endswith("export default Vocab;\n")

    def test_unknown_extension(self, example_ttl_file, tmp_path):
        output = tmp_path / "vocab.txt"
        with pytest.raises(ValueError, match="Cannot infer target"):
            VocabularyGenerator().generate_file(example_ttl_file, output)
        assert not output.exists()

    def test_rdfxml_input(self, tmp_path):
        source = tmp_path / "thing.rdf"
        source.write_text(EXAMPLE_RDFXML, encoding="utf-8")
        output = tmp_path / "Things.py"
        VocabularyGenerator(GenerationConfig(namespace="http://example.org/ns#")).generate_file(source, output)
        cls = load_class(output, "Things")
        assert cls.Thing == "http://example.org/ns#Thing"


@pytest.mark.integration
class TestGenerationFailures:
    """Failed runs raise the right error and leave no file behind."""

    def test_identifier_collision_writes_nothing(self, case_collision_ttl_file, tmp_path):
        """AB and Ab collide under upper_underscore."""
        output = tmp_path / "Collide.py"
        config = GenerationConfig(namespace="http://example.org/ns#", constant_case=CaseFormat.UPPER_UNDERSCORE)
        with pytest.raises(IdentifierCollision):
            VocabularyGenerator(config).generate_file(case_collision_ttl_file, output)
        assert not output.exists()

    def test_collision_free_without_case_change(self, case_collision_ttl_file, tmp_path):
        output = tmp_path / "Collide.py"
        config = GenerationConfig(namespace="http://example.org/ns#")
        result = VocabularyGenerator(config).generate_file(case_collision_ttl_file, output)
        assert result.identifiers == ["AB", "Ab"]

    def test_blank_namespace_fails_before_metadata(self, monkeypatch):
        """Without a namespace no metadata is ever resolved."""
        def fail(*args, **kwargs):
            raise AssertionError("metadata resolved before namespace check")

        monkeypatch.setattr("vocab_builder.generator.pipeline.MetadataResolver", fail)
        store = TripleStore.from_content(UNDECLARED_TTL)
        generator = VocabularyGenerator(GenerationConfig(namespace="  ", infer_namespace=False))
        with pytest.raises(ConfigurationError, match=NO_PREFIX_MESSAGE):
            generator.generate(store, "python", "Things")

    def test_undetectable_namespace(self, tmp_path):
        source = tmp_path / "undeclared.ttl"
        source.write_text(UNDECLARED_TTL, encoding="utf-8")
        output = tmp_path / "Things.py"
        with pytest.raises(ConfigurationError):
            VocabularyGenerator().generate_file(source, output)
        assert not output.exists()

    def test_parse_failure_writes_nothing(self, tmp_path):
        source = tmp_path / "broken.ttl"
        source.write_text(MALFORMED_TTL, encoding="utf-8")
        output = tmp_path / "Broken.py"
        with pytest.raises(ParseFailure):
            VocabularyGenerator(GenerationConfig(namespace="http://example.org/ns#")).generate_file(source, output)
        assert not output.exists()

    def test_missing_input(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            VocabularyGenerator().generate_file(tmp_path / "absent.ttl", tmp_path / "Out.py")

    def test_fail_policy(self):
        store = TripleStore.from_content(ALIAS_TTL)
        config = GenerationConfig(
            namespace="http://example.org/ns#",
            namespace_aliases=("https://example.org/ns#",),
            collision_policy=CollisionPolicy.FAIL,
        )
        with pytest.raises(LocalNameCollision):
            VocabularyGenerator(config).generate(store, "python", "Things")

    def test_warn_policy_records_collision(self):
        store = TripleStore.from_content(ALIAS_TTL)
        config = GenerationConfig(
            namespace="http://example.org/ns#",
            namespace_aliases=("https://example.org/ns#",),
        )
        result = VocabularyGenerator(config).generate(store, "python", "Things")
        assert [c.key for c in result.table.collisions] == ["Thing"]
        assert "Discarded (local-name collisions): 1" in result.get_summary()


@pytest.mark.integration
class TestBuildTable:
    """Tests for the table stage on its own."""

    def test_table_in_canonical_order(self, example_store):
        table = VocabularyGenerator().build_table(example_store, "Example")
        assert table.keys == EXAMPLE_KEYS
        assert table.vocabulary.namespace == EXAMPLE_NAMESPACE
        assert table.get("Person").label.value == "Person"

    def test_preferred_language(self, example_store):
        table = VocabularyGenerator(GenerationConfig(preferred_language="de")).build_table(example_store)
        assert table.get("Person").comment.value == "Ein Mensch."

    def test_summary(self, example_store):
        summary = VocabularyGenerator().build_table(example_store, "Example").get_summary()
        assert "Terms: 4" in summary
        assert "Local-name collisions: 0" in summary


@pytest.mark.integration
class TestRoundTrip:
    """Generated values reproduce the subject IRIs they document."""

    def test_alias_terms_keep_their_own_iri(self, tmp_path):
        """Terms found under an alias prefix are emitted with their full IRI."""
        source = tmp_path / "alias.ttl"
        source.write_text(ALIAS_TTL, encoding="utf-8")
        output = tmp_path / "Things.py"
        config = GenerationConfig(
            namespace="http://example.org/ns#",
            namespace_aliases=("https://example.org/ns#",),
        )
        result = VocabularyGenerator(config).generate_file(source, output)

        cls = load_class(output, "Things")
        assert cls.Thing == "http://example.org/ns#Thing"
        assert cls.Other == "https://example.org/ns#Other"
        for key, term in result.table.terms.items():
            assert getattr(cls, key) == term.iri

    @pytest.mark.parametrize("extension,declaration", [
        (".py", "class foaf_terms:"),
        (".js", "const foaf_terms = {"),
        (".ts", "export const foaf_terms = {"),
        (".java", "public final class foaf_terms {"),
    ])
    def test_class_name_from_hyphenated_file_stem(self, example_ttl_file, tmp_path, extension, declaration):
        """A file stem that is not an identifier yields a cleaned class name."""
        output = tmp_path / f"foaf-terms{extension}"
        result = VocabularyGenerator().generate_file(example_ttl_file, output)
        text = output.read_text(encoding="utf-8")
        assert result.class_name == "foaf_terms"
        assert declaration in text
        assert "foaf-terms" not in text

    def test_hyphenated_python_output_compiles(self, example_ttl_file, tmp_path):
        output = tmp_path / "foaf-terms.py"
        VocabularyGenerator().generate_file(example_ttl_file, output)
        cls = load_class(output, "foaf_terms")
        assert cls.Person == EXAMPLE_NAMESPACE + "Person"
