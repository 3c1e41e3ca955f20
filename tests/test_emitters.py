"""
Tests for the backend emitters and the emitter registry.

This module tests:
- Shared render context (identifier tracks, documentation wrapping)
- Python, JavaScript, TypeScript and Java output
- Registry lookup and target inference
"""

import pytest

from vocab_builder.core.exceptions import IdentifierCollision
from vocab_builder.emitters import (
    Target,
    build_render_context,
    get_emitter,
    infer_target_from_path,
    list_emitters,
    register_emitter,
)
from vocab_builder.emitters.common import (
    as_sentence,
    escape_block_comment,
    escape_docstring,
    escape_double_quoted,
    escape_single_quoted,
    wrap_text,
)
from vocab_builder.shared.models import (
    CaseFormat,
    GenerationConfig,
    LocalizedText,
    Term,
    TermTable,
    VocabularyInfo,
)

NS = "http://example.org/ns#"
LONG_COMMENT = (
    "A rather long comment that keeps going well past the wrapping column so that "
    "the emitted documentation has to be split   across several lines."
)


def make_table(*keys, title="Test Vocabulary", description=None, see_also=()):
    """Build a term table without a triple store."""
    terms = {}
    for key in keys:
        terms[key] = Term(
            local_name=key,
            iri=NS + key,
            label=LocalizedText(f"{key} label", "en"),
            comment=LocalizedText(f"About {key}.", "en"),
        )
    vocabulary = VocabularyInfo(
        namespace=NS,
        name="Test",
        title=LocalizedText(title, "en") if title else None,
        description=LocalizedText(description, "en") if description else None,
        see_also=tuple(see_also),
    )
    return TermTable(vocabulary=vocabulary, terms=terms)


def exec_python(source, class_name):
    namespace = {}
    exec(compile(source, f"{class_name}.py", "exec"), namespace)
    return namespace[class_name]


@pytest.mark.unit
class TestTextHelpers:
    """Tests for wrapping and escaping."""

    def test_wrap_normalizes_and_wraps(self):
        lines = wrap_text(LONG_COMMENT, 70)
        assert len(lines) > 1
        assert all(len(line) <= 70 for line in lines)
        assert "  " not in " ".join(lines)

    def test_wrap_empty(self):
        assert wrap_text("  \n ", 70) == []

    def test_as_sentence(self):
        assert as_sentence(["A title"]) == ["A title."]
        assert as_sentence(["Done."]) == ["Done."]
        assert as_sentence(["Really?"]) == ["Really?"]
        assert as_sentence([]) == []

    def test_escapes(self):
        assert escape_double_quoted('say "hi"\\') == 'say \\"hi\\"\\\\'
        assert escape_single_quoted("it's") == "it\\'s"
        assert escape_block_comment("end */ here") == "end *&#47; here"
        assert '"""' not in escape_docstring('a """ b')


@pytest.mark.unit
class TestRenderContext:
    """Tests for the language-neutral rendering step."""

    def test_string_block_disabled_by_default(self):
        """Without string knobs only term constants are produced."""
        context = build_render_context("Test", GenerationConfig(), make_table("a", "b"), get_emitter("python"))
        assert context.string_constants == ()
        assert [c.identifier for c in context.term_constants] == ["a", "b"]
        assert context.identifiers == ("a", "b")

    def test_string_block_precedes_terms(self):
        """String identifiers are assigned before term identifiers."""
        config = GenerationConfig(string_suffix="_STR", constant_case=CaseFormat.UPPER)
        context = build_render_context("Test", config, make_table("a", "b"), get_emitter("python"))
        assert context.identifiers == ("a_STR", "b_STR", "A", "B")
        assert context.string_constants[0].local_name == "a"

    def test_tracks_share_one_container(self):
        """A string identifier equal to a term identifier collides."""
        config = GenerationConfig(string_case=CaseFormat.NONE)
        with pytest.raises(IdentifierCollision):
            build_render_context("Test", config, make_table("a"), get_emitter("python"))

    def test_case_collision(self):
        """AB and Ab collide under upper_underscore."""
        config = GenerationConfig(constant_case=CaseFormat.UPPER_UNDERSCORE)
        with pytest.raises(IdentifierCollision) as exc_info:
            build_render_context("Test", config, make_table("AB", "Ab"), get_emitter("java"))
        assert exc_info.value.identifier == "AB"

    def test_term_named_like_class(self):
        """A constant may not share the class name."""
        with pytest.raises(IdentifierCollision):
            build_render_context("Test", GenerationConfig(), make_table("Test"), get_emitter("javascript"))

    def test_reserved_words_per_target(self):
        """Reserved words differ between targets."""
        table = make_table("class", "default", "None")
        python_ids = build_render_context("T", GenerationConfig(), table, get_emitter("python")).identifiers
        java_ids = build_render_context("T", GenerationConfig(), table, get_emitter("java")).identifiers
        assert python_ids == ("class_", "default", "None_")
        assert java_ids == ("class_", "default_", "None")

    def test_header_documentation(self):
        """Title and description become wrapped sentences."""
        table = make_table("a", title="Title  with\nbreaks", description=LONG_COMMENT)
        context = build_render_context("T", GenerationConfig(wrap_width=40), table, get_emitter("python"))
        assert context.title_lines == ("Title with breaks.",)
        assert len(context.description_lines) > 2
        assert all(len(line) <= 40 for line in context.description_lines)
        assert context.description_lines[-1].endswith(".")
        assert context.prefix == "test"


@pytest.mark.unit
class TestPythonEmitter:
    """Tests for the Python target."""

    def test_generated_class_evaluates(self):
        """The output is valid Python and constants hold full IRIs."""
        config = GenerationConfig(constant_case=CaseFormat.UPPER_UNDERSCORE, string_suffix="_NAME")
        source = get_emitter(Target.PYTHON).emit("TestVocab", config, make_table("firstName", "Person"))
        cls = exec_python(source, "TestVocab")
        assert cls.NAMESPACE == NS
        assert cls.PREFIX == "test"
        assert cls.FIRST_NAME == NS + "firstName"
        assert cls.PERSON == NS + "Person"
        assert cls.firstName_NAME == "firstName"
        assert "Test Vocabulary." in cls.__doc__

    def test_layout(self):
        """Header, namespace, prefix and documented terms in order."""
        source = get_emitter("python").emit("T", GenerationConfig(), make_table("a"))
        assert source.startswith("class T:\n    \"\"\"\n")
        assert '    NAMESPACE = "http://example.org/ns#"\n' in source
        assert '    PREFIX = "test"\n' in source
        assert (
            "    # a label\n"
            "    # http://example.org/ns#a.\n"
            "    # About a.\n"
            '    # <a href="http://example.org/ns#a">a</a>\n'
            '    a = NAMESPACE + "a"\n'
        ) in source
        assert source.endswith('a = NAMESPACE + "a"\n')
        assert source.index("NAMESPACE =") < source.index("PREFIX =")

    def test_docstring_escaped(self):
        """Titles containing quotes or backslashes keep the docstring valid."""
        table = make_table("a", title='Tricky """ title \\ here')
        source = get_emitter("python").emit("T", GenerationConfig(), table)
        cls = exec_python(source, "T")
        assert 'Tricky """ title \\ here.' in cls.__doc__

    def test_see_also_listed(self):
        table = make_table("a", see_also=["http://example.org/docs"])
        source = get_emitter("python").emit("T", GenerationConfig(), table)
        assert "See also: <http://example.org/docs>" in source

    def test_no_trailing_whitespace(self):
        table = make_table("a", description=LONG_COMMENT)
        source = get_emitter("python").emit("T", GenerationConfig(), table)
        assert all(line == line.rstrip() for line in source.splitlines())


@pytest.mark.unit
class TestJavaScriptEmitter:
    """Tests for the JavaScript target."""

    def test_layout(self):
        source = get_emitter("javascript").emit("Vocab", GenerationConfig(), make_table("a", "b"))
        assert source.startswith("const NAMESPACE = 'http://example.org/ns#';\n\n/**\n")
        assert "const Vocab = {\n" in source
        assert "    NAMESPACE: 'http://example.org/ns#',\n" in source
        assert "    PREFIX: 'test',\n" in source
        assert "    a: NAMESPACE + 'a',\n" in source
        assert "    b: NAMESPACE + 'b'\n" in source
        assert source.endswith("};\n\nexport default Vocab;\n")

    def test_header_javadoc(self):
        table = make_table("a", see_also=["http://example.org/docs"])
        source = get_emitter("javascript").emit("Vocab", GenerationConfig(), table)
        assert " * Test Vocabulary.\n" in source
        assert " * Namespace Test.\n" in source
        assert " * Prefix: {@code <http://example.org/ns#>}\n" in source
        assert ' * @see <a href="http://example.org/docs">http://example.org/docs</a>\n' in source

    def test_string_block_values_are_local_names(self):
        config = GenerationConfig(string_prefix="S_")
        source = get_emitter("javascript").emit("Vocab", config, make_table("a"))
        assert "    S_a: 'a',\n" in source
        assert "    a: NAMESPACE + 'a'\n" in source

    def test_comment_terminator_escaped(self):
        table = make_table("a")
        table.terms["a"] = Term("a", NS + "a", comment=LocalizedText("ends */ early"))
        source = get_emitter("javascript").emit("Vocab", GenerationConfig(), table)
        assert "ends */ early" not in source
        assert "ends *&#47; early" in source

    def test_empty_table(self):
        """With no terms PREFIX is the last member."""
        source = get_emitter("javascript").emit("Vocab", GenerationConfig(), make_table())
        assert "    PREFIX: 'test'\n" in source


@pytest.mark.unit
class TestTypeScriptEmitter:
    """Tests for the TypeScript target."""

    def test_layout(self):
        source = get_emitter("typescript").emit("Vocab", GenerationConfig(), make_table("a"))
        assert source.startswith("export const NAMESPACE = 'http://example.org/ns#';\n")
        assert "export const Vocab = {\n" in source
        assert "} as const;\n" in source
        assert "export type VocabTerm = (typeof Vocab)[keyof typeof Vocab];\n" in source
        assert source.endswith("export default Vocab;\n")

    def test_typescript_reserved_words(self):
        context = build_render_context("V", GenerationConfig(), make_table("type"), get_emitter("typescript"))
        assert context.identifiers == ("type_",)


@pytest.mark.unit
class TestJavaEmitter:
    """Tests for the Java target."""

    def test_layout(self):
        config = GenerationConfig(constant_case=CaseFormat.UPPER_UNDERSCORE, package_name="org.example.vocab")
        source = get_emitter("java").emit("Vocab", config, make_table("firstName"))
        assert source.startswith("package org.example.vocab;\n\n/**\n")
        assert "public final class Vocab {\n" in source
        assert '    public static final String NAMESPACE = "http://example.org/ns#";\n' in source
        assert '    public static final String PREFIX = "test";\n' in source
        assert '    public static final String FIRST_NAME = NAMESPACE + "firstName";\n' in source
        assert "    private Vocab() {\n    }\n}\n" in source

    def test_without_package(self):
        source = get_emitter("java").emit("Vocab", GenerationConfig(), make_table("a"))
        assert not source.startswith("package")


@pytest.mark.unit
class TestEmitterRegistry:
    """Tests for registry lookup."""

    def test_builtin_targets(self):
        assert [e.target for e in list_emitters()] == ["java", "javascript", "python", "typescript"]

    def test_lookup_is_case_insensitive(self):
        assert get_emitter("Python").target == "python"
        assert get_emitter(Target.JAVA).target == "java"

    def test_unknown_target(self):
        with pytest.raises(ValueError, match="No emitter registered"):
            get_emitter("cobol")

    @pytest.mark.parametrize("filename,target", [
        ("FOAF.py", "python"),
        ("foaf.js", "javascript"),
        ("foaf.mjs", "javascript"),
        ("foaf.ts", "typescript"),
        ("FOAF.java", "java"),
    ])
    def test_infer_target_from_path(self, filename, target):
        assert infer_target_from_path(filename).target == target

    def test_infer_unknown_extension(self):
        with pytest.raises(ValueError, match="--target"):
            infer_target_from_path("foaf.txt")

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            register_emitter(get_emitter("python"))

    def test_default_extension(self):
        assert get_emitter("javascript").default_extension == ".js"


@pytest.mark.unit
class TestAliasTermsAndClassNames:
    """Terms outside the primary namespace and invalid class names."""

    @staticmethod
    def alias_table():
        table = make_table("a")
        table.terms["b"] = Term("b", "https://example.org/ns#b")
        return table

    def test_context_marks_alias_terms(self):
        context = build_render_context("T", GenerationConfig(), self.alias_table(), get_emitter("python"))
        flags = {c.local_name: c.in_namespace for c in context.term_constants}
        assert flags == {"a": True, "b": False}

    @pytest.mark.parametrize("target,primary,alias", [
        ("python", 'a = NAMESPACE + "a"', 'b = "https://example.org/ns#b"'),
        ("javascript", "a: NAMESPACE + 'a',", "b: 'https://example.org/ns#b'"),
        ("typescript", "a: NAMESPACE + 'a',", "b: 'https://example.org/ns#b'"),
        ("java", 'String a = NAMESPACE + "a";', 'String b = "https://example.org/ns#b";'),
    ])
    def test_alias_terms_use_full_iri(self, target, primary, alias):
        source = get_emitter(target).emit("T", GenerationConfig(), self.alias_table())
        assert primary in source
        assert alias in source

    def test_python_alias_values_round_trip(self):
        table = self.alias_table()
        cls = exec_python(get_emitter("python").emit("T", GenerationConfig(), table), "T")
        for key, term in table.terms.items():
            assert getattr(cls, key) == term.iri

    def test_class_name_is_cleaned(self, caplog):
        context = build_render_context("foaf-terms", GenerationConfig(), make_table("a"), get_emitter("java"))
        assert context.class_name == "foaf_terms"
        assert "not a valid Java identifier" in caplog.text

    def test_reserved_class_name_is_suffixed(self):
        context = build_render_context("class", GenerationConfig(), make_table("a"), get_emitter("python"))
        assert context.class_name == "class_"

    def test_cleaned_class_name_still_checked_for_shadowing(self):
        with pytest.raises(IdentifierCollision):
            build_render_context("foaf-terms", GenerationConfig(), make_table("foaf_terms"), get_emitter("python"))
