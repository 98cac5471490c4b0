"""Tests for the line synthesizer: determinism, adjacency, block balance and layout."""

import random

import pytest

from transmute.languages import PatternCategory
from transmute.synth_types import SynthesisConfig, SynthesisMode
from transmute.synthesizer import synthesize, synthesize_statements

BRACE_LANGUAGES = ["javascript", "rust", "go", "cpp", "java"]

SAMPLE_TEXTS = [
    "buy milk",
    "buy milk\n\nfinish report",
    "Plan the week\nCall the bank about the loan\nWrite tests\nShip it!",
    "if this then that {\n} weird [brackets] (here)\n\n\n# not a heading",
    "one\ntwo\nthree\nfour\nfive\nsix\nseven\neight\nnine\nten",
    "emoji 🎉 and <html> & \"quotes\" 'single'",
]


def _sample_lines(count: int) -> list[str]:
    rng = random.Random(11)
    words = ["alpha", "beta", "gamma", "delta", "task", "goal", "note", "plan"]
    return [
        " ".join(rng.choice(words) for _ in range(rng.randint(1, 6)))
        for _ in range(count)
    ]


class TestDeterminism:
    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_seeded_output_is_stable(self, text):
        first = synthesize(text, "javascript", "seeded")
        second = synthesize(text, "javascript", "seeded")
        assert first == second

    def test_seeded_ignores_rng(self):
        a = synthesize("buy milk", "python", "seeded", rng=random.Random(1))
        b = synthesize("buy milk", "python", "seeded", rng=random.Random(2))
        assert a == b

    def test_random_mode_with_same_seed_repeats(self):
        text = "\n".join(_sample_lines(10))
        a = synthesize(text, "go", "random", rng=random.Random(99))
        b = synthesize(text, "go", "random", rng=random.Random(99))
        assert a == b

    def test_mode_enum_accepted(self):
        assert synthesize("x", "java", SynthesisMode.SEEDED) == synthesize("x", "java", "seeded")

    def test_invalid_mode_raises(self):
        with pytest.raises(ValueError):
            synthesize("buy milk", "javascript", "chaotic")


class TestAdjacency:
    @pytest.mark.parametrize("language_id", BRACE_LANGUAGES + ["python", "ruby", "cobol"])
    def test_no_adjacent_repeat(self, language_id):
        text = "\n".join(_sample_lines(40))
        statements = synthesize_statements(text, language_id, "seeded")
        assert len(statements) >= 2
        for prev, curr in zip(statements, statements[1:]):
            if curr.forced:
                continue
            assert prev.pattern_id != curr.pattern_id

    def test_hidden_python_close_does_not_split_repeats(self):
        text = "\n".join(_sample_lines(200))
        statements = synthesize_statements(text, "python", "seeded")
        visible = [s for s in statements if s.text]
        for prev, curr in zip(visible, visible[1:]):
            assert prev.pattern_id != curr.pattern_id

    def test_random_mode_no_adjacent_repeat(self):
        text = "\n".join(_sample_lines(40))
        statements = synthesize_statements(text, "rust", "random", rng=random.Random(5))
        for prev, curr in zip(statements, statements[1:]):
            if not curr.forced:
                assert prev.pattern_id != curr.pattern_id


class TestBlockBalance:
    @pytest.mark.parametrize("language_id", BRACE_LANGUAGES)
    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_braces_balanced(self, language_id, text):
        code = synthesize(text, language_id, "seeded")
        assert code.count("{") == code.count("}")

    @pytest.mark.parametrize("language_id", BRACE_LANGUAGES)
    def test_braces_balanced_over_many_seeds(self, language_id):
        text = "\n".join(_sample_lines(25))
        for seed in range(20):
            code = synthesize(text, language_id, "random", rng=random.Random(seed))
            assert code.count("{") == code.count("}")

    @pytest.mark.parametrize("language_id", BRACE_LANGUAGES + ["python", "ruby"])
    def test_opens_and_closes_pair_up(self, language_id):
        text = "\n".join(_sample_lines(30))
        statements = synthesize_statements(text, language_id, "seeded")
        opens = sum(1 for s in statements if s.category == PatternCategory.CONTROL_OPEN)
        closes = sum(1 for s in statements if s.category == PatternCategory.CONTROL_CLOSE)
        assert opens == closes

    def test_ruby_closes_with_end(self):
        text = "\n".join(_sample_lines(30))
        statements = synthesize_statements(text, "ruby", "seeded")
        opens = sum(1 for s in statements if s.category == PatternCategory.CONTROL_OPEN)
        code = synthesize(text, "ruby", "seeded")
        assert sum(1 for line in code.split("\n") if line.strip() == "end") == opens

    def test_python_emits_no_close_lines(self):
        code = synthesize("\n".join(_sample_lines(30)), "python", "seeded")
        assert all(line.strip() for line in code.split("\n"))

    def test_open_blocks_bounded(self):
        config = SynthesisConfig(max_open_blocks=1)
        statements = synthesize_statements(
            "\n".join(_sample_lines(30)), "javascript", "seeded", config=config
        )
        depth = 0
        for statement in statements:
            if statement.category == PatternCategory.CONTROL_OPEN:
                depth += 1
            elif statement.category == PatternCategory.CONTROL_CLOSE:
                depth -= 1
            assert 0 <= depth <= 1

    def test_forced_closes_only_at_end(self):
        statements = synthesize_statements("\n".join(_sample_lines(30)), "java", "seeded")
        forced = [i for i, s in enumerate(statements) if s.forced]
        if forced:
            assert forced == list(range(forced[0], len(statements)))
            assert all(statements[i].category == PatternCategory.CONTROL_CLOSE for i in forced)


class TestLayout:
    def test_blank_line_between_groups(self):
        code = synthesize("buy milk\n\nfinish report", "javascript", "seeded")
        lines = code.split("\n")
        blank = [i for i, line in enumerate(lines) if not line.strip()]
        assert len(blank) == 1
        assert 0 < blank[0] < len(lines) - 1
        assert code.count("{") == code.count("}")

    def test_blank_lines_preserved(self):
        code = synthesize("a\n\n\nb", "python", "seeded")
        assert code.count("\n\n\n") == 1

    def test_indent_depth_bounded(self):
        code = synthesize("\n".join(_sample_lines(40)), "javascript", "seeded")
        for line in code.split("\n"):
            indent = len(line) - len(line.lstrip(" "))
            assert indent <= 4 * 2

    def test_statement_depth_bounded(self):
        statements = synthesize_statements("\n".join(_sample_lines(40)), "go", "seeded")
        assert all(0 <= s.depth <= 4 for s in statements)

    def test_one_to_three_statements_per_line(self):
        statements = synthesize_statements("only line", "java", "seeded")
        drawn = [s for s in statements if not s.forced]
        assert 1 <= len(drawn) <= 3

    def test_line_index_recorded(self):
        statements = synthesize_statements("first\n\nthird", "javascript", "seeded")
        assert {s.line_index for s in statements if not s.forced} == {0, 2}

    def test_crlf_treated_as_newline(self):
        assert synthesize("a\r\nb", "rust", "seeded") == synthesize("a\nb", "rust", "seeded")


class TestEmptyInput:
    def test_empty_text_gives_placeholder(self):
        assert synthesize("", "javascript", "seeded") == "// Start typing..."

    def test_whitespace_only_gives_placeholder(self):
        assert synthesize("  \n\t\n", "python", "seeded") == "# Start typing..."

    def test_placeholder_statement(self):
        statements = synthesize_statements("", "ruby", "seeded")
        assert len(statements) == 1
        assert statements[0].text == "# Start typing..."

    def test_unknown_language_still_synthesizes(self):
        code = synthesize("buy milk", "cobol", "seeded")
        assert code
        assert code.count("{") == code.count("}")
