"""End-to-end tests for numseq.pipeline."""

import pytest

from numseq import (
    EvaluationError,
    LexerError,
    ParseError,
    ShorthandError,
    expand,
    parse_and_evaluate,
    validate,
)
from numseq.core.types import EvalErrorKind, ParseErrorKind


class TestBasicFunctionality:
    def test_repetition_shorthand(self):
        assert parse_and_evaluate("42x3") == [42, 42, 42]
        assert parse_and_evaluate("0, 2x3, 10, 42x3") == [0, 2, 2, 2, 10, 42, 42, 42]
        assert parse_and_evaluate(".1x2, 2.3x2, -4.5x2") == [0.1, 0.1, 2.3, 2.3, -4.5, -4.5]

    def test_group(self):
        assert parse_and_evaluate("(1, 2, 3)x2") == [1, 2, 3, 1, 2, 3]

    def test_nested_group(self):
        assert parse_and_evaluate("(((1, 2)x2)x2)x2") == [1, 2] * 8

    def test_complex_example(self):
        expected = [
            1, 2, 1, 2, 42, 42, 42,
            0.5, 1.5, 1.5, 8, 16, 8, 16, 8, 16,
            0.5, 1.5, 1.5, 8, 16, 8, 16, 8, 16,
            5.5,
        ]
        assert parse_and_evaluate("(1, 2)x2, 42x3, (.5, 1.5x2, (8, 16)x3)x2, 5.5") == expected

    def test_overview_example(self):
        assert parse_and_evaluate("(1, 2)x2, 42x3") == [1, 2, 1, 2, 42, 42, 42]


class TestSpecificFeatures:
    def test_single_number(self):
        assert parse_and_evaluate("42") == [42]

    def test_multiple_numbers(self):
        assert parse_and_evaluate("1, 2, 3, 4, 5, 6") == [1, 2, 3, 4, 5, 6]

    def test_strange_whitespace(self):
        assert parse_and_evaluate("  1,2,  3  , 4 ,5, 6 ") == [1, 2, 3, 4, 5, 6]

    def test_decimal_values(self):
        assert parse_and_evaluate(".1, .23, 0.45, 6.7") == [0.1, 0.23, 0.45, 6.7]

    def test_negative_values(self):
        assert parse_and_evaluate("-42, -.1, -0.25, -3.33") == [-42, -0.1, -0.25, -3.33]

    def test_zero_repetitions(self):
        assert parse_and_evaluate("42x0") == []
        assert parse_and_evaluate("1, 2, 42x0, 3") == [1, 2, 3]
        assert parse_and_evaluate("(1, 2)x0, 3") == [3]

    def test_group_with_single_value(self):
        assert parse_and_evaluate("(1)x3") == [1, 1, 1]

    def test_mixed_values_with_group(self):
        assert parse_and_evaluate("0, 1x2, (2, 3, 4x2)x2") == [0, 1, 1, 2, 3, 4, 4, 2, 3, 4, 4]

    def test_empty_input(self):
        assert parse_and_evaluate("") == []
        assert parse_and_evaluate("   ") == []

    def test_results_are_floats(self):
        assert all(isinstance(v, float) for v in parse_and_evaluate("1, (2)x2"))


class TestProperties:
    @pytest.mark.parametrize("source", ["42x3", "(1, (2, 3)x2)x3, 4", "-1.5, (0)x0"])
    def test_deterministic(self, source):
        assert parse_and_evaluate(source) == parse_and_evaluate(source)

    @pytest.mark.parametrize("element", ["7", "(1, 2)", "((3)x2, 4)"])
    def test_group_once_is_identity(self, element):
        assert parse_and_evaluate(f"({element})x1") == parse_and_evaluate(element)

    @pytest.mark.parametrize("a, b", [(2, 3), (1, 5), (0, 4), (3, 0)])
    def test_nesting_multiplies(self, a, b):
        assert parse_and_evaluate(f"((1, 2)x{a})x{b}") == parse_and_evaluate(f"(1, 2)x{a * b}")


class TestFailures:
    @pytest.mark.parametrize(
        "source",
        [
            "1 2",
            "(((1 2)x2)x2)x2",
            "1,,2",
            "(1, 2, 3)x, (4, 5)x2",
            "(1, 2, 3)2, (4, 5)x2",
            "(((1, 2x2)x2)x2",
            "((1, 2)x2)x2)x2",
        ],
    )
    def test_parse_failures(self, source):
        with pytest.raises(ParseError):
            parse_and_evaluate(source)

    def test_lex_failure(self):
        with pytest.raises(LexerError):
            parse_and_evaluate("1, two")

    def test_evaluation_failure(self):
        with pytest.raises(EvaluationError) as exc_info:
            parse_and_evaluate("1, 2-3")
        assert exc_info.value.kind == EvalErrorKind.INVALID_NUMBER

    def test_all_errors_share_a_base(self):
        for source in ["?", "1,,2", "1.2.3"]:
            with pytest.raises(ShorthandError):
                parse_and_evaluate(source)


class TestExpand:
    def test_statistics(self):
        result = expand("(1, 2)x2")
        assert result.source == "(1, 2)x2"
        assert result.values == [1, 2, 1, 2]
        assert result.token_count == 8
        assert result.node_count == 6
        assert len(result) == 4


class TestValidate:
    @pytest.mark.parametrize(
        "source, ok",
        [
            ("42x3", True),
            ("", True),
            ("1-2", True),
            ("1,,2", False),
            ("1 ? 2", False),
            ("(1", False),
        ],
    )
    def test_validate_agrees_with_pipeline(self, source, ok):
        errors = [e for e in validate(source) if e.severity == "error"]
        assert (not errors) == ok
        if ok:
            try:
                parse_and_evaluate(source)
            except (LexerError, ParseError):
                pytest.fail("validate accepted input the pipeline rejects")
            except EvaluationError:
                pass
        else:
            with pytest.raises((LexerError, ParseError)):
                parse_and_evaluate(source)


class TestNumericBounds:
    def test_oversized_count_is_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            parse_and_evaluate("1x99999999999999999999")
        assert exc_info.value.kind == ParseErrorKind.INVALID_COUNT

    def test_out_of_range_value_is_evaluation_error(self):
        with pytest.raises(EvaluationError) as exc_info:
            parse_and_evaluate("1" * 400)
        assert exc_info.value.kind == EvalErrorKind.INVALID_NUMBER

    def test_negative_out_of_range_value(self):
        with pytest.raises(EvaluationError):
            parse_and_evaluate("-" + "1" * 400 + "x2")
