"""Tests for numseq.dsl.formatter."""

import pytest

from numseq.dsl.ast_nodes import Loop, Sequence, Value
from numseq.dsl.formatter import format_node
from numseq.dsl.lexer import lex
from numseq.dsl.parser import parse_sequence


def _canonical(source):
    return format_node(parse_sequence(lex(source)))


class TestFormat:
    def test_normalizes_whitespace(self):
        assert _canonical("  1,2 ,  3 x 2") == "1, 2, 3x2"

    def test_groups(self):
        assert _canonical("( (1,2) x2 ,3)x 4") == "((1, 2)x2, 3)x4"

    def test_bare_group_keeps_parentheses(self):
        assert _canonical("(1), 2") == "(1), 2"

    def test_value_text_verbatim(self):
        assert _canonical("-.5, 007") == "-.5, 007"

    def test_empty(self):
        assert format_node(Sequence()) == ""

    def test_non_sequence_root(self):
        assert format_node(Loop(Value("1"), Value("3"))) == "1x3"
        assert format_node(Value("4")) == "4"

    @pytest.mark.parametrize("source", ["(1, 2)x2, 42x3", "(((1, 2)x2)x2)x2", "(.5, 1.5x2, (8, 16)x3)x2, 5.5"])
    def test_reparses_to_same_tree(self, source):
        tree = parse_sequence(lex(source))
        assert parse_sequence(lex(format_node(tree))) == tree

    def test_unknown_node(self):
        with pytest.raises(TypeError):
            format_node(Sequence(("bogus",)))
