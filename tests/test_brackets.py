"""Test one-character squares and bracket expressions."""

from globlex.tokens import NodeKind

from .conftest import assert_kinds


class TestSquare:
    def test_single_char(self, lex):
        nodes = lex("[a]")
        assert_kinds(nodes, [NodeKind.SQUARE])
        assert nodes[0].value == "a"
        assert nodes[0].raw == "[a]"

    def test_star_in_square(self, lex):
        nodes = lex("[*]")
        assert_kinds(nodes, [NodeKind.SQUARE])
        assert nodes[0].value == "*"

    def test_caret_is_not_square(self, lex):
        nodes = lex("[^]")
        assert nodes[0].kind == NodeKind.BRACKET


class TestBracket:
    def test_negated_bang(self, lex):
        nodes = lex("[!abc]")
        assert_kinds(nodes, [NodeKind.BRACKET])
        node = nodes[0]
        assert node.negated == "^"
        assert node.inner == "abc"
        assert node.close == "]"
        assert node.escaped is False
        assert node.value == "[!abc]"

    def test_negated_caret(self, lex):
        nodes = lex("[^a-z]")
        assert nodes[0].negated == "^"
        assert nodes[0].inner == "a-z"

    def test_plain_class(self, lex):
        nodes = lex("[abc]")
        assert nodes[0].negated == ""
        assert nodes[0].inner == "abc"

    def test_class_with_globs_inside(self, lex):
        nodes = lex("[*.js]")
        assert_kinds(nodes, [NodeKind.BRACKET])
        assert nodes[0].inner == "*.js"

    def test_leading_close_bracket_range(self, lex):
        nodes = lex("[]-]")
        assert_kinds(nodes, [NodeKind.BRACKET])
        assert nodes[0].inner == "]-"
        assert nodes[0].close == "]"

    def test_surrounded(self, lex):
        nodes = lex("a[bc]*")
        assert_kinds(nodes, [NodeKind.TEXT, NodeKind.BRACKET, NodeKind.STAR])

    def test_backslash_run_collapses(self, lex):
        nodes = lex("[a\\\\\\b]")
        node = nodes[0]
        assert node.inner == "a\\\\b"
        assert node.value == "[a\\\\b]"
        assert node.raw == "[a\\\\\\b]"


class TestUnterminatedBracket:
    def test_missing_close(self, lex):
        nodes = lex("[abc")
        assert_kinds(nodes, [NodeKind.BRACKET])
        assert nodes[0].escaped is True
        assert nodes[0].raw == "[abc"

    def test_lone_open(self, lex):
        nodes = lex("[")
        assert_kinds(nodes, [NodeKind.BRACKET])
        node = nodes[0]
        assert node.inner == ""
        assert node.close == ""
        assert node.escaped is True

    def test_empty_class(self, lex):
        nodes = lex("[]")
        assert_kinds(nodes, [NodeKind.BRACKET, NodeKind.TEXT])
        assert nodes[0].escaped is True
        assert nodes[1].value == "]"
