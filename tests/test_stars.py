"""Test stars, globstars, question marks, and plus."""

from globlex.ast import EnclosingContext
from globlex.tokens import NodeKind

from .conftest import assert_kinds, assert_values, find_nodes


class TestStar:
    def test_single_star(self, lex_ast):
        ast = lex_ast("*")
        assert_kinds(ast.nodes, [NodeKind.STAR])
        assert ast.nodes[0].value == "*"
        assert ast.state.has_wildcard_star is True
        assert ast.state.has_metachar is True
        assert ast.state.has_globstar is False

    def test_double_star_before_text(self, lex):
        nodes = lex("**.js")
        assert_kinds(nodes, [NodeKind.STAR, NodeKind.DOT, NodeKind.TEXT])
        assert nodes[0].value == "**"

    def test_double_star_mid_segment(self, lex):
        nodes = lex("a**b")
        assert_values(nodes, ["a", "**", "b"])
        assert nodes[1].kind == NodeKind.STAR

    def test_triple_star(self, lex):
        nodes = lex("***")
        assert_kinds(nodes, [NodeKind.STAR])
        assert nodes[0].value == "***"

    def test_star_before_extglob(self, lex):
        nodes = lex("**(a)")
        assert_kinds(nodes, [NodeKind.STAR, NodeKind.TEXT, NodeKind.TEXT])
        assert_values(nodes, ["*", "*(", "a)"])


class TestGlobstar:
    def test_globstar_alone(self, lex_ast):
        ast = lex_ast("**")
        assert_kinds(ast.nodes, [NodeKind.GLOBSTAR])
        node = ast.nodes[0]
        assert node.value == "**"
        assert node.parsed == ""
        assert node.inside == EnclosingContext(brace=False, paren=False)
        assert ast.state.has_globstar is True
        assert ast.state.has_metachar is True
        assert ast.state.has_wildcard_star is False

    def test_noglobstar_degrades_to_star(self, lex_ast):
        ast = lex_ast("**", noglobstar=True)
        assert_kinds(ast.nodes, [NodeKind.STAR])
        assert ast.nodes[0].value == "*"
        assert ast.nodes[0].raw == "**"
        assert ast.state.has_wildcard_star is True
        assert ast.state.has_globstar is False

    def test_trailing_globstar(self, lex):
        nodes = lex("a/**")
        assert_kinds(nodes, [NodeKind.TEXT, NodeKind.SLASH, NodeKind.GLOBSTAR])
        assert nodes[2].parsed == "a/"

    def test_leading_globstar(self, lex):
        nodes = lex("**/*.{js,ts}")
        assert_kinds(
            nodes,
            [NodeKind.GLOBSTAR, NodeKind.SLASH, NodeKind.STAR, NodeKind.DOT, NodeKind.TEXT],
        )
        assert nodes[4].value == "{js,ts}"

    def test_globstar_before_comma(self, lex):
        nodes = lex("{**,a}")
        assert_kinds(nodes, [NodeKind.TEXT, NodeKind.GLOBSTAR, NodeKind.TEXT])

    def test_globstar_before_close_paren(self, lex):
        nodes = lex("(**)")
        assert find_nodes(nodes, NodeKind.GLOBSTAR)


class TestGlobstarFolding:
    def test_repeated_globstars_fold(self, lex):
        folded = lex("a/**/**/**/b")
        plain = lex("a/**/b")
        assert [n.kind for n in folded] == [n.kind for n in plain]
        assert_values(folded, ["a", "/", "**", "/", "b"])
        assert folded[2].raw == "**/**/**"

    def test_fold_keeps_trailing_slash(self, lex):
        nodes = lex("**/**/")
        assert_kinds(nodes, [NodeKind.GLOBSTAR, NodeKind.SLASH])
        assert nodes[0].raw == "**/**"

    def test_no_fold_without_trailing_slash(self, lex):
        nodes = lex("**/**")
        assert_kinds(nodes, [NodeKind.GLOBSTAR, NodeKind.SLASH, NodeKind.GLOBSTAR])

    def test_fold_with_noglobstar(self, lex):
        nodes = lex("a/**/**/b", noglobstar=True)
        assert_values(nodes, ["a", "/", "*", "/", "b"])


class TestQmark:
    def test_single(self, lex_ast):
        ast = lex_ast("?")
        assert_kinds(ast.nodes, [NodeKind.QMARK])
        assert ast.state.has_metachar is True
        assert ast.state.has_qmark is True

    def test_run_records_parsed(self, lex):
        nodes = lex("a??")
        assert_kinds(nodes, [NodeKind.TEXT, NodeKind.QMARK])
        assert nodes[1].value == "??"
        assert nodes[1].parsed == "a"


class TestPlus:
    def test_plus(self, lex):
        nodes = lex("a+b")
        assert_kinds(nodes, [NodeKind.TEXT, NodeKind.PLUS, NodeKind.TEXT])
        assert nodes[1].value == "+"

    def test_plus_does_not_set_metachar(self, lex_ast):
        ast = lex_ast("a+")
        assert ast.state.has_metachar is False
