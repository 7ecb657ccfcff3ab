import pytest

from lispy.errors import LispySyntaxError
from lispy.reader import SyntaxNode, TokenStream, is_blank, lex, open_depth, parse, read
from lispy.types.value import Error, ErrorKind, Number, QExpr, SExpr, String, Symbol


def test_lex_tokens():
    tokens = list(lex('(+ 1 -2) {a} "s\\"t" ; note'))
    assert tokens == [
        ("lparen", "("),
        ("symbol", "+"),
        ("symbol", "1"),
        ("symbol", "-2"),
        ("rparen", ")"),
        ("lbrace", "{"),
        ("symbol", "a"),
        ("rbrace", "}"),
        ("string", '"s\\"t"'),
        ("comment", "; note"),
    ]


def test_lex_operator_symbols():
    assert [v for _, v in lex("+ - * / % ^ \\ = min max <= !&")] == [
        "+", "-", "*", "/", "%", "^", "\\", "=", "min", "max", "<=", "!&",
    ]


@pytest.mark.parametrize("source", ["#", "1 . 2", "'a", "[1]"])
def test_lex_rejects_unknown_characters(source):
    with pytest.raises(LispySyntaxError):
        list(lex(source))


def test_lex_unterminated_string():
    with pytest.raises(LispySyntaxError, match="Unterminated string"):
        list(lex('"abc'))


def test_parse_builds_generic_tree():
    tree = parse("+ 1 (x) {y}")
    assert tree == SyntaxNode("program", children=[
        SyntaxNode("symbol", "+"),
        SyntaxNode("number", "1"),
        SyntaxNode("sexpr", children=[SyntaxNode("symbol", "x")]),
        SyntaxNode("qexpr", children=[SyntaxNode("symbol", "y")]),
    ])


def test_numbers_versus_symbols():
    tags = [node.tag for node in parse("12 -3 - 1a a1 --1").children]
    assert tags == ["number", "number", "symbol", "symbol", "symbol", "symbol"]


@pytest.mark.parametrize("source", ["(1 2", "{1 (2}", ")", "}", "(1))", "{(})"])
def test_parse_rejects_unbalanced_brackets(source):
    with pytest.raises(LispySyntaxError):
        parse(source)


def test_token_stream_parse_all():
    stream = TokenStream(lex("1 (2) ; c"))
    assert [n.tag for n in stream.parse_all()] == ["number", "sexpr", "comment"]


def test_read_values():
    value = read(parse('+ 1 "a\\tb" {x (y)} ; trailing comment'))
    assert value == SExpr([
        Symbol("+"),
        Number(1),
        String("a\tb"),
        QExpr([Symbol("x"), SExpr([Symbol("y")])]),
    ])


def test_read_empty_program():
    assert read(parse("")) == SExpr()
    assert read(parse("; only a comment")) == SExpr()


@pytest.mark.parametrize("literal", ["9223372036854775808", "-9223372036854775809"])
def test_read_out_of_range_number(literal):
    value = read(parse(literal))
    assert value == SExpr([Error("Invalid number", ErrorKind.INVALID_NUMBER)])


@pytest.mark.parametrize("literal", ["9" * 5000, "-" + "1" * 5000, "1" + "0" * 19])
def test_read_over_long_number(literal):
    value = read(parse(literal))
    assert value == SExpr([Error("Invalid number", ErrorKind.INVALID_NUMBER)])


def test_read_number_with_leading_zeros():
    assert read(parse("0" * 30 + "42")) == SExpr([Number(42)])
    assert read(parse("-9223372036854775808")) == SExpr([Number(-(1 << 63))])


def test_over_long_number_is_an_error_value(interp):
    result = interp.eval("+ 1 " + "9" * 5000)
    assert result == Error("Invalid number", ErrorKind.INVALID_NUMBER)


def test_lex_escaped_newline_in_string():
    assert list(lex('"a\\\nb"')) == [("string", '"a\\\nb"')]
    assert read(parse('"a\\\nb"')) == SExpr([String("a\nb")])


def test_read_string_escapes():
    value = read(parse(r'"line\nnext \"q\" back\\slash \z"'))
    assert value == SExpr([String('line\nnext "q" back\\slash z')])


def test_read_rejects_unknown_tag():
    with pytest.raises(ValueError):
        read(SyntaxNode("decimal", "1.5"))


@pytest.mark.parametrize(
    "source,depth",
    [
        ("", 0),
        ("(1 2)", 0),
        ("def {f} (\\ {x} {", 2),
        ('"(" (', 1),
        ("; ( ignored\n{", 1),
        ("())", -1),
    ]
)
def test_open_depth(source, depth):
    assert open_depth(source) == depth


@pytest.mark.parametrize(
    "source,blank",
    [("", True), ("   \n", True), ("; comment", True), ("1", False), ("#", False)]
)
def test_is_blank(source, blank):
    assert is_blank(source) is blank
