import pytest

from lamcalc import parser
from lamcalc.abstract_syntax import Abstraction, Application, DefineLet, Number, Script, Variable
from lamcalc.printer import show
from lamcalc.type_impls import O, FunctionType

f, a, b, x = map(Variable, "fabx")


def test_parse_identifiers():
    assert parser.parse_term("x") == x
    assert parser.parse_term("foo_bar2") == Variable("foo_bar2")
    assert parser.parse_term("x''") == Variable("x''")
    assert parser.parse_term("succ") == Variable("succ")
    assert parser.parse_term("letter") == Variable("letter")


def test_parse_number():
    assert parser.parse_term("42") == Number(42)


def test_parse_application():
    assert parser.parse_term("(f) (a)") == Application(f, a)
    assert parser.parse_term("f a b") == Application(Application(f, a), b)
    assert parser.parse_term("f (a b)") == Application(f, Application(a, b))


def test_parse_abstraction():
    assert parser.parse_term("lambda x: (x)") == Abstraction("x", x)
    assert parser.parse_term("lambda x: x a") == Abstraction("x", Application(x, a))
    assert parser.parse_term("(lambda x: (x)) (5)") == Application(
        Abstraction("x", x), Number(5)
    )


def test_parse_typed_abstraction():
    assert parser.parse_term("lambda x: o. (x)") == Abstraction("x", x, O)
    assert parser.parse_term("lambda f: (o -> o). (f)") == Abstraction(
        "f", f, FunctionType(O, O)
    )


def test_parse_types():
    assert parser.parse_type("o") == O
    assert parser.parse_type("o -> o -> o") == FunctionType(O, FunctionType(O, O))
    assert parser.parse_type("(o -> o) -> o") == FunctionType(FunctionType(O, O), O)


def test_parse_let():
    assert parser.parse_toplevel("let two = (succ) (1)") == DefineLet(
        "two", Application(Variable("succ"), Number(1))
    )
    assert parser.parse_toplevel("f a") == Application(f, a)


def test_parse_script():
    src = """
    # numbers
    let a = 1;
    (succ) (a);
    """
    assert parser.parse_script(src) == Script(
        [DefineLet("a", Number(1)), Application(Variable("succ"), a)]
    )
    assert parser.parse_script("") == Script([])


@pytest.mark.parametrize("src", ["(x", "lambda : (x)", "let", "lambda x (x)", "x )"])
def test_syntax_errors(src):
    with pytest.raises(parser.ParseError) as info:
        parser.parse_term(src)
    assert info.value.src == src
    assert info.value.col >= 1


def test_printed_terms_read_back():
    term = Application(
        Abstraction("y'", Application(Variable("y'"), Number(3)), FunctionType(O, O)),
        Abstraction("x", Application(f, x)),
    )
    assert parser.parse_term(show(term)) == term


def test_script_items_are_separated_by_semicolons_only():
    assert parser.parse_script("let three = 3;\nsucc three") == Script(
        [DefineLet("three", Number(3)), Application(Variable("succ"), Variable("three"))]
    )
    # a line break inside an item is whitespace
    assert parser.parse_script("f\na;") == Script([Application(f, a)])
