import dataclasses
import functools

import pyparsing as pp

from lamcalc import abstract_syntax as ast
from lamcalc import type_impls as t


@dataclasses.dataclass
class ParseError(Exception):
    msg: str
    src: str
    col: int

    def __str__(self):
        return f"{self.msg} (at column {self.col})"

    def show_line(self) -> str:
        return f"{self.src}\n{' ' * (self.col - 1)}^"


def parse_script(src: str) -> ast.Script:
    return _parse(script, src)


def parse_toplevel(src: str) -> ast.ToplevelItem:
    return _parse(toplevel, src)


def parse_term(src: str) -> ast.Term:
    return _parse(term, src)


def parse_type(src: str) -> t.Type:
    return _parse(type_expr, src)


def _parse(grammar: pp.ParserElement, src: str):
    try:
        return grammar.parse_string(src, parse_all=True)[0]
    except pp.ParseException as e:
        raise ParseError(e.msg, src, e.col) from None


### Grammar

keyword = pp.Keyword("lambda") | pp.Keyword("let")

# trailing quotes are allowed so that renamed binders can be read back
ident = ~keyword + pp.Regex(r"[A-Za-z_][A-Za-z0-9_]*'*")


type_expr = pp.Forward()

base_type = pp.Keyword("o").set_parse_action(lambda: t.O)

atomic_type = base_type | (pp.Suppress("(") + type_expr + pp.Suppress(")"))

type_expr <<= pp.DelimitedList(atomic_type, "->").set_parse_action(
    lambda toks: t.arrow(*toks)
)


term = pp.Forward()

number = pp.Word(pp.nums).set_parse_action(lambda toks: ast.Number(int(toks[0])))

varref = ident.copy().set_parse_action(lambda toks: ast.Variable(toks[0]))

atom = number | varref | (pp.Suppress("(") + term + pp.Suppress(")"))

typed_abstraction = (
    pp.Suppress(pp.Keyword("lambda"))
    + ident
    + pp.Suppress(":")
    + type_expr
    + pp.Suppress(".")
    + term
).set_parse_action(lambda toks: ast.Abstraction(toks[0], toks[2], toks[1]))

untyped_abstraction = (
    pp.Suppress(pp.Keyword("lambda")) + ident + pp.Suppress(":") + term
).set_parse_action(lambda toks: ast.Abstraction(toks[0], toks[1]))

abstraction = typed_abstraction | untyped_abstraction

# application is left associative: a b c == (a b) c
term <<= pp.OneOrMore(atom | abstraction).set_parse_action(
    lambda toks: functools.reduce(ast.Application, toks[1:], toks[0])
)


deflet = (pp.Suppress(pp.Keyword("let")) + ident + pp.Suppress("=") + term).set_parse_action(
    lambda toks: ast.DefineLet(toks[0], toks[1])
)

toplevel = deflet | term

script = (
    pp.ZeroOrMore(toplevel + pp.Suppress(";")) + pp.Optional(toplevel)
).set_parse_action(lambda toks: ast.Script(list(toks)))

script.ignore(pp.python_style_comment)
