from lamcalc import interpreter
from lamcalc.abstract_syntax import (
    Abstraction,
    Application,
    DefineLet,
    Number,
    Succ,
    Term,
    ToplevelItem,
    Variable,
)
from lamcalc.type_impls import Type


def show(term: Term, numerals: bool = False) -> str:
    """Render `term` in the reference textual form, which `parser` reads back.

    With `numerals`, abstractions shaped like church numerals are shown as
    decimal literals.
    """
    if numerals and isinstance(term, Abstraction):
        n = interpreter.as_number(term)
        if n is not None:
            return str(n)

    match term:
        case Variable(name):
            return name
        case Abstraction(param, body, None):
            return f"lambda {param}: ({show(body, numerals)})"
        case Abstraction(param, body, ty):
            return f"lambda {param}: {show_type(ty)}. ({show(body, numerals)})"
        case Application(fun, arg):
            return f"({show(fun, numerals)}) ({show(arg, numerals)})"
        case Number(val):
            return str(val)
        case Succ():
            return "succ"
        case _:
            raise NotImplementedError(term)


def show_type(ty: Type) -> str:
    return str(ty)


def show_toplevel(item: ToplevelItem, numerals: bool = False) -> str:
    match item:
        case DefineLet(var, val):
            return f"let {var} = {show(val, numerals)}"
        case _:
            return show(item, numerals)
