from __future__ import annotations

import logging
from typing import Iterable, Optional

from lamcalc.abstract_syntax import (
    Abstraction,
    Application,
    DefineLet,
    Number,
    Script,
    Succ,
    Term,
    ToplevelItem,
    Variable,
    free_vars,
)
from lamcalc.definitions import Definitions
from lamcalc.substitution import fresh_name, substitute

logger = logging.getLogger(__name__)


class Interpreter:
    def __init__(self, definitions: Optional[Definitions] = None):
        if definitions is None:
            definitions = Definitions.default()
        self.definitions = definitions

    def run_script(self, script: Script) -> list[Term]:
        return [self.run_toplevel(stmt) for stmt in script.statements]

    def run_toplevel(self, stmt: ToplevelItem) -> Term:
        match stmt:
            case DefineLet(var, val):
                self.definitions.set(var, val)
                return val
            case Term() as term:
                return evaluate(term, self.definitions)
            case _:
                raise NotImplementedError(stmt)


def evaluate(term: Term, definitions: Definitions) -> Term:
    """Reduce `term` to normal form.

    Applications reduce the function first and substitute the argument
    unevaluated (call-by-name). Abstraction bodies are normalized too. May
    not terminate.
    """
    match term:
        case Variable(name):
            match definitions.get(name):
                case None:
                    return term
                case val:
                    return evaluate(val, definitions)
        case Abstraction(param, body, ty):
            return Abstraction(param, evaluate(body, definitions), ty)
        case Application(fun, arg):
            return apply(evaluate(fun, definitions), arg, definitions)
        case Number(_) | Succ():
            return term
        case _:
            raise NotImplementedError(term)


def apply(fun: Term, arg: Term, definitions: Definitions) -> Term:
    """Reduce the application of an already evaluated `fun` to `arg`."""
    match fun:
        case Abstraction(param, body, _):
            logger.debug("beta: %s", param)
            return evaluate(substitute(body, param, arg), definitions)
        case Number(n):
            logger.debug("numeral %d applied", n)
            z = pick_binder("z", [arg], definitions)
            body = Variable(z)
            for _ in range(n):
                body = Application(arg, body)
            return evaluate(Abstraction(z, body), definitions)

    argval = evaluate(arg, definitions)
    match fun, argval:
        case Succ(), Number(m):
            return Number(m + 1)
        case Succ(), Abstraction():
            logger.debug("symbolic successor")
            s = pick_binder("s", [argval], definitions)
            z = pick_binder("z", [argval, Variable(s)], definitions)
            body = Application(
                Application(argval, Variable(s)), Application(Variable(s), Variable(z))
            )
            return evaluate(Abstraction(s, Abstraction(z, body)), definitions)
        case _:
            return Application(fun, argval)


def pick_binder(preferred: str, scope: Iterable[Term], definitions: Definitions) -> str:
    """Name for a binder wrapped around the terms in `scope`; it must not
    capture their free variables or hide a global definition."""
    avoid = {fv for t in scope for fv in free_vars(t)}
    avoid.update(definitions)
    if preferred not in avoid:
        return preferred
    return fresh_name(preferred, avoid)


def church_numeral(n: int) -> Abstraction:
    """The lambda encoding `lambda f: (lambda z: (f (... (f z))))`."""
    if n < 0:
        raise ValueError(f"expected natural number, got {n}")
    body = Variable("z")
    for _ in range(n):
        body = Application(Variable("f"), body)
    return Abstraction("f", Abstraction("z", body))


def as_number(term: Term) -> Optional[int]:
    """Return the natural number a numeral-shaped term denotes, or None."""
    match term:
        case Number(n):
            return n
        case Abstraction(f, Abstraction(z, body, _), _) if f != z:
            n = 0
            while True:
                match body:
                    case Variable(x) if x == z:
                        return n
                    case Application(Variable(x), inner) if x == f:
                        n += 1
                        body = inner
                    case _:
                        return None
    return None
