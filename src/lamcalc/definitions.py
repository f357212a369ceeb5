from __future__ import annotations

import logging
from typing import Iterator, Optional

from lamcalc.abstract_syntax import SUCC, Abstraction, Application, Term, Variable

logger = logging.getLogger(__name__)


def _lam(*params_and_body) -> Term:
    *params, body = params_and_body
    for p in reversed(params):
        body = Abstraction(p, body)
    return body


def _app(fun: Term, *args: Term) -> Term:
    for a in args:
        fun = Application(fun, a)
    return fun


_f, _s, _b, _p, _t, _x = map(Variable, "fsbptx")

BUILTINS: dict[str, Term] = {
    "succ": SUCC,
    "pair": _lam("f", "s", "b", _app(_b, _f, _s)),
    "fst": _lam("p", _app(_p, _lam("t", "f", _t))),
    "snd": _lam("p", _app(_p, _lam("t", "f", _f))),
    "true": _lam("t", "f", _t),
    "false": _lam("t", "f", _f),
    "id": _lam("x", _x),
}


class Definitions:
    """Global name -> term store written by `let` and read when evaluating
    variables. Stored terms are kept unevaluated."""

    def __init__(self, initial: Optional[dict[str, Term]] = None):
        self.m: dict[str, Term] = dict(initial or {})

    @staticmethod
    def default() -> Definitions:
        return Definitions(BUILTINS)

    def get(self, name: str) -> Optional[Term]:
        return self.m.get(name)

    def set(self, name: str, term: Term):
        if name in self.m:
            logger.debug("redefining %s", name)
        else:
            logger.debug("defining %s", name)
        self.m[name] = term

    def __contains__(self, name: str) -> bool:
        return name in self.m

    def __iter__(self) -> Iterator[str]:
        return iter(self.m)
