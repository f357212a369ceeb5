from __future__ import annotations

import abc
import dataclasses
import typing
from typing import Optional

from lamcalc.type_impls import Type


class ToplevelItem(abc.ABC):
    pass


class Term(ToplevelItem):
    pass


@dataclasses.dataclass(frozen=True)
class Variable(Term):
    name: str


@dataclasses.dataclass(frozen=True)
class Abstraction(Term):
    param: str
    body: Term
    ty: Optional[Type] = None


@dataclasses.dataclass(frozen=True)
class Application(Term):
    fun: Term
    arg: Term


@dataclasses.dataclass(frozen=True)
class Number(Term):
    val: int

    def __post_init__(self):
        if self.val < 0:
            raise ValueError(f"numerals must be non-negative, got {self.val}")


@dataclasses.dataclass(frozen=True)
class Succ(Term):
    pass


@dataclasses.dataclass(frozen=True)
class DefineLet(ToplevelItem):
    var: str
    val: Term


@dataclasses.dataclass(frozen=True)
class Script:
    statements: list[ToplevelItem]


SUCC = Succ()


def free_vars(term: Term) -> typing.Iterator[str]:
    """Yield the names occurring free in `term`, left to right.

    A name is reported once per free occurrence, so duplicates are possible.
    """
    match term:
        case Variable(name):
            yield name
        case Abstraction(param, body, _):
            for fv in free_vars(body):
                if fv != param:
                    yield fv
        case Application(fun, arg):
            yield from free_vars(fun)
            yield from free_vars(arg)
        case Number(_) | Succ():
            return
        case _:
            raise NotImplementedError(term)


def is_free(name: str, term: Term) -> bool:
    return any(fv == name for fv in free_vars(term))


def alpha_equivalent(a: Term, b: Term) -> bool:
    """Structural equality up to consistent renaming of bound variables."""
    return _alpha_eq(a, b, {}, {}, 0)


def _alpha_eq(a: Term, b: Term, lenv: dict, renv: dict, depth: int) -> bool:
    match a, b:
        case Variable(x), Variable(y):
            # bound names map to binder depth, free names to themselves
            return lenv.get(x, x) == renv.get(y, y)
        case Abstraction(p, lbody, lty), Abstraction(q, rbody, rty):
            return lty == rty and _alpha_eq(
                lbody, rbody, {**lenv, p: depth}, {**renv, q: depth}, depth + 1
            )
        case Application(lf, la), Application(rf, ra):
            return _alpha_eq(lf, rf, lenv, renv, depth) and _alpha_eq(
                la, ra, lenv, renv, depth
            )
        case _:
            return a == b
