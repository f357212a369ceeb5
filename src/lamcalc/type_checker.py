from __future__ import annotations

import dataclasses
from typing import Mapping, TypeAlias

from lamcalc.abstract_syntax import (
    Abstraction,
    Application,
    Number,
    Succ,
    Term,
    Variable,
)
from lamcalc.bindings import Bindings
from lamcalc.printer import show
from lamcalc.type_impls import NAT, FunctionType, Type

TEnv: TypeAlias = Bindings[Type]


@dataclasses.dataclass
class TypeCheckError(TypeError):
    term: Term

    def __str__(self):
        return f"{self.describe()} in {show(self.term)}"

    def describe(self) -> str:
        return "type error"


@dataclasses.dataclass
class UnboundError(TypeCheckError):
    def describe(self) -> str:
        return f"no type known for {self.term.name}"


@dataclasses.dataclass
class MissingAnnotationError(TypeCheckError):
    def describe(self) -> str:
        return f"parameter {self.term.param} has no declared type"


@dataclasses.dataclass
class NotAFunctionError(TypeCheckError):
    actual: Type

    def describe(self) -> str:
        return f"expected a function, found {self.actual}"


@dataclasses.dataclass
class ArgumentMismatchError(TypeCheckError):
    expected: Type
    actual: Type

    def describe(self) -> str:
        return f"expected argument of type {self.expected}, found {self.actual}"


def infer(term: Term, tenv: TEnv | Mapping[str, Type] | None = None) -> Type:
    if tenv is None:
        tenv = empty_tenv()
    elif not isinstance(tenv, Bindings):
        tenv = Bindings.from_mapping(tenv)
    return _infer(term, tenv)


def _infer(term: Term, tenv: TEnv) -> Type:
    match term:
        case Variable(name):
            if name not in tenv:
                raise UnboundError(term)
            return tenv.get(name)
        case Abstraction(_, _, None):
            raise MissingAnnotationError(term)
        case Abstraction(param, body, ty):
            return FunctionType(ty, _infer(body, tenv.extend(param, ty)))
        case Application(fun, arg):
            tfun = _infer(fun, tenv)
            if not isinstance(tfun, FunctionType):
                raise NotAFunctionError(term, tfun)
            targ = _infer(arg, tenv)
            if targ != tfun.arg:
                raise ArgumentMismatchError(term, tfun.arg, targ)
            return tfun.ret
        case Number(_):
            return NAT
        case Succ():
            return FunctionType(NAT, NAT)
        case _:
            raise NotImplementedError(term)


def empty_tenv() -> TEnv:
    return Bindings()


def default_tenv() -> TEnv:
    """Types for the builtin definitions expressible with simple types."""
    return empty_tenv().extend("succ", FunctionType(NAT, NAT))
