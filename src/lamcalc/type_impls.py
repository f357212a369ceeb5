from __future__ import annotations

import abc
import dataclasses


class Type(abc.ABC):
    pass


@dataclasses.dataclass(frozen=True)
class BaseType(Type):
    def __str__(self):
        return "o"


@dataclasses.dataclass(frozen=True)
class FunctionType(Type):
    arg: Type
    ret: Type

    def __str__(self):
        return f"({self.arg} -> {self.ret})"


O = BaseType()

# type of a church numeral: (o -> o) -> (o -> o)
NAT = FunctionType(FunctionType(O, O), FunctionType(O, O))


def arrow(*types: Type) -> Type:
    """Right-associated function type: arrow(a, b, c) == a -> (b -> c)."""
    *args, ret = types
    for arg in reversed(args):
        ret = FunctionType(arg, ret)
    return ret
