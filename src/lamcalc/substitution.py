from __future__ import annotations

import logging
from typing import Container

from lamcalc.abstract_syntax import (
    Abstraction,
    Application,
    Number,
    Succ,
    Term,
    Variable,
    free_vars,
)

logger = logging.getLogger(__name__)


def substitute(term: Term, name: str, replacement: Term) -> Term:
    """Replace every free occurrence of `name` in `term` by `replacement`.

    Binders that would capture a free variable of `replacement` are renamed
    first. Unchanged subtrees are shared with the input.
    """
    match term:
        case Variable(x):
            return replacement if x == name else term
        case Application(fun, arg):
            return Application(
                substitute(fun, name, replacement), substitute(arg, name, replacement)
            )
        case Number(_) | Succ():
            return term
        case Abstraction(param, _, _) if param == name:
            return term
        case Abstraction(param, body, ty):
            replacement_fvs = set(free_vars(replacement))
            if param in replacement_fvs:
                avoid = replacement_fvs | set(free_vars(body)) | {name}
                renamed = rename(term, fresh_name(param, avoid))
                return substitute(renamed, name, replacement)
            return Abstraction(param, substitute(body, name, replacement), ty)
        case _:
            raise NotImplementedError(term)


def rename(abstraction: Abstraction, new_param: str) -> Abstraction:
    """Alpha-convert `abstraction` so that it binds `new_param`."""
    logger.debug("renaming bound %s to %s", abstraction.param, new_param)
    body = substitute(abstraction.body, abstraction.param, Variable(new_param))
    return Abstraction(new_param, body, abstraction.ty)


def fresh_name(name: str, avoid: Container[str]) -> str:
    candidate = name + "'"
    while candidate in avoid:
        candidate += "'"
    return candidate
