from __future__ import annotations

import abc
import dataclasses
import logging
from typing import Optional

from lamcalc import abstract_syntax as ast
from lamcalc import parser, type_checker
from lamcalc.definitions import Definitions
from lamcalc.interpreter import Interpreter
from lamcalc.type_impls import Type

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Options:
    typed: bool = False
    numerals: bool = False


@dataclasses.dataclass
class EvaluationAborted(Exception):
    reason: str

    def __str__(self):
        return self.reason


class Outcome(abc.ABC):
    ok: bool


@dataclasses.dataclass
class Success(Outcome):
    item: ast.ToplevelItem
    result: ast.Term
    type: Optional[Type] = None

    ok = True


@dataclasses.dataclass
class Failure(Outcome):
    error: Exception
    item: Optional[ast.ToplevelItem] = None

    ok = False


class Session:
    """Runs toplevel items against one definition store (and, in typed mode,
    one global typing context). Syntax, type and evaluation errors are
    returned as `Failure` outcomes rather than raised."""

    def __init__(
        self,
        options: Options = Options(),
        definitions: Optional[Definitions] = None,
        tenv: Optional[type_checker.TEnv] = None,
    ):
        self.options = options
        self.interpreter = Interpreter(definitions)
        self.tenv = type_checker.default_tenv() if tenv is None else tenv

    @property
    def definitions(self) -> Definitions:
        return self.interpreter.definitions

    def execute(self, src: str) -> Outcome:
        try:
            item = parser.parse_toplevel(src)
        except parser.ParseError as e:
            return Failure(e)
        return self.run_item(item)

    def execute_script(self, src: str) -> list[Outcome]:
        """Run every item of a script, stopping after the first failure."""
        try:
            script = parser.parse_script(src)
        except parser.ParseError as e:
            return [Failure(e)]

        outcomes = []
        for item in script.statements:
            outcome = self.run_item(item)
            outcomes.append(outcome)
            if not outcome.ok:
                break
        return outcomes

    def run_item(self, item: ast.ToplevelItem) -> Outcome:
        logger.debug("running %s", type(item).__name__)
        try:
            ty = self.check(item) if self.options.typed else None
            result = self.interpreter.run_toplevel(item)
        except type_checker.TypeCheckError as e:
            return Failure(e, item)
        except RecursionError:
            return Failure(
                EvaluationAborted(
                    "normal form might exist, but maximum recursion depth exceeded"
                ),
                item,
            )
        return Success(item, result, ty)

    def check(self, item: ast.ToplevelItem) -> Type:
        match item:
            case ast.DefineLet(var, val):
                ty = type_checker.infer(val, self.tenv)
                self.tenv = self.tenv.extend(var, ty)
                return ty
            case ast.Term():
                return type_checker.infer(item, self.tenv)
            case _:
                raise NotImplementedError(item)
