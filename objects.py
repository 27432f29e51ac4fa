"""Runtime values produced by the evaluator.

Every value is a small frozen dataclass with a `type` discriminator
(`ObjectType`) and an `inspect()` method returning its display text.
Booleans and null are shared: the evaluator only ever hands out `TRUE`,
`FALSE` and `NULL` defined here. Integers are created fresh for each result.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ObjectType(Enum):
    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EvalObject:
    type: ObjectType

    def inspect(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class IntegerObject(EvalObject):
    type: ObjectType = ObjectType.INTEGER
    value: int = 0

    def inspect(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BooleanObject(EvalObject):
    type: ObjectType = ObjectType.BOOLEAN
    value: bool = False

    def inspect(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class NullObject(EvalObject):
    type: ObjectType = ObjectType.NULL

    def inspect(self) -> str:
        return "null"


TRUE = BooleanObject(value=True)
FALSE = BooleanObject(value=False)
NULL = NullObject()

Value = Union[IntegerObject, BooleanObject, NullObject]


def native_bool_to_boolean_object(value: bool) -> BooleanObject:
    return TRUE if value else FALSE
