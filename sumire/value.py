import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union


class ValueKind(IntEnum):
    NUMBER = 1
    STRING = 2
    BOOL = 3
    NIL = 4


@dataclass(frozen=True)
class Value:
    kind: ValueKind
    data: Optional[Union[float, str, bool]] = None

    def __str__(self) -> str:
        return stringify(self)


NIL = Value(ValueKind.NIL)
TRUE = Value(ValueKind.BOOL, True)
FALSE = Value(ValueKind.BOOL, False)


def number_of(number: float) -> Value:
    return Value(ValueKind.NUMBER, float(number))


def string_of(text: str) -> Value:
    return Value(ValueKind.STRING, text)


def bool_of(flag: bool) -> Value:
    return TRUE if flag else FALSE


def is_number(value: Value) -> bool:
    return value.kind == ValueKind.NUMBER


def is_equal(left: Value, right: Value) -> bool:
    # values of different kinds are never equal, so 1 == true is false
    if left.kind != right.kind:
        return False
    return left.data == right.data


def divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def format_number(number: float) -> str:
    if math.isfinite(number) and number.is_integer():
        return f"{number:.0f}"
    return repr(number)


def stringify(value: Value) -> str:
    match value.kind:
        case ValueKind.NUMBER:
            return format_number(value.data)
        case ValueKind.STRING:
            return value.data
        case ValueKind.BOOL:
            return "true" if value.data else "false"
        case ValueKind.NIL:
            return "nil"
    raise ValueError("invalid value kind")
