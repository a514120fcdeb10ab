"""Small value types: answers, device states, comparisons and division."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class SuperBoolean(enum.Enum):
    TRUE = "The answer is true!"
    FALSE = "The answer is false!"
    UNKNOWN = "The answer is unknown!"
    MAYBE = "The answer is maybe!"
    POSSIBLY = "The answer is possibly!"
    PROBABLY = "The answer is probably!"
    PROBABLY_NOT = "The answer is probably not!"
    DEFINITELY = "The answer is definitely!"
    DEFINITELY_NOT = "The answer is definitely not!"
    UNCERTAIN = "The answer is uncertain!"
    UNCLEAR = "The answer is unclear!"
    I_DONT_KNOW = "I don't know the answer!"
    UNLIKELY = "The answer is unlikely!"
    LIKELY = "The answer is likely!"
    UNLIKELY_BUT_POSSIBLE = "The answer is unlikely but possible!"
    LIKELY_BUT_UNCERTAIN = "The answer is likely but uncertain!"


def describe_answer(answer: SuperBoolean) -> str:
    return SuperBoolean(answer).value


class StateKind(enum.Enum):
    ON = "on"
    OFF = "off"
    STANDBY = "standby"
    ERROR = "error"
    UNKNOWN = "unknown"


def _check_int(value: Any, upper: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an int")
    if not 0 <= value <= upper:
        raise ValueError(f"{what} out of range: {value}")
    return value


def describe_state(kind: StateKind, value: Any = None) -> str:
    """Describe a device state; ON, STANDBY and ERROR carry a value."""
    kind = StateKind(kind)
    if kind is StateKind.ON:
        power = _check_int(value, 0xFFFF, "power level")
        return f"The device is on with power level: {power}"
    if kind is StateKind.STANDBY:
        length = _check_int(value, 0xFF, "timeout length")
        if length > 8:
            return f"entering low power standby for : {length}"
        return "The device is in standby mode"
    if kind is StateKind.ERROR:
        if not isinstance(value, str):
            raise ValueError("error state needs a message")
        return f"The device has an error: {value}"
    if value is not None:
        raise ValueError(f"{kind.name} state carries no value")
    if kind is StateKind.OFF:
        return "The device is off"
    return "The device state is unknown"


def floor_divide(numerator: float, denominator: float) -> int:
    """Floor of numerator / denominator as a 32-bit integer."""
    if denominator == 0.0:
        raise ZeroDivisionError("Division by zero")
    quotient = numerator / denominator
    if math.isnan(quotient):
        return 0
    if math.isinf(quotient):
        return _I32_MAX if quotient > 0 else _I32_MIN
    return max(_I32_MIN, min(_I32_MAX, math.floor(quotient)))


def compare_items(item1: Any, item2: Any) -> int:
    """Return -1, 0 or 1 as item1 is less than, equal to or greater than item2."""
    return (item1 > item2) - (item1 < item2)


@dataclass
class GenericContainer(Generic[T]):
    value: T

    def compare(self, other_item: T) -> int:
        return compare_items(self.value, other_item)


@dataclass
class Foo:
    x: int = 0

    def bump(self) -> int:
        """Increment x, print it and return the new value."""
        self.x += 1
        print(f"Foo x: {self.x}")
        return self.x