import math
from typing import Any

from harmony.install import builtins, define
from harmony.values import is_number

EPSILON = 2.220446049250313e-16
MAX_INTEGER = 9007199254740991

define(builtins.surface('Number'), 'EPSILON', EPSILON)
define(builtins.surface('Number'), 'MAX_INTEGER', MAX_INTEGER)


@builtins.register(on='Number', name='isNaN')
def is_nan(value: Any) -> bool:
    return is_number(value) and math.isnan(value)


@builtins.register(on='Number', name='isFinite')
def is_finite(value: Any) -> bool:
    return is_number(value) and math.isfinite(value)


@builtins.register(on='Number', name='isInteger')
def is_integer(value: Any) -> bool:
    return (is_finite(value)
            and -MAX_INTEGER < value < MAX_INTEGER
            and math.floor(value) == value)


@builtins.register(on='Number', name='toInteger')
def to_integer(value: Any) -> int | float:
    """
    ToInteger: NaN becomes +0, zeros and infinities pass through,
    everything else is truncated toward zero.
    """
    if isinstance(value, bool):
        value = int(value)
    if not is_number(value) or math.isnan(value):
        return 0
    if value == 0 or math.isinf(value):
        return value
    if isinstance(value, int):
        return value
    return math.copysign(math.floor(abs(value)), value)


def to_int32(value: Any) -> int:
    """The `x | 0` coercion: wrap to a signed 32-bit integer, anything else is 0."""
    if isinstance(value, bool):
        return int(value)
    if not is_number(value):
        return 0
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        value = int(value)
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value
