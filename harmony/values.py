import math
from typing import Any

from harmony.install import builtins

NaN = float('nan')


class Undefined:
    """The JS `undefined` value: absence, distinct from None (null) and every falsy value."""
    __slots__ = ()
    _instance: 'Undefined' = None # type: ignore

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'undefined'

    def __reduce__(self):
        return (Undefined, ())


undefined = Undefined()


def is_number(x: Any) -> bool:
    # bool is a subclass of int, but true !== 1
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def is_nan(x: Any) -> bool:
    return isinstance(x, float) and math.isnan(x)


def _strict_equals(x: Any, y: Any) -> bool:
    match x:
        case bool():
            return isinstance(y, bool) and x == y
        case int() | float():
            return is_number(y) and x == y
        case str():
            return isinstance(y, str) and x == y
        case _:
            return x is y


def same_value(x: Any, y: Any) -> bool:
    """
    Key identity for IdentityMap and IdentitySet.

    Like `===`, except that NaN equals itself. +0 and -0 compare equal.
    """
    if is_nan(x) or is_nan(y):
        return is_nan(x) and is_nan(y)
    return _strict_equals(x, y)


@builtins.register(on='Object', name='is')
def object_is(x: Any, y: Any) -> bool:
    """
    Object.is: `same_value` that also tells +0 from -0.

    object_is(0, -0.0)       -> False
    object_is('0', 0)        -> False
    object_is(NaN, NaN)      -> True
    """
    if not same_value(x, y):
        return False
    if is_number(x) and x == 0:
        return math.copysign(1.0, x) == math.copysign(1.0, y)
    return True


@builtins.register(on='Object', name='isnt')
def object_isnt(x: Any, y: Any) -> bool:
    return not object_is(x, y)


@builtins.register(on='Object', name='isObject')
def is_object(value: Any) -> bool:
    """Object.isObject: true only for plain objects, which here are dicts."""
    return isinstance(value, dict)
