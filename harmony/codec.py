"""
Conversion between Unicode scalar values and UTF-16 code units.

A "string" here follows the JS model: a sequence of 16-bit code units, where
scalars above U+FFFF take two units (a surrogate pair). Python `str` values
are accepted by the string-level helpers and viewed as code units first.
"""
import math
from typing import Iterable, Iterator, List, Sequence

from harmony.debug import debug
from harmony.install import builtins
from harmony.number import to_int32
from harmony.values import NaN

MAX_CODE_POINT = 0x10FFFF

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF


class RangeError(ValueError):
    def __init__(self, value, message: str | None = None):
        super().__init__(message or f"Invalid code point {value!r}")
        self.value = value


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def _check_code_point(value) -> int:
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise RangeError(value)
        value = int(value)
    elif not isinstance(value, int):
        raise RangeError(value)

    if value < 0 or value > MAX_CODE_POINT:
        raise RangeError(value)
    return value


@debug
def encode(scalars: Iterable[int]) -> List[int]:
    """
    Encode scalar values as UTF-16 code units, one unit for the BMP and a
    high/low surrogate pair above it.

    Raises RangeError, without returning anything, if any scalar lies
    outside [0, 0x10FFFF].
    """
    units: List[int] = []
    for scalar in scalars:
        scalar = _check_code_point(scalar)

        if scalar < 0x10000:
            units.append(scalar)
        else:
            scalar -= 0x10000
            units.append(HIGH_SURROGATE_START | (scalar >> 10))
            units.append(LOW_SURROGATE_START | (scalar & 0x3FF))
    return units


@debug
def decode_at(units: Sequence[int], index=0) -> int | float:
    """
    Decode the scalar starting at `units[index]`.

    A high surrogate followed by a low surrogate is combined into one scalar.
    Any other unit, lone surrogates included, is returned as is. An index
    outside the sequence gives NaN.
    """
    index = to_int32(index)
    size = len(units)

    if index < 0 or index >= size:
        return NaN

    first = units[index]
    if not is_high_surrogate(first) or index + 1 == size:
        return first

    second = units[index + 1]
    if not is_low_surrogate(second):
        return first

    return (first - HIGH_SURROGATE_START) * 0x400 + (second - LOW_SURROGATE_START) + 0x10000


class _Units:
    EOS = -1

    def __init__(self, units: Sequence[int]):
        self.units = units
        self.index = 0
        self.current = _Units.EOS if len(units) == 0 else units[0]

    def next(self):
        if self.index < len(self.units):
            self.index += 1
        self.current = _Units.EOS if self.index >= len(self.units) else self.units[self.index]

    def __repr__(self) -> str:
        start_index = max(0, self.index - 4)
        end_index = min(len(self.units), self.index + 4)

        chars = []
        for i in range(start_index, end_index):
            unit = f"{self.units[i]:04X}"
            chars.append(f"[{unit}]" if i == self.index else unit)

        return f"Units(index={self.index}, {' '.join(chars)})"


def iter_code_points(units: Sequence[int]) -> Iterator[int]:
    input = _Units(units)
    while input.current != _Units.EOS:
        scalar = decode_at(units, input.index)
        input.next()
        if scalar >= 0x10000:
            input.next()  # the low half of the pair
        yield scalar


def decode(units: Sequence[int]) -> List[int]:
    return list(iter_code_points(units))


def to_code_units(text: str) -> List[int]:
    return encode(ord(c) for c in text)


@builtins.register(on='String', name='fromCodePoint')
def from_code_point(*code_points: int) -> str:
    """
    String.fromCodePoint: a string of code units, so astral characters come
    out as two surrogate characters.

    from_code_point(0x30, 107)   -> '0k'
    """
    return ''.join(map(chr, encode(code_points)))


@builtins.register(on='String.prototype', name='codePointAt')
def code_point_at(text: str, index=0) -> int | float:
    """String.prototype.codePointAt"""
    if not isinstance(text, str):
        raise TypeError(f"codePointAt expects a string, got {type(text).__name__}")
    return decode_at(to_code_units(text), index)
