from typing import Any, List, Optional

from harmony.codec import RangeError, to_code_units
from harmony.install import builtins
from harmony.number import to_int32


def _this(text: Any, method: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"String.prototype.{method} called on {type(text).__name__}")
    return text


def _units(text: str) -> str:
    # Positions count UTF-16 code units, so astral characters take two.
    return ''.join(map(chr, to_code_units(text)))


def _clamp(position: Any, size: int) -> int:
    return min(max(to_int32(position), 0), size)


@builtins.register(on='String.prototype', name='repeat')
def repeat(text: str, count: int) -> str:
    """
    'A'.repeat(2) -> 'AA'

    A count that is not positive after `| 0` raises RangeError.
    """
    text = _this(text, 'repeat')
    count = to_int32(count)
    if count <= 0:
        raise RangeError(count, f"Invalid repeat count {count!r}")
    return text * count


@builtins.register(on='String.prototype', name='startsWith')
def starts_with(text: str, value: Any, position: int = 0) -> bool:
    text = _units(_this(text, 'startsWith'))
    return text.startswith(_units(str(value)), _clamp(position, len(text)))


@builtins.register(on='String.prototype', name='endsWith')
def ends_with(text: str, value: Any, end_position: Optional[int] = None) -> bool:
    text = _units(_this(text, 'endsWith'))
    end = len(text) if end_position is None else _clamp(end_position, len(text))
    return text.endswith(_units(str(value)), 0, end)


@builtins.register(on='String.prototype', name='contains')
def contains(text: str, value: Any, position: int = 0) -> bool:
    text = _units(_this(text, 'contains'))
    return text.find(_units(str(value)), _clamp(position, len(text))) != -1


@builtins.register(on='String.prototype', name='toArray')
def to_array(text: str) -> List[str]:
    return list(_this(text, 'toArray'))
