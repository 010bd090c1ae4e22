import collections.abc
from typing import Any, List

from harmony.containers import IdentityMap
from harmony.install import builtins
from harmony.number import MAX_INTEGER, to_integer
from harmony.values import undefined


@builtins.register(on='Array', name='of')
def array_of(*items: Any) -> List[Any]:
    return list(items)


@builtins.register(on='Array', name='from')
def array_from(source: Any) -> List[Any]:
    """
    Array.from: iterables are listed as is, and an IdentityMap gives its
    (key, value) entries. An array-like (a mapping with a 'length' key, or an
    object with a `length` attribute and indexed access) is read index by
    index, and holes become `undefined`.

    array_from('foo')                         -> ['f', 'o', 'o']
    array_from({'length': 3, 0: 'a', 2: 'c'}) -> ['a', undefined, 'c']
    """
    if isinstance(source, IdentityMap):
        return list(source.entries())
    if isinstance(source, collections.abc.Mapping):
        length = source.get('length', 0)
    elif isinstance(source, collections.abc.Iterable):
        return list(source)
    else:
        length = getattr(source, 'length', None)
        if length is None:
            raise TypeError(f"{type(source).__name__} is neither iterable nor array-like")

    result = []
    for i in range(int(min(max(to_integer(length), 0), MAX_INTEGER))):
        try:
            result.append(source[i])
        except (KeyError, IndexError):
            result.append(undefined)
    return result
