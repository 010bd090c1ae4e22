import collections.abc
from typing import Any, Callable, Iterable, Iterator, List, Tuple

from harmony.debug import debug
from harmony.install import builtins
from harmony.values import same_value, undefined


def _index_of(seq: List[Any], probe: Any) -> int:
    # Linear on purpose: same_value has to work for values that cannot be hashed.
    i = len(seq)
    while i:
        i -= 1
        if same_value(seq[i], probe):
            return i
    return -1


@builtins.register(name='Map')
class IdentityMap(collections.abc.MutableMapping):
    """
    An insertion-ordered mapping whose keys are matched with `same_value`
    instead of `__hash__`/`__eq__`: NaN finds NaN, 0 finds -0.0, '1' never
    finds 1, and objects are matched by identity.

    Lookups are O(n). Not safe for concurrent mutation; callers that share a
    map across threads must serialize access to it.
    """

    __slots__ = ("_keys", "_values")

    def __init__(self, entries: Iterable[Tuple[Any, Any]] = ()):
        self._keys: List[Any] = []
        self._values: List[Any] = []
        if isinstance(entries, IdentityMap):
            entries = entries.entries()
        elif isinstance(entries, collections.abc.Mapping):
            entries = entries.items()
        for key, value in entries:
            self.set(key, value)

    # Map.prototype

    def get(self, key, default=undefined):
        index = _index_of(self._keys, key)
        return default if index < 0 else self._values[index]

    @debug
    def set(self, key, value) -> 'IdentityMap':
        index = _index_of(self._keys, key)
        if index < 0:
            self._keys.append(key)
            self._values.append(value)
        else:
            self._values[index] = value
        return self

    def has(self, key) -> bool:
        return _index_of(self._keys, key) >= 0

    @debug
    def delete(self, key) -> bool:
        index = _index_of(self._keys, key)
        if index < 0:
            return False
        del self._keys[index]
        del self._values[index]
        return True

    def size(self) -> int:
        return len(self._keys)

    def clear(self):
        self._keys.clear()
        self._values.clear()

    def for_each(self, callback: Callable[[Any, Any, 'IdentityMap'], Any]):
        for key, value in self.entries():
            callback(value, key, self)

    def entries(self) -> Iterator[Tuple[Any, Any]]:
        yield from zip(list(self._keys), list(self._values))

    # MutableMapping

    def __getitem__(self, key):
        index = _index_of(self._keys, key)
        if index < 0:
            raise KeyError(key)
        return self._values[index]

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        if not self.delete(key):
            raise KeyError(key)

    def __iter__(self):
        # A snapshot, so deleting while iterating does not skip keys.
        yield from list(self._keys)

    def __len__(self):
        return len(self._keys)

    def __contains__(self, key):
        return self.has(key)

    def __repr__(self):
        items_str = ', '.join(
            f'{repr(k)}: {repr(v)}' for (k, v) in zip(self._keys, self._values)
        )
        return f'{self.__class__.__name__}({{{items_str}}})'

    # Like JS maps, two maps are only equal when they are the same map.
    __eq__ = object.__eq__
    __hash__ = object.__hash__


@builtins.register(name='Set')
class IdentitySet(collections.abc.MutableSet):
    """
    An insertion-ordered set whose members are matched with `same_value`.
    """

    __slots__ = ("_members",)

    def __init__(self, iterable: Iterable[Any] = ()):
        self._members: List[Any] = []
        for value in iterable:
            self.add(value)

    # Set.prototype

    @debug
    def add(self, value) -> 'IdentitySet':
        # An equal member is replaced in place, keeping its position.
        index = _index_of(self._members, value)
        if index < 0:
            self._members.append(value)
        else:
            self._members[index] = value
        return self

    def has(self, value) -> bool:
        return _index_of(self._members, value) >= 0

    @debug
    def delete(self, value) -> bool:
        index = _index_of(self._members, value)
        if index < 0:
            return False
        del self._members[index]
        return True

    def size(self) -> int:
        return len(self._members)

    def clear(self):
        self._members.clear()

    def for_each(self, callback: Callable[[Any, Any, 'IdentitySet'], Any]):
        for value in self:
            callback(value, value, self)

    def values(self) -> Iterator[Any]:
        return iter(self)

    def entries(self) -> Iterator[Tuple[Any, Any]]:
        for value in self:
            yield (value, value)

    # MutableSet

    def discard(self, value):
        self.delete(value)

    def __contains__(self, value):
        return self.has(value)

    def __iter__(self):
        yield from list(self._members)

    def __len__(self):
        return len(self._members)

    def __repr__(self):
        if not self._members:
            return "%s()" % (self.__class__.__name__,)
        return "%s(%r)" % (self.__class__.__name__, self._members)
