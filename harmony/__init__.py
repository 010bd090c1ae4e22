from harmony.install import builtins, define, Registry, Surface
from harmony.values import NaN, undefined, same_value, object_is, object_isnt, is_object
from harmony.codec import RangeError, encode, decode_at, decode, from_code_point, code_point_at
from harmony.containers import IdentityMap, IdentitySet
from harmony import number, strings, arrays

String = builtins.surface('String')
Object = builtins.surface('Object')
Number = builtins.surface('Number')
Array = builtins.surface('Array')
