import math

import pytest

from harmony.codec import (RangeError, encode, decode_at, decode, iter_code_points,
                           to_code_units, from_code_point, code_point_at)


def is_nan(x) -> bool:
    return isinstance(x, float) and math.isnan(x)

# ------------------------------
# encode
# ------------------------------

def test_encode_empty():
    assert encode([]) == []

def test_encode_bmp_is_one_unit_each():
    assert encode([0x41, 0x6B, 0xFFFF]) == [0x41, 0x6B, 0xFFFF]

def test_encode_astral_is_a_surrogate_pair():
    units = encode([0x1F600])
    assert units == [0xD83D, 0xDE00]
    assert 0xD800 <= units[0] <= 0xDBFF
    assert 0xDC00 <= units[1] <= 0xDFFF

def test_encode_boundaries():
    assert encode([0x10000]) == [0xD800, 0xDC00]
    assert encode([0x10FFFF]) == [0xDBFF, 0xDFFF]

def test_encode_keeps_order_across_scalars():
    assert encode([0x61, 0x1F600, 0x62]) == [0x61, 0xD83D, 0xDE00, 0x62]

def test_encode_out_of_range():
    with pytest.raises(RangeError):
        encode([0x10FFFF + 1])
    with pytest.raises(RangeError):
        encode([-1])

def test_encode_aborts_whole_call():
    with pytest.raises(RangeError) as info:
        encode([0x41, 0x1F600, 0x110000, 0x42])
    assert info.value.value == 0x110000

def test_encode_range_error_is_a_value_error():
    with pytest.raises(ValueError):
        encode([0x110000])

def test_encode_integral_float_accepted():
    assert encode([65.0]) == [65]

@pytest.mark.parametrize("bad", [1.5, float('nan'), float('inf'), '65', None])
def test_encode_rejects_non_integral(bad):
    with pytest.raises(RangeError):
        encode([bad])

# ------------------------------
# decode_at
# ------------------------------

def test_decode_at_out_of_bounds_is_nan():
    assert is_nan(decode_at([0x41], 1))
    assert is_nan(decode_at([0x41], -1))
    assert is_nan(decode_at([], 0))

def test_decode_at_plain_unit():
    assert decode_at([0x41, 0x42], 1) == 0x42

def test_decode_at_pair_and_low_half():
    units = encode([0x1F600])
    assert decode_at(units, 0) == 0x1F600
    # The low unit alone is returned raw.
    assert decode_at(units, 1) == 0xDE00

def test_decode_at_lone_high_surrogate_at_end():
    assert decode_at([0x41, 0xD83D], 1) == 0xD83D

def test_decode_at_high_surrogate_not_followed_by_low():
    assert decode_at([0xD83D, 0x41], 0) == 0xD83D
    assert decode_at([0xD83D, 0xD83D], 0) == 0xD83D

def test_decode_at_index_is_truncated():
    units = encode([0x1F600])
    assert decode_at(units, 0.9) == 0x1F600
    assert decode_at(units, float('nan')) == 0x1F600
    assert decode_at(units) == 0x1F600

def test_round_trip_law():
    for scalar in [0, 0x41, 0xD7FF, 0xE000, 0xFFFF, 0x10000, 0x1F600, 0x10FFFF]:
        assert decode_at(encode([scalar]), 0) == scalar

def test_round_trip_all_planes():
    for plane in range(17):
        for offset in (0, 0x1234, 0xFFFF):
            scalar = (plane << 16) | offset
            if 0xD800 <= scalar <= 0xDFFF:
                continue
            assert decode_at(encode([scalar]), 0) == scalar

# ------------------------------
# decode
# ------------------------------

def test_decode_whole_sequence():
    scalars = [0x61, 0x1F600, 0x62, 0x10FFFF]
    assert decode(encode(scalars)) == scalars

def test_decode_keeps_lone_surrogates():
    assert decode([0xDE00, 0x41, 0xD83D]) == [0xDE00, 0x41, 0xD83D]

def test_iter_code_points_is_lazy():
    it = iter_code_points([0xD83D, 0xDE00, 0x41])
    assert next(it) == 0x1F600
    assert next(it) == 0x41
    with pytest.raises(StopIteration):
        next(it)

# ------------------------------
# String level
# ------------------------------

def test_to_code_units_splits_astral_characters():
    assert to_code_units('a\U0001F600') == [0x61, 0xD83D, 0xDE00]
    assert to_code_units('') == []

def test_from_code_point():
    assert from_code_point(0x30, 107) == '0k'
    assert from_code_point() == ''
    assert from_code_point(0x1F600) == '\ud83d\ude00'

def test_from_code_point_range_error():
    with pytest.raises(RangeError):
        from_code_point(0x41, -5)

def test_code_point_at():
    assert code_point_at('A') == 65
    assert code_point_at('\U0001F600', 0) == 0x1F600
    assert code_point_at('\U0001F600', 1) == 0xDE00
    assert code_point_at(from_code_point(0x1F600), 0) == 0x1F600
    assert is_nan(code_point_at('abc', 3))

def test_code_point_at_requires_a_string():
    with pytest.raises(TypeError):
        code_point_at([0x41], 0)
