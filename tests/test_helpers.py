import pytest

from rayshooter.helpers import as_arrays, flat_arrays


def test_round_trip():
    data = list(range(24))
    assert flat_arrays(as_arrays(data, 4)) == data


def test_group_sizes():
    groups = as_arrays(range(12), 3)
    assert len(groups) == 4
    assert all(len(group) == 3 for group in groups)


def test_remainder_is_dropped():
    groups = as_arrays(range(7), 3)
    assert len(groups) == 2
    assert flat_arrays(groups) == list(range(6))


def test_bytes_grouping():
    groups = as_arrays(b"\x01\x02\x03\x04\x05\x06\x07\x08", 4)
    assert groups[0] == (1, 2, 3, 4)
    assert groups[1] == (5, 6, 7, 8)


def test_zero_length_rejected():
    with pytest.raises(ValueError):
        as_arrays([1, 2, 3], 0)


def test_flatten_empty():
    assert flat_arrays([]) == []