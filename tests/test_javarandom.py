import pytest

from nosqlqtf.javarandom import Random


def test_same_seed_same_sequence():
    a = Random(1)
    b = Random(1)
    assert [a.next_int(20) for _ in range(50)] == [b.next_int(20) for _ in range(50)]


def test_different_seeds_differ():
    a = [Random(1).next(32) for _ in range(1)]
    b = [Random(2).next(32) for _ in range(1)]
    assert a[0] != b[0] or a == b and False


def test_next31_is_top_bits_of_next32():
    wide = Random(7).next(32)
    narrow = Random(7).next(31)
    assert narrow == (wide & 0xFFFFFFFF) >> 1


@pytest.mark.parametrize("bound", [2, 3, 5, 20, 100, 1 << 20, 2**31 - 1])
def test_next_int_in_range(bound):
    rnd = Random(12345)
    values = [rnd.next_int(bound) for _ in range(200)]
    assert all(0 <= v < bound for v in values)


def test_next_int_bound_two_covers_both_values():
    rnd = Random(3)
    values = {rnd.next_int(2) for _ in range(100)}
    assert values == {0, 1}


def test_next31_is_non_negative():
    rnd = Random(99)
    assert all(rnd.next(31) >= 0 for _ in range(100))


@pytest.mark.parametrize("bound", [1, 0, -5])
def test_next_int_rejects_small_bound(bound):
    with pytest.raises(ValueError):
        Random(1).next_int(bound)


@pytest.mark.parametrize("bits", [0, 33])
def test_next_rejects_bad_bits(bits):
    with pytest.raises(ValueError):
        Random(1).next(bits)