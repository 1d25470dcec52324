import pytest

from sliceops.access import (
    bottom,
    chunk,
    drop_top,
    drop_while,
    first,
    first_or,
    flat,
    insert,
    last,
    last_or,
    pop,
    shift,
    sub_slice,
    top,
    unshift,
)

TOP_AND_BOTTOM = [
    (None, 1, [], []),
    ([], 1, [], []),
    ([1.23, 2.34], 1, [1.23], [2.34]),
    ([1.23, 2.34], 3, [1.23, 2.34], [2.34, 1.23]),
    ([1.23, 2.34], 0, [], []),
    ([1.23, 2.34], -1, [], []),
]


@pytest.mark.parametrize("ss, n, expected_top, expected_bottom", TOP_AND_BOTTOM)
def test_top(ss, n, expected_top, expected_bottom):
    assert top(ss, n) == expected_top


@pytest.mark.parametrize("ss, n, expected_top, expected_bottom", TOP_AND_BOTTOM)
def test_bottom(ss, n, expected_top, expected_bottom):
    assert bottom(ss, n) == expected_bottom


@pytest.mark.parametrize(
    "ss, n, expected",
    [
        (None, 1, []),
        ([], 1, []),
        ([1.23, 2.34], -1, []),
        ([1.23, 2.34], 0, [1.23, 2.34]),
        ([1.23, 2.34], 1, [2.34]),
        ([1.23, 2.34], 2, []),
        ([1.23, 2.34], 3, []),
    ],
)
def test_drop_top(ss, n, expected):
    assert drop_top(ss, n) == expected


def test_drop_top_returns_copy():
    source = [1, 2, 3]
    result = drop_top(source, 0)
    result[0] = 99
    assert source == [1, 2, 3]


@pytest.mark.parametrize(
    "ss, fn, expected",
    [
        (None, lambda s: s == 0.1, []),
        ([2.1, 2.1, 2.1, 7.2, 8.1], lambda s: s == 2.1, [7.2, 8.1]),
        ([2.1, 4.1, 5.1, 7.2, 8.1], lambda s: s == 0.2, [2.1, 4.1, 5.1, 7.2, 8.1]),
        ([2.1, 2.1, 2.1, 2.1, 2.1], lambda s: s == 2.1, []),
    ],
)
def test_drop_while(ss, fn, expected):
    assert drop_while(ss, fn) == expected


@pytest.mark.parametrize(
    "ss, length, expected",
    [
        (None, 1, []),
        ([], 1, []),
        ([1, 2, 3], 4, [[1, 2, 3]]),
        ([1, 2, 3], 3, [[1, 2, 3]]),
        ([1, 2, 3], 2, [[1, 2], [3]]),
        ([1, 2, 3], 1, [[1], [2], [3]]),
    ],
)
def test_chunk(ss, length, expected):
    assert chunk(ss, length) == expected


@pytest.mark.parametrize("length", [0, -3])
def test_chunk_rejects_non_positive_length(length):
    with pytest.raises(ValueError, match="greater than 0"):
        chunk([1, 2, 3], length)


FIRST_AND_LAST = [
    ([100.0], 100.0, 100.0),
    ([1.0, 2.0], 1.0, 2.0),
    ([1.0, 2.0, 3.0], 1.0, 3.0),
]


@pytest.mark.parametrize("ss, expected_first, expected_last", FIRST_AND_LAST)
def test_first(ss, expected_first, expected_last):
    assert first(ss) == expected_first


@pytest.mark.parametrize("ss, expected_first, expected_last", FIRST_AND_LAST)
def test_last(ss, expected_first, expected_last):
    assert last(ss) == expected_last


@pytest.mark.parametrize("ss", [None, []])
def test_first_and_last_of_empty(ss):
    assert (first(ss), last(ss)) == (None, None)


FIRST_OR_AND_LAST_OR = [
    (None, 102.0, 202.0),
    ([100.0], 100.0, 100.0),
    ([1.0, 2.0], 1.0, 2.0),
    ([1.0, 2.0, 3.0], 1.0, 3.0),
]


@pytest.mark.parametrize("ss, expected_first, expected_last", FIRST_OR_AND_LAST_OR)
def test_first_or(ss, expected_first, expected_last):
    assert first_or(ss, 102.0) == expected_first


@pytest.mark.parametrize("ss, expected_first, expected_last", FIRST_OR_AND_LAST_OR)
def test_last_or(ss, expected_first, expected_last):
    assert last_or(ss, 202.0) == expected_last


@pytest.mark.parametrize(
    "ss, expected",
    [
        (None, []),
        ([[100]], [100]),
        ([[100], [101, 102], [102, 103]], [100, 101, 102, 102, 103]),
        ([None, [101, 102], []], [101, 102]),
        ([None, None], []),
    ],
)
def test_flat(ss, expected):
    assert flat(ss) == expected


def test_insert():
    assert insert(None, 0) == []
    assert insert([1.0], 0, 2.0) == [2.0, 1.0]
    assert insert([1.0], 1, 2.0) == [1.0, 2.0]
    assert insert([1.0, 3.3], 1, 2.0) == [1.0, 2.0, 3.3]


def test_insert_past_end_appends_and_leaves_input():
    source = [1, 2]
    assert insert(source, 10, 3, 4) == [1, 2, 3, 4]
    assert source == [1, 2]


def test_insert_negative_index_raises():
    with pytest.raises(IndexError):
        insert([1, 2], -1, 3)


def test_pop():
    numbers = [42.0, 4.2]
    assert pop(numbers) == 42.0
    assert numbers == [4.2]
    assert pop(numbers) == 4.2
    assert numbers == []
    assert pop(numbers) is None


SHIFT_AND_UNSHIFT = [
    (None, 0, [], [], []),
    (None, 0, [], [1.23, 2.34], [1.23, 2.34]),
    ([], 0, [], [], []),
    ([], 0, [], [1.23, 2.34], [1.23, 2.34]),
    ([1.23], 1.23, [], [2.34], [2.34, 1.23]),
    ([1.23, 2.34], 1.23, [2.34], [3.45], [3.45, 1.23, 2.34]),
    ([1.23, 2.34], 1.23, [2.34], [3.45, 4.56], [3.45, 4.56, 1.23, 2.34]),
]


@pytest.mark.parametrize("ss, shifted, rest, params, unshifted", SHIFT_AND_UNSHIFT)
def test_shift(ss, shifted, rest, params, unshifted):
    assert shift(ss) == (shifted, rest)


@pytest.mark.parametrize("ss, shifted, rest, params, unshifted", SHIFT_AND_UNSHIFT)
def test_unshift(ss, shifted, rest, params, unshifted):
    assert unshift(ss, *params) == unshifted


@pytest.mark.parametrize(
    "ss, start, end, expected",
    [
        (None, 1, 1, []),
        (None, 1, 2, [0]),
        ([], 1, 1, []),
        ([], 1, 2, [0]),
        ([1.23, 2.34], -1, -1, []),
        ([1.23, 2.34], -1, 1, []),
        ([1.23, 2.34], 1, -1, []),
        ([1.23, 2.34], 2, 0, []),
        ([1.23, 2.34], 1, 1, []),
        ([1.23, 2.34], 1, 2, [2.34]),
        ([1.23, 2.34], 1, 3, [2.34, 0]),
        ([1.23, 2.34], 2, 2, []),
        ([1.23, 2.34], 2, 3, [0]),
        ([1.23, 2.34, 0], 2, 3, [0]),
    ],
)
def test_sub_slice(ss, start, end, expected):
    assert sub_slice(ss, start, end, 0) == expected


def test_sub_slice_default_fill_is_none():
    assert sub_slice(["a"], 0, 3) == ["a", None, None]