import pytest

from algonotes.searching import (
    count_occurrences,
    find_min_rotated,
    find_peak,
    first_occurrence,
    last_occurrence,
    max_increasing_decreasing,
    search_rotated,
)

BITONIC = [
    [1, 3, 50, 10, 9, 7, 6],
    [60, 50, 10, 9, 7, 6],
    [1, 2, 3, 4, 5],
    [2, 4, 6, 8, 10, 12, 9, 3],
    [1, 5, 4, 3, 2, 1, 0],
    [7],
    [3, 8],
    [8, 3],
]

ROTATED = [
    [5, 6, 1, 2, 3, 4],
    [1, 2, 3, 4],
    [1],
    [1, 2],
    [2, 1],
    [5, 6, 7, 1, 2, 3, 4],
    [1, 2, 3, 4, 5, 6, 7],
    [2, 3, 4, 5, 6, 7, 8, 1],
    [3, 4, 5, 1, 2],
    [5, 4, 3, 2, 1],
]


@pytest.mark.parametrize("values", BITONIC)
def test_max_increasing_decreasing_matches_max(values):
    assert max_increasing_decreasing(values) == max(values)


def test_max_increasing_decreasing_empty():
    with pytest.raises(ValueError):
        max_increasing_decreasing([])


@pytest.mark.parametrize(
    ("values", "peaks"),
    [
        ([10, 9, 15, 2, 23, 90, 67], {10, 15, 90}),
        ([1, 3, 20, 4, 1, 0], {20}),
        ([5, 10, 20, 15], {20}),
        ([10, 20, 15, 2, 23, 90, 67], {20, 90}),
        ([4], {4}),
        ([1, 2], {2}),
        ([9, 8, 7, 6], {9}),
    ],
)
def test_find_peak_returns_a_peak(values, peaks):
    assert find_peak(values) in peaks


def test_find_peak_single_peak_example():
    assert find_peak([5, 10, 20, 15]) == 20


def test_find_peak_empty():
    with pytest.raises(ValueError):
        find_peak([])


@pytest.mark.parametrize("values", ROTATED)
def test_find_min_rotated_matches_min(values):
    assert find_min_rotated(values) == min(values)


def test_find_min_rotated_empty():
    with pytest.raises(ValueError):
        find_min_rotated([])


@pytest.mark.parametrize(
    "values",
    [
        [5, 6, 7, 8, 9, 10, 1, 2, 3],
        [3, 4, 5, 1, 2],
        [1, 2, 3, 4, 5, 6],
        [30, 40, 50, 10, 20],
        [2, 1],
    ],
)
def test_search_rotated_finds_every_element(values):
    for key in values:
        index = search_rotated(values, key)
        assert values[index] == key


def test_search_rotated_source_example():
    values = [5, 6, 7, 8, 9, 10, 1, 2, 3]
    assert search_rotated(values, 3) == len(values) - 1


@pytest.mark.parametrize("values", [[5, 6, 7, 1, 2], [], [4]])
def test_search_rotated_missing(values):
    assert search_rotated(values, 100) is None


SORTED = [1, 2, 2, 3, 3, 3, 3]


@pytest.mark.parametrize("key", [1, 2, 3])
def test_first_occurrence(key):
    assert first_occurrence(SORTED, key) == SORTED.index(key)


@pytest.mark.parametrize("key", [1, 2, 3])
def test_last_occurrence(key):
    expected = len(SORTED) - 1 - SORTED[::-1].index(key)
    assert last_occurrence(SORTED, key) == expected


@pytest.mark.parametrize("key", [0, 5])
def test_occurrence_missing(key):
    assert first_occurrence(SORTED, key) is None
    assert last_occurrence(SORTED, key) is None


@pytest.mark.parametrize("key", [0, 1, 2, 3, 5])
def test_count_occurrences_matches_count(key):
    assert count_occurrences(SORTED, key) == SORTED.count(key)


def test_count_occurrences_empty():
    assert count_occurrences([], 3) == 0