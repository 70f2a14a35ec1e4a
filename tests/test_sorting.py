import pytest

from kata.sorting import (
    bubble_sort,
    bucket_sort,
    counting_sort,
    heap_sort,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)

SAMPLE = [2, 7, 3, 5, 1, 24, 31, 100, 11]
SAMPLE_ASC = [1, 2, 3, 5, 7, 11, 24, 31, 100]
SAMPLE_DESC = [100, 31, 24, 11, 7, 5, 3, 2, 1]

DUPES = [2, 7, 2, 5, 1, 11, 31, 100, 11]
DUPES_ASC = [1, 2, 2, 5, 7, 11, 11, 31, 100]

EXTRA_LISTS = [
    [],
    [42],
    [3, 3, 3],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [9, -1, 4, 0, -7, 4, 12, 3, 3, -1],
    [10, 0, 10, 0, 5, 5, 1, 9, 2, 8, 3, 7],
]


@pytest.mark.parametrize("sorter", [bubble_sort, insertion_sort, selection_sort])
def test_reversible_sorts_ascending(sorter):
    items = list(SAMPLE)
    sorter(items, False)
    assert items == SAMPLE_ASC


@pytest.mark.parametrize("sorter", [bubble_sort, insertion_sort, selection_sort])
def test_reversible_sorts_descending(sorter):
    items = list(SAMPLE)
    sorter(items, True)
    assert items == SAMPLE_DESC


def test_bucket_sort_asc():
    assert bucket_sort(DUPES) == DUPES_ASC


def test_bucket_sort_leaves_input_untouched():
    items = list(DUPES)
    bucket_sort(items)
    assert items == DUPES


def test_bucket_sort_empty():
    assert bucket_sort([]) == []


def test_bucket_sort_rejects_all_zero():
    with pytest.raises(ValueError):
        bucket_sort([0, 0])


def test_bucket_sort_rejects_negative():
    with pytest.raises(ValueError):
        bucket_sort([3, -1])


def test_counting_sort_asc():
    items = list(DUPES)
    counting_sort(items, 100)
    assert items == DUPES_ASC


@pytest.mark.parametrize("bad", [101, -1])
def test_counting_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        counting_sort([1, bad], 100)


def test_heap_sort_asc():
    assert heap_sort(DUPES, False) == DUPES_ASC


def test_heap_sort_desc():
    assert heap_sort(DUPES, True) == [100, 31, 11, 11, 7, 5, 2, 2, 1]


def test_merge_sort_asc():
    items = [2, 7, 3, 5, 1, 24, 31, 100, 7]
    merge_sort(items)
    assert items == [1, 2, 3, 5, 7, 7, 24, 31, 100]


def test_quick_sort_asc():
    items = [2, 7, 3, 5, 1, 24, 31, 100, 7]
    quick_sort(items)
    assert items == [1, 2, 3, 5, 7, 7, 24, 31, 100]


def test_shell_sort_asc():
    items = list(SAMPLE)
    shell_sort(items)
    assert items == SAMPLE_ASC


@pytest.mark.parametrize("data", EXTRA_LISTS)
@pytest.mark.parametrize(
    "sorter", [bubble_sort, insertion_sort, selection_sort, merge_sort, shell_sort, quick_sort]
)
def test_in_place_sorts_match_sorted(sorter, data):
    items = list(data)
    sorter(items)
    assert items == sorted(data)


@pytest.mark.parametrize("data", EXTRA_LISTS)
@pytest.mark.parametrize("sorter", [bubble_sort, insertion_sort, selection_sort])
def test_descending_matches_sorted_reverse(sorter, data):
    items = list(data)
    sorter(items, True)
    assert items == sorted(data, reverse=True)


@pytest.mark.parametrize("data", EXTRA_LISTS)
def test_heap_sort_matches_sorted(data):
    assert heap_sort(data) == sorted(data)
    assert heap_sort(data, True) == sorted(data, reverse=True)


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana"]
    quick_sort(words)
    assert words == ["apple", "banana", "fig", "pear"]


def test_main_prints_sorted_sample(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "1 2 3 5 7 11 24 31 100 \n"