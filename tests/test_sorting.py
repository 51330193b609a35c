import random

import pytest

from algodrills.sorting import count_sort, quick_sort, quick_sort_two_way

SAMPLE = [49, 38, 65, 97, 76, 13, 27, 49]
COUNT_SAMPLE = [1, 5, 3, 4, 2, 3, 6, 7, 8, 5, 5]


@pytest.mark.parametrize("sorter", [quick_sort, quick_sort_two_way])
def test_quick_sorts_sample(sorter):
    assert sorter(SAMPLE) == sorted(SAMPLE)


@pytest.mark.parametrize("sorter", [quick_sort, quick_sort_two_way, count_sort])
def test_sorters_do_not_mutate_input(sorter):
    data = list(COUNT_SAMPLE)
    sorter(data)
    assert data == COUNT_SAMPLE


@pytest.mark.parametrize("sorter", [quick_sort, quick_sort_two_way])
def test_quick_sorts_random(sorter):
    rng = random.Random(7)
    for _ in range(50):
        data = [rng.randint(-20, 20) for _ in range(rng.randint(0, 30))]
        assert sorter(data) == sorted(data)


@pytest.mark.parametrize("sorter", [quick_sort, quick_sort_two_way])
def test_quick_sorts_already_sorted_long_input(sorter):
    data = list(range(3000))
    assert sorter(data) == data


@pytest.mark.parametrize("sorter", [quick_sort, quick_sort_two_way, count_sort])
def test_sorters_handle_empty_and_single(sorter):
    assert sorter([]) == []
    assert sorter([3]) == [3]


def test_count_sort_sample():
    assert count_sort(COUNT_SAMPLE) == sorted(COUNT_SAMPLE)


def test_count_sort_random():
    rng = random.Random(3)
    data = [rng.randint(0, 50) for _ in range(200)]
    assert count_sort(data) == sorted(data)


def test_count_sort_rejects_negative():
    with pytest.raises(ValueError):
        count_sort([3, -1, 2])