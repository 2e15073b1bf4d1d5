from itertools import combinations, product

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algopractice.dp_subsets import (
    can_partition,
    coin_change,
    count_partitions_with_difference,
    count_subsets_with_sum,
    cut_rod,
    is_subset_sum,
    knapsack_01,
    min_subset_sum_difference,
    target_sum_ways,
    unbounded_knapsack,
)

small_values = st.lists(st.integers(min_value=0, max_value=12), max_size=8)


def _subsets(values):
    for size in range(len(values) + 1):
        yield from combinations(range(len(values)), size)


def _subset_sums(values):
    return [sum(values[i] for i in chosen) for chosen in _subsets(values)]


# knapsack_01

def test_knapsack_single_item_that_fits():
    assert knapsack_01(5, [5], [42]) == 42


def test_knapsack_item_too_heavy():
    assert knapsack_01(4, [5], [42]) == 0


def test_knapsack_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack_01(5, [1, 2], [3])


def test_knapsack_negative_capacity():
    with pytest.raises(ValueError):
        knapsack_01(-1, [1], [1])


# count_subsets_with_sum

def test_count_subsets_empty_values_zero_total():
    assert count_subsets_with_sum([], 0) == 1


@given(small_values, st.integers(0, 40))
def test_count_subsets_matches_enumeration(values, total):
    expected = sum(1 for s in _subset_sums(values) if s == total)
    assert count_subsets_with_sum(values, total) == expected


# coin_change

def test_coin_change_zero_amount_needs_no_coins():
    assert coin_change([2, 5], 0) == 0


def test_coin_change_impossible_is_none():
    assert coin_change([2], 3) is None


def test_coin_change_negative_amount():
    with pytest.raises(ValueError):
        coin_change([1], -1)


@given(st.integers(1, 9), st.integers(1, 9))
def test_coin_change_single_coin_multiples(coin, count):
    assert coin_change([coin], coin * count) == count


@given(st.lists(st.integers(1, 8), min_size=1, max_size=4), st.integers(1, 30))
def test_coin_change_result_is_achievable(coins, amount):
    result = coin_change(coins, amount)
    if result is None:
        assert 1 not in coins
    else:
        assert result >= 1
        assert result * max(coins) >= amount


# can_partition

def test_can_partition_odd_total():
    assert can_partition([1, 2]) is False


@given(st.lists(st.integers(0, 20), max_size=6))
def test_can_partition_of_doubled_list(values):
    assert can_partition(values + values) is True


@given(small_values)
def test_can_partition_agrees_with_subset_sum(values):
    total = sum(values)
    expected = total % 2 == 0 and is_subset_sum(values, total // 2)
    assert can_partition(values) == expected


# min_subset_sum_difference

def test_min_difference_single_value():
    assert min_subset_sum_difference([7]) == 7


def test_min_difference_empty_raises():
    with pytest.raises(ValueError):
        min_subset_sum_difference([])


@given(st.lists(st.integers(0, 12), min_size=1, max_size=8))
def test_min_difference_matches_enumeration(values):
    total = sum(values)
    expected = min(abs(total - 2 * s) for s in _subset_sums(values))
    assert min_subset_sum_difference(values) == expected


# count_partitions_with_difference

def test_partitions_difference_larger_than_total():
    assert count_partitions_with_difference([1, 2], 4) == 0


@given(small_values, st.integers(0, 30))
def test_partitions_with_difference_matches_enumeration(values, difference):
    total = sum(values)
    expected = sum(1 for s in _subset_sums(values) if total - 2 * s == difference)
    assert count_partitions_with_difference(values, difference) == expected


# cut_rod

def test_cut_rod_single_piece():
    assert cut_rod([9]) == 9


def test_cut_rod_empty_raises():
    with pytest.raises(ValueError):
        cut_rod([])


@given(st.lists(st.integers(0, 30), min_size=1, max_size=10))
def test_cut_rod_bounds(prices):
    best = cut_rod(prices)
    assert best >= prices[-1]
    assert best >= len(prices) * prices[0]


@given(st.lists(st.integers(0, 30), min_size=1, max_size=10))
def test_cut_rod_equals_unbounded_knapsack(prices):
    n = len(prices)
    assert cut_rod(prices) == unbounded_knapsack(n, prices, list(range(1, n + 1)))


# target_sum_ways

def test_target_sum_unreachable():
    assert target_sum_ways([1, 1], 5) == 0


@given(st.lists(st.integers(0, 6), max_size=7), st.integers(-20, 20))
def test_target_sum_matches_sign_enumeration(nums, target):
    expected = sum(
        1
        for signs in product((1, -1), repeat=len(nums))
        if sum(s * v for s, v in zip(signs, nums)) == target
    )
    assert target_sum_ways(nums, target) == expected


# unbounded_knapsack

@given(st.integers(1, 6), st.integers(0, 20), st.integers(1, 6))
def test_unbounded_single_item_multiples(weight, value, count):
    assert unbounded_knapsack(weight * count, [value], [weight]) == value * count


def test_unbounded_mismatched_lengths():
    with pytest.raises(ValueError):
        unbounded_knapsack(5, [1], [1, 2])


@given(
    st.lists(st.tuples(st.integers(1, 8), st.integers(0, 20)), max_size=6),
    st.integers(0, 25),
)
def test_unbounded_at_least_zero_one(items, capacity):
    weights = [w for w, _ in items]
    values = [v for _, v in items]
    assert unbounded_knapsack(capacity, values, weights) >= knapsack_01(
        capacity, weights, values
    )


# is_subset_sum

def test_subset_sum_zero_total_always_reachable():
    assert is_subset_sum([5, 6], 0) is True


def test_subset_sum_negative_total():
    with pytest.raises(ValueError):
        is_subset_sum([1], -1)


def test_subset_sum_negative_value():
    with pytest.raises(ValueError):
        is_subset_sum([-1, 2], 1)


@given(small_values, st.integers(0, 40))
def test_subset_sum_matches_enumeration(values, total):
    assert is_subset_sum(values, total) == (total in _subset_sums(values))