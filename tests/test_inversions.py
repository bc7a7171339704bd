import random

from algokit.inversions import count_inversions, is_ideal_permutation, reverse_pairs


def test_count_inversions_sorted_is_zero():
    assert count_inversions([1, 2, 3, 4, 5]) == 0


def test_count_inversions_reversed_is_all_pairs():
    n = 9
    assert count_inversions(list(range(n, 0, -1))) == n * (n - 1) // 2


def test_count_inversions_single_adjacent_swap():
    values = list(range(10))
    values[3], values[4] = values[4], values[3]
    assert count_inversions(values) == 1


def test_count_inversions_equal_values_do_not_count():
    assert count_inversions([7, 7, 7, 7]) == count_inversions([])


def test_count_inversions_does_not_modify_input():
    values = [5, 3, 1, 4]
    count_inversions(values)
    assert values == [5, 3, 1, 4]


def test_count_inversions_reversal_complements():
    rng = random.Random(11)
    for _ in range(20):
        values = rng.sample(range(100), rng.randint(1, 15))
        n = len(values)
        assert count_inversions(values) + count_inversions(values[::-1]) == n * (n - 1) // 2


def test_reverse_pairs_worked_example():
    assert reverse_pairs([1, 3, 2, 3, 1]) == 2


def test_reverse_pairs_all_pairs_qualify():
    values = [1000, 100, 10, 1]
    n = len(values)
    assert reverse_pairs(values) == n * (n - 1) // 2


def test_reverse_pairs_bounded_by_inversions_for_non_negative():
    rng = random.Random(12)
    for _ in range(30):
        values = [rng.randint(0, 50) for _ in range(rng.randint(0, 15))]
        assert 0 <= reverse_pairs(values) <= count_inversions(values)


def test_reverse_pairs_ascending_positive_is_zero():
    assert reverse_pairs([1, 2, 3, 4]) == count_inversions([1, 2, 3, 4])


def test_is_ideal_identity():
    assert is_ideal_permutation(list(range(6))) is True


def test_is_ideal_with_adjacent_swap():
    nums = list(range(6))
    nums[1], nums[2] = nums[2], nums[1]
    assert is_ideal_permutation(nums) is True


def test_is_ideal_with_distant_swap():
    nums = list(range(6))
    nums[1], nums[3] = nums[3], nums[1]
    assert is_ideal_permutation(nums) is False


def test_is_ideal_worked_example():
    assert is_ideal_permutation([1, 0, 2]) is True