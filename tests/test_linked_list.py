import pytest

from algokit.linked_list import (
    ListNode,
    build_list,
    insertion_sort_list,
    list_values,
    remove_values,
    swap_pairs,
)


@pytest.mark.parametrize("values", [[], [1], [3, 1, 2], list(range(20))])
def test_build_and_read_round_trip(values):
    assert list_values(build_list(values)) == values


def test_build_empty_is_none():
    assert build_list([]) is None


def test_node_iteration():
    head = ListNode(1, ListNode(2, ListNode(3)))
    assert list(head) == [1, 2, 3]


def test_remove_values():
    values = [1, 2, 3, 4, 5, 2, 1]
    head = remove_values([1, 2], build_list(values))
    assert list_values(head) == [3, 4, 5]


def test_remove_values_all_removed():
    assert remove_values([7], build_list([7, 7, 7])) is None


def test_remove_values_none_match():
    values = [4, 5, 6]
    assert list_values(remove_values([1, 2], build_list(values))) == values


def test_swap_pairs_odd_length():
    head = swap_pairs(build_list([1, 2, 3, 4, 5]))
    assert list_values(head) == [2, 1, 4, 3, 5]


@pytest.mark.parametrize("values", [[], [1], [1, 2], list(range(9))])
def test_swap_pairs_twice_restores(values):
    head = swap_pairs(swap_pairs(build_list(values)))
    assert list_values(head) == values


def test_swap_pairs_keeps_nodes():
    head = build_list([10, 20])
    first, second = head, head.next
    new_head = swap_pairs(head)
    assert new_head is second
    assert new_head.next is first
    assert first.next is None


@pytest.mark.parametrize(
    "values", [[], [1], [4, 2, 1, 3], [-1, 5, 3, 4, 0], [2, 2, 1, 1, 3, 3]]
)
def test_insertion_sort_list(values):
    assert list_values(insertion_sort_list(build_list(values))) == sorted(values)


def test_insertion_sort_keeps_length():
    values = list(range(30, 0, -1))
    head = insertion_sort_list(build_list(values))
    assert len(list_values(head)) == len(values)
    assert list_values(head)[0] == min(values)