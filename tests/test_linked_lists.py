import pytest

from puzzlebox.linked_lists import (
    ListNode,
    add_one,
    build_circular,
    build_list,
    circular_values,
    kth_from_last,
    merge_sorted,
    remove_alternate,
    to_list,
)


def _as_number(head):
    return int("".join(str(digit) for digit in to_list(head)))


def test_build_and_read_back():
    values = [3, 1, 4, 1, 5]
    assert to_list(build_list(values)) == values


def test_empty_list():
    assert build_list([]) is None
    assert to_list(None) == []


def test_iteration_from_node():
    head = ListNode(1, ListNode(2, ListNode(3)))
    assert list(head) == [1, 2, 3]
    assert list(head.next) == [2, 3]


def test_add_one_all_nines():
    assert to_list(add_one(build_list([9, 9, 9, 9]))) == [1, 0, 0, 0, 0]


def test_add_one_carries_into_middle():
    assert to_list(add_one(build_list([1, 2, 9]))) == [1, 3, 0]


@pytest.mark.parametrize("digits", [[0], [5], [1, 9, 9], [8, 9], [4, 0, 9, 9, 9]])
def test_add_one_adds_one(digits):
    head = build_list(digits)
    before = _as_number(head)
    assert _as_number(add_one(head)) == before + 1


def test_add_one_keeps_head_when_no_carry_out():
    head = build_list([1, 9])
    assert add_one(head) is head


def test_add_one_empty_rejected():
    with pytest.raises(ValueError):
        add_one(None)


def test_kth_from_last_source_example():
    assert kth_from_last(build_list([9, 7, 3, 4, 5]), 2) == 4


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_kth_from_last_matches_negative_index(k):
    values = [9, 7, 3, 4, 5]
    assert kth_from_last(build_list(values), k) == values[-k]


@pytest.mark.parametrize("k", [0, 6, -1])
def test_kth_from_last_out_of_range(k):
    with pytest.raises(IndexError):
        kth_from_last(build_list([9, 7, 3, 4, 5]), k)


def test_merge_sorted_source_example():
    first = [2, 4, 5, 8, 9]
    second = [3, 7, 13, 14, 15]
    merged = merge_sorted(build_list(first), build_list(second))
    assert to_list(merged) == sorted(first + second)


def test_merge_sorted_reuses_nodes():
    head1 = build_list([1, 3])
    head2 = build_list([2])
    merged = merge_sorted(head1, head2)
    assert merged is head1
    assert merged.next is head2


def test_merge_sorted_ties_take_second_first():
    head1 = build_list([1])
    head2 = build_list([1])
    assert merge_sorted(head1, head2) is head2


def test_merge_sorted_with_empty():
    head = build_list([1, 2])
    assert merge_sorted(None, head) is head
    assert merge_sorted(head, None) is head
    assert merge_sorted(None, None) is None


def test_circular_round_trip():
    values = [13, 57, 11, 2, 56, 12, 61]
    head = build_circular(values)
    assert circular_values(head) == values
    tail = head
    for _ in range(len(values) - 1):
        tail = tail.next
    assert tail.next is head


def test_circular_empty():
    assert build_circular([]) is None
    assert circular_values(None) == []
    assert remove_alternate(None) is None


def test_remove_alternate_source_example():
    head = build_circular([13, 57, 11, 2, 56, 12, 61])
    assert circular_values(remove_alternate(head)) == [13, 11, 56, 61]


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6, 9])
def test_remove_alternate_keeps_even_positions(size):
    values = list(range(10, 10 + size))
    head = build_circular(values)
    result = remove_alternate(head)
    assert result is head
    assert circular_values(result) == values[::2]