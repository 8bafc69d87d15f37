import pytest

from algolab.linked_list import LinkedList, SearchResult


def build(values):
    ll = LinkedList()
    for value in values:
        ll.insert(value, len(ll))
    return ll


def test_new_list_is_empty():
    ll = LinkedList()
    assert len(ll) == 0
    assert list(ll) == []


def test_append_keeps_order():
    ll = build([5, 6, 7])
    assert list(ll) == [5, 6, 7]
    assert len(ll) == 3


def test_insert_at_front():
    ll = build([5, 6])
    ll.insert(4, 0)
    assert list(ll) == [4, 5, 6]


def test_insert_in_middle():
    ll = build([1, 3, 4])
    ll.insert(2, 1)
    assert list(ll) == [1, 2, 3, 4]


def test_insert_in_middle_near_tail():
    ll = build([1, 2, 3, 5])
    ll.insert(4, 3)
    assert list(ll) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("index", [-1, 4])
def test_insert_invalid_index_raises(index):
    ll = build([1, 2, 3])
    with pytest.raises(IndexError):
        ll.insert(9, index)
    assert list(ll) == [1, 2, 3]


def test_insert_into_empty_at_nonzero_raises():
    with pytest.raises(IndexError):
        LinkedList().insert(1, 1)


def test_delete_head_middle_tail():
    ll = build([1, 2, 3, 4, 5])
    ll.delete(0)
    assert list(ll) == [2, 3, 4, 5]
    ll.delete(3)
    assert list(ll) == [2, 3, 4]
    ll.delete(1)
    assert list(ll) == [2, 4]
    assert len(ll) == 2


def test_delete_last_element_then_reuse():
    ll = build([1])
    ll.delete(0)
    assert list(ll) == []
    ll.insert(8, 0)
    ll.insert(9, 1)
    assert list(ll) == [8, 9]


def test_insert_after_tail_delete_links_correctly():
    ll = build([1, 2, 3])
    ll.delete(2)
    ll.insert(7, 2)
    ll.insert(6, 2)
    assert list(ll) == [1, 2, 6, 7]


@pytest.mark.parametrize("index", [-1, 3])
def test_delete_invalid_index_raises(index):
    ll = build([1, 2, 3])
    with pytest.raises(IndexError):
        ll.delete(index)
    assert len(ll) == 3


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().delete(0)


def test_search_finds_first_match():
    ll = build([4, 7, 7, 2])
    assert ll.search(7) == SearchResult(index=1, found=True)
    assert ll.search(2).index == 3


def test_search_missing_value():
    ll = build([4, 7])
    result = ll.search(5)
    assert result.found is False
    assert result.index is None


def test_str_is_tab_separated():
    assert str(build([1, 2, 3])) == "1\t2\t3\t"
    assert str(LinkedList()) == ""


def test_matches_python_list_model():
    ll = LinkedList()
    model = []
    operations = [(0, 10), (1, 20), (1, 15), (0, 5), (4, 30), (2, 12)]
    for index, value in operations:
        ll.insert(value, index)
        model.insert(index, value)
    for index in (2, 0, 3):
        ll.delete(index)
        del model[index]
    assert list(ll) == model
    assert len(ll) == len(model)