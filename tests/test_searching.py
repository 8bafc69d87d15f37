from algolab.searching import linear_search


def test_finds_first_occurrence():
    items = [3, 2, 7, 5, 7, 4]
    assert linear_search(items, 7) == 2


def test_finds_at_start_and_end():
    items = [3, 2, 7, 5, 4]
    assert linear_search(items, 3) == 0
    assert linear_search(items, 4) == len(items) - 1


def test_missing_returns_none():
    assert linear_search([3, 2, 7, 5, 4], 10000) is None


def test_empty_sequence():
    assert linear_search([], 0) is None


def test_every_element_found_at_its_index():
    items = [10, 20, 30, 40, 50]
    for index, value in enumerate(items):
        assert linear_search(items, value) == index


def test_works_on_generators():
    assert linear_search((x * 2 for x in range(10)), 8) == 4