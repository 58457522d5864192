from types import SimpleNamespace

from aviary.services.sorting import sort_records


def _birds(*rows):
    return [SimpleNamespace(id=i, breed=b, price=p) for i, (b, p) in enumerate(rows)]


def test_numeric_key_sorts_numerically():
    birds = _birds(("x", 100), ("y", 9), ("z", 25))
    assert [b.price for b in sort_records(birds, "price")] == [9, 25, 100]


def test_string_key_sorts_lexicographically():
    birds = _birds(("Lovebird", 1), ("Budgie", 1), ("Cockatiel", 1))
    assert [b.breed for b in sort_records(birds, "breed")] == ["Budgie", "Cockatiel", "Lovebird"]


def test_sort_is_stable_for_equal_keys():
    birds = _birds(("A", 10), ("B", 5), ("C", 10), ("D", 5))
    assert [b.breed for b in sort_records(birds, "price")] == ["B", "D", "A", "C"]
    assert [b.breed for b in sort_records(birds, "price", descending=True)] == ["A", "C", "B", "D"]


def test_sorting_twice_gives_identical_output():
    birds = _birds(("A", 3), ("B", 1), ("C", 3), ("D", 2))
    once = sort_records(birds, "price")
    assert sort_records(once, "price") == once


def test_descending_is_exact_reverse_without_ties():
    birds = _birds(("A", 3), ("B", 1), ("C", 4), ("D", 2))
    asc = sort_records(birds, "price")
    desc = sort_records(birds, "price", descending=True)
    assert desc == list(reversed(asc))


def test_missing_values_sort_last_ascending_and_first_descending():
    items = [
        SimpleNamespace(id=1, category="b"),
        SimpleNamespace(id=2, category=None),
        SimpleNamespace(id=3, category="a"),
    ]
    assert [i.id for i in sort_records(items, "category")] == [3, 1, 2]
    assert [i.id for i in sort_records(items, "category", descending=True)] == [2, 1, 3]


def test_no_key_keeps_input_order():
    birds = _birds(("C", 3), ("A", 1), ("B", 2))
    result = sort_records(birds, None)
    assert result == birds
    assert result is not birds
