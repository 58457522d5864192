import pytest

from aviary.core.pagination import page_count, paginate


@pytest.mark.parametrize("size", [1, 3, 10, 25])
def test_pages_concatenate_back_to_input(size):
    items = list(range(23))
    pages = page_count(len(items), size)
    rebuilt = [x for p in range(1, pages + 1) for x in paginate(items, p, size)]
    assert rebuilt == items
    assert paginate(items, pages + 1, size) == []


def test_page_slice_offsets():
    items = list(range(1, 26))
    assert paginate(items, 1, 10) == list(range(1, 11))
    assert paginate(items, 3, 10) == [21, 22, 23, 24, 25]


def test_page_count_is_ceiling_and_zero_when_empty():
    assert page_count(0, 10) == 0
    assert page_count(1, 10) == 1
    assert page_count(10, 10) == 1
    assert page_count(11, 10) == 2


def test_empty_list_gives_empty_pages():
    assert paginate([], 1, 10) == []
    assert paginate([], 5, 10) == []


@pytest.mark.parametrize("page,size", [(0, 10), (-1, 10), (1, 0)])
def test_invalid_page_or_size_fails_fast(page, size):
    with pytest.raises(ValueError):
        paginate([1, 2, 3], page, size)
