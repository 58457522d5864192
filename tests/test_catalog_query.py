from types import SimpleNamespace

import pytest

from aviary.core.exceptions import ValidationError
from aviary.services.catalog_query import (
    CatalogQueryPipeline,
    QuerySpec,
    parse_categories,
    parse_page,
    parse_price_range,
    parse_sort,
)

SORT_FIELDS = {"price": "price", "category": "category", "name": "name"}


@pytest.fixture
def pipeline():
    return CatalogQueryPipeline(category_field="category", sort_fields=SORT_FIELDS, page_size=10)


def _item(i, price, category=None, name=None):
    return SimpleNamespace(id=i, price=price, category=category, name=name or f"item-{i}")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class TestParsing:
    def test_categories_split_on_commas_and_spaces(self):
        assert parse_categories("A,B  C") == frozenset({"A", "B", "C"})
        assert parse_categories(["A,B", "C"]) == frozenset({"A", "B", "C"})

    def test_blank_categories_mean_no_filter(self):
        assert parse_categories(None) is None
        assert parse_categories(" , ") is None

    def test_price_range(self):
        assert parse_price_range("10 40") == (10.0, 40.0)
        assert parse_price_range("10") == (10.0, None)
        assert parse_price_range("* 40") == (None, 40.0)
        assert parse_price_range("* *") is None
        assert parse_price_range(None) is None

    @pytest.mark.parametrize("raw", ["ten 40", "10 forty", "nan 5", "1 inf", "1 2 3", "50 10"])
    def test_malformed_price_is_rejected(self, raw):
        with pytest.raises(ValidationError):
            parse_price_range(raw)

    def test_sort(self):
        assert parse_sort("price", SORT_FIELDS) == ("price", False)
        assert parse_sort("price desc", SORT_FIELDS) == ("price", True)
        assert parse_sort("name Ascending", SORT_FIELDS) == ("name", False)
        assert parse_sort(None, SORT_FIELDS) == (None, False)

    @pytest.mark.parametrize("raw", ["colour", "price sideways", "price asc now"])
    def test_malformed_sort_is_rejected(self, raw):
        with pytest.raises(ValidationError):
            parse_sort(raw, SORT_FIELDS)

    def test_page(self):
        assert parse_page(None) == 1
        assert parse_page("3") == 3

    @pytest.mark.parametrize("raw", ["0", "-1", "two", "1.5"])
    def test_malformed_page_is_rejected(self, raw):
        with pytest.raises(ValidationError):
            parse_page(raw)

    def test_parse_builds_query_spec(self, pipeline):
        spec = pipeline.parse(categories="A C", price="10 40", sortby="price desc", page="2")
        assert spec == QuerySpec(
            categories=frozenset({"A", "C"}),
            price_range=(10.0, 40.0),
            sort_key="price",
            descending=True,
            page=2,
            page_size=10,
        )


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

class TestPipeline:
    def test_price_window_beyond_last_page_is_empty(self, pipeline):
        records = [_item(i, price) for i, price in enumerate(range(5, 65, 5))]
        spec = pipeline.parse(price="10 40", sortby="price asc", page="2")

        result = pipeline.run(records, spec)

        assert result.total_count == 7
        assert result.page_count == 1
        assert result.items == []

    def test_category_selection_keeps_input_order(self, pipeline):
        records = [_item(i, 1, c) for i, c in enumerate("AABBC")]
        result = pipeline.run(records, pipeline.parse(categories="A,C"))
        assert result.total_count == 3
        assert [r.id for r in result.items] == [0, 1, 4]

    def test_empty_catalog(self, pipeline):
        for page in ("1", "4"):
            result = pipeline.run([], pipeline.parse(page=page))
            assert (result.total_count, result.page_count, result.items) == (0, 0, [])

    def test_counts_reflect_filtered_set(self, pipeline):
        records = [_item(i, i, "A" if i % 2 else "B") for i in range(35)]
        result = pipeline.run(records, pipeline.parse(categories="A"))
        assert result.total_count == 17
        assert result.page_count == 2
        assert len(result.items) == 10

    def test_sort_happens_before_pagination(self, pipeline):
        records = [_item(i, price) for i, price in enumerate([50, 3, 41, 7, 12, 99, 1, 30, 8, 64, 2, 77])]
        second = pipeline.run(records, pipeline.parse(sortby="price", page="2"))
        assert [r.price for r in second.items] == [77, 99]

    def test_records_are_not_mutated(self, pipeline):
        records = [_item(i, 10 - i, "A") for i in range(5)]
        snapshot = [vars(r).copy() for r in records]
        pipeline.run(records, pipeline.parse(sortby="price desc", price="2 8"))
        assert [vars(r) for r in records] == snapshot

    def test_unknown_sort_key_in_spec_fails_fast(self, pipeline):
        with pytest.raises(ValueError):
            pipeline.run([], QuerySpec(sort_key="colour"))
