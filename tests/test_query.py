"""Tests for the generic filter -> sort -> paginate pipeline."""

import pytest

from acservice.errors import InvalidRequestError
from acservice.query import (
    any_of,
    apply_filters,
    at_least,
    exact,
    in_range,
    is_descending,
    paginate,
    resolve_sort_key,
    run_query,
    sort_items,
    text_search,
)

ITEMS = [
    {"name": "Alpha", "price": 500, "tags": ["split", "window"]},
    {"name": "Bravo", "price": 1500, "tags": ["central"]},
    {"name": "Charlie", "price": 900, "tags": ["split"]},
    {"name": "Delta", "price": 1500, "tags": []},
    {"name": "Echo", "price": 200, "tags": ["portable", "Split"]},
]


class TestPredicateBuilders:
    def test_absent_values_produce_no_predicate(self):
        assert exact(lambda i: i["name"], None) is None
        assert at_least(lambda i: i["price"], None) is None
        assert in_range(lambda i: i["price"]) is None
        assert any_of(lambda i: i["tags"], None) is None
        assert any_of(lambda i: i["tags"], []) is None
        assert text_search(None, lambda i: i["name"]) is None
        assert text_search("   ", lambda i: i["name"]) is None

    def test_exact_match(self):
        pred = exact(lambda i: i["price"], 1500)
        assert [i["name"] for i in ITEMS if pred(i)] == ["Bravo", "Delta"]

    def test_in_range_open_bounds(self):
        below = in_range(lambda i: i["price"], maximum=900)
        above = in_range(lambda i: i["price"], minimum=900)
        assert {i["name"] for i in ITEMS if below(i)} == {"Alpha", "Charlie", "Echo"}
        assert {i["name"] for i in ITEMS if above(i)} == {"Bravo", "Charlie", "Delta"}

    def test_any_of_with_normalizer(self):
        pred = any_of(lambda i: i["tags"], ["SPLIT"], normalize=str.lower)
        assert {i["name"] for i in ITEMS if pred(i)} == {"Alpha", "Charlie", "Echo"}

    def test_text_search_is_case_insensitive_across_fields(self):
        pred = text_search("PORT", lambda i: i["name"], lambda i: i["tags"])
        assert [i["name"] for i in ITEMS if pred(i)] == ["Echo"]

    def test_text_search_skips_none_fields(self):
        pred = text_search("x", lambda i: None, lambda i: i["name"])
        assert [i["name"] for i in ITEMS if pred(i)] == []


class TestFiltering:
    def test_filters_combine_with_and(self):
        result = apply_filters(
            ITEMS,
            [at_least(lambda i: i["price"], 500), any_of(lambda i: i["tags"], ["split"])],
        )
        assert [i["name"] for i in result] == ["Alpha", "Charlie"]

    def test_none_predicates_are_ignored(self):
        assert apply_filters(ITEMS, [None, None]) == ITEMS

    def test_adding_a_filter_never_grows_the_result(self):
        base = [at_least(lambda i: i["price"], 300)]
        narrower = base + [text_search("a", lambda i: i["name"])]
        assert len(apply_filters(ITEMS, narrower)) <= len(apply_filters(ITEMS, base))


class TestSorting:
    def test_no_key_keeps_order(self):
        assert sort_items(ITEMS, None) == ITEMS

    def test_descending_is_reverse(self):
        names = [i["name"] for i in sort_items(ITEMS, lambda i: i["price"], descending=True)]
        assert names[0] in ("Bravo", "Delta")
        assert names[-1] == "Echo"

    def test_ties_keep_incoming_order_ascending(self):
        names = [i["name"] for i in sort_items(ITEMS, lambda i: i["price"])]
        assert names == ["Echo", "Alpha", "Charlie", "Bravo", "Delta"]

    def test_unknown_sort_key_rejected(self):
        with pytest.raises(InvalidRequestError, match="Unsupported sort field"):
            resolve_sort_key({"name": lambda i: i}, "rating")

    def test_sort_order_validation(self):
        assert is_descending("DESC") is True
        assert is_descending("asc") is False
        with pytest.raises(InvalidRequestError):
            is_descending("sideways")


class TestPagination:
    def test_page_metadata(self):
        page, info = paginate(ITEMS, page=2, limit=2)
        assert [i["name"] for i in page] == ["Charlie", "Delta"]
        assert info.total == 5
        assert info.total_pages == 3
        assert info.has_next_page is True
        assert info.has_prev_page is True

    def test_last_page(self):
        page, info = paginate(ITEMS, page=3, limit=2)
        assert len(page) == 1
        assert info.has_next_page is False

    def test_out_of_range_page_is_empty_not_error(self):
        page, info = paginate(ITEMS, page=10, limit=2)
        assert page == []
        assert info.total == 5

    def test_empty_collection(self):
        page, info = paginate([], page=1, limit=10)
        assert page == []
        assert info.total_pages == 0
        assert info.has_next_page is False

    @pytest.mark.parametrize("page,limit", [(0, 10), (-1, 10), (1, 0), (1, 1000)])
    def test_invalid_page_or_limit(self, page, limit):
        with pytest.raises(InvalidRequestError):
            paginate(ITEMS, page=page, limit=limit)


class TestRunQuery:
    def test_total_counts_matches_before_pagination(self):
        pred = any_of(lambda i: i["tags"], ["split"])
        result = run_query(ITEMS, [pred], sort_key=lambda i: i["name"], page=1, limit=1)
        assert len(result.items) == 1
        assert result.page_info.total == sum(1 for i in ITEMS if pred(i))
        assert result.items[0]["name"] == "Alpha"

    def test_default_limit_from_settings(self):
        result = run_query(ITEMS)
        assert result.page_info.limit == 10
        assert len(result.items) == 5
