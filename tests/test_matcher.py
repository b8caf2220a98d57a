"""
Unit tests for lookup matching and catalog filtering.
"""

import threading

import pytest

from warehouse_lookup.models import Product
from warehouse_lookup.services.matcher import (
    LookupResult,
    LookupSession,
    LookupState,
    filter_catalog,
    find_product,
)


@pytest.fixture
def products():
    return [
        Product(identifier="1", article="SM-001", name="Смартфон Samsung", cell="A-12", quantity=45, zone="A"),
        Product(identifier="2", article="LP-003", name="Ноутбук Lenovo", cell="A-08", quantity=12, zone="A"),
        Product(identifier="3", article="SN-045", name="Наушники Sony", cell="B-23", quantity=78, zone="B"),
        Product(identifier="14", article="SM-002", name="Смартфон Xiaomi", cell="C-01", quantity=3, zone="C"),
    ]


class TestFindProduct:

    @pytest.mark.parametrize("query", ["", "   ", "\t"])
    def test_blank_query_returns_none(self, products, query):
        assert find_product(query, products) is None

    def test_case_insensitive_article(self, products):
        assert find_product("sm-001", products) is products[0]

    def test_substring_of_article(self, products):
        assert find_product("045", products) is products[2]

    def test_first_match_wins(self, products):
        assert find_product("sm", products) is products[0]

    def test_matches_identifier(self, products):
        assert find_product("14", products) is products[3]

    def test_no_match(self, products):
        assert find_product("zz", products) is None

    def test_name_is_not_a_lookup_field(self, products):
        assert find_product("lenovo", products) is None

    def test_query_is_not_trimmed(self, products):
        assert find_product(" sm-001", products) is None

    def test_exact_article_finds_each_record(self, products):
        for product in products:
            assert find_product(product.article, products) is product

    def test_empty_sequence(self):
        assert find_product("sm", []) is None


class TestFilterCatalog:

    def test_empty_query_returns_everything(self, products):
        assert filter_catalog("", products) == products

    def test_cell_substring(self, products):
        assert filter_catalog("A-1", products) == [products[0]]

    def test_name_match_is_case_insensitive(self, products):
        assert filter_catalog("СМАРТФОН", products) == [products[0], products[3]]

    def test_order_is_preserved(self, products):
        result = filter_catalog("a-", products)
        assert result == [products[0], products[1]]

    def test_no_results(self, products):
        assert filter_catalog("nothing", products) == []


class TestLookupSession:

    def test_starts_empty(self):
        session = LookupSession()

        assert session.state is LookupState.EMPTY
        assert session.product is None

    def test_found_then_not_found_then_cleared(self, products):
        session = LookupSession()

        session.update("lp", products)
        assert session.state is LookupState.FOUND
        assert session.product is products[1]

        session.update("lpx", products)
        assert session.state is LookupState.NOT_FOUND
        assert session.product is None

        session.update("  ", products)
        assert session.state is LookupState.EMPTY
        assert session.query == "  "

    def test_clear_resets_state(self, products):
        session = LookupSession()
        session.update("sn", products)
        session.clear()

        assert session.state is LookupState.EMPTY
        assert session.query == ""

    def test_returned_result_is_not_changed_by_later_queries(self, products):
        session = LookupSession()

        first = session.update("sm", products)
        second = session.update("zz", products)

        assert first == LookupResult("sm", LookupState.FOUND, products[0])
        assert second == LookupResult("zz", LookupState.NOT_FOUND, None)
        assert session.current is second

    def test_concurrent_updates_never_mix_query_and_state(self, products):
        session = LookupSession()
        mismatches = []

        def worker(query, expected_state):
            for _ in range(500):
                result = session.update(query, products)
                if result.query != query or result.state is not expected_state:
                    mismatches.append(result)

        threads = [
            threading.Thread(target=worker, args=("sm-001", LookupState.FOUND)),
            threading.Thread(target=worker, args=("zz", LookupState.NOT_FOUND)),
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert mismatches == []
        assert session.current.state in (LookupState.FOUND, LookupState.NOT_FOUND)
