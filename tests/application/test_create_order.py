"""Integration tests for the CreateOrder use case.

Uses in-memory repositories: no file I/O.
"""

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.results import ResultCode
from storefront.domain.exceptions import RepositoryError
from storefront.domain.model.value_objects import Money
from storefront.infrastructure import bootstrap
from tests.fakes import BrokenRepository, seeded_repositories


def _setup():
    repos = seeded_repositories()
    return bootstrap.create_order_handler(repos), repos


class TestCreateOrderHappyPath:

    def test_returns_assigned_id(self):
        handler, _ = _setup()
        result = handler.handle(customer_id=1, product_ids=[1, 2])
        assert result.ok
        assert result.value == 1

    def test_persists_order_with_total(self):
        handler, repos = _setup()
        result = handler.handle(1, [1, 2])
        saved = repos.orders.get_by_id(result.value)
        assert saved.customer.name == "Alice"
        assert saved.total == Money.of("80")

    def test_sequential_ids(self):
        handler, _ = _setup()
        first = handler.handle(1, [1])
        second = handler.handle(1, [2])
        assert second.value == first.value + 1

    def test_keeps_requested_product_order(self):
        handler, repos = _setup()
        result = handler.handle(1, [3, 1])
        assert [p.id for p in repos.orders.get_by_id(result.value).products] == [3, 1]

    def test_duplicate_ids_collapsed(self):
        handler, repos = _setup()
        result = handler.handle(1, [2, 2, 1])
        assert [p.id for p in repos.orders.get_by_id(result.value).products] == [2, 1]

    def test_with_promotion(self):
        handler, repos = _setup()
        result = handler.handle(1, [1, 2], promotion_id=2)
        order = repos.orders.get_by_id(result.value)
        assert order.discount_amount == Money.of("5")
        assert order.total == Money.of("75")


class TestCreateOrderValidation:

    def test_unknown_product(self):
        handler, repos = _setup()
        result = handler.handle(1, [1, 42])
        assert result.error == ResultCode.INVALID_PRODUCT
        assert repos.orders.count() == 0

    def test_negative_product_id(self):
        handler, _ = _setup()
        assert handler.handle(1, [-1]).error == ResultCode.INVALID_PRODUCT

    def test_unknown_customer(self):
        handler, _ = _setup()
        result = handler.handle(9, [1])
        assert result.error == ResultCode.INVALID_CUSTOMER
        assert "Customer #9" in result.message

    def test_unknown_promotion(self):
        handler, _ = _setup()
        assert handler.handle(1, [1], promotion_id=77).error == ResultCode.INVALID_PROMOTION

    def test_empty_product_list(self):
        handler, repos = _setup()
        result = handler.handle(1, [])
        assert not result.ok
        assert result.error == ResultCode.EMPTY_PRODUCT_LIST
        assert repos.orders.count() == 0

    def test_failure_codes_are_negative(self):
        handler, _ = _setup()
        assert int(handler.handle(1, []).error) < 0


class TestCreateOrderStorageFailure:

    def test_repository_errors_propagate(self):
        repos = seeded_repositories()
        handler = CreateOrderHandler(
            BrokenRepository(), repos.products, repos.customers, repos.promotions
        )
        with pytest.raises(RepositoryError):
            handler.handle(1, [1])
