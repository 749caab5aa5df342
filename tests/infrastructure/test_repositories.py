"""Tests for the in-memory and JSON-file repositories.

Both implementations run the same contract tests; the JSON one writes
under pytest's ``tmp_path``.
"""

import json

import pytest

from storefront.domain.exceptions import RepositoryError
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.codecs import OrderCodec, ProductCodec
from storefront.infrastructure.persistence.in_memory_repository import InMemoryRepository
from storefront.infrastructure.persistence.json_repository import JsonFileRepository
from tests.fakes import make_customer, make_product, product_promotion


@pytest.fixture(params=["memory", "json"])
def product_repo(request, tmp_path):
    if request.param == "memory":
        return InMemoryRepository()
    return JsonFileRepository(tmp_path / "products.json", ProductCodec())


class TestRepositoryContract:

    def test_save_assigns_sequential_ids(self, product_repo):
        first = make_product(None, "10")
        second = make_product(None, "20")
        assert product_repo.save(first) == 1
        assert product_repo.save(second) == 2
        assert first.id == 1

    def test_next_id(self, product_repo):
        assert product_repo.next_id() == 1
        product_repo.save(make_product(None))
        assert product_repo.next_id() == 2

    def test_save_upserts(self, product_repo):
        product_repo.save(make_product(None, "10", "Old"))
        product_repo.save(make_product(1, "15", "New"))
        assert product_repo.count() == 1
        assert product_repo.get_by_id(1).name == "New"

    def test_get_missing(self, product_repo):
        assert product_repo.get_by_id(3) is None

    def test_get_many_returns_one_per_stored_id(self, product_repo):
        for value in ("10", "20", "30"):
            product_repo.save(make_product(None, value))
        found = product_repo.get_many([3, 1, 1, 99])
        assert sorted(p.id for p in found) == [1, 3]

    def test_contains(self, product_repo):
        product_repo.save(make_product(None))
        assert product_repo.contains(1)
        assert not product_repo.contains(2)
        assert not product_repo.contains(0)

    def test_contains_all(self, product_repo):
        product_repo.save(make_product(None))
        product_repo.save(make_product(None))
        assert product_repo.contains_all([1, 2])
        assert product_repo.contains_all([2, 2])
        assert not product_repo.contains_all([1, 3])
        assert not product_repo.contains_all([1, -1])

    def test_delete(self, product_repo):
        product_repo.save(make_product(None))
        assert product_repo.delete(1) == 1
        assert product_repo.delete(1) == 0
        assert product_repo.count() == 0

    def test_list_all_in_id_order(self, product_repo):
        product_repo.save(make_product(4, "10"))
        product_repo.save(make_product(2, "10"))
        assert [p.id for p in product_repo.list_all()] == [2, 4]


class TestInMemoryRepository:

    def test_instances_do_not_share_state(self):
        a = InMemoryRepository()
        b = InMemoryRepository()
        a.save(make_product(None))
        assert b.count() == 0

    def test_counter_stays_ahead_of_explicit_ids(self):
        repo = InMemoryRepository([make_product(5)])
        assert repo.save(make_product(None)) == 6

    def test_returns_stored_reference(self):
        repo = InMemoryRepository()
        product = make_product(None)
        repo.save(product)
        assert repo.get_by_id(1) is product


class TestJsonFileRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonFileRepository(path, ProductCodec())
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_order_round_trip(self, tmp_path):
        repo = JsonFileRepository(tmp_path / "orders.json", OrderCodec())
        order = Order.create(
            [make_product(1, "50", "Widget"), make_product(2, "30", "Gadget")],
            make_customer(1, "Alice"),
            product_promotion(1, 10),
        )
        order_id = repo.save(order)

        loaded = repo.get_by_id(order_id)
        assert loaded.customer.name == "Alice"
        assert [p.name for p in loaded.products] == ["Widget", "Gadget"]
        assert loaded.promotion.target_id == 1
        assert loaded.discount_amount == Money.of("5")
        assert loaded.total == Money.of("75")

    def test_order_without_promotion(self, tmp_path):
        repo = JsonFileRepository(tmp_path / "orders.json", OrderCodec())
        order_id = repo.save(Order.create([make_product(1, "9.99")], make_customer()))
        loaded = repo.get_by_id(order_id)
        assert loaded.promotion is None
        assert loaded.total == Money.of("9.99")

    def test_values_stored_as_strings(self, tmp_path):
        path = tmp_path / "products.json"
        JsonFileRepository(path, ProductCodec()).save(make_product(None, "19.90", "Widget"))
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw == [{"id": 1, "name": "Widget", "value": "19.90", "currency": "USD"}]

    def test_corrupt_file_raises_repository_error(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json", encoding="utf-8")
        repo = JsonFileRepository(path, ProductCodec())
        with pytest.raises(RepositoryError, match="Cannot read"):
            repo.list_all()
