"""Unit tests for the discount calculation domain service."""

from storefront.domain.model.value_objects import Money
from storefront.domain.service.discount_calculator import (
    calculate_discount,
    find_target,
    is_promotion_target,
    subtotal_of,
)
from tests.fakes import make_product, order_promotion, product_promotion


class TestSubtotal:

    def test_sum_of_values(self):
        products = [make_product(1, "50"), make_product(2, "30.25")]
        assert subtotal_of(products) == Money.of("80.25")

    def test_empty_is_zero(self):
        assert subtotal_of([]) == Money.zero()


class TestPromotionTarget:

    def test_product_promotion_matches_its_target(self):
        assert is_promotion_target(product_promotion(2), 2)

    def test_product_promotion_ignores_other_products(self):
        assert not is_promotion_target(product_promotion(2), 3)

    def test_order_promotion_targets_nothing(self):
        assert not is_promotion_target(order_promotion(), 1)

    def test_no_promotion_targets_nothing(self):
        assert not is_promotion_target(None, 1)

    def test_unsaved_product_never_matches(self):
        assert not is_promotion_target(product_promotion(1), None)

    def test_find_target_returns_first_match(self):
        first = make_product(1, "50", "First")
        second = make_product(1, "70", "Second")
        assert find_target(product_promotion(1), [make_product(2), first, second]) is first


class TestCalculateDiscount:

    def test_no_promotion(self):
        products = [make_product(1, "50")]
        assert calculate_discount(None, products, subtotal_of(products)).is_zero

    def test_order_promotion_uses_subtotal(self):
        products = [make_product(1, "50"), make_product(2, "30")]
        discount = calculate_discount(order_promotion(10), products, subtotal_of(products))
        assert discount == Money.of("8")

    def test_product_promotion_uses_target_value_only(self):
        products = [make_product(1, "50"), make_product(2, "30")]
        discount = calculate_discount(product_promotion(1), products, subtotal_of(products))
        assert discount == Money.of("5")

    def test_product_promotion_counts_duplicated_target_once(self):
        products = [make_product(1, "50"), make_product(1, "50")]
        discount = calculate_discount(product_promotion(1), products, subtotal_of(products))
        assert discount == Money.of("5")

    def test_product_promotion_missing_target(self):
        products = [make_product(1, "50")]
        discount = calculate_discount(product_promotion(99), products, subtotal_of(products))
        assert discount.is_zero
