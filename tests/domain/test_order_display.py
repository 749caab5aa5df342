"""Tests for the plain-text rendering of an order."""

from storefront.domain.model.order import Order
from tests.fakes import make_customer, make_product, order_promotion, product_promotion


def _products():
    return [make_product(1, "50", "Widget"), make_product(2, "30", "Gadget")]


class TestOrderDisplay:

    def test_full_layout_with_product_promotion(self):
        order = Order.create(_products(), make_customer(name="Alice"), product_promotion(1, 10))

        assert order.to_display_string() == (
            "Order #0\n"
            "\tClient: ALICE\n"
            "\tProducts:\n"
            "\n"
            "\t\t1\tWIDGET\t$50.00 [PROMO]\n"
            "\t\t2\tGADGET\t$30.00\n"
            "\n"
            "\tDiscount: $5.00\n"
            "\tTotal: $75.00\n"
        )

    def test_str_matches_display_string(self):
        order = Order.create(_products(), make_customer())
        order.id = 12
        assert str(order) == order.to_display_string()
        assert str(order).startswith("Order #12\n")

    def test_order_promotion_marks_nothing(self):
        order = Order.create(_products(), make_customer(), order_promotion(10))
        text = order.to_display_string()
        assert "[PROMO]" not in text
        assert "\tDiscount: $8.00\n" in text
        assert "\tTotal: $72.00\n" in text

    def test_marker_agrees_with_discount_when_target_absent(self):
        order = Order.create(_products(), make_customer(), product_promotion(99, 10))
        text = order.to_display_string()
        assert "[PROMO]" not in text
        assert "\tDiscount: $0.00\n" in text

    def test_rendering_has_no_side_effects(self):
        order = Order.create(_products(), make_customer(), order_promotion(10))
        assert order.to_display_string() == order.to_display_string()
        assert len(order.products) == 2
