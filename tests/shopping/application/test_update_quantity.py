"""Application tests for updating a cart line's quantity."""

import pytest
from protean import current_domain
from shopping.cart import service
from shopping.cart.cart import Cart
from shopping.cart.errors import (
    CartNotFound,
    InsufficientStock,
    InvalidQuantity,
    ItemNotFound,
    ProductNotFound,
    QuantityCapExceeded,
    Unauthenticated,
)
from shopping.cart.session import ShopperSession
from shopping.catalogue.product import Product

SESSION = ShopperSession(user_id="user-001")


def _quantity(product_id):
    cart = current_domain.repository_for(Cart).find_by_user("user-001")
    return cart.find_item(product_id).quantity


class TestUpdateQuantity:
    def test_sets_quantity_and_returns_totals(self, make_product):
        product_id = make_product(price=100, stock_quantity=5, offers=[(20, "active")])
        service.add_to_cart(SESSION, product_id)

        result = service.update_quantity(SESSION, product_id, 4)

        assert result.quantity == 4
        assert result.item_total == 320
        assert result.cart_total == 320
        assert _quantity(product_id) == 4

    def test_cart_total_includes_other_lines(self, make_product):
        first = make_product(price=100, stock_quantity=5, offers=[(20, "active")])
        second = make_product(price=50)
        service.add_to_cart(SESSION, first)
        service.add_to_cart(SESSION, second)

        result = service.update_quantity(SESSION, first, 2)

        assert result.item_total == 160
        assert result.cart_total == 210

    def test_uses_best_offer_not_first(self, make_product):
        product_id = make_product(price=100, stock_quantity=5, offers=[(10, "active"), (25, "active")])
        service.add_to_cart(SESSION, product_id)

        result = service.update_quantity(SESSION, product_id, 2)

        assert result.item_total == 150

    def test_accepts_numeric_strings(self, make_product):
        product_id = make_product()
        service.add_to_cart(SESSION, product_id)
        assert service.update_quantity(SESSION, product_id, "3").quantity == 3

    @pytest.mark.parametrize("quantity", [0, -2, "abc", "", None, 1.5])
    def test_invalid_quantity(self, make_product, quantity):
        product_id = make_product()
        service.add_to_cart(SESSION, product_id)
        with pytest.raises(InvalidQuantity):
            service.update_quantity(SESSION, product_id, quantity)
        assert _quantity(product_id) == 1

    def test_requires_login(self):
        with pytest.raises(Unauthenticated):
            service.update_quantity(ShopperSession(), "prod-001", 2)

    def test_no_cart(self):
        with pytest.raises(CartNotFound):
            service.update_quantity(SESSION, "prod-001", 2)

    def test_item_not_in_cart(self, make_product):
        service.add_to_cart(SESSION, make_product())
        with pytest.raises(ItemNotFound):
            service.update_quantity(SESSION, "prod-not-in-cart", 2)

    def test_above_cap(self, make_product):
        product_id = make_product(stock_quantity=10)
        service.add_to_cart(SESSION, product_id)
        with pytest.raises(QuantityCapExceeded) as exc_info:
            service.update_quantity(SESSION, product_id, 6)
        assert exc_info.value.context == {"max_quantity": 5, "current_quantity": 1}
        assert _quantity(product_id) == 1

    def test_above_stock(self, make_product):
        product_id = make_product(stock_quantity=3)
        service.add_to_cart(SESSION, product_id)
        with pytest.raises(InsufficientStock) as exc_info:
            service.update_quantity(SESSION, product_id, 4)
        assert exc_info.value.context == {"stock_quantity": 3, "current_quantity": 1}
        assert _quantity(product_id) == 1

    def test_deleted_product_line_cannot_be_updated(self, make_product):
        product_id = make_product()
        service.add_to_cart(SESSION, product_id)

        repo = current_domain.repository_for(Product)
        product = repo.get(product_id)
        product.is_deleted = True
        repo.add(product)

        with pytest.raises(ProductNotFound):
            service.update_quantity(SESSION, product_id, 2)
