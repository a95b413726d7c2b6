"""Shared BDD fixtures and step definitions for the shopping cart."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then, when
from shopping.cart import service
from shopping.cart.errors import CartError
from shopping.cart.session import ShopperSession
from shopping.catalogue.product import Offer, Product


@pytest.fixture()
def outcome():
    """Container for the last step's result or captured cart error."""
    return {"result": None, "exc": None}


def _run(outcome, fn, *args):
    outcome["result"], outcome["exc"] = None, None
    try:
        outcome["result"] = fn(*args)
    except CartError as exc:
        outcome["exc"] = exc


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a signed-in shopper", target_fixture="session")
def signed_in_shopper():
    return ShopperSession(user_id="user-bdd-001")


@given(
    parsers.cfparse("a product priced {price:d} with {stock:d} in stock and an active {discount:d}% offer"),
    target_fixture="product_id",
)
def product_with_offer(price, stock, discount):
    product = Product(title="Desk Lamp", price=price, stock_quantity=stock)
    product.add_offers(Offer(discount=discount, status="active"))
    current_domain.repository_for(Product).add(product)
    return str(product.id)


@given(parsers.cfparse("the product also has an active {discount:d}% offer"))
def additional_offer(product_id, discount):
    repo = current_domain.repository_for(Product)
    product = repo.get(product_id)
    product.add_offers(Offer(discount=discount, status="active"))
    repo.add(product)


@given("the product is sold out")
def sold_out(product_id):
    repo = current_domain.repository_for(Product)
    product = repo.get(product_id)
    product.stock_quantity = 0
    repo.add(product)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the shopper adds the product to the cart")
def add_product(session, product_id, outcome):
    _run(outcome, service.add_to_cart, session, product_id)


@when(parsers.cfparse("the shopper sets the quantity to {quantity:d}"))
def set_quantity(session, product_id, quantity, outcome):
    _run(outcome, service.update_quantity, session, product_id, quantity)


@when("the shopper removes the product")
def remove_product(session, product_id, outcome):
    _run(outcome, service.remove_from_cart, session, product_id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {lines:d} line with quantity {quantity:d}"))
def cart_lines(session, lines, quantity):
    cart = service.view_cart(session)
    assert len(cart.items) == lines
    assert cart.items[0].quantity == quantity


@then(parsers.cfparse("the cart shows a discounted price of {price:d} and a subtotal of {subtotal:d}"))
def cart_prices(session, price, subtotal):
    item = service.view_cart(session).items[0]
    assert item.discounted_price == price
    assert item.subtotal == subtotal


@then(parsers.cfparse('the request fails with "{code}"'))
def request_fails(outcome, code):
    assert outcome["exc"] is not None
    assert outcome["exc"].code == code


@then(parsers.cfparse("the cart total is {total:d}"))
def cart_total(outcome, total):
    assert outcome["exc"] is None
    assert outcome["result"].cart_total == total


@then("the cart is empty")
def cart_is_empty(session):
    cart = service.view_cart(session)
    assert cart.is_empty
    assert cart.grand_total == 0
