"""Read side of the cart: price a stored cart against the current catalogue.

Viewing never writes. Lines whose product is soft-deleted, or gone from the
catalogue altogether, stay in the stored cart but are left out of what the
shopper sees and of every total.
"""

from protean.utils.globals import current_domain

from shopping.cart.cart import Cart
from shopping.cart.pricing import compute_discounted_price, effective_unit_price, grand_total
from shopping.cart.results import PricedCart, PricedLineItem
from shopping.catalogue.product import Product


def products_in(cart) -> dict[str, Product]:
    """Available catalogue products for the cart's lines, keyed by product id."""
    return current_domain.repository_for(Product).available(str(item.product_id) for item in cart.items)


def current_prices(products) -> dict[str, int]:
    return {product_id: compute_discounted_price(product) for product_id, product in products.items()}


def cart_total(cart, products) -> int:
    """Grand total over the cart's visible lines using their cached unit prices."""
    return grand_total(
        (item.quantity, effective_unit_price(item, products[str(item.product_id)]))
        for item in cart.items
        if str(item.product_id) in products
    )


def price_cart(cart, products) -> PricedCart:
    items = []
    for item in cart.items:
        product = products.get(str(item.product_id))
        if product is None:
            continue
        items.append(
            PricedLineItem(
                product_id=str(item.product_id),
                title=product.title,
                quantity=item.quantity,
                price=product.price,
                discounted_price=compute_discounted_price(product),
            )
        )
    return PricedCart(user_id=str(cart.user_id), items=tuple(items))


def view_cart_for(user_id) -> PricedCart:
    cart = current_domain.repository_for(Cart).find_by_user(user_id)
    if cart is None:
        return PricedCart(user_id=str(user_id))
    return price_cart(cart, products_in(cart))
