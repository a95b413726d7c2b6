"""Cart item management: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from shopping.cart.cart import Cart
from shopping.cart.errors import CartNotFound, ProductNotFound
from shopping.cart.pricing import compute_discounted_price
from shopping.cart.results import AddedToCart, QuantityChanged, RemovedFromCart
from shopping.cart.validation import parse_quantity
from shopping.cart.viewing import cart_total, current_prices, products_in
from shopping.catalogue.product import Product
from shopping.domain import shopping
from shopping.utils.logging import get_logger

logger = get_logger(__name__)


@shopping.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@shopping.command(part_of="Cart")
class UpdateCartQuantity:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@shopping.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


def _existing_cart(repo, user_id):
    cart = repo.find_by_user(user_id)
    if cart is None:
        raise CartNotFound()
    return cart


@shopping.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = current_domain.repository_for(Product).find_by_id(command.product_id)
        if product is None or not product.is_available:
            raise ProductNotFound()

        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_user(command.user_id)
        if cart is None:
            cart = Cart.create(user_id=command.user_id)
            logger.info("Created cart", user_id=str(command.user_id), cart_id=str(cart.id))

        quantity = cart.add_product(
            product_id=command.product_id,
            stock_quantity=product.stock_quantity,
            unit_price=compute_discounted_price(product),
        )
        repo.add(cart)

        logger.info(
            "Added product to cart",
            user_id=str(command.user_id),
            product_id=str(command.product_id),
            quantity=quantity,
        )
        return AddedToCart(product_id=str(command.product_id), quantity=quantity)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        quantity = parse_quantity(command.quantity)

        repo = current_domain.repository_for(Cart)
        cart = _existing_cart(repo, command.user_id)
        cart.get_item(command.product_id)

        products = products_in(cart)
        product = products.get(str(command.product_id))
        if product is None:
            raise ProductNotFound()

        prices = current_prices(products)
        item = cart.update_item_quantity(
            product_id=command.product_id,
            quantity=quantity,
            stock_quantity=product.stock_quantity,
            unit_price=prices[str(command.product_id)],
        )
        cart.refresh_prices(prices)
        repo.add(cart)

        return QuantityChanged(
            product_id=str(command.product_id),
            quantity=item.quantity,
            item_total=item.quantity * item.discounted_price,
            cart_total=cart_total(cart, products),
        )

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _existing_cart(repo, command.user_id)
        cart.remove_item(command.product_id)

        products = products_in(cart)
        cart.refresh_prices(current_prices(products))
        repo.add(cart)

        logger.info(
            "Removed product from cart",
            user_id=str(command.user_id),
            product_id=str(command.product_id),
            remaining_items=len(cart.items),
        )
        return RemovedFromCart(product_id=str(command.product_id), cart_total=cart_total(cart, products))
