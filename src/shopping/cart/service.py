"""Cart service: the entry point the storefront calls for every cart action.

Each call takes the request's ``ShopperSession`` explicitly. Mutations run as
commands under the shopper's lock, so the load-modify-commit cycle of one
request finishes before the next request for the same shopper starts.
Expected failures surface as ``CartError``; anything else is logged and
reported as ``StorageFailure`` without retrying.
"""

from protean.utils.globals import current_domain

from shopping.cart.errors import CartError, ItemNotFound, ProductNotFound, StorageFailure
from shopping.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from shopping.cart.locking import cart_lock
from shopping.cart.results import AddedToCart, PricedCart, QuantityChanged, RemovedFromCart
from shopping.cart.session import ShopperSession
from shopping.cart.validation import parse_quantity
from shopping.cart.viewing import view_cart_for
from shopping.utils.logging import get_logger

logger = get_logger(__name__)


def add_to_cart(session: ShopperSession, product_id: str) -> AddedToCart:
    user_id = session.require_user()
    if not product_id:
        raise ProductNotFound()

    command = AddToCart(user_id=user_id, product_id=product_id)
    return _process(user_id, command, failure_message="Error adding to cart")


def view_cart(session: ShopperSession) -> PricedCart:
    user_id = session.require_user()
    try:
        return view_cart_for(user_id)
    except CartError:
        raise
    except Exception as exc:
        logger.exception("Error fetching cart", user_id=user_id)
        raise StorageFailure("Error fetching cart") from exc


def update_quantity(session: ShopperSession, product_id: str, quantity) -> QuantityChanged:
    user_id = session.require_user()
    requested = parse_quantity(quantity)
    if not product_id:
        raise ItemNotFound()

    command = UpdateCartQuantity(user_id=user_id, product_id=product_id, quantity=requested)
    return _process(user_id, command, failure_message="Error updating cart")


def remove_from_cart(session: ShopperSession, product_id: str) -> RemovedFromCart:
    user_id = session.require_user()
    if not product_id:
        raise ItemNotFound()

    command = RemoveFromCart(user_id=user_id, product_id=product_id)
    return _process(user_id, command, failure_message="Error removing from cart")


def _process(user_id, command, failure_message):
    with cart_lock(user_id):
        try:
            return current_domain.process(command, asynchronous=False)
        except CartError:
            raise
        except Exception as exc:
            logger.exception(
                failure_message,
                user_id=user_id,
                command=type(command).__name__,
            )
            raise StorageFailure(failure_message) from exc
