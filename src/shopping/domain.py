"""Shopping bounded context: per-shopper carts priced from the catalogue.

Handles cart mutations (add, update quantity, remove) as commands processed
inside a unit of work, and prices carts from the product catalogue's active
offers at read time.
"""

from protean.domain import Domain

from shopping.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
shopping = Domain(name="shopping")
