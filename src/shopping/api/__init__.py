"""Shopping domain API package."""

from shopping.api.errors import install_error_handlers
from shopping.api.routes import cart_router

__all__ = ["cart_router", "install_error_handlers"]
