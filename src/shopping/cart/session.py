"""Request-scoped shopper identity, passed explicitly into every cart call."""

from dataclasses import dataclass

from shopping.cart.errors import Unauthenticated


@dataclass(frozen=True)
class ShopperSession:
    """Identity of the shopper behind the current request, if any."""

    user_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id)

    def require_user(self) -> str:
        if not self.is_authenticated:
            raise Unauthenticated()
        return self.user_id
