"""FastAPI routes for the shopper's cart."""

from fastapi import APIRouter, Depends, Header
from fastapi.responses import RedirectResponse

from shopping.api.schemas import (
    AddToCartResponse,
    CartResponse,
    CartTotalResponse,
    ErrorResponse,
    QuantityUpdateResponse,
    UpdateQuantityRequest,
)
from shopping.cart import service
from shopping.cart.errors import Unauthenticated
from shopping.cart.session import ShopperSession

cart_router = APIRouter(
    prefix="/cart",
    tags=["cart"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def shopper_session(x_user_id: str | None = Header(default=None)) -> ShopperSession:
    """Identity set by the upstream auth layer; absent for anonymous visitors."""
    return ShopperSession(user_id=x_user_id or None)


@cart_router.post("/items/{product_id}", response_model=AddToCartResponse)
async def add_to_cart(product_id: str, session: ShopperSession = Depends(shopper_session)) -> AddToCartResponse:
    result = service.add_to_cart(session, product_id)
    return AddToCartResponse.from_result(result)


@cart_router.get("", response_model=CartResponse)
async def get_cart(session: ShopperSession = Depends(shopper_session)):
    try:
        cart = service.view_cart(session)
    except Unauthenticated as exc:
        return RedirectResponse(url=exc.context["redirect_to"], status_code=303)
    return CartResponse.from_result(cart)


@cart_router.put("/items", response_model=QuantityUpdateResponse)
async def update_cart_quantity(
    body: UpdateQuantityRequest, session: ShopperSession = Depends(shopper_session)
) -> QuantityUpdateResponse:
    result = service.update_quantity(session, body.product_id, body.quantity)
    return QuantityUpdateResponse.from_result(result)


@cart_router.delete("/items/{product_id}", response_model=CartTotalResponse)
async def remove_from_cart(product_id: str, session: ShopperSession = Depends(shopper_session)) -> CartTotalResponse:
    result = service.remove_from_cart(session, product_id)
    return CartTotalResponse.from_result(result)
