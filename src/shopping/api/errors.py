"""Translate cart failures into JSON responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shopping.cart.errors import CartError


async def cart_error_handler(request: Request, exc: CartError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CartError, cart_error_handler)
