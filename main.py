from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stripe_checkout.checkout import CORS_HEADERS, router as stripe_checkout_router
from stripe_checkout.errors import CheckoutError, MethodNotAllowedError
from stripe_checkout.middleware import RequestLoggingMiddleware


app = FastAPI(
    title="Fee Checkout",
    description="Creates Stripe checkout sessions for monthly and one-time setup fees",
    version="0.1.0",
)

app.add_middleware(RequestLoggingMiddleware)
app.include_router(stripe_checkout_router)


@app.exception_handler(CheckoutError)
async def checkout_error_handler(request: Request, exc: CheckoutError):
    # Every error keeps the CORS headers so browsers can read the body
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=CORS_HEADERS,
    )


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Starlette's own 405, raised for verbs no route lists (TRACE, PROPFIND, ...)."""
    if exc.status_code == 405:
        return await checkout_error_handler(request, MethodNotAllowedError())
    return await http_exception_handler(request, exc)
