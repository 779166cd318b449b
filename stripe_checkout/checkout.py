import json

from fastapi import APIRouter, Depends, Request, Response

from models import CheckoutRequest
from pricing import CheckoutSessionBuilder
from . import config
from .client import StripeCheckoutClient, error_message
from .errors import InvalidAmountsError, MethodNotAllowedError, UpstreamError
from .logging import console_logger
from .schemas import CheckoutSessionResponse, ErrorResponse

CHECKOUT_PATH = "/api/create-checkout-session"

CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}

router = APIRouter()

_client = StripeCheckoutClient()


def get_checkout_client() -> StripeCheckoutClient:
    return _client


def get_session_builder() -> CheckoutSessionBuilder:
    return CheckoutSessionBuilder(
        currency=config.CHECKOUT_CURRENCY,
        success_url=config.SUCCESS_URL,
        cancel_url=config.CANCEL_URL,
    )


async def read_json_body(request: Request):
    """Decoded JSON body, or {} when the body is empty or not JSON."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError):
        return {}


@router.options(CHECKOUT_PATH)
async def checkout_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post(
    CHECKOUT_PATH,
    response_model=CheckoutSessionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_checkout_session(
    request: Request,
    response: Response,
    client: StripeCheckoutClient = Depends(get_checkout_client),
    builder: CheckoutSessionBuilder = Depends(get_session_builder),
):
    """
    Creates a Stripe checkout session for a monthly fee and/or a one-time setup fee.
    Returns the session id the frontend redirects with.
    """
    response.headers.update(CORS_HEADERS)

    payload = await read_json_body(request)
    checkout_request = CheckoutRequest.from_payload(payload)
    if checkout_request is None:
        console_logger.warning("checkout_session.invalid_amounts")
        raise InvalidAmountsError()

    params = builder.build(checkout_request)

    try:
        session = await client.create_session(params.to_stripe())
    except Exception as e:
        console_logger.error("stripe_api_error", error=str(e), exc_info=True)
        raise UpstreamError(error_message(e)) from e

    return CheckoutSessionResponse(sessionId=session.id)


@router.api_route(
    CHECKOUT_PATH,
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def checkout_method_not_allowed():
    raise MethodNotAllowedError()
