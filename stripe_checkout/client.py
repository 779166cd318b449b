import asyncio
from typing import Any, Dict, Optional

import stripe

from .config import STRIPE_SECRET_KEY
from .logging import console_logger

# Failures surface to the caller directly
stripe.max_network_retries = 0


class StripeCheckoutClient:
    """
    Async wrapper around stripe.checkout.Session.create.
    The SDK call is blocking, so it runs in a worker thread.
    The API key goes with each call; the global stripe.api_key is never set.
    """

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or STRIPE_SECRET_KEY

    async def create_session(self, params: Dict[str, Any]) -> stripe.checkout.Session:
        console_logger.info(
            "checkout_session.create",
            mode=params.get("mode"),
            line_items=len(params.get("line_items", [])),
        )
        session = await asyncio.to_thread(
            stripe.checkout.Session.create,
            api_key=self.api_key,
            **params,
        )
        console_logger.info("checkout_session.created", session_id=session.id)
        return session


def error_message(exc: Exception) -> str:
    """The message Stripe attached to the error, else str(exc)."""
    if isinstance(exc, stripe.StripeError) and exc.user_message:
        return exc.user_message
    return str(exc)
