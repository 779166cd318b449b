from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Dict, Optional

from models import CheckoutRequest, SessionParams


SUBSCRIPTION_NAME = "Monthly Service Subscription"
SETUP_FEE_NAME = "One-time Setup Fee"
SETUP_FEE_DESCRIPTION = "Initial setup and onboarding fee"

PLACEHOLDER_SUCCESS_URL = "https://your-website.com/success"
PLACEHOLDER_CANCEL_URL = "https://your-website.com/cancel"


def to_minor_units(total: float) -> int:
    """
    Dollars -> cents, rounding half up.
    Works from the shortest repr of the float so 19.995 becomes 2000, not 1999.
    """
    amount = Decimal(total) if isinstance(total, int) else Decimal(repr(total))
    with localcontext() as ctx:
        # room for every integer digit, so huge totals stay exact
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        cents = amount * 100
        return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_dollars(total: float) -> str:
    """Two-decimal amount for descriptions. Ints go through Decimal so huge ones never hit float."""
    if isinstance(total, int):
        total = Decimal(total)
    return f"{total:.2f}"


class CheckoutSessionBuilder:
    """
    Turns a CheckoutRequest into Stripe session params:
    - Resolve redirect URLs (request -> environment -> placeholder)
    - Monthly total > 0 -> recurring line item, subscription mode
    - Otherwise setup total > 0 -> payment mode
    - Setup total > 0 -> one-time line item, whatever the mode
    """

    def __init__(
        self,
        currency: str = "usd",
        success_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
    ):
        # success_url/cancel_url are the configured defaults, used when the request has none
        self.currency = currency
        self.success_url = success_url
        self.cancel_url = cancel_url

    def _monthly_item(self, total: float) -> Dict[str, Any]:
        return {
            "price_data": {
                "currency": self.currency,
                "product_data": {
                    "name": SUBSCRIPTION_NAME,
                    "description": f"Custom monthly service fee: ${format_dollars(total)}/month",
                },
                "unit_amount": to_minor_units(total),
                "recurring": {"interval": "month"},
            },
            "quantity": 1,
        }

    def _setup_item(self, total: float) -> Dict[str, Any]:
        return {
            "price_data": {
                "currency": self.currency,
                "product_data": {
                    "name": SETUP_FEE_NAME,
                    "description": SETUP_FEE_DESCRIPTION,
                },
                "unit_amount": to_minor_units(total),
            },
            "quantity": 1,
        }

    def build(self, request: CheckoutRequest) -> SessionParams:
        params = SessionParams(
            success_url=request.success_url or self.success_url or PLACEHOLDER_SUCCESS_URL,
            cancel_url=request.cancel_url or self.cancel_url or PLACEHOLDER_CANCEL_URL,
        )
        line_items = []

        if request.monthly_total > 0:
            line_items.append(self._monthly_item(request.monthly_total))
            params.mode = "subscription"
        elif request.setup_total > 0:
            params.mode = "payment"

        if request.setup_total > 0:
            line_items.append(self._setup_item(request.setup_total))

        # Both totals <= 0 leaves mode unset and no items; Stripe decides what that means.
        params.line_items = line_items
        return params
