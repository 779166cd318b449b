import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def is_amount(value: Any) -> bool:
    """True for JSON numbers. Booleans and NaN/inf do not count."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


@dataclass
class CheckoutRequest:
    monthly_total: float
    setup_total: float
    success_url: Optional[str] = None
    cancel_url: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["CheckoutRequest"]:
        """
        Build a request from a decoded JSON body.
        Returns None when either total is missing or not a number.
        """
        if not isinstance(payload, dict):
            payload = {}

        monthly_total = payload.get("monthlyTotal")
        setup_total = payload.get("setupTotal")
        if not is_amount(monthly_total) or not is_amount(setup_total):
            return None

        return cls(
            monthly_total=monthly_total,
            setup_total=setup_total,
            success_url=payload.get("success_url"),
            cancel_url=payload.get("cancel_url"),
        )


@dataclass
class SessionParams:
    success_url: str
    cancel_url: str
    payment_method_types: List[str] = field(default_factory=lambda: ["card"])
    mode: Optional[str] = None          # subscription, payment, or unset
    line_items: List[Dict[str, Any]] = field(default_factory=list)

    def to_stripe(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "payment_method_types": list(self.payment_method_types),
            "success_url": self.success_url,
            "cancel_url": self.cancel_url,
        }
        if self.mode is not None:
            params["mode"] = self.mode
        params["line_items"] = self.line_items
        return params
