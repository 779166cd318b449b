from types import SimpleNamespace
from unittest.mock import patch

import pytest
import stripe

from stripe_checkout.client import StripeCheckoutClient, error_message


@pytest.mark.asyncio
async def test_create_session_calls_stripe_with_params():
    params = {"payment_method_types": ["card"], "line_items": [], "success_url": "s", "cancel_url": "c"}

    with patch.object(
        stripe.checkout.Session, "create", return_value=SimpleNamespace(id="cs_test_abc")
    ) as create:
        session = await StripeCheckoutClient(api_key="sk_test_key").create_session(params)

    assert session.id == "cs_test_abc"
    create.assert_called_once_with(api_key="sk_test_key", **params)


@pytest.mark.asyncio
async def test_create_session_propagates_stripe_errors():
    with patch.object(
        stripe.checkout.Session,
        "create",
        side_effect=stripe.CardError("card_declined", param=None, code="card_declined"),
    ):
        with pytest.raises(stripe.CardError):
            await StripeCheckoutClient(api_key="sk_test_key").create_session({"line_items": []})


def test_error_message_prefers_stripe_message():
    err = stripe.AuthenticationError("Invalid API Key provided")
    assert error_message(err) == "Invalid API Key provided"


def test_error_message_falls_back_to_str():
    assert error_message(RuntimeError("connection reset")) == "connection reset"


@pytest.mark.asyncio
async def test_api_key_is_per_call_not_global(monkeypatch):
    monkeypatch.setattr(stripe, "api_key", None)

    with patch.object(
        stripe.checkout.Session, "create", return_value=SimpleNamespace(id="cs_test_abc")
    ) as create:
        await StripeCheckoutClient(api_key="sk_test_other").create_session({"line_items": []})

    assert create.call_args.kwargs["api_key"] == "sk_test_other"
    assert stripe.api_key is None
