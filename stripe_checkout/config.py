import os
from dotenv import load_dotenv

load_dotenv()
STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY")
SUCCESS_URL = os.getenv("SUCCESS_URL")  # e.g. https://example.com/thanks
CANCEL_URL = os.getenv("CANCEL_URL")
CHECKOUT_CURRENCY = os.getenv("CHECKOUT_CURRENCY", "usd")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_REQUESTS = os.getenv("LOG_REQUESTS", "false").lower() in ("1", "true", "yes")
