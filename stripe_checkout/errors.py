from typing import Optional


class CheckoutError(Exception):
    """Base error rendered to the caller as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidAmountsError(CheckoutError):
    status_code = 400

    def __init__(self, message: str = "Invalid amounts provided"):
        super().__init__(message)


class MethodNotAllowedError(CheckoutError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class UpstreamError(CheckoutError):
    """The payment API rejected or failed the call. The message is passed through as-is."""

    status_code = 500
