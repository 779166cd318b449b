from pydantic import BaseModel


class CheckoutSessionResponse(BaseModel):
    sessionId: str


class ErrorResponse(BaseModel):
    error: str
