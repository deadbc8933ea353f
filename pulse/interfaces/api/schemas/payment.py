"""Payment intent and webhook schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PaymentIntentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_id: int = Field(..., alias="eventId", gt=0)


class PaymentIntentResponse(BaseModel):
    client_secret: str
    payment_intent_id: str


class WebhookAck(BaseModel):
    received: bool = True
    duplicate: bool = False


class UploadResponse(BaseModel):
    success: bool
    path: str
    filename: str
