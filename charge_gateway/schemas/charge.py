# charge_gateway/schemas/charge.py
from __future__ import annotations
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ChargeRequest(BaseModel):
    """Cardholder and billing fields accumulated by a gateway before charging.

    Values are stored as given; format checks are left to the processor.
    """

    name: str = ""
    address_line1: str = ""
    address_line2: Optional[str] = None
    city: str = ""
    province: str = ""
    postal_code: str = ""
    country: str = ""
    card_number: str = ""
    card_cvv: str = ""
    expiration_month: str = ""
    expiration_year: str = ""

    def redacted(self) -> dict[str, Any]:
        """Log-safe view: card number masked, CVV dropped."""
        data = self.model_dump(exclude={"card_cvv"})
        digits = "".join(ch for ch in self.card_number if ch.isdigit())
        data["card_number"] = f"****{digits[-4:]}" if len(digits) >= 4 else "****"
        return data


class ChargeOutcome(BaseModel):
    success: bool
    transaction_id: Optional[str] = None
    # Transport messages are strings; processor errors are kept as returned
    errors: List[Any] = Field(default_factory=list)
