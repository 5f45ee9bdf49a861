"""Interface shared by card-charge gateways."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class BasicPaymentGateway(ABC):
    """Builder-style gateway: set cardholder details, then charge once.

    Every setter stores its value and returns the gateway so calls can be
    chained::

        gw.set_name("Bob Smith").set_city("Morristown").set_cvv("123")
    """

    @abstractmethod
    def set_name(self, name: str) -> "BasicPaymentGateway":
        """Set the cardholder's full name."""

    @abstractmethod
    def set_address1(self, address: str) -> "BasicPaymentGateway":
        """Set billing address line 1."""

    @abstractmethod
    def set_address2(self, address: Optional[str]) -> "BasicPaymentGateway":
        """Set billing address line 2, or None when not applicable."""

    @abstractmethod
    def set_city(self, city: str) -> "BasicPaymentGateway":
        """Set the billing city."""

    @abstractmethod
    def set_province(self, province: str) -> "BasicPaymentGateway":
        """Set the billing state or province."""

    @abstractmethod
    def set_postal(self, postal: str) -> "BasicPaymentGateway":
        """Set the billing zip or postal code."""

    @abstractmethod
    def set_country(self, country: str) -> "BasicPaymentGateway":
        """Set the ISO 3166-1 alpha-2 country code."""

    @abstractmethod
    def set_card_number(self, number: str) -> "BasicPaymentGateway":
        """Set the credit or debit card number."""

    @abstractmethod
    def set_expiration_date(self, month: str, year: str) -> "BasicPaymentGateway":
        """Set expiration month (MM) and year (YYYY)."""

    @abstractmethod
    def set_cvv(self, cvv: str) -> "BasicPaymentGateway":
        """Set the card security code (CVV, CVV2)."""

    @abstractmethod
    def charge(self, amount: int, currency: str = "USD") -> bool:
        """Charge ``amount`` in the currency's smallest unit (100 = 1.00 USD).

        Returns True when the processor accepted the charge.
        """

    @abstractmethod
    def get_errors(self) -> list[Any]:
        """Errors from the last charge attempt; empty if none."""

    @abstractmethod
    def get_transaction_id(self) -> Optional[str]:
        """Transaction id captured by the last successful charge, or None."""
