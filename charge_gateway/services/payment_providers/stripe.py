from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from charge_gateway.core.config import settings
from charge_gateway.schemas.charge import ChargeOutcome, ChargeRequest
from charge_gateway.services.payment_providers import (
    PaymentProviderError,
    PaymentProviderConfigurationError,
    PaymentProviderTransportError,
)
from charge_gateway.services.payment_providers.base import BasicPaymentGateway


logger = logging.getLogger(__name__)


def _get_secret_key(secret_key: Optional[str] = None) -> str:
    key = secret_key if secret_key is not None else settings.STRIPE_SECRET_KEY
    if not key:
        raise PaymentProviderConfigurationError("Stripe secret key is not configured")
    return key


def _check_api_url(api_url: str) -> str:
    try:
        url = httpx.URL(api_url)
    except httpx.InvalidURL as exc:
        raise PaymentProviderConfigurationError(f"Invalid Stripe API URL: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise PaymentProviderConfigurationError(f"Invalid Stripe API URL: {api_url!r}")
    return api_url


def get_gateway(secret_key: Optional[str] = None, **options: Any) -> "StripeGateway":
    """Build a gateway from settings, overriding the key or options if given."""
    return StripeGateway(_get_secret_key(secret_key), **options)


class StripeGateway(BasicPaymentGateway):
    """Plain card charge against Stripe's ``/v1/charges`` endpoint.

    The card fields are collected for the processor but the request itself
    pays with ``source_token``, a tokenized card, so raw card data never
    leaves the process.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        api_url: Optional[str] = None,
        source_token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._secret_key = _get_secret_key(secret_key)
        self._api_url = _check_api_url(api_url or settings.STRIPE_API_URL)
        self._source_token = source_token or settings.STRIPE_SOURCE_TOKEN
        self._timeout = timeout if timeout is not None else settings.STRIPE_TIMEOUT_SECONDS
        self._transport = transport

        self._request = ChargeRequest()
        self._outcome: Optional[ChargeOutcome] = None
        self._transaction_id: Optional[str] = None

    @property
    def request(self) -> ChargeRequest:
        return self._request

    # --- Builder setters ---

    def set_name(self, name: str) -> "StripeGateway":
        self._request.name = name
        return self

    def set_address1(self, address: str) -> "StripeGateway":
        self._request.address_line1 = address
        return self

    def set_address2(self, address: Optional[str]) -> "StripeGateway":
        self._request.address_line2 = address
        return self

    def set_city(self, city: str) -> "StripeGateway":
        self._request.city = city
        return self

    def set_province(self, province: str) -> "StripeGateway":
        self._request.province = province
        return self

    def set_postal(self, postal: str) -> "StripeGateway":
        self._request.postal_code = postal
        return self

    def set_country(self, country: str) -> "StripeGateway":
        self._request.country = country
        return self

    def set_card_number(self, number: str) -> "StripeGateway":
        self._request.card_number = number
        return self

    def set_expiration_date(self, month: str, year: str) -> "StripeGateway":
        self._request.expiration_month = month
        self._request.expiration_year = year
        return self

    def set_cvv(self, cvv: str) -> "StripeGateway":
        self._request.card_cvv = cvv
        return self

    # --- Charge ---

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        try:
            with httpx.Client(transport=self._transport, timeout=self._timeout) as client:
                return client.post(
                    self._api_url,
                    data=payload,
                    auth=(self._secret_key, ""),
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            detail = str(exc) or exc.__class__.__name__
            raise PaymentProviderTransportError(f"Stripe connection error: {detail}") from exc

    @staticmethod
    def _decode(response: httpx.Response) -> Optional[dict[str, Any]]:
        if not response.content:
            return None
        try:
            body = response.json()
        except ValueError:
            return None
        return body if isinstance(body, dict) else None

    def _fail(self, error: Any) -> bool:
        self._outcome = ChargeOutcome(success=False, errors=[error])
        logger.warning("Stripe charge failed", extra={"error": error})
        return False

    def charge(self, amount: int, currency: str = "USD") -> bool:
        self._outcome = None
        payload = {
            "amount": amount,
            "currency": currency.lower(),
            "source": self._source_token,
        }
        logger.info(
            "Submitting Stripe charge",
            extra={"amount": amount, "currency": payload["currency"], "cardholder": self._request.redacted()},
        )

        try:
            response = self._post(payload)
        except PaymentProviderError as exc:
            return self._fail(str(exc))

        body = self._decode(response)
        if body is None:
            return self._fail(f"Empty or invalid response from Stripe (HTTP {response.status_code})")

        error = body.get("error")
        if error:
            return self._fail(error)
        if response.is_error:
            return self._fail(f"Stripe returned HTTP {response.status_code} without error details")

        reference = body.get("balance_transaction") or body.get("id")
        if not reference:
            return self._fail(f"Stripe response carried no transaction reference (HTTP {response.status_code})")

        transaction_id = str(reference)
        self._transaction_id = transaction_id
        self._outcome = ChargeOutcome(success=True, transaction_id=transaction_id)
        logger.info("Stripe charge succeeded", extra={"transaction_id": transaction_id})
        return True

    def get_outcome(self) -> Optional[ChargeOutcome]:
        return self._outcome

    def get_errors(self) -> list[Any]:
        if self._outcome is None:
            return []
        return list(self._outcome.errors)

    def get_transaction_id(self) -> Optional[str]:
        return self._transaction_id
