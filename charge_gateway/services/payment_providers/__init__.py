"""Card-charge provider integrations and their error types."""

class PaymentProviderError(Exception):
    """Base error for payment providers."""


class PaymentProviderConfigurationError(PaymentProviderError):
    """Raised when a gateway is built without credentials or endpoint."""


class PaymentProviderTransportError(PaymentProviderError):
    """Network-level failure talking to the processor (DNS, TLS, timeout)."""
