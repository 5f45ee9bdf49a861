"""Submit one sandbox charge with Stripe's test card and print the result."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on PYTHONPATH when running as a script.
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from charge_gateway.core.logging import setup_logging
from charge_gateway.services.payment_providers import PaymentProviderConfigurationError
from charge_gateway.services.payment_providers.stripe import get_gateway


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--amount", type=int, default=4999, help="Amount in cents")
    parser.add_argument("--currency", default="USD")
    parser.add_argument("--secret-key", default=None, help="Overrides STRIPE_SECRET_KEY")
    args = parser.parse_args(argv)

    setup_logging()

    try:
        gw = get_gateway(args.secret_key)
    except PaymentProviderConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    (
        gw.set_name("Bob Smith")
        .set_address1("123 Test Street")
        .set_address2("Suite #4")
        .set_city("Morristown")
        .set_province("TN")
        .set_postal("37814")
        .set_country("US")
        .set_card_number("4007000000027")
        .set_expiration_date("10", "2021")
        .set_cvv("123")
    )

    if gw.charge(args.amount, args.currency):
        print(f"Charge successful! Transaction ID: {gw.get_transaction_id()}")
        return 0
    print(f"Charge failed. Errors: {gw.get_errors()}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
