"""Demonstration entry point: wire payment methods into a processor and run one pass"""

from datetime import date

from solid_payments.config import settings
from solid_payments.domain.factory import PaymentMethodFactory
from solid_payments.domain.processor import PaymentProcessor
from solid_payments.infrastructure.observability.logging import setup_logging
from solid_payments.utils.date_utils import add_years

DEMO_AMOUNT = 100.00


def build_processor(today: date | None = None) -> PaymentProcessor:
    """Create the demo payment methods through the factory and a processor over them"""
    if today is None:
        today = date.today()

    credit_card_payment = PaymentMethodFactory.create_method(
        "credit_card",
        cardholder_name="John Doe",
        card_number="1234-5678-9012-3456",
        cvv="123",
        expiration_date=add_years(today, 2),
    )
    paypal_payment = PaymentMethodFactory.create_method(
        "paypal",
        email="example@example.com",
        password="password123",
    )

    return PaymentProcessor([credit_card_payment, paypal_payment])


def main() -> int:
    setup_logging(settings.log_level, settings.log_format)

    processor = build_processor()
    processor.process_payments(DEMO_AMOUNT)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
