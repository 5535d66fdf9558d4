"""Pytest fixtures for testing"""

import logging
import pytest
from datetime import date, timedelta
from typing import Generator
from solid_payments.domain.methods import CreditCardPayment, PayPalPayment


@pytest.fixture
def credit_card_payment() -> CreditCardPayment:
    return CreditCardPayment(
        cardholder_name="John Doe",
        card_number="1234-5678-9012-3456",
        cvv="123",
        expiration_date=date.today() + timedelta(days=730),
    )


@pytest.fixture
def paypal_payment() -> PayPalPayment:
    return PayPalPayment(email="a@b.com", password="pw")


@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Undo handler and level changes made by setup_logging"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield root
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
