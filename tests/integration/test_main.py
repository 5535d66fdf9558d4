"""End-to-end tests for the demonstration entry point"""

import json
import logging
from dataclasses import dataclass
from datetime import date
from solid_payments.domain.methods import CreditCardPayment, PayPalPayment
from solid_payments.config import settings
from solid_payments.domain.factory import PaymentMethodFactory
from solid_payments.infrastructure.observability.logging import setup_logging
from solid_payments.main import DEMO_AMOUNT, build_processor, main


def test_build_processor_wires_demo_methods():
    processor = build_processor(today=date(2025, 6, 1))

    card, paypal = processor.gateways
    assert isinstance(card, CreditCardPayment)
    assert card.cardholder_name == "John Doe"
    assert card.expiration_date == date(2027, 6, 1)
    assert isinstance(paypal, PayPalPayment)
    assert paypal.email == "example@example.com"


def test_demo_pass_succeeds():
    outcomes = build_processor().process_payments(DEMO_AMOUNT)

    assert [o.method for o in outcomes] == ["credit_card", "paypal"]
    assert all(o.success for o in outcomes)


def test_main_prints_status_lines(capsys, restore_root_logger, monkeypatch):
    monkeypatch.setattr(settings, "log_level", "INFO")
    monkeypatch.setattr(settings, "log_format", "text")

    exit_code = main()

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Processing credit card payment of $100.0.",
        "Processing PayPal payment of $100.0.",
    ]


def test_json_logging_format(capsys, restore_root_logger):
    setup_logging("INFO", "json")

    logging.getLogger("solid_payments.test").info("hello", extra={"amount": 1.5})

    record = json.loads(capsys.readouterr().out.strip())
    assert record["message"] == "hello"
    assert record["level"] == "INFO"
    assert record["service"] == "solid-payments"
    assert record["amount"] == 1.5
    assert "timestamp" in record


def test_build_processor_resolves_methods_through_factory(monkeypatch):
    """Replacing a registered kind changes the demo wiring without editing it"""

    @dataclass(frozen=True)
    class SandboxPayPalPayment(PayPalPayment):
        pass

    monkeypatch.setattr(PaymentMethodFactory, "_methods", dict(PaymentMethodFactory._methods))
    PaymentMethodFactory.register_method("paypal", SandboxPayPalPayment)

    _, paypal = build_processor().gateways

    assert type(paypal) is SandboxPayPalPayment
    assert paypal.email == "example@example.com"
