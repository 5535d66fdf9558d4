"""Concrete payment methods.

Each method only stores the credentials it was given and reports success;
no card, account or amount validation takes place.
"""

import logging
from abc import abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar

from solid_payments.domain.gateway import PaymentGateway
from solid_payments.infrastructure.observability.metrics import record_payment

logger = logging.getLogger(__name__)


class PaymentMethod(PaymentGateway):
    """Abstract base class for payment methods"""

    kind: ClassVar[str]

    @abstractmethod
    def process_payment(self, amount: float) -> bool:
        pass


@dataclass(frozen=True)
class CreditCardPayment(PaymentMethod):
    """Payment by credit card"""

    kind: ClassVar[str] = "credit_card"

    cardholder_name: str
    card_number: str = field(repr=False)
    cvv: str = field(repr=False)
    expiration_date: date

    def process_payment(self, amount: float) -> bool:
        logger.info(
            f"Processing credit card payment of ${amount}.",
            extra={"payment_method": self.kind, "amount": amount},
        )
        record_payment(self.kind, True)
        return True


@dataclass(frozen=True)
class PayPalPayment(PaymentMethod):
    """Payment through a PayPal account"""

    kind: ClassVar[str] = "paypal"

    email: str
    password: str = field(repr=False)

    def process_payment(self, amount: float) -> bool:
        logger.info(
            f"Processing PayPal payment of ${amount}.",
            extra={"payment_method": self.kind, "amount": amount},
        )
        record_payment(self.kind, True)
        return True
