"""Factory for creating payment methods by kind name"""

from typing import Any, Dict, List, Type

from solid_payments.domain.exceptions import UnsupportedPaymentMethodError
from solid_payments.domain.methods import CreditCardPayment, PaymentMethod, PayPalPayment


class PaymentMethodFactory:
    """Registry of payment method classes keyed by kind"""

    _methods: Dict[str, Type[PaymentMethod]] = {
        CreditCardPayment.kind: CreditCardPayment,
        PayPalPayment.kind: PayPalPayment,
    }

    @classmethod
    def create_method(cls, kind: str, **credentials: Any) -> PaymentMethod:
        """
        Create a payment method instance from its credentials.

        Raises:
            UnsupportedPaymentMethodError: If no method is registered for kind
        """
        method_class = cls._methods.get(kind.lower())
        if method_class is None:
            raise UnsupportedPaymentMethodError(f"Unsupported payment method: {kind}")
        return method_class(**credentials)

    @classmethod
    def register_method(cls, kind: str, method_class: Type[PaymentMethod]) -> None:
        """Register a new payment method, replacing any existing one for kind"""
        cls._methods[kind.lower()] = method_class

    @classmethod
    def available_methods(cls) -> List[str]:
        return sorted(cls._methods)
