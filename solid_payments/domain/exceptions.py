"""Domain-specific exceptions"""


class PaymentError(Exception):
    """Base exception for payment domain"""

    pass


class UnsupportedPaymentMethodError(PaymentError):
    """Requested payment method kind is not registered"""

    pass
