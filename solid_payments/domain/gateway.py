"""Payment gateway capability shared by every payment method"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Anything that can process a payment for an amount"""

    @abstractmethod
    def process_payment(self, amount: float) -> bool:
        """
        Process a payment for the given amount.

        Returns:
            True if the payment succeeded, False otherwise
        """
        pass
