"""Domain models - pure Python dataclasses representing payment results"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentOutcome:
    """Result of one gateway invocation during a processing pass"""

    method: str  # gateway kind, e.g. "credit_card" or "paypal"
    amount: float
    success: bool
