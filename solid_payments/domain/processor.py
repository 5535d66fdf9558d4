"""Payment processor - drives a sequence of payment gateways"""

import time
from typing import List, Sequence

from solid_payments.domain.gateway import PaymentGateway
from solid_payments.domain.models import PaymentOutcome
from solid_payments.infrastructure.observability.logging import log_payment_pass
from solid_payments.infrastructure.observability.metrics import payment_pass_histogram


class PaymentProcessor:
    """Coordinates payment processing across the configured gateways"""

    def __init__(self, gateways: Sequence[PaymentGateway]):
        self.gateways = tuple(gateways)

    def process_payments(self, amount: float) -> List[PaymentOutcome]:
        """
        Run every gateway once for the same amount, in configuration order.

        Exceptions raised by a gateway are not caught; remaining gateways
        are skipped and the error reaches the caller.

        Returns:
            One PaymentOutcome per gateway, in invocation order
        """
        start_time = time.perf_counter()
        outcomes = []

        for gateway in self.gateways:
            success = gateway.process_payment(amount)
            method = getattr(gateway, "kind", type(gateway).__name__)
            outcomes.append(PaymentOutcome(method=method, amount=amount, success=success))

        duration = time.perf_counter() - start_time
        payment_pass_histogram.observe(duration)
        log_payment_pass(
            amount=amount,
            gateway_count=len(outcomes),
            success_count=sum(1 for o in outcomes if o.success),
            duration_ms=duration * 1000,
        )
        return outcomes
