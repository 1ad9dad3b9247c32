"""
支付网关。

目前只有 SimulatedPaymentGateway：等待 delay 秒后返回成功回执。
这是演示用的脚手架，可以通过 PAYMENT_SIMULATE_FAILURE 配置成必定失败，
以便走通 CheckoutSession 的失败路径。
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..exceptions import ProviderCallFailed

logger = logging.getLogger(__name__)


@dataclass
class PaymentRequest:
    amount: int          # minor units（kobo / cents）
    currency: str        # "NGN" / "USD"
    reference: str
    payer_email: str


@dataclass
class PaymentReceipt:
    reference: str
    amount: int
    currency: str
    status: str = "success"


def new_reference() -> str:
    return f"ref_{int(time.time() * 1000)}"


class BasePaymentGateway(ABC):

    @abstractmethod
    def charge(self, request: PaymentRequest) -> PaymentReceipt:
        """
        发起扣款。

        Raises:
            ProviderCallFailed: 网关拒绝或调用失败
        """


class SimulatedPaymentGateway(BasePaymentGateway):

    def __init__(self, delay: float = 3.0, fail: bool = False, sleep=time.sleep):
        self.delay = delay
        self.fail = fail
        self._sleep = sleep

    def charge(self, request: PaymentRequest) -> PaymentReceipt:
        logger.info(
            "[Payment] simulated charge ref=%s amount=%d %s",
            request.reference, request.amount, request.currency,
        )
        if self.delay > 0:
            self._sleep(self.delay)

        if request.amount <= 0:
            raise ProviderCallFailed(
                message="Payment amount must be positive",
                code="PAYMENT_DECLINED",
                detail={"reference": request.reference, "amount": request.amount},
            )
        if self.fail:
            raise ProviderCallFailed(
                message="Payment was declined by the gateway",
                code="PAYMENT_DECLINED",
                detail={"reference": request.reference},
            )

        return PaymentReceipt(
            reference=request.reference,
            amount=request.amount,
            currency=request.currency,
        )


def get_payment_gateway() -> BasePaymentGateway:
    """从 settings 构造网关。"""
    from django.conf import settings

    return SimulatedPaymentGateway(
        delay=float(getattr(settings, "PAYMENT_SIMULATED_DELAY", 3)),
        fail=bool(getattr(settings, "PAYMENT_SIMULATE_FAILURE", False)),
    )
