"""
CheckoutSession: 单个用户的购物会话 + 结账状态机。

状态：cart → shipping → payment → success

  cart     → shipping   proceed_to_shipping()   购物车非空
  shipping → payment    submit_shipping(info)   五个字段都非空，提交后写入 shipping_info
  shipping → cart       back()
  payment  → shipping   back()
  payment  → success    submit_payment()        网关成功：清空购物车，保留 shipping_info
  payment  → payment    submit_payment()        网关失败：购物车保留，payment_error 写入，抛 PaymentFailed
  success  → cart       close()

跳转条件不满足时抛 CheckoutBlocked；shipping 信息不全不抛异常，返回字段级错误列表。
同一个会话同一时间最多一笔付款在处理中（非阻塞锁，第二笔直接拒绝）；
付款进行中时购物车修改和其他跳转同样被拒绝（PAYMENT_IN_PROGRESS）。
"""

import logging
import threading
import uuid
from contextlib import contextmanager
from dataclasses import replace
from typing import Optional

from ..exceptions import CheckoutBlocked, PaymentFailed, ProviderCallFailed
from .cart import Cart
from .payment import BasePaymentGateway, PaymentRequest, new_reference
from .types import (
    DEFAULT_CURRENCY,
    ISO_CURRENCY,
    MINOR_UNITS_PER_MAJOR,
    Order,
    ShippingInfo,
    ShoppingCartItem,
    check_currency,
)

logger = logging.getLogger(__name__)

STEP_CART = "cart"
STEP_SHIPPING = "shipping"
STEP_PAYMENT = "payment"
STEP_SUCCESS = "success"
STEPS = (STEP_CART, STEP_SHIPPING, STEP_PAYMENT, STEP_SUCCESS)

_BACK = {
    STEP_SHIPPING: STEP_CART,
    STEP_PAYMENT: STEP_SHIPPING,
}

_FIELD_LABELS = {
    "receiver_name": "Receiver name",
    "phone_number": "Phone number",
    "address": "Address",
    "city": "City",
    "state": "State",
}


def validate_shipping_info(info: ShippingInfo) -> list[dict]:
    return [
        {"field": name, "message": f"{_FIELD_LABELS[name]} is required."}
        for name in info.missing_fields()
    ]


class CheckoutSession:

    def __init__(self, session_id: Optional[str] = None, currency: str = DEFAULT_CURRENCY):
        self.session_id = session_id or uuid.uuid4().hex
        self.cart = Cart()
        self.step = STEP_CART
        self.currency = check_currency(currency)
        self.shipping_info: Optional[ShippingInfo] = None
        self.cart_items_snapshot = []
        self.is_processing = False
        self.payment_error: Optional[str] = None
        self.last_order: Optional[Order] = None
        self._lock = threading.Lock()

    @contextmanager
    def _idle(self):
        """持有状态锁；付款进行中（is_processing）时直接拒绝。"""
        with self._lock:
            if self.is_processing:
                raise CheckoutBlocked(message="A payment is already being processed", code="PAYMENT_IN_PROGRESS")
            yield

    def _require_step(self, expected, action):
        if self.step != expected:
            raise CheckoutBlocked(
                message=f"Cannot {action} from step {self.step!r}.",
                detail={"current_step": self.step, "expected_step": expected},
            )

    def _move(self, step):
        logger.info("[Checkout] session=%s %s -> %s", self.session_id, self.step, step)
        self.step = step

    # ── 购物车 ─────────────────────────────────────────────────────────────
    #
    # 外部只通过这几个方法改购物车，self.cart 仅供读取。

    def add_to_cart(self, item: ShoppingCartItem) -> None:
        with self._idle():
            self.cart.add_to_cart(item)

    def remove_from_cart(self, item_id: str) -> None:
        with self._idle():
            self.cart.remove_from_cart(item_id)

    def update_quantity(self, item_id: str, quantity: int) -> None:
        with self._idle():
            self.cart.update_quantity(item_id, quantity)

    def clear_cart(self) -> None:
        with self._idle():
            self.cart.clear_cart()

    # ── 配置类操作 ─────────────────────────────────────────────────────────

    def set_currency(self, currency: str) -> None:
        with self._idle():
            self.currency = check_currency(currency)

    def set_shipping_info(self, info: ShippingInfo) -> None:
        """无条件覆盖，不做校验（校验是 submit_shipping 的前置条件）。"""
        with self._idle():
            self.shipping_info = info

    # ── 跳转 ───────────────────────────────────────────────────────────────

    def proceed_to_shipping(self) -> None:
        with self._idle():
            self._require_step(STEP_CART, "proceed to checkout")
            if self.cart.is_empty():
                raise CheckoutBlocked(message="Cart is empty", code="EMPTY_CART")
            self._move(STEP_SHIPPING)

    def submit_shipping(self, info: ShippingInfo) -> list[dict]:
        """
        信息完整 → 写入 shipping_info 并进入 payment，返回 []。
        信息不完整 → 状态不变，返回字段级错误列表。
        """
        with self._idle():
            self._require_step(STEP_SHIPPING, "submit shipping info")
            errors = validate_shipping_info(info)
            if errors:
                return errors
            self.shipping_info = replace(
                info,
                receiver_name=info.receiver_name.strip(),
                phone_number=info.phone_number.strip(),
                address=info.address.strip(),
                city=info.city.strip(),
                state=info.state.strip(),
            )
            self._move(STEP_PAYMENT)
            return []

    def back(self) -> None:
        with self._idle():
            previous = _BACK.get(self.step)
            if previous is None:
                raise CheckoutBlocked(
                    message=f"Cannot go back from step {self.step!r}.",
                    detail={"current_step": self.step},
                )
            self._move(previous)

    def submit_payment(self, gateway: BasePaymentGateway, payer_email: str) -> Order:
        """
        网关调用期间不持有状态锁，但 is_processing 为 True，
        其他修改操作和第二笔付款都会被 _idle() 拒绝。
        """
        with self._idle():
            self._require_step(STEP_PAYMENT, "submit payment")
            if self.cart.is_empty():
                raise CheckoutBlocked(message="Cart is empty", code="EMPTY_CART")

            self.is_processing = True
            self.payment_error = None
            self.cart_items_snapshot = self.cart.items
            total = self.cart.get_total_price(self.currency)
            request = PaymentRequest(
                amount=total * MINOR_UNITS_PER_MAJOR,
                currency=ISO_CURRENCY[self.currency],
                reference=new_reference(),
                payer_email=payer_email,
            )

        try:
            receipt = gateway.charge(request)
        except ProviderCallFailed as exc:
            self.payment_error = exc.message
            logger.warning(
                "[Checkout] session=%s payment ref=%s failed: %s",
                self.session_id, request.reference, exc.message,
            )
            raise PaymentFailed(
                message=f"Payment failed: {exc.message}",
                detail={"reference": request.reference, "reason": exc.code},
            ) from exc
        else:
            self.last_order = Order(
                reference=receipt.reference,
                amount=receipt.amount,
                currency=receipt.currency,
                total=total,
                items=self.cart_items_snapshot,
                shipping_info=self.shipping_info,
            )
            self.cart.clear_cart()
            self._move(STEP_SUCCESS)
            return self.last_order
        finally:
            with self._lock:
                self.is_processing = False

    def close(self) -> None:
        """关闭结账面板。只有 success 会重置回 cart，其余步骤保持不变。"""
        with self._idle():
            if self.step == STEP_SUCCESS:
                self.payment_error = None
                self._move(STEP_CART)
