"""
购物车 / 结账相关的数据结构。

价格一律用整数（naira / dollar 的主单位），合计和付款金额都走整数运算，
不会出现浮点累计误差。付款时再乘 100 换算成 kobo / cents。
"""

from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import ValidationError

ITEM_TYPES = ("medicine", "food")

CURRENCIES = ("naira", "dollar")
DEFAULT_CURRENCY = "naira"
ISO_CURRENCY = {"naira": "NGN", "dollar": "USD"}
MINOR_UNITS_PER_MAJOR = 100

SHIPPING_FIELDS = ("receiver_name", "phone_number", "address", "city", "state")


def check_currency(currency: str) -> str:
    if currency not in CURRENCIES:
        raise ValidationError(
            message=f"Unknown currency: {currency!r}.",
            code="UNKNOWN_CURRENCY",
            detail={"known_currencies": list(CURRENCIES)},
        )
    return currency


@dataclass(frozen=True)
class Price:
    naira: int
    dollar: int

    def amount(self, currency: str) -> int:
        return getattr(self, check_currency(currency))


@dataclass
class ShoppingCartItem:
    id: str
    name: str
    type: str                 # "medicine" | "food"
    price: Price
    quantity: int = 1
    description: str = ""

    def line_total(self, currency: str) -> int:
        return self.price.amount(currency) * self.quantity


@dataclass
class ShippingInfo:
    receiver_name: str = ""
    phone_number: str = ""
    address: str = ""
    city: str = ""
    state: str = ""

    def missing_fields(self) -> list[str]:
        return [name for name in SHIPPING_FIELDS if not (getattr(self, name) or "").strip()]


@dataclass
class Order:
    """付款成功后的订单确认信息，供 success 页展示。"""

    reference: str
    amount: int               # minor units（kobo / cents）
    currency: str             # ISO 代码 "NGN" / "USD"
    total: int                # 主单位合计
    items: list[ShoppingCartItem] = field(default_factory=list)
    shipping_info: Optional[ShippingInfo] = None
