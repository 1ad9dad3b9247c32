"""
购物车商品定价策略。

extract_shopping_items() 不直接生成价格，而是委托给 PricingStrategy，
测试可以注入确定性的 TablePricing。
"""

import random
from abc import ABC, abstractmethod
from typing import Optional

from ..shopping.types import Price

# 半开区间 [low, high)
PRICE_RANGES = {
    "medicine": {"naira": (1000, 6000), "dollar": (10, 60)},
    "food":     {"naira": (500, 2500),  "dollar": (5, 25)},
}


class PricingStrategy(ABC):

    @abstractmethod
    def price_for(self, item_type: str, name: str) -> Price:
        """返回某个商品的双币种价格。"""


class RandomPricing(PricingStrategy):
    """在 PRICE_RANGES 范围内随机定价。"""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def price_for(self, item_type: str, name: str) -> Price:
        ranges = PRICE_RANGES[item_type]
        return Price(
            naira=self._rng.randrange(*ranges["naira"]),
            dollar=self._rng.randrange(*ranges["dollar"]),
        )


class TablePricing(PricingStrategy):
    """
    固定价目表：先按商品名（不区分大小写）查，查不到用该类型的默认价。
    """

    DEFAULTS = {
        "medicine": Price(naira=2000, dollar=20),
        "food":     Price(naira=1000, dollar=10),
    }

    def __init__(self, prices: Optional[dict[str, Price]] = None, defaults: Optional[dict[str, Price]] = None):
        self._prices = {k.strip().lower(): v for k, v in (prices or {}).items()}
        self._defaults = {**self.DEFAULTS, **(defaults or {})}

    def price_for(self, item_type: str, name: str) -> Price:
        return self._prices.get(name.strip().lower()) or self._defaults[item_type]
