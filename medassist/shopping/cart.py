"""
Cart: 购物车内容。

四个修改操作（add / remove / update_quantity / clear）都是全函数：
对任何输入都不会失败，越界数量会被规整而不是拒绝。
不变量：
  - 同一个 id 只出现一次
  - quantity 永远 >= 1（更新到 0 或负数等同于删除）
合计是派生值，不单独存储。
"""

import logging
from dataclasses import replace
from typing import Iterator, Optional

from .types import ShoppingCartItem, check_currency

logger = logging.getLogger(__name__)


class Cart:

    def __init__(self, items=None):
        self._items: list[ShoppingCartItem] = []
        for item in items or []:
            self.add_to_cart(item)

    @property
    def items(self) -> list[ShoppingCartItem]:
        """当前商品的副本，按加入顺序。"""
        return [replace(item) for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ShoppingCartItem]:
        return iter(self.items)

    def is_empty(self) -> bool:
        return not self._items

    def get(self, item_id: str) -> Optional[ShoppingCartItem]:
        for item in self._items:
            if item.id == item_id:
                return replace(item)
        return None

    def _find(self, item_id):
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def add_to_cart(self, item: ShoppingCartItem) -> None:
        """已存在同 id → 数量 +1（忽略传入商品的 quantity）；否则追加到末尾。"""
        existing = self._find(item.id)
        if existing is not None:
            existing.quantity += 1
            logger.debug("[Cart] %s quantity -> %d", item.id, existing.quantity)
            return
        self._items.append(replace(item, quantity=max(1, int(item.quantity))))

    def remove_from_cart(self, item_id: str) -> None:
        """不存在时什么都不做。"""
        self._items = [item for item in self._items if item.id != item_id]

    def update_quantity(self, item_id: str, quantity: int) -> None:
        """quantity <= 0 等同于 remove_from_cart；否则精确设置。"""
        if quantity <= 0:
            self.remove_from_cart(item_id)
            return
        existing = self._find(item_id)
        if existing is not None:
            existing.quantity = int(quantity)

    def clear_cart(self) -> None:
        self._items = []

    def get_total_price(self, currency: str) -> int:
        """Σ price[currency] * quantity，整数运算；空购物车为 0。"""
        check_currency(currency)
        return sum(item.line_total(currency) for item in self._items)
