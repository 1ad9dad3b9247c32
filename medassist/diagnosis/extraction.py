"""Diagnosis → 购物车商品。"""

from typing import Optional

from ..shopping.types import ShoppingCartItem
from .pricing import PricingStrategy, RandomPricing


def extract_shopping_items(diagnosis, pricing: Optional[PricingStrategy] = None) -> list[ShoppingCartItem]:
    """
    medications[i] → id "med-i"（medicine），foods[i] → id "food-i"（food），数量都是 1。

    纯函数：不修改 diagnosis，每个药物 / 食物恰好生成一个商品。
    """
    pricing = pricing or RandomPricing()
    items = []

    for index, med in enumerate(diagnosis.medications):
        items.append(ShoppingCartItem(
            id=f"med-{index}",
            name=med,
            type="medicine",
            price=pricing.price_for("medicine", med),
            quantity=1,
            description=f"Recommended medication: {med}",
        ))

    for index, food in enumerate(diagnosis.foods):
        items.append(ShoppingCartItem(
            id=f"food-{index}",
            name=food,
            type="food",
            price=pricing.price_for("food", food),
            quantity=1,
            description=f"Healing food: {food}",
        ))

    return items
