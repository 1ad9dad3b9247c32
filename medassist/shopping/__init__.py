from .cart import Cart
from .checkout import CheckoutSession
from .store import shopping_sessions
from .types import Price, ShippingInfo, ShoppingCartItem

__all__ = ["Cart", "CheckoutSession", "Price", "ShippingInfo", "ShoppingCartItem", "shopping_sessions"]
