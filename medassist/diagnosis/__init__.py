from .extraction import extract_shopping_items
from .service import AIService

__all__ = ["AIService", "extract_shopping_items"]
