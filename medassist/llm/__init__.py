from .config import AIConfig
from .factory import get_llm_service
from .types import ImageInput, LLMResponse

__all__ = ["AIConfig", "ImageInput", "LLMResponse", "get_llm_service"]
