"""
工厂函数：根据 AIConfig.provider 返回对应的 LLMService 实例。

新增 LLM 供应商只需：
  1. 在 services.py 新建 XxxService(BaseLLMService) 类
  2. 在此处 _build_registry 加一行
  不需要修改 AIService 或任何业务代码。
"""

from ..exceptions import ProviderNotConfigured, ValidationError
from .base import BaseLLMService
from .config import AIConfig


def _build_registry() -> dict[str, type[BaseLLMService]]:
    # 延迟导入，避免在 Django 启动前触发 SDK import
    from .services import GeminiService, OpenAIService

    return {
        "openai": OpenAIService,
        "gemini": GeminiService,
    }


def get_llm_service(config: AIConfig) -> BaseLLMService:
    """
    从 config.provider 读取供应商，返回对应的 LLMService 实例。

    Raises:
        ValidationError:       provider 未知
        ProviderNotConfigured: provider 没有可用的 API key
    """
    registry = _build_registry()
    service_cls = registry.get(config.provider)

    if service_cls is None:
        raise ValidationError(
            message=f"Unknown AI provider: {config.provider!r}.",
            code="UNKNOWN_AI_PROVIDER",
            detail={"known_providers": list(registry.keys())},
        )

    api_key = config.resolve_key(config.provider)
    if not api_key:
        raise ProviderNotConfigured(
            message=f"{config.provider} API key not configured",
            detail={"provider": config.provider},
        )

    return service_cls(
        api_key=api_key,
        model=config.models.get(config.provider) or None,
        timeout=config.timeout,
    )
