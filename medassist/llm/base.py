"""
BaseLLMService: 所有 LLM 实现的抽象基类。

每个新 LLM 只需：
1. 继承 BaseLLMService
2. 实现 complete()
3. 在 factory.py 的 _build_registry 注册一行

AIService 完全不知道背后用哪家 LLM。
"""

from abc import ABC, abstractmethod
from typing import Optional

from .types import ImageInput, LLMResponse


class BaseLLMService(ABC):

    # 子类声明自己对应的 provider 标识（与 factory 注册键一致）
    provider: str = ""
    DEFAULT_MODEL: str = ""

    def __init__(self, api_key: str, model: Optional[str] = None, timeout: float = 30.0):
        self.api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self.timeout = timeout

    @abstractmethod
    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        image: Optional[ImageInput] = None,
    ) -> LLMResponse:
        """
        调用 LLM，返回标准 LLMResponse。

        Args:
            system_prompt: 系统级角色设定（"You are a medical AI assistant..."）
            user_prompt:   用户级输入（症状 / 病情 prompt）
            image:         可选图片，照片诊断时传入

        Returns:
            LLMResponse(content=生成文本, model=模型名)

        Raises:
            ProviderCallFailed: API 调用失败（网络 / 超时 / SDK 报错）。不重试。
        """
