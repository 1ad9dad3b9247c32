"""
具体 LLM 实现。

新增 LLM 供应商：在此文件添加一个类，然后在 factory.py 注册即可。

已注册供应商：
  openai: OpenAIService   (gpt-3.5-turbo，带图片时 gpt-4o)
  gemini: GeminiService   (gemini-1.5-flash)

两家都是单次阻塞调用：不重试、不流式，超时由 AIConfig.timeout 控制。
SDK 抛出的异常统一包成 ProviderCallFailed。
"""

import base64
import logging
from typing import Optional

from ..exceptions import ProviderCallFailed
from .base import BaseLLMService
from .types import ImageInput, LLMResponse

logger = logging.getLogger(__name__)

MAX_TOKENS = 1500
TEMPERATURE = 0.7


# ── OpenAIService ──────────────────────────────────────────────────────────
#
# 使用 OpenAI SDK。
# 环境变量：OPENAI_API_KEY
# 模型：gpt-3.5-turbo（可通过 OPENAI_MODEL 覆盖）

class OpenAIService(BaseLLMService):

    provider = "openai"
    DEFAULT_MODEL = "gpt-3.5-turbo"
    VISION_MODEL = "gpt-4o"

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        image: Optional[ImageInput] = None,
    ) -> LLMResponse:
        import openai

        model = self.model
        user_content = user_prompt
        if image is not None:
            # gpt-3.5-turbo 不支持图片输入
            if model == self.DEFAULT_MODEL:
                model = self.VISION_MODEL
            data_url = f"data:{image.mime_type};base64,{base64.b64encode(image.data).decode('ascii')}"
            user_content = [
                {"type": "text", "text": user_prompt},
                {"type": "image_url", "image_url": {"url": data_url}},
            ]

        client = openai.OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)

        try:
            response = client.chat.completions.create(
                model=model,
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user",   "content": user_content},
                ],
            )
        except openai.OpenAIError as exc:
            logger.error("[LLM][openai] call failed: %s", exc)
            raise ProviderCallFailed(
                message=f"OpenAI API error: {exc}",
                detail={"provider": self.provider, "model": model},
            ) from exc

        choices = response.choices or []
        content = (choices[0].message.content if choices else None) or ""

        return LLMResponse(content=content, model=model, provider=self.provider)


# ── GeminiService ──────────────────────────────────────────────────────────
#
# 使用 google-ai-generativelanguage 的 GenerativeServiceClient。
# 环境变量：GEMINI_API_KEY
# 模型：gemini-1.5-flash（可通过 GEMINI_MODEL 覆盖）
#
# 不用 genai.configure()：它设置的是进程级默认 client，
# 会话级 key 不同的并发请求会互相覆盖。这里每次调用都用自己的 key 建 client。

class GeminiService(BaseLLMService):

    provider = "gemini"
    DEFAULT_MODEL = "gemini-1.5-flash"

    def _model_name(self):
        return self.model if self.model.startswith("models/") else f"models/{self.model}"

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        image: Optional[ImageInput] = None,
    ) -> LLMResponse:
        from google.ai import generativelanguage as glm
        from google.api_core import exceptions as google_exceptions

        client = glm.GenerativeServiceClient(client_options={"api_key": self.api_key})

        parts = [glm.Part(text=user_prompt)]
        if image is not None:
            parts.append(glm.Part(inline_data=glm.Blob(mime_type=image.mime_type, data=image.data)))

        request = glm.GenerateContentRequest(
            model=self._model_name(),
            system_instruction=glm.Content(parts=[glm.Part(text=system_prompt)]),
            contents=[glm.Content(role="user", parts=parts)],
            generation_config=glm.GenerationConfig(max_output_tokens=MAX_TOKENS, temperature=TEMPERATURE),
        )

        try:
            response = client.generate_content(request=request, timeout=self.timeout)
        except google_exceptions.GoogleAPIError as exc:
            logger.error("[LLM][gemini] call failed: %s", exc)
            raise ProviderCallFailed(
                message=f"Gemini API error: {exc}",
                detail={"provider": self.provider, "model": self.model},
            ) from exc

        candidates = list(response.candidates or [])
        if not candidates:
            # 被安全策略拦截时没有候选结果；按"无输出"处理
            logger.warning("[LLM][gemini] response has no candidates")
            content = ""
        else:
            content = "".join(part.text or "" for part in candidates[0].content.parts)

        return LLMResponse(content=content, model=self.model, provider=self.provider)
