"""
AIService: Response Normalizer 对外入口。

每个 generate_* / analyze_* 方法都是同一个形状：
  1. 构建 prompt
  2. get_llm_service(config) 选供应商（没有 key → ProviderNotConfigured）
  3. 单次调用（失败 → ProviderCallFailed，原样抛给调用方，不重试）
  4. classify_response + normalize_*，解析失败走文本兜底，永远不抛

"未配置" 和 "调用失败" 是两种不同的异常，调用方据此决定展示设置引导还是重试提示；
demo 内容由 API 层在 is_configured() 为 False 时自行选择，不在这里。
"""

import base64
import binascii
import logging
import re
from typing import Optional

from ..llm import AIConfig, ImageInput, get_llm_service
from . import prompts
from .extraction import extract_shopping_items
from .parsing import (
    classify_response,
    normalize_diagnosis,
    normalize_health_article,
    normalize_treatment_plan,
)
from .pricing import PricingStrategy

logger = logging.getLogger(__name__)

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)


def decode_image(image_data) -> Optional[ImageInput]:
    """
    base64 字符串或 data URL → ImageInput。

    无法解码时返回 None，照片诊断退化为只发文字 prompt。
    """
    if not image_data:
        return None

    mime_type = "image/jpeg"
    payload = image_data.strip()
    match = _DATA_URL_RE.match(payload)
    if match:
        mime_type = match.group("mime")
        payload = match.group("data")

    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        logger.warning("[AIService] image data is not valid base64, sending prompt only")
        return None

    return ImageInput(data=data, mime_type=mime_type) if data else None


class AIService:

    def __init__(self, config: AIConfig, pricing: Optional[PricingStrategy] = None):
        self.config = config
        self.pricing = pricing

    def is_configured(self) -> bool:
        """任意一家供应商有可用 key 即为 True。"""
        return self.config.is_configured()

    def _call(self, prompt, image=None):
        service = get_llm_service(self.config)
        logger.info(
            "[AIService] calling provider=%s model=%s prompt_len=%d image=%s",
            service.provider, service.model, len(prompt), image is not None,
        )
        response = service.complete(prompts.SYSTEM_PROMPT, prompt, image=image)
        logger.info("[AIService] %s returned %d chars", response.provider, len(response.content))
        return classify_response(response.content)

    def generate_symptom_diagnosis(self, symptoms, body_parts, severity, duration):
        prompt = prompts.build_symptom_prompt(symptoms, list(body_parts or []), severity, duration)
        return normalize_diagnosis(self._call(prompt))

    def generate_treatment_plan(self, condition, severity):
        prompt = prompts.build_treatment_prompt(condition, severity)
        return normalize_treatment_plan(self._call(prompt))

    def analyze_photo(self, image_data, image_type, body_part):
        prompt = prompts.build_photo_prompt(image_type, body_part)
        return normalize_diagnosis(self._call(prompt, image=decode_image(image_data)), photo=True)

    def generate_health_article(self, topic):
        prompt = prompts.build_article_prompt(topic)
        return normalize_health_article(self._call(prompt), topic)

    def extract_shopping_items(self, diagnosis):
        return extract_shopping_items(diagnosis, pricing=self.pricing)
