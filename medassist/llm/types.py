"""
LLM 层的标准请求 / 响应结构。

所有 LLMService 实现的 complete() 都返回 LLMResponse。
业务层（diagnosis.service）只认识这个格式，不知道背后用的是哪家 LLM。
"""

from dataclasses import dataclass


@dataclass
class ImageInput:
    """随 prompt 一起发给模型的图片（照片诊断用）。"""

    data: bytes
    mime_type: str = "image/jpeg"


@dataclass
class LLMResponse:
    content: str       # 提取出的文本内容，模型没返回内容时为空字符串
    model: str         # 实际使用的模型名
    provider: str = ""
