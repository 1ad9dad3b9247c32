"""
AIConfig: AI 供应商配置对象。

构造时显式传给 AIService，业务代码里不再到处读环境变量。

key 查找是两层的：
  1. user_keys : 会话级覆盖（用户在设置页填的 key）
  2. env_keys  : 进程级默认（来自 settings / 环境变量）
空字符串等同于未配置。
"""

from dataclasses import dataclass, field
from typing import Optional

PROVIDERS = ("openai", "gemini")
DEFAULT_PROVIDER = "openai"


@dataclass
class AIConfig:
    provider: str = DEFAULT_PROVIDER
    env_keys: dict[str, str] = field(default_factory=dict)
    user_keys: dict[str, str] = field(default_factory=dict)
    models: dict[str, str] = field(default_factory=dict)
    timeout: float = 30.0

    def resolve_key(self, provider: str) -> Optional[str]:
        """会话覆盖优先，其次环境默认；都没有返回 None。"""
        for source in (self.user_keys, self.env_keys):
            key = (source.get(provider) or "").strip()
            if key:
                return key
        return None

    def is_configured(self, provider: Optional[str] = None) -> bool:
        """不传 provider 时：任意一家有 key 即为 True。"""
        if provider is not None:
            return self.resolve_key(provider) is not None
        return any(self.resolve_key(p) is not None for p in PROVIDERS)

    @classmethod
    def from_settings(cls, overrides: Optional[dict] = None) -> "AIConfig":
        """
        从 Django settings 构造，再叠加会话级覆盖。

        overrides 结构（存放在 request.session['ai_settings']）:
            {"provider": "gemini", "keys": {"gemini": "..."}}
        """
        from django.conf import settings

        overrides = overrides or {}
        provider = (overrides.get("provider") or getattr(settings, "AI_PROVIDER", DEFAULT_PROVIDER)).strip().lower()

        return cls(
            provider=provider,
            env_keys={
                "openai": getattr(settings, "OPENAI_API_KEY", ""),
                "gemini": getattr(settings, "GEMINI_API_KEY", ""),
            },
            user_keys=dict(overrides.get("keys") or {}),
            models={
                "openai": getattr(settings, "OPENAI_MODEL", ""),
                "gemini": getattr(settings, "GEMINI_MODEL", ""),
            },
            timeout=float(getattr(settings, "AI_REQUEST_TIMEOUT", 30)),
        )
