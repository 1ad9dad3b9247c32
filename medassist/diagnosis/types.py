"""
Response Normalizer 的输出结构。

AIService 返回的所有记录（AI 成功解析 / 文本兜底 / demo）都是这里的 dataclass，
列表字段永远是 list（可能为空），下游不需要判空。
"""

from dataclasses import dataclass, field
from typing import Optional, Union

SEVERITIES = ("mild", "moderate", "severe")

# 记录来源
SOURCE_AI = "ai"
SOURCE_TEXT_FALLBACK = "text_fallback"
SOURCE_DEMO = "demo"


@dataclass
class TreatmentPhases:
    phase1: str = ""
    phase2: str = ""
    phase3: str = ""


@dataclass
class Diagnosis:
    condition: str
    confidence: int                                   # 0-100
    description: str = ""
    natural_remedies: list[str] = field(default_factory=list)
    foods: list[str] = field(default_factory=list)
    medications: list[str] = field(default_factory=list)
    exercises: list[str] = field(default_factory=list)
    administration: list[str] = field(default_factory=list)
    prevention: list[str] = field(default_factory=list)
    warning: str = ""
    severity: Optional[str] = None                    # 仅照片诊断
    anomaly_detected: Optional[bool] = None           # 仅照片诊断
    treatment_plan: Optional[TreatmentPhases] = None
    source: str = SOURCE_AI


@dataclass
class ScheduleEntry:
    time: str
    activity: str
    type: str = "wellness"


@dataclass
class TreatmentPlan:
    lifecycle_phases: TreatmentPhases = field(default_factory=TreatmentPhases)
    natural_remedies: list[str] = field(default_factory=list)
    foods: list[str] = field(default_factory=list)
    medications: list[str] = field(default_factory=list)
    exercises: list[str] = field(default_factory=list)
    daily_schedule: list[ScheduleEntry] = field(default_factory=list)
    prevention_tips: list[str] = field(default_factory=list)
    possible_causes: list[str] = field(default_factory=list)
    source: str = SOURCE_AI


@dataclass
class HealthArticle:
    title: str
    overview: str = ""
    key_points: list[str] = field(default_factory=list)
    natural_treatments: list[str] = field(default_factory=list)
    evidence: str = ""
    prevention: list[str] = field(default_factory=list)
    seek_help: str = ""
    source: str = SOURCE_AI


# ── 上游输出的 tagged union ────────────────────────────────────────────────
#
# classify_response() 把模型返回的文本分成两类，normalize_*() 再把两类都收敛成
# 上面的记录类型。

@dataclass(frozen=True)
class ParsedResponse:
    data: dict


@dataclass(frozen=True)
class RawTextFallback:
    text: str


UpstreamResponse = Union[ParsedResponse, RawTextFallback]
