"""
模型输出 → 强类型记录。

两步：
1. classify_response(text)   文本 → ParsedResponse | RawTextFallback
2. normalize_*(response)     两种情况都收敛成 Diagnosis / TreatmentPlan / HealthArticle

模型返回的字段可能缺失、类型不对、命名风格不一致（camelCase / snake_case），
这里逐字段做容错，缺的列表补 []，置信度夹到 0-100。
本模块任何函数都不会抛异常到调用方。
"""

import json
import logging
import math
import re

from . import fallbacks
from .types import (
    SEVERITIES,
    SOURCE_AI,
    Diagnosis,
    HealthArticle,
    ParsedResponse,
    RawTextFallback,
    ScheduleEntry,
    TreatmentPhases,
    TreatmentPlan,
)

logger = logging.getLogger(__name__)

# ```json ... ``` 包裹的输出
_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)


def classify_response(text):
    raw = (text or "").strip()
    fenced = _FENCE_RE.match(raw)
    candidate = fenced.group(1) if fenced else raw

    try:
        data = json.loads(candidate)
    except (ValueError, RecursionError):
        logger.info("[Parsing] response is not JSON, using text fallback (len=%d)", len(raw))
        return RawTextFallback(text=raw)

    if not isinstance(data, dict):
        logger.info("[Parsing] JSON root is %s, not an object; using text fallback", type(data).__name__)
        return RawTextFallback(text=raw)

    return ParsedResponse(data=data)


# ── 字段级容错 ─────────────────────────────────────────────────────────────

def _pick(data, *keys):
    """按顺序取第一个存在的键（兼容 camelCase / snake_case）。"""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


def as_text(value, default=""):
    if isinstance(value, str):
        return value.strip() or default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def as_str_list(value):
    """
    任意值 → list[str]。

    单个字符串视为一个元素；对象元素（如 {"name": ..., "dosage": ...}）把值拼起来；
    空值和无法识别的类型丢弃。
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if not isinstance(value, (list, tuple)):
        return []

    result = []
    for item in value:
        if isinstance(item, dict):
            text = " - ".join(as_text(v) for v in item.values() if as_text(v))
        else:
            text = as_text(item)
        if text:
            result.append(text)
    return result


def as_confidence(value, default):
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return default
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return default
    # 0.85 这种小数形式按比例处理
    if isinstance(value, float) and 0 < value < 1:
        value = value * 100
    return max(0, min(100, int(round(value))))


def as_severity(value, default="moderate"):
    text = as_text(value).lower()
    return text if text in SEVERITIES else default


def as_bool(value, default):
    if isinstance(value, bool):
        return value
    text = as_text(value).lower()
    if text in ("true", "yes", "1"):
        return True
    if text in ("false", "no", "0"):
        return False
    return default


def as_phases(value, default=None):
    if isinstance(value, dict):
        return TreatmentPhases(
            phase1=as_text(_pick(value, "phase1", "phase_1")),
            phase2=as_text(_pick(value, "phase2", "phase_2")),
            phase3=as_text(_pick(value, "phase3", "phase_3")),
        )
    phases = as_str_list(value)
    if phases:
        phases += [""] * (3 - len(phases))
        return TreatmentPhases(*phases[:3])
    return default


def as_schedule(value):
    if not isinstance(value, (list, tuple)):
        return []
    entries = []
    for item in value:
        if isinstance(item, dict):
            activity = as_text(item.get("activity"))
            if not activity:
                continue
            entries.append(ScheduleEntry(
                time=as_text(item.get("time")),
                activity=activity,
                type=as_text(item.get("type"), "wellness"),
            ))
        elif as_text(item):
            entries.append(ScheduleEntry(time="", activity=as_text(item)))
    return entries


# ── 收敛成记录 ─────────────────────────────────────────────────────────────

def normalize_diagnosis(response, photo=False):
    """
    ParsedResponse | RawTextFallback → Diagnosis。

    photo=True 时是照片诊断变体：带 severity / anomaly_detected / treatment_plan。
    """
    if isinstance(response, RawTextFallback):
        if photo:
            return fallbacks.text_fallback_photo_diagnosis(response.text)
        return fallbacks.text_fallback_diagnosis(response.text)

    data = response.data
    diagnosis = Diagnosis(
        condition=as_text(
            data.get("condition"),
            fallbacks.PHOTO_DIAGNOSIS_LABEL if photo else fallbacks.DIAGNOSIS_LABEL,
        ),
        confidence=as_confidence(
            data.get("confidence"),
            fallbacks.PHOTO_DIAGNOSIS_CONFIDENCE if photo else fallbacks.DIAGNOSIS_CONFIDENCE,
        ),
        description=as_text(data.get("description")),
        natural_remedies=as_str_list(_pick(data, "naturalRemedies", "natural_remedies")),
        foods=as_str_list(data.get("foods")),
        medications=as_str_list(data.get("medications")),
        exercises=as_str_list(data.get("exercises")),
        administration=as_str_list(data.get("administration")),
        prevention=as_str_list(data.get("prevention")),
        warning=as_text(
            data.get("warning"),
            fallbacks.PHOTO_WARNING if photo else fallbacks.GENERIC_WARNING,
        ),
        treatment_plan=as_phases(_pick(data, "treatmentPlan", "treatment_plan")),
        source=SOURCE_AI,
    )
    if photo:
        diagnosis.severity = as_severity(data.get("severity"))
        diagnosis.anomaly_detected = as_bool(_pick(data, "anomalyDetected", "anomaly_detected"), True)
    return diagnosis


def normalize_treatment_plan(response):
    if isinstance(response, RawTextFallback):
        return fallbacks.fallback_treatment_plan()

    data = response.data
    return TreatmentPlan(
        lifecycle_phases=as_phases(
            _pick(data, "lifecyclePhases", "lifecycle_phases", "phases"),
            fallbacks.default_phases(),
        ),
        natural_remedies=as_str_list(_pick(data, "naturalRemedies", "natural_remedies")),
        foods=as_str_list(data.get("foods")),
        medications=as_str_list(data.get("medications")),
        exercises=as_str_list(data.get("exercises")),
        daily_schedule=as_schedule(_pick(data, "dailySchedule", "daily_schedule")),
        prevention_tips=as_str_list(_pick(data, "preventionTips", "prevention_tips")),
        possible_causes=as_str_list(_pick(data, "possibleCauses", "possible_causes")),
        source=SOURCE_AI,
    )


def normalize_health_article(response, topic):
    if isinstance(response, RawTextFallback):
        return fallbacks.fallback_health_article(response.text, topic)

    data = response.data
    return HealthArticle(
        title=as_text(data.get("title"), f"Understanding {topic}: A Comprehensive Guide"),
        overview=as_text(data.get("overview")),
        key_points=as_str_list(_pick(data, "keyPoints", "key_points")),
        natural_treatments=as_str_list(_pick(data, "naturalTreatments", "natural_treatments")),
        evidence=as_text(data.get("evidence")),
        prevention=as_str_list(data.get("prevention")),
        seek_help=as_text(_pick(data, "seekHelp", "seek_help")),
        source=SOURCE_AI,
    )
