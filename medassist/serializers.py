"""
Response serializers: dataclass / 会话对象 → JSON-able dict。

只负责「输出格式化」，不做任何解析或校验。
请求体的解析和校验在 medassist/payloads.py。
"""

from dataclasses import asdict

from .llm.config import PROVIDERS
from .shopping.types import CURRENCIES


def _phases(phases):
    return asdict(phases) if phases is not None else None


def serialize_diagnosis(diagnosis):
    body = {
        'condition': diagnosis.condition,
        'confidence': diagnosis.confidence,
        'description': diagnosis.description,
        'natural_remedies': list(diagnosis.natural_remedies),
        'foods': list(diagnosis.foods),
        'medications': list(diagnosis.medications),
        'exercises': list(diagnosis.exercises),
        'administration': list(diagnosis.administration),
        'prevention': list(diagnosis.prevention),
        'warning': diagnosis.warning,
        'treatment_plan': _phases(diagnosis.treatment_plan),
        'source': diagnosis.source,
    }
    # 照片诊断变体才有这两个字段
    if diagnosis.severity is not None:
        body['severity'] = diagnosis.severity
    if diagnosis.anomaly_detected is not None:
        body['anomaly_detected'] = diagnosis.anomaly_detected
    return body


def serialize_treatment_plan(plan):
    return {
        'lifecycle_phases': _phases(plan.lifecycle_phases),
        'natural_remedies': list(plan.natural_remedies),
        'foods': list(plan.foods),
        'medications': list(plan.medications),
        'exercises': list(plan.exercises),
        'daily_schedule': [asdict(entry) for entry in plan.daily_schedule],
        'prevention_tips': list(plan.prevention_tips),
        'possible_causes': list(plan.possible_causes),
        'source': plan.source,
    }


def serialize_health_article(article):
    return asdict(article)


def serialize_cart_item(item):
    return {
        'id': item.id,
        'name': item.name,
        'type': item.type,
        'description': item.description,
        'price': {'naira': item.price.naira, 'dollar': item.price.dollar},
        'quantity': item.quantity,
    }


def serialize_order(order):
    return {
        'reference': order.reference,
        'amount': order.amount,
        'currency': order.currency,
        'total': order.total,
        'items': [serialize_cart_item(item) for item in order.items],
        'shipping_info': asdict(order.shipping_info) if order.shipping_info else None,
    }


def serialize_checkout(session):
    """购物车 + 结账状态，前端每次操作后都拿这个结构重新渲染。"""
    items = session.cart.items
    return {
        'step': session.step,
        'currency': session.currency,
        'items': [serialize_cart_item(item) for item in items],
        'item_count': sum(item.quantity for item in items),
        'totals': {currency: session.cart.get_total_price(currency) for currency in CURRENCIES},
        'shipping_info': asdict(session.shipping_info) if session.shipping_info else None,
        'is_processing': session.is_processing,
        'payment_error': session.payment_error,
        'last_order': serialize_order(session.last_order) if session.last_order else None,
    }


def serialize_ai_settings(config):
    return {
        'provider': config.provider,
        'configured': config.is_configured(),
        'providers': {
            name: {
                'configured': config.is_configured(name),
                'user_override': bool((config.user_keys.get(name) or '').strip()),
            }
            for name in PROVIDERS
        },
    }
