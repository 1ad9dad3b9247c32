"""
请求体 → 领域对象。

每个函数要么返回解析好的值，要么抛 ValidationError（detail.errors 是字段级错误列表，
和 exception_handler 的统一格式一致）。
"""

from .exceptions import ValidationError
from .llm.config import PROVIDERS
from .shopping.types import CURRENCIES, ITEM_TYPES, SHIPPING_FIELDS, Price, ShippingInfo, ShoppingCartItem


def _raise_if(errors):
    if errors:
        raise ValidationError(
            message="Request validation failed.",
            code="VALIDATION_ERROR",
            detail={"errors": errors},
        )


def _text(data, key):
    value = data.get(key)
    return value.strip() if isinstance(value, str) else ""


def _int(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    return None


def require_text(data, key):
    value = _text(data, key)
    _raise_if([] if value else [{"field": key, "message": f"{key} is required."}])
    return value


def parse_symptom_request(data):
    symptoms = require_text(data, "symptoms")
    body_parts = data.get("body_parts") or []
    if isinstance(body_parts, str):
        body_parts = [body_parts]
    if not isinstance(body_parts, list):
        _raise_if([{"field": "body_parts", "message": "body_parts must be a list of strings."}])
    return {
        "symptoms": symptoms,
        "body_parts": [str(part).strip() for part in body_parts if str(part).strip()],
        "severity": _text(data, "severity"),
        "duration": _text(data, "duration"),
    }


def parse_treatment_request(data):
    return {
        "condition": require_text(data, "condition"),
        "severity": _text(data, "severity"),
    }


def parse_photo_request(data):
    image = require_text(data, "image")
    return {
        "image_data": image,
        "image_type": _text(data, "image_type"),
        "body_part": _text(data, "body_part"),
    }


def parse_cart_item(data):
    errors = []
    item_id = _text(data, "id")
    name = _text(data, "name")
    item_type = _text(data, "type")
    price = data.get("price") if isinstance(data.get("price"), dict) else {}
    naira = _int(price.get("naira"))
    dollar = _int(price.get("dollar"))
    quantity = _int(data.get("quantity", 1))

    if not item_id:
        errors.append({"field": "id", "message": "id is required."})
    if not name:
        errors.append({"field": "name", "message": "name is required."})
    if item_type not in ITEM_TYPES:
        errors.append({"field": "type", "message": f"type must be one of {list(ITEM_TYPES)}."})
    for currency, amount in (("naira", naira), ("dollar", dollar)):
        if amount is None or amount < 0:
            errors.append({"field": f"price.{currency}", "message": "Price must be a non-negative integer."})
    if quantity is None:
        errors.append({"field": "quantity", "message": "quantity must be an integer."})
    _raise_if(errors)

    return ShoppingCartItem(
        id=item_id,
        name=name,
        type=item_type,
        price=Price(naira=naira, dollar=dollar),
        quantity=max(1, quantity),
        description=_text(data, "description"),
    )


def parse_quantity(data):
    quantity = _int(data.get("quantity"))
    _raise_if([] if quantity is not None else [{"field": "quantity", "message": "quantity must be an integer."}])
    return quantity


def parse_currency(data):
    currency = _text(data, "currency")
    _raise_if([] if currency in CURRENCIES else [
        {"field": "currency", "message": f"currency must be one of {list(CURRENCIES)}."},
    ])
    return currency


def parse_shipping_info(data):
    """不做非空校验，非空是 CheckoutSession.submit_shipping 的职责。"""
    return ShippingInfo(**{name: _text(data, name) for name in SHIPPING_FIELDS})


def parse_ai_settings(data):
    """
    {"provider": "gemini", "keys": {"gemini": "..."}} → 会话级覆盖。

    key 传空字符串表示清除该供应商的会话覆盖。
    """
    errors = []
    provider = _text(data, "provider").lower()
    if provider and provider not in PROVIDERS:
        errors.append({"field": "provider", "message": f"provider must be one of {list(PROVIDERS)}."})

    keys = data.get("keys") or {}
    if not isinstance(keys, dict):
        errors.append({"field": "keys", "message": "keys must be an object."})
        keys = {}
    for name in keys:
        if name not in PROVIDERS:
            errors.append({"field": f"keys.{name}", "message": f"Unknown provider {name!r}."})
    _raise_if(errors)

    return {
        "provider": provider,
        "keys": {name: (value or "").strip() if isinstance(value, str) else "" for name, value in keys.items()},
    }
