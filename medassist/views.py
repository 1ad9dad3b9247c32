"""
API views。

View 层只做三件事：解析请求体 → 调 AIService / CheckoutSession → 序列化。
所有业务异常直接往外抛，由 exception_handler.unified_exception_handler 统一格式化。
"""

import logging

from django.conf import settings
from rest_framework.response import Response
from rest_framework.views import APIView

from . import payloads
from .diagnosis import AIService
from .diagnosis.fallbacks import demo_photo_diagnosis, demo_symptom_diagnosis, demo_treatment_plan
from .exceptions import ValidationError
from .llm import AIConfig
from .serializers import (
    serialize_ai_settings,
    serialize_cart_item,
    serialize_checkout,
    serialize_diagnosis,
    serialize_health_article,
    serialize_treatment_plan,
)
from .shopping import CheckoutSession, shopping_sessions
from .shopping.payment import get_payment_gateway

logger = logging.getLogger(__name__)

AI_SETTINGS_KEY = 'ai_settings'
SHOPPING_SESSION_KEY = 'shopping_session_id'

MODE_LIVE = 'live'
MODE_DEMO = 'demo'


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _body(request):
    data = request.data
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object.')
    return data


def get_ai_config(request):
    """settings 默认值 + 当前会话的覆盖。"""
    return AIConfig.from_settings(request.session.get(AI_SETTINGS_KEY))


def get_ai_service(request):
    return AIService(get_ai_config(request))


def peek_checkout(request):
    """只读：当前会话还没有购物车时返回一个不登记的空会话。"""
    session_id = request.session.get(SHOPPING_SESSION_KEY)
    return (session_id and shopping_sessions.get(session_id)) or CheckoutSession()


def get_checkout(request):
    """当前浏览器会话对应的 CheckoutSession，不存在就新建。"""
    session_id = request.session.get(SHOPPING_SESSION_KEY)
    checkout = shopping_sessions.get_or_create(session_id)
    if checkout.session_id != session_id:
        request.session[SHOPPING_SESSION_KEY] = checkout.session_id
    return checkout


def _diagnosis_response(service, diagnosis, mode):
    return Response({
        'mode': mode,
        'diagnosis': serialize_diagnosis(diagnosis),
        'shopping_items': [serialize_cart_item(item) for item in service.extract_shopping_items(diagnosis)],
    })


# ---------------------------------------------------------------------------
# AI settings
# ---------------------------------------------------------------------------

class AISettingsView(APIView):
    """GET/PUT /api/settings/ai/ - 会话级 provider / API key 覆盖"""

    def get(self, request):
        return Response(serialize_ai_settings(get_ai_config(request)))

    def put(self, request):
        update = payloads.parse_ai_settings(_body(request))
        current = request.session.get(AI_SETTINGS_KEY) or {}

        keys = dict(current.get('keys') or {})
        for name, value in update['keys'].items():
            if value:
                keys[name] = value
            else:
                keys.pop(name, None)

        request.session[AI_SETTINGS_KEY] = {
            'provider': update['provider'] or current.get('provider', ''),
            'keys': keys,
        }
        logger.info("[API] AI settings updated: provider=%s overrides=%s",
                    request.session[AI_SETTINGS_KEY]['provider'] or '(default)', sorted(keys))
        return Response(serialize_ai_settings(get_ai_config(request)))


# ---------------------------------------------------------------------------
# Diagnosis / treatment / articles
# ---------------------------------------------------------------------------

class SymptomDiagnosisView(APIView):
    """POST /api/diagnosis/symptoms/ - 症状诊断；未配置任何 key 时返回 demo 内容"""

    def post(self, request):
        params = payloads.parse_symptom_request(_body(request))
        service = get_ai_service(request)

        if not service.is_configured():
            return _diagnosis_response(service, demo_symptom_diagnosis(), MODE_DEMO)

        diagnosis = service.generate_symptom_diagnosis(**params)
        return _diagnosis_response(service, diagnosis, MODE_LIVE)


class PhotoDiagnosisView(APIView):
    """POST /api/diagnosis/photo/ - 照片诊断"""

    def post(self, request):
        params = payloads.parse_photo_request(_body(request))
        service = get_ai_service(request)

        if not service.is_configured():
            return _diagnosis_response(service, demo_photo_diagnosis(), MODE_DEMO)

        diagnosis = service.analyze_photo(**params)
        return _diagnosis_response(service, diagnosis, MODE_LIVE)


class TreatmentPlanView(APIView):
    """POST /api/treatment-plans/ - 分阶段治疗方案"""

    def post(self, request):
        params = payloads.parse_treatment_request(_body(request))
        service = get_ai_service(request)

        if not service.is_configured():
            plan, mode = demo_treatment_plan(), MODE_DEMO
        else:
            plan, mode = service.generate_treatment_plan(**params), MODE_LIVE

        return Response({'mode': mode, 'treatment_plan': serialize_treatment_plan(plan)})


class HealthArticleView(APIView):
    """POST /api/articles/ - 健康科普文章（需要已配置的供应商）"""

    def post(self, request):
        topic = payloads.require_text(_body(request), 'topic')
        article = get_ai_service(request).generate_health_article(topic)
        return Response({'mode': MODE_LIVE, 'article': serialize_health_article(article)})


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------

class CartView(APIView):
    """GET /api/cart/ - 购物车 + 结账状态；DELETE - 清空购物车"""

    def get(self, request):
        return Response(serialize_checkout(peek_checkout(request)))

    def delete(self, request):
        checkout = get_checkout(request)
        checkout.clear_cart()
        return Response(serialize_checkout(checkout))


class CartItemsView(APIView):
    """POST /api/cart/items/ - 加入购物车（同 id 数量 +1）"""

    def post(self, request):
        item = payloads.parse_cart_item(_body(request))
        checkout = get_checkout(request)
        checkout.add_to_cart(item)
        return Response(serialize_checkout(checkout), status=201)


class CartItemDetailView(APIView):
    """PATCH /api/cart/items/<id>/ - 修改数量（<=0 即删除）；DELETE - 删除"""

    def patch(self, request, item_id):
        quantity = payloads.parse_quantity(_body(request))
        checkout = get_checkout(request)
        checkout.update_quantity(item_id, quantity)
        return Response(serialize_checkout(checkout))

    def delete(self, request, item_id):
        checkout = get_checkout(request)
        checkout.remove_from_cart(item_id)
        return Response(serialize_checkout(checkout))


class CartCurrencyView(APIView):
    """PUT /api/cart/currency/ - 切换 naira / dollar"""

    def put(self, request):
        currency = payloads.parse_currency(_body(request))
        checkout = get_checkout(request)
        checkout.set_currency(currency)
        return Response(serialize_checkout(checkout))


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------

class CheckoutProceedView(APIView):
    """POST /api/checkout/proceed/ - cart → shipping"""

    def post(self, request):
        checkout = get_checkout(request)
        checkout.proceed_to_shipping()
        return Response(serialize_checkout(checkout))


class CheckoutShippingView(APIView):
    """POST /api/checkout/shipping/ - shipping → payment"""

    def post(self, request):
        info = payloads.parse_shipping_info(_body(request))
        checkout = get_checkout(request)
        errors = checkout.submit_shipping(info)
        if errors:
            raise ValidationError(
                message='Please fill in all shipping fields.',
                code='INCOMPLETE_SHIPPING_INFO',
                detail={'errors': errors},
            )
        return Response(serialize_checkout(checkout))


class CheckoutBackView(APIView):
    """POST /api/checkout/back/ - shipping → cart / payment → shipping"""

    def post(self, request):
        checkout = get_checkout(request)
        checkout.back()
        return Response(serialize_checkout(checkout))


class CheckoutPayView(APIView):
    """POST /api/checkout/pay/ - payment → success（失败时 402，状态留在 payment）"""

    def post(self, request):
        data = _body(request)
        email = data.get('email') if isinstance(data.get('email'), str) else ''
        checkout = get_checkout(request)
        order = checkout.submit_payment(
            get_payment_gateway(),
            payer_email=email.strip() or settings.PAYMENT_PAYER_EMAIL,
        )
        logger.info("[API] order %s paid: %d %s", order.reference, order.amount, order.currency)
        return Response(serialize_checkout(checkout))


class CheckoutCloseView(APIView):
    """POST /api/checkout/close/ - 关闭面板；success → cart"""

    def post(self, request):
        checkout = get_checkout(request)
        checkout.close()
        return Response(serialize_checkout(checkout))
