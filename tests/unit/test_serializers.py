"""
Unit tests for serializer functions.

覆盖照片诊断的可选字段、结账状态结构、AI 设置不泄露 key。
"""
from medassist.diagnosis import fallbacks
from medassist.llm import AIConfig
from medassist.serializers import (
    serialize_ai_settings,
    serialize_checkout,
    serialize_diagnosis,
    serialize_treatment_plan,
)
from medassist.shopping import CheckoutSession, Price
from tests.conftest import CartItemFactory, DiagnosisFactory, ShippingInfoFactory


class TestSerializeDiagnosis:

    def test_symptom_diagnosis_has_no_photo_fields(self):
        result = serialize_diagnosis(DiagnosisFactory())

        assert result['condition'] == 'Common Cold'
        assert result['medications'] == ['Paracetamol 500mg', 'Throat lozenges']
        assert result['treatment_plan'] is None
        assert 'severity' not in result
        assert 'anomaly_detected' not in result

    def test_photo_diagnosis_fields(self):
        result = serialize_diagnosis(fallbacks.demo_photo_diagnosis())

        assert result['severity'] == 'mild'
        assert result['anomaly_detected'] is True
        assert result['treatment_plan']['phase1'].startswith('Immediate relief')
        assert result['source'] == 'demo'


def test_serialize_treatment_plan_schedule():
    result = serialize_treatment_plan(fallbacks.demo_treatment_plan())

    assert result['daily_schedule'][0] == {
        'time': '08:00',
        'activity': 'Morning medication and healthy breakfast',
        'type': 'medication',
    }
    assert set(result['lifecycle_phases']) == {'phase1', 'phase2', 'phase3'}


class TestSerializeCheckout:

    def test_cart_state(self):
        session = CheckoutSession()
        session.add_to_cart(CartItemFactory(id='med-0', price=Price(naira=1500, dollar=15)))
        session.add_to_cart(CartItemFactory(id='med-0'))

        result = serialize_checkout(session)

        assert result['step'] == 'cart'
        assert result['item_count'] == 2
        assert result['totals'] == {'naira': 3000, 'dollar': 30}
        assert result['items'][0]['price'] == {'naira': 1500, 'dollar': 15}
        assert result['shipping_info'] is None
        assert result['last_order'] is None

    def test_success_state_includes_order(self, gateway):
        session = CheckoutSession()
        session.add_to_cart(CartItemFactory(id='med-0'))
        session.proceed_to_shipping()
        session.submit_shipping(ShippingInfoFactory())
        session.submit_payment(gateway, 'buyer@example.com')

        result = serialize_checkout(session)

        assert result['step'] == 'success'
        assert result['items'] == []
        assert result['shipping_info']['city'] == 'Lagos'
        assert result['last_order']['items'][0]['id'] == 'med-0'
        assert result['last_order']['shipping_info']['receiver_name'] == 'Ada Obi'


def test_serialize_ai_settings_never_exposes_keys():
    config = AIConfig(provider='gemini', env_keys={'openai': 'sk-env'}, user_keys={'gemini': 'g-user'})

    result = serialize_ai_settings(config)

    assert result['provider'] == 'gemini'
    assert result['configured'] is True
    assert result['providers']['gemini'] == {'configured': True, 'user_override': True}
    assert result['providers']['openai'] == {'configured': True, 'user_override': False}
    assert 'sk-env' not in str(result)
    assert 'g-user' not in str(result)
