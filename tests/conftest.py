"""
Shared fixtures for all tests.

factory-boy factories live here so both unit/ and integration/ can import them.
没有数据库：所有记录都是 dataclass，用 factory.Factory 构造。
"""
import pytest
from django.test import Client

import factory
from medassist.diagnosis.types import Diagnosis
from medassist.llm import AIConfig, LLMResponse
from medassist.llm.base import BaseLLMService
from medassist.shopping import shopping_sessions
from medassist.shopping.payment import SimulatedPaymentGateway
from medassist.shopping.types import Price, ShippingInfo, ShoppingCartItem


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

class PriceFactory(factory.Factory):
    class Meta:
        model = Price

    naira = 2000
    dollar = 20


class CartItemFactory(factory.Factory):
    class Meta:
        model = ShoppingCartItem

    id = factory.Sequence(lambda n: f'med-{n}')
    name = factory.Sequence(lambda n: f'Paracetamol {n}')
    type = 'medicine'
    price = factory.SubFactory(PriceFactory)
    quantity = 1
    description = 'Recommended medication'


class ShippingInfoFactory(factory.Factory):
    class Meta:
        model = ShippingInfo

    receiver_name = 'Ada Obi'
    phone_number = '08031234567'
    address = '12 Marina Road'
    city = 'Lagos'
    state = 'Lagos'


class DiagnosisFactory(factory.Factory):
    class Meta:
        model = Diagnosis

    condition = 'Common Cold'
    confidence = 80
    description = 'Viral infection of the upper respiratory tract.'
    medications = factory.LazyFunction(lambda: ['Paracetamol 500mg', 'Throat lozenges'])
    foods = factory.LazyFunction(lambda: ['Chicken soup', 'Oranges', 'Ginger tea'])
    natural_remedies = factory.LazyFunction(lambda: ['Rest'])
    administration = factory.LazyFunction(lambda: ['Take with food'])
    warning = 'See a doctor if symptoms persist.'


# ---------------------------------------------------------------------------
# Fake LLM
# ---------------------------------------------------------------------------

class FakeLLMService(BaseLLMService):
    """记录调用参数，返回预设文本；reply 是异常时直接抛出。"""

    provider = 'openai'
    DEFAULT_MODEL = 'fake-model'

    def __init__(self, reply='', **kwargs):
        super().__init__(api_key='sk-test', **kwargs)
        self.reply = reply
        self.calls = []

    def complete(self, system_prompt, user_prompt, image=None):
        self.calls.append({'system': system_prompt, 'user': user_prompt, 'image': image})
        if isinstance(self.reply, Exception):
            raise self.reply
        return LLMResponse(content=self.reply, model=self.model, provider=self.provider)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolated_settings(settings):
    """测试不读真实环境变量里的 key，付款不等待。"""
    settings.AI_PROVIDER = 'openai'
    settings.OPENAI_API_KEY = ''
    settings.GEMINI_API_KEY = ''
    settings.PAYMENT_SIMULATED_DELAY = 0
    settings.PAYMENT_SIMULATE_FAILURE = False
    return settings


@pytest.fixture(autouse=True)
def _clean_shopping_sessions():
    shopping_sessions.clear()
    yield
    shopping_sessions.clear()


@pytest.fixture
def api_client():
    """Django test client for integration tests (keeps the session cookie)."""
    return Client()


@pytest.fixture
def ai_config():
    return AIConfig(provider='openai', env_keys={'openai': 'sk-env'})


@pytest.fixture
def fake_llm(monkeypatch):
    """把 AIService 用到的 get_llm_service 换成 FakeLLMService。"""
    service = FakeLLMService()
    monkeypatch.setattr('medassist.diagnosis.service.get_llm_service', lambda config: service)
    return service


@pytest.fixture
def gateway():
    return SimulatedPaymentGateway(delay=0)


@pytest.fixture
def failing_gateway():
    return SimulatedPaymentGateway(delay=0, fail=True)
