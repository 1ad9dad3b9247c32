"""
OpenAIService / GeminiService 单测。SDK 全部 mock 掉，不发真实请求。
"""
import threading
from unittest.mock import MagicMock, patch

import openai
import pytest
from google.ai import generativelanguage as glm
from google.api_core import exceptions as google_exceptions

from medassist.exceptions import ProviderCallFailed
from medassist.llm import ImageInput
from medassist.llm.services import GeminiService, OpenAIService


def _openai_response(content):
    message = MagicMock()
    message.content = content
    return MagicMock(choices=[MagicMock(message=message)])


class TestOpenAIService:

    @patch('openai.OpenAI')
    def test_returns_message_content(self, mock_client_cls):
        mock_client = mock_client_cls.return_value
        mock_client.chat.completions.create.return_value = _openai_response('{"condition": "Flu"}')

        response = OpenAIService(api_key='sk-test', timeout=30).complete('system', 'user')

        assert response.content == '{"condition": "Flu"}'
        assert response.provider == 'openai'
        assert response.model == 'gpt-3.5-turbo'
        mock_client_cls.assert_called_once_with(api_key='sk-test', timeout=30, max_retries=0)
        messages = mock_client.chat.completions.create.call_args.kwargs['messages']
        assert messages[0] == {'role': 'system', 'content': 'system'}
        assert messages[1] == {'role': 'user', 'content': 'user'}

    @patch('openai.OpenAI')
    def test_missing_content_becomes_empty_string(self, mock_client_cls):
        mock_client_cls.return_value.chat.completions.create.return_value = _openai_response(None)

        response = OpenAIService(api_key='sk-test').complete('system', 'user')

        assert response.content == ''

    @patch('openai.OpenAI')
    def test_sdk_error_wrapped_as_provider_call_failed(self, mock_client_cls):
        mock_client_cls.return_value.chat.completions.create.side_effect = openai.OpenAIError('boom')

        with pytest.raises(ProviderCallFailed) as exc_info:
            OpenAIService(api_key='sk-test').complete('system', 'user')

        assert exc_info.value.detail['provider'] == 'openai'
        assert isinstance(exc_info.value.__cause__, openai.OpenAIError)

    @patch('openai.OpenAI')
    def test_image_switches_to_vision_model(self, mock_client_cls):
        mock_client = mock_client_cls.return_value
        mock_client.chat.completions.create.return_value = _openai_response('ok')

        response = OpenAIService(api_key='sk-test').complete(
            'system', 'look', image=ImageInput(data=b'\x89PNG', mime_type='image/png'),
        )

        assert response.model == OpenAIService.VISION_MODEL
        user_content = mock_client.chat.completions.create.call_args.kwargs['messages'][1]['content']
        assert user_content[0] == {'type': 'text', 'text': 'look'}
        assert user_content[1]['image_url']['url'].startswith('data:image/png;base64,')

def _gemini_response(*texts):
    return glm.GenerateContentResponse(candidates=[
        glm.Candidate(content=glm.Content(parts=[glm.Part(text=text) for text in texts])),
    ])


class TestGeminiService:

    @patch('google.ai.generativelanguage.GenerativeServiceClient')
    def test_returns_text(self, mock_client_cls):
        mock_client_cls.return_value.generate_content.return_value = _gemini_response('plain ', 'text')

        response = GeminiService(api_key='g-key', timeout=30).complete('system', 'user')

        assert response.content == 'plain text'
        assert response.provider == 'gemini'
        mock_client_cls.assert_called_once_with(client_options={'api_key': 'g-key'})
        kwargs = mock_client_cls.return_value.generate_content.call_args.kwargs
        request = kwargs['request']
        assert kwargs['timeout'] == 30
        assert request.model == 'models/gemini-1.5-flash'
        assert request.system_instruction.parts[0].text == 'system'
        assert request.contents[0].parts[0].text == 'user'
        assert request.generation_config.max_output_tokens == 1500

    @patch('google.ai.generativelanguage.GenerativeServiceClient')
    def test_image_sent_as_inline_part(self, mock_client_cls):
        mock_client_cls.return_value.generate_content.return_value = _gemini_response('ok')

        GeminiService(api_key='g-key').complete('system', 'user', image=ImageInput(data=b'img'))

        request = mock_client_cls.return_value.generate_content.call_args.kwargs['request']
        blob = request.contents[0].parts[1].inline_data
        assert (blob.mime_type, blob.data) == ('image/jpeg', b'img')

    @patch('google.ai.generativelanguage.GenerativeServiceClient')
    def test_blocked_response_becomes_empty_text(self, mock_client_cls):
        mock_client_cls.return_value.generate_content.return_value = glm.GenerateContentResponse()

        response = GeminiService(api_key='g-key').complete('system', 'user')

        assert response.content == ''

    @patch('google.ai.generativelanguage.GenerativeServiceClient')
    def test_api_error_wrapped(self, mock_client_cls):
        mock_client_cls.return_value.generate_content.side_effect = google_exceptions.DeadlineExceeded('timeout')

        with pytest.raises(ProviderCallFailed) as exc_info:
            GeminiService(api_key='g-key').complete('system', 'user')

        assert exc_info.value.detail['provider'] == 'gemini'

    @patch('google.ai.generativelanguage.GenerativeServiceClient')
    def test_concurrent_calls_keep_their_own_key(self, mock_client_cls):
        """A 的请求挂起期间 B 用另一个 key 完成调用，A 仍然用自己的 key 发出。"""
        a_started = threading.Event()
        b_done = threading.Event()
        sent_with = []

        def make_client(client_options):
            key = client_options['api_key']
            client = MagicMock()

            def generate_content(request, timeout):
                if key == 'KEY_USER_A':
                    a_started.set()
                    b_done.wait(timeout=5)
                sent_with.append(key)
                return _gemini_response(key)

            client.generate_content.side_effect = generate_content
            return client

        mock_client_cls.side_effect = make_client
        results = {}

        worker = threading.Thread(
            target=lambda: results.setdefault('a', GeminiService(api_key='KEY_USER_A').complete('s', 'u')),
        )
        worker.start()
        a_started.wait(timeout=5)
        results['b'] = GeminiService(api_key='KEY_USER_B').complete('s', 'u')
        b_done.set()
        worker.join(timeout=5)

        assert sent_with == ['KEY_USER_B', 'KEY_USER_A']
        assert results['a'].content == 'KEY_USER_A'
        assert results['b'].content == 'KEY_USER_B'
