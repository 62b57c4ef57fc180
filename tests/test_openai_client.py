"""
Unit Tests for the OpenAI Client
================================
Network calls are mocked at requests.Session.post.
"""
import threading
import time
from unittest.mock import Mock, patch

import pytest
import requests

from chat_translator.config.constants import TargetLanguage
from chat_translator.models.translation import (
    TranslationRequest,
    Success,
    RemoteError,
    TransportError,
    Cancelled,
    UNKNOWN_REMOTE_ERROR
)
from chat_translator.services.openai_client import OpenAIClient, INVALID_TOKEN_MESSAGE
from tests.helpers import make_response, completion_body


class TestPayload:
    """Test request construction."""

    def test_english_prompt(self, openai_client):
        request = TranslationRequest("你好世界", TargetLanguage.EN)
        payload = openai_client.build_payload(request)

        assert payload['model'] == 'gpt-3.5-turbo'
        assert payload['max_tokens'] == 1000
        assert payload['temperature'] == pytest.approx(0.2)
        assert len(payload['messages']) == 1
        message = payload['messages'][0]
        assert message['role'] == 'system'
        assert 'English' in message['content']
        assert '你好世界' in message['content']
        assert 'training data' in message['content']
        assert 'knowledge cutoff' in message['content']

    def test_traditional_chinese_prompt(self, openai_client):
        request = TranslationRequest("hello", TargetLanguage.ZH_HANT)
        prompt = openai_client.build_prompt(request)

        assert 'Traditional Chinese' in prompt
        assert prompt.endswith("hello")

    def test_error_result_flags(self):
        assert not Success("hi").is_error
        assert not Cancelled().is_error
        assert RemoteError("bad").is_error
        assert TransportError("down").is_error


class TestTranslate:
    """Test response handling."""

    @patch('requests.Session.post')
    def test_success_is_trimmed(self, mock_post, openai_client):
        mock_post.return_value = make_response(200, completion_body(" Hello World \n"))

        outcome = openai_client.translate("你好世界", TargetLanguage.EN, "sk-test")

        assert outcome == Success("Hello World")

    @patch('requests.Session.post')
    def test_sends_bearer_token_and_payload(self, mock_post, openai_client):
        mock_post.return_value = make_response(200, completion_body("你好"))

        openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")

        args, kwargs = mock_post.call_args
        assert args[0] == openai_client.api_url
        assert kwargs['headers']['Authorization'] == 'Bearer sk-test'
        assert 'Traditional Chinese' in kwargs['json']['messages'][0]['content']

    @patch('requests.Session.post')
    def test_empty_text_skips_network(self, mock_post, openai_client):
        outcome = openai_client.translate("", TargetLanguage.EN, "sk-test")

        assert outcome == Success("")
        mock_post.assert_not_called()

    @patch('requests.Session.post')
    def test_remote_error_message(self, mock_post, openai_client):
        mock_post.return_value = make_response(401, {
            'error': {
                'message': 'Incorrect API key provided: sk-bad.',
                'type': 'invalid_request_error',
                'param': None,
                'code': 'invalid_api_key'
            }
        })

        outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-bad")

        assert outcome == RemoteError('Incorrect API key provided: sk-bad.')
        assert outcome.is_error

    @patch('requests.Session.post')
    def test_error_without_message_uses_generic_text(self, mock_post, openai_client):
        mock_post.return_value = make_response(400, {'error': {'message': None, 'type': 'server_error'}})

        outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")

        assert outcome == RemoteError(UNKNOWN_REMOTE_ERROR)
        assert 'None' not in outcome.message

    @patch('requests.Session.post')
    def test_error_object_that_is_not_a_dict(self, mock_post, openai_client):
        mock_post.return_value = make_response(500, {'error': 'upstream exploded'})

        outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")

        assert outcome == RemoteError("Failed to parse error response (HTTP 500)")

    @patch('requests.Session.post')
    def test_unparseable_error_body(self, mock_post, openai_client):
        mock_post.return_value = make_response(502, "<html>Bad Gateway</html>")

        outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")

        assert isinstance(outcome, RemoteError)
        assert 'Failed to parse' in outcome.message
        assert '502' in outcome.message

    @patch('requests.Session.post')
    def test_error_body_without_error_object(self, mock_post, openai_client):
        mock_post.return_value = make_response(500, {'detail': 'oops'})

        outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")

        assert isinstance(outcome, RemoteError)
        assert 'Failed to parse' in outcome.message

    @pytest.mark.parametrize("body", [
        {'choices': []},
        {'choices': [{'message': {}}]},
        {'choices': [{'message': {'content': None}}]},
        "not json",
    ])
    def test_malformed_success_body(self, openai_client, body):
        with patch('requests.Session.post', return_value=make_response(200, body)):
            outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")

        assert isinstance(outcome, RemoteError)
        assert outcome.message == "Failed to parse completion response"

    @patch('requests.Session.post')
    def test_connection_error(self, mock_post, openai_client):
        mock_post.side_effect = requests.ConnectionError("Connection refused")

        outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")

        assert outcome == TransportError("Connection refused")
        assert mock_post.call_count == 1

    @patch('requests.Session.post')
    def test_timeout(self, mock_post, openai_client):
        mock_post.side_effect = requests.Timeout()

        outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")

        assert outcome == TransportError("Request timed out")

    @patch('requests.Session.post')
    def test_token_with_cjk_characters(self, mock_post, openai_client):
        outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-测试")

        assert outcome == TransportError(INVALID_TOKEN_MESSAGE)
        mock_post.assert_not_called()

    @patch('requests.Session.post')
    def test_request_rejected_before_sending(self, mock_post, openai_client):
        mock_post.side_effect = ValueError("Invalid header value")

        outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")

        assert outcome == TransportError("Invalid header value")
        assert openai_client.open_requests == 0


class TestResponseLog:
    """Test the raw response log."""

    @patch('requests.Session.post')
    def test_success_body_is_appended(self, mock_post, openai_client):
        first = make_response(200, completion_body("one"))
        second = make_response(200, completion_body("two"))
        mock_post.side_effect = [first, second]

        openai_client.translate("uno", TargetLanguage.ZH_HANT, "sk-test")
        openai_client.translate("dos", TargetLanguage.ZH_HANT, "sk-test")

        logged = openai_client.response_log_path.read_text(encoding='utf-8')
        assert logged == first.text + second.text

    @patch('requests.Session.post')
    def test_error_body_is_not_logged(self, mock_post, openai_client):
        mock_post.return_value = make_response(429, {'error': {'message': 'Rate limit reached'}})

        openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")

        assert not openai_client.response_log_path.exists()

    @patch('requests.Session.post')
    def test_log_failure_is_swallowed(self, mock_post, tmp_path):
        fs = Mock()
        fs.append_text.side_effect = PermissionError("read-only")
        client = OpenAIClient(response_log_path=tmp_path / 'responses.log', fs=fs, poll_interval=0.01)
        mock_post.return_value = make_response(200, completion_body("ok"))

        try:
            outcome = client.translate("hello", TargetLanguage.ZH_HANT, "sk-test")
        finally:
            client.close()

        assert outcome == Success("ok")
        fs.append_text.assert_called_once()


class TestCancellation:
    """Test that the cancel signal releases the caller."""

    @patch('requests.Session.post')
    def test_already_cancelled_makes_no_call(self, mock_post, openai_client):
        cancel_event = threading.Event()
        cancel_event.set()

        outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test", cancel_event)

        assert outcome == Cancelled()
        mock_post.assert_not_called()

    def test_cancel_during_request(self, openai_client):
        release = threading.Event()

        def slow_post(*args, **kwargs):
            release.wait(5)
            return make_response(200, completion_body("too late"))

        cancel_event = threading.Event()
        timer = threading.Timer(0.05, cancel_event.set)

        with patch('requests.Session.post', side_effect=slow_post):
            timer.start()
            started = time.monotonic()
            outcome = openai_client.translate("hello", TargetLanguage.ZH_HANT, "sk-test", cancel_event)
            elapsed = time.monotonic() - started
            release.set()

        assert outcome == Cancelled()
        assert elapsed < 2
        assert not openai_client.response_log_path.exists()

    def test_abandoned_requests_do_not_delay_new_ones(self, openai_client):
        release = threading.Event()

        def post(url, json=None, **kwargs):
            if 'stale' in json['messages'][0]['content']:
                release.wait(10)
                return make_response(200, completion_body("too late"))
            return make_response(200, completion_body("fresh"))

        try:
            with patch('requests.Session.post', side_effect=post):
                for _ in range(6):
                    cancel_event = threading.Event()
                    threading.Timer(0.05, cancel_event.set).start()
                    outcome = openai_client.translate("stale", TargetLanguage.ZH_HANT, "sk-test", cancel_event)
                    assert outcome == Cancelled()

                started = time.monotonic()
                outcome = openai_client.translate("new text", TargetLanguage.ZH_HANT, "sk-test")
                elapsed = time.monotonic() - started
        finally:
            release.set()

        assert outcome == Success("fresh")
        assert elapsed < 1
        assert openai_client.open_requests == 0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
