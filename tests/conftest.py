"""
Shared fixtures.
"""
import os
import tempfile
from unittest.mock import Mock

import pytest

# Setup test environment before any package import reads config
os.environ.setdefault('CHAT_TRANSLATOR_DATA_DIR', tempfile.mkdtemp(prefix='chat_translator_tests_'))
os.environ.setdefault('VERBOSE_DEBUG', 'false')


@pytest.fixture
def credential_store(tmp_path):
    from chat_translator.services.credential_store import CredentialStore
    return CredentialStore(path=tmp_path / 'openai_token.txt')


@pytest.fixture
def openai_client(tmp_path):
    from chat_translator.services.openai_client import OpenAIClient
    client = OpenAIClient(response_log_path=tmp_path / 'responses.log', poll_interval=0.01)
    yield client
    client.close()


@pytest.fixture
def clipboard():
    return Mock()
