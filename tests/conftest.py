"""
Pytest configuration and fixtures for testing the Blog Summarizer API.
"""

import json
import os
import sys

import pytest
import requests
from requests.utils import get_encoding_from_headers
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from blog_summarizer import create_app
from blog_summarizer.services.storage import reset_supabase_client
from blog_summarizer.services.document_store import close_document_store

fake = Faker()

SERVICE_ENV_VARS = (
    'HUGGINGFACE_API_KEY',
    'HUGGINGFACE_SUMMARIZER_URL',
    'SUMMARY_INPUT_LIMIT',
    'SUPABASE_URL',
    'SUPABASE_ANON_KEY',
    'SUPABASE_SERVICE_KEY',
    'MONGODB_URI',
    'MONGODB_DB_NAME',
    'MONGODB_TIMEOUT_MS',
    'MONGODB_RETRY_COOLDOWN',
    'LOG_LEVEL',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test with no external services configured."""
    for var in SERVICE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_supabase_client()
    close_document_store()
    yield
    reset_supabase_client()
    close_document_store()


@pytest.fixture
def app(monkeypatch):
    """Create application for testing."""
    monkeypatch.setenv('HUGGINGFACE_API_KEY', 'hf_test_key')
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture
def make_response():
    """Build a real requests.Response with the given status and body."""
    def _make(status=200, text='', json_data=None, url='https://example.com/', headers=None):
        resp = requests.Response()
        resp.status_code = status
        resp.headers.update(headers or {})
        body = json.dumps(json_data) if json_data is not None else text
        resp._content = body.encode('utf-8')
        # Same guess requests.get makes from the headers
        resp.encoding = get_encoding_from_headers(resp.headers) or 'utf-8'
        resp.url = url
        return resp
    return _make


@pytest.fixture
def blog_url():
    return fake.url() + 'posts/' + fake.slug()
