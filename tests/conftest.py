import json

import pytest

from bento_mailer.providers.api_client import ApiResponse
from bento_mailer.providers.email_adapter import EmailMessage


class StubApiClient:
    """Records every post and answers with a canned response."""

    def __init__(self, status_code=200, body='{"results": 1}', error=None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.calls = []

    def post(self, url, headers, body):
        self.calls.append({'url': url, 'headers': headers, 'body': body})
        if self.error is not None:
            raise self.error
        return ApiResponse(status_code=self.status_code, headers={}, body=self.body)

    @property
    def sent_json(self):
        return json.loads(self.calls[-1]['body'])


@pytest.fixture
def config():
    return {
        'base_url': 'http://localhost:4000',
        'publishable_key': 'pk_test_123',
        'secret_key': 'sk_test_456',
        'site_uuid': 'test-site-uuid',
    }


@pytest.fixture
def valid_email():
    return EmailMessage(
        from_email='sender@example.com',
        to='recipient@example.com',
        subject='Hello!',
        html_body='<h1>Hello</h1>'
    )


@pytest.fixture
def api_client():
    return StubApiClient()


@pytest.fixture
def make_api_client():
    return StubApiClient
