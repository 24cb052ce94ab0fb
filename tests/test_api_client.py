from unittest.mock import MagicMock

import pytest
import requests

from bento_mailer.providers.api_client import ApiClient, ApiResponse
from bento_mailer.providers.errors import TransportError


def _fake_response(status_code=200, text='{"results": 1}', headers=None):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.headers = headers or {'Content-Type': 'application/json'}
    return response


def test_post_sends_body_and_headers(monkeypatch):
    post = MagicMock(return_value=_fake_response())
    monkeypatch.setattr(requests, 'post', post)

    result = ApiClient(timeout=7).post('http://bento.test/batch/emails', {'Accept': 'application/json'}, '{"emails": []}')

    assert result == ApiResponse(
        status_code=200,
        headers={'Content-Type': 'application/json'},
        body='{"results": 1}'
    )
    post.assert_called_once_with(
        'http://bento.test/batch/emails',
        data=b'{"emails": []}',
        headers={'Accept': 'application/json'},
        timeout=7
    )


def test_error_statuses_are_returned_not_raised(monkeypatch):
    monkeypatch.setattr(requests, 'post', MagicMock(return_value=_fake_response(500, 'oops')))

    result = ApiClient().post('http://bento.test', {}, '{}')

    assert (result.status_code, result.body) == (500, 'oops')


def test_default_timeout():
    assert ApiClient().timeout == 30


@pytest.mark.parametrize('exc', [
    requests.exceptions.Timeout('slow'),
    requests.exceptions.ConnectionError('refused'),
    requests.exceptions.TooManyRedirects('loop'),
])
def test_request_exceptions_become_transport_errors(monkeypatch, exc):
    monkeypatch.setattr(requests, 'post', MagicMock(side_effect=exc))

    with pytest.raises(TransportError) as raised:
        ApiClient().post('http://bento.test', {}, '{}')

    assert raised.value.__cause__ is exc
