"""
Bento Email Adapter Implementation

Concrete implementation of the EmailAdapter for Bento's batch email API.
For reference: https://bentonow.com/docs/emails_api

Bento is for transactional emails only (password resets, welcome emails,
etc.). It accepts exactly one recipient per email and has no CC, BCC or
attachment support; messages using those are rejected before any request is
made.

Provider options (``EmailMessage.provider_options``):
    transactional (bool): send even if the user has unsubscribed.
        Defaults to True.
    personalizations (dict): key/value pairs injected into the HTML body
        with Liquid templating.
"""

import base64
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from bento_mailer import __version__
from bento_mailer.config import (
    BENTO_BATCH_EMAILS_PATH,
    DEFAULT_BENTO_BASE_URL,
    REQUIRED_CONFIG_KEYS,
)
from bento_mailer.observability import debug, warning
from bento_mailer.providers.api_client import ApiClient, ApiResponse
from bento_mailer.providers.email_adapter import (
    Address,
    EmailAdapter,
    EmailMessage,
    EmailResponse,
)
from bento_mailer.providers.errors import (
    AttachmentsNotSupportedError,
    BccNotSupportedError,
    CcNotSupportedError,
    ConfigurationError,
    MultipleRecipientsError,
    TransportError,
)


@dataclass(frozen=True)
class BentoOptions:
    """
    Bento specific provider options with their defaults.

    ``has_personalizations`` records whether the option was given at all, so
    an explicit None is still sent.
    """
    transactional: bool = True
    personalizations: Optional[Dict[str, Any]] = None
    has_personalizations: bool = False

    @classmethod
    def from_provider_options(cls, provider_options: Optional[Mapping[str, Any]]) -> 'BentoOptions':
        provider_options = provider_options or {}
        return cls(
            transactional=provider_options.get('transactional', True),
            personalizations=provider_options.get('personalizations'),
            has_personalizations='personalizations' in provider_options
        )


def validate_config(config: Mapping[str, Any]) -> None:
    """
    Check that every required Bento credential is set.

    A key holding None or an empty string counts as missing.

    Raises:
        ConfigurationError: naming each missing key
    """
    missing = [key for key in REQUIRED_CONFIG_KEYS if config.get(key) in (None, '')]
    if missing:
        raise ConfigurationError(missing)


def validate_email(message: EmailMessage) -> EmailMessage:
    """Reject messages using features Bento does not support. First violation wins."""
    if len(message.to) > 1:
        raise MultipleRecipientsError(message.to)
    if message.cc:
        raise CcNotSupportedError(message.cc)
    if message.bcc:
        raise BccNotSupportedError(message.bcc)
    if message.attachments:
        raise AttachmentsNotSupportedError(message.attachments)
    return message


def build_email_params(message: EmailMessage) -> Dict[str, Any]:
    """Map a validated message onto Bento's email fields."""
    options = BentoOptions.from_provider_options(message.provider_options)

    params = {'from': Address.coerce(message.from_email).extract_address()}

    if message.to:
        params['to'] = Address.coerce(message.to[0]).extract_address()
    else:
        # Nothing rejects this upstream; Bento decides what to do with it
        warning('Bento email has no recipient, sending without "to"')

    if message.subject:
        params['subject'] = message.subject

    if message.html_body is not None:
        params['html_body'] = message.html_body

    params['transactional'] = options.transactional

    if options.has_personalizations:
        params['personalizations'] = options.personalizations

    return params


def prepare_email(message: EmailMessage) -> Dict[str, Any]:
    return build_email_params(validate_email(message))


def prepare_body(message: EmailMessage) -> Dict[str, Any]:
    """Batch envelope holding a single email."""
    return {'emails': [prepare_email(message)]}


def prepare_body_many(messages: Sequence[EmailMessage]) -> Dict[str, Any]:
    """Batch envelope for several emails, in input order.

    Every message is validated before the envelope exists, so one bad
    message aborts the whole batch.
    """
    return {'emails': [prepare_email(message) for message in messages]}


def basic_auth(config: Mapping[str, Any]) -> str:
    credentials = f"{config['publishable_key']}:{config['secret_key']}"
    return base64.b64encode(credentials.encode('utf-8')).decode('ascii')


def prepare_headers(config: Mapping[str, Any]) -> Dict[str, str]:
    return {
        'User-Agent': f'bento-mailer/{__version__}',
        'Authorization': f'Basic {basic_auth(config)}',
        'Content-Type': 'application/json',
        'Accept': 'application/json'
    }


def build_url(config: Mapping[str, Any]) -> str:
    base_url = config.get('base_url') or DEFAULT_BENTO_BASE_URL
    return f"{base_url}{BENTO_BATCH_EMAILS_PATH}?site_uuid={config['site_uuid']}"


# Response shape matchers, tried in order. Each returns _NO_MATCH or the value
# the caller should receive.
_NO_MATCH = object()
_UNDECODABLE = object()


def _results_value(decoded):
    if isinstance(decoded, dict) and 'results' in decoded:
        return decoded['results']
    return _NO_MATCH


def _list_value(decoded):
    if isinstance(decoded, list):
        return decoded
    return _NO_MATCH


def _any_value(decoded):
    return decoded


SINGLE_RESPONSE_SHAPES = (_results_value, _any_value)
BATCH_RESPONSE_SHAPES = (_results_value, _list_value, _any_value)


def _decode(body: Optional[str]):
    try:
        return json.loads(body)
    except (TypeError, ValueError):
        return _UNDECODABLE


def _match_shape(decoded, shapes: Sequence[Callable[[Any], Any]], fallback: Callable[[], Any]):
    if decoded is _UNDECODABLE:
        return fallback()
    for shape in shapes:
        value = shape(decoded)
        if value is not _NO_MATCH:
            return value
    return fallback()


def handle_response(
    response: ApiResponse,
    shapes: Sequence[Callable[[Any], Any]],
    fallback: Callable[[], Any]
) -> EmailResponse:
    """
    Turn a raw Bento response into an EmailResponse.

    A body that is not JSON on a 2xx status yields the empty fallback value
    and still counts as success.
    """
    code = response.status_code
    decoded = _decode(response.body)

    if 200 <= code < 300:
        return EmailResponse(
            success=True,
            data=_match_shape(decoded, shapes, fallback),
            status_code=code,
            raw_response=response.body
        )

    if code < 400:
        warning('Unexpected status from Bento API', status_code=code)

    return EmailResponse(
        success=False,
        status_code=code,
        error=response.body if decoded is _UNDECODABLE else decoded,
        raw_response=response.body
    )


class BentoAdapter(EmailAdapter):
    """Bento implementation of the EmailAdapter interface."""

    def __init__(self, api_client=None):
        """
        Args:
            api_client: Object with ``post(url, headers, body)``. Defaults to
                a requests-backed ApiClient using the config's timeout.
        """
        self.api_client = api_client

    def get_provider_name(self) -> str:
        return "Bento"

    def validate_config(self, config: Mapping[str, Any]) -> None:
        validate_config(config)

    def send_email(self, message: EmailMessage, config: Mapping[str, Any]) -> EmailResponse:
        """
        Send one email via Bento's batch endpoint.

        Args:
            message: EmailMessage with email details
            config: Must contain 'publishable_key', 'secret_key' and
                'site_uuid'; optionally 'base_url' and 'timeout'

        Returns:
            EmailResponse with send result
        """
        validate_config(config)
        body = prepare_body(message)
        return self._dispatch(body, config, SINGLE_RESPONSE_SHAPES, dict)

    def send_emails(self, messages: Sequence[EmailMessage], config: Mapping[str, Any]) -> EmailResponse:
        """Send several emails in a single Bento request."""
        if not messages:
            return EmailResponse(success=True, data=[])

        validate_config(config)
        body = prepare_body_many(messages)
        return self._dispatch(body, config, BATCH_RESPONSE_SHAPES, list)

    def _dispatch(self, body, config, shapes, fallback) -> EmailResponse:
        url = build_url(config)
        api_client = self.api_client
        if api_client is None:
            api_client = ApiClient(timeout=config.get('timeout'))

        debug('Sending emails via Bento', count=len(body['emails']), url=url)

        try:
            response = api_client.post(url, prepare_headers(config), json.dumps(body))
        except TransportError as e:
            return EmailResponse(success=False, error=e)

        return handle_response(response, shapes, fallback)


def deliver(message: EmailMessage, config: Mapping[str, Any], api_client=None) -> EmailResponse:
    """Send one email through Bento."""
    return BentoAdapter(api_client).send_email(message, config)


def deliver_many(messages: Sequence[EmailMessage], config: Mapping[str, Any], api_client=None) -> EmailResponse:
    """Send several emails through one Bento request. An empty list sends nothing."""
    return BentoAdapter(api_client).send_emails(messages, config)
