"""
HTTP client used by the adapters.

Adapters only depend on ``post(url, headers, body)``, which returns an
ApiResponse once the server answered with any status, or raises
TransportError when no response was received.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
import requests

from bento_mailer.config import DEFAULT_TIMEOUT_SECONDS
from bento_mailer.observability import error as log_error
from bento_mailer.providers.errors import TransportError


@dataclass
class ApiResponse:
    """Raw HTTP response: status, headers and undecoded body text."""
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ''


class ApiClient:
    """requests-backed implementation of the post contract."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS

    def post(self, url: str, headers: Dict[str, str], body: str) -> ApiResponse:
        try:
            response = requests.post(
                url,
                data=body.encode('utf-8'),
                headers=headers,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            log_error('Bento API timeout', err=e)
            raise TransportError(f'API request timed out: POST {url}') from e
        except requests.exceptions.ConnectionError as e:
            log_error('Bento API connection error', err=e)
            raise TransportError(f'Cannot connect to API: {e}') from e
        except requests.RequestException as e:
            log_error('Bento API request failed', err=e)
            raise TransportError(f'API request failed: {e}') from e

        return ApiResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text
        )
