"""Bento transactional email adapter."""

__version__ = '0.1.0'

from bento_mailer.providers.bento_adapter import (  # noqa: E402
    BentoAdapter,
    deliver,
    deliver_many,
    validate_config,
)
from bento_mailer.providers.email_adapter import (  # noqa: E402
    Address,
    EmailAttachment,
    EmailMessage,
    EmailResponse,
)

__all__ = [
    '__version__',
    'Address',
    'BentoAdapter',
    'EmailAttachment',
    'EmailMessage',
    'EmailResponse',
    'deliver',
    'deliver_many',
    'validate_config',
]
