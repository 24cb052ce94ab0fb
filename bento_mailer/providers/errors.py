"""Exceptions raised by the Bento adapter and its HTTP client."""

from typing import Any, Sequence


class BentoError(Exception):
    """Base exception for the Bento adapter."""
    pass


class ConfigurationError(BentoError, ValueError):
    """Required credentials are missing from the config."""

    def __init__(self, missing_keys: Sequence[str]):
        self.missing_keys = list(missing_keys)
        super().__init__(f'expected {self.missing_keys!r} to be set')


class EmailValidationError(BentoError, ValueError):
    """The message uses a feature the vendor cannot deliver."""

    def __init__(self, message: str, field: str, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(message)


class MultipleRecipientsError(EmailValidationError):
    def __init__(self, recipients):
        super().__init__(
            f'Bento adapter supports only a single recipient, got: {list(recipients)!r}',
            field='to',
            value=list(recipients)
        )


class CcNotSupportedError(EmailValidationError):
    def __init__(self, cc):
        super().__init__('Bento adapter does not support CC', field='cc', value=list(cc))


class BccNotSupportedError(EmailValidationError):
    def __init__(self, bcc):
        super().__init__('Bento adapter does not support BCC', field='bcc', value=list(bcc))


class AttachmentsNotSupportedError(EmailValidationError):
    def __init__(self, attachments):
        super().__init__(
            'Bento adapter does not support attachments',
            field='attachments',
            value=list(attachments)
        )


class TransportError(BentoError):
    """The HTTP request failed before a response status was received."""
    pass
