"""
Email Adapter Pattern - Interface and Message Model

This module defines the provider-agnostic message format and the contract
(interface) every email provider adapter implements, so callers get the same
result shape whichever vendor sits behind the adapter.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List, Sequence, Union, Tuple
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Address:
    """An email address with an optional display name."""
    email: str
    name: Optional[str] = None

    @classmethod
    def coerce(cls, value: Union['Address', str, Tuple[str, str]]) -> 'Address':
        """
        Normalize the accepted address shapes into an Address.

        Accepts an Address, a bare address string or a (name, address) pair.
        """
        if isinstance(value, Address):
            return value
        if isinstance(value, str):
            return cls(email=value)
        if _is_address_pair(value):
            name, email = value
            return cls(email=email, name=name)

        raise TypeError(f'Unsupported address value: {value!r}')

    def extract_address(self) -> str:
        return self.email


AddressLike = Union[Address, str, Tuple[str, str]]


def _is_address_pair(value) -> bool:
    """A (name, address) pair is a 2-tuple of strings; lists never are."""
    return isinstance(value, tuple) and len(value) == 2 and all(isinstance(part, str) for part in value)


@dataclass
class EmailAttachment:
    """Attachment descriptor. Adapters only care whether any are present."""
    filename: str
    content: bytes = b''
    content_type: Optional[str] = None


def _as_address_list(value) -> List[AddressLike]:
    if value is None:
        return []
    if isinstance(value, (str, Address)) or _is_address_pair(value):
        return [value]
    return list(value)


@dataclass
class EmailMessage:
    """Standard email message format used across all adapters."""
    from_email: AddressLike
    to: Sequence[AddressLike] = field(default_factory=list)
    subject: Optional[str] = None
    html_body: Optional[str] = None
    cc: Sequence[AddressLike] = field(default_factory=list)
    bcc: Sequence[AddressLike] = field(default_factory=list)
    attachments: Sequence[EmailAttachment] = field(default_factory=list)
    provider_options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.to = _as_address_list(self.to)
        self.cc = _as_address_list(self.cc)
        self.bcc = _as_address_list(self.bcc)
        self.attachments = list(self.attachments or [])
        self.provider_options = dict(self.provider_options or {})


@dataclass
class EmailResponse:
    """
    Standard response format from email providers.

    On success ``data`` holds the normalized provider payload. On failure
    ``status_code`` is the HTTP status (None for transport failures) and
    ``error`` is the decoded error body, the raw body text, or the transport
    exception.
    """
    success: bool
    data: Any = None
    status_code: Optional[int] = None
    error: Optional[Any] = None
    raw_response: Optional[str] = None


class EmailAdapter(ABC):
    """
    Abstract base class (interface) for email providers.

    Any email provider implementation must extend this class and implement
    the send methods.
    """

    @abstractmethod
    def validate_config(self, config: Dict[str, Any]) -> None:
        """
        Check that the provider credentials are present.

        Raises:
            ConfigurationError: If required keys are missing
        """
        pass

    @abstractmethod
    def send_email(self, message: EmailMessage, config: Dict[str, Any]) -> EmailResponse:
        """
        Send one email using the provider's API.

        Args:
            message: EmailMessage object containing email details
            config: Provider-specific configuration (API keys, etc.)

        Returns:
            EmailResponse object with send result

        Raises:
            ConfigurationError: If the config is incomplete
            EmailValidationError: If the message uses unsupported features
        """
        pass

    @abstractmethod
    def send_emails(self, messages: Sequence[EmailMessage], config: Dict[str, Any]) -> EmailResponse:
        """Send several emails in one provider call."""
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the name of this email provider."""
        pass
