"""
Email Service - Factory and Facade

This module provides a simple interface for sending emails without
knowing which adapter is being used. It handles adapter selection
and logs every send and its outcome.
"""

from typing import Dict, Any, Optional, Sequence
from bento_mailer.providers.email_adapter import EmailAdapter, EmailMessage, EmailResponse
from bento_mailer.providers.bento_adapter import BentoAdapter
from bento_mailer import logger


class EmailService:
    """
    Email service that manages adapters and provides a unified interface.

    This is the main class that business logic should use to send emails.
    """

    # Registry of available adapters
    ADAPTERS = {
        'bento': BentoAdapter
    }

    def __init__(self, provider: str = 'bento', api_client=None):
        """
        Initialize email service with specified provider.

        Args:
            provider: Name of email provider ('bento', ...)
            api_client: Optional HTTP client handed to the adapter
        """
        self.provider = provider.lower()
        self.adapter = self._get_adapter(self.provider, api_client)

    def _get_adapter(self, provider: str, api_client) -> EmailAdapter:
        """
        Get the appropriate adapter for the provider.

        Raises:
            ValueError: If provider is not supported
        """
        adapter_class = self.ADAPTERS.get(provider)
        if not adapter_class:
            available = ', '.join(self.ADAPTERS.keys())
            raise ValueError(
                f'Unsupported email provider: {provider}. '
                f'Available providers: {available}'
            )

        return adapter_class(api_client=api_client)

    def validate_config(self, config: Dict[str, Any]) -> None:
        self.adapter.validate_config(config)

    def send_email(self, message: EmailMessage, config: Dict[str, Any]) -> EmailResponse:
        """
        Send an email using the configured provider.

        Args:
            message: The email to send
            config: Provider configuration (API keys, etc.)

        Returns:
            EmailResponse with send result
        """
        logger.info(
            f'Sending email via {self.adapter.get_provider_name()}',
            subject=message.subject,
            recipients=len(message.to)
        )

        response = self.adapter.send_email(message, config)
        self._log_outcome(response, count=1)
        return response

    def send_emails(self, messages: Sequence[EmailMessage], config: Dict[str, Any]) -> EmailResponse:
        """Send a batch of emails in one provider call."""
        logger.info(
            f'Sending {len(messages)} emails via {self.adapter.get_provider_name()}',
            count=len(messages)
        )

        response = self.adapter.send_emails(messages, config)
        self._log_outcome(response, count=len(messages))
        return response

    def _log_outcome(self, response: EmailResponse, count: int):
        if response.success:
            logger.info(
                f'Email sent successfully via {self.adapter.get_provider_name()}',
                status_code=response.status_code,
                count=count
            )
        elif isinstance(response.error, Exception):
            logger.error(
                f'Email send failed via {self.adapter.get_provider_name()}',
                err=response.error,
                count=count
            )
        else:
            logger.error(
                f'Email send failed via {self.adapter.get_provider_name()}',
                status_code=response.status_code,
                error=response.error,
                count=count
            )

    @classmethod
    def register_adapter(cls, provider: str, adapter_class: type):
        """
        Register a new email adapter.

        This allows adding custom adapters at runtime.

        Args:
            provider: Name of the provider (e.g., 'custom_provider')
            adapter_class: Class that implements EmailAdapter
        """
        if not issubclass(adapter_class, EmailAdapter):
            raise TypeError(f'{adapter_class} must implement EmailAdapter')

        cls.ADAPTERS[provider.lower()] = adapter_class
        logger.info(f'Registered email adapter: {provider}')


def create_email_service(config: Dict[str, Any], api_client=None) -> EmailService:
    """
    Factory function to create EmailService from configuration.

    Example:
        >>> config = {'publishable_key': 'pk', 'secret_key': 'sk', 'site_uuid': 'uuid'}
        >>> service = create_email_service(config)
        >>> response = service.send_email(message, config)
    """
    provider: Optional[str] = config.get('email_provider') or 'bento'
    return EmailService(provider=provider, api_client=api_client)
