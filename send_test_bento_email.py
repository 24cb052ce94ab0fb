#!/usr/bin/env python3
"""Send a test email via Bento using credentials from the environment."""

import sys

from bento_mailer.config import bento_config_from_env
from bento_mailer.providers.email_adapter import EmailMessage
from bento_mailer.providers.email_service import create_email_service
from bento_mailer.providers.errors import ConfigurationError

print("🧪 Testing Bento Email Send")
print("=" * 60)

config = bento_config_from_env()
service = create_email_service(config)
print(f"Using Provider: {service.adapter.get_provider_name()}")

try:
    service.validate_config(config)
except ConfigurationError as e:
    print(f"❌ {e}")
    print("Set BENTO_PUBLISHABLE_KEY, BENTO_SECRET_KEY and BENTO_SITE_UUID in .env.local")
    sys.exit(1)

print(f"Site UUID: {config['site_uuid']}")
print()

from_email = input("Enter the sender address (must be an author in Bento): ").strip()
test_email = input("Enter your email address to test: ").strip()

if from_email and test_email:
    print(f"\nSending test email to {test_email}...")

    message = EmailMessage(
        from_email=from_email,
        to=test_email,
        subject='Test Email from bento-mailer',
        html_body='<p>Hello {{ name }}! This is a test email sent via the Bento adapter.</p>',
        provider_options={'personalizations': {'name': test_email}}
    )
    response = service.send_email(message, config)

    print()
    if response.success:
        print("✅ Email sent successfully!")
        print(f"   Results: {response.data}")
    else:
        print(f"❌ Email failed ({response.status_code}): {response.error}")
else:
    print("No address provided. Skipping test.")
