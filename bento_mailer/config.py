import os
from pathlib import Path
from typing import Any, Dict
from dotenv import load_dotenv

def load_env_file():
    """Load environment variables from ENV_FILE if specified, or .env.local, or .env."""
    env_file = os.getenv('ENV_FILE')
    if env_file:
        load_dotenv(Path(env_file))
        return

    # Try .env.local first, then fall back to .env
    env_local = Path.cwd() / '.env.local'
    if env_local.exists():
        load_dotenv(env_local)
    else:
        load_dotenv()


def _number_from_env(key: str, fallback: int) -> int:
    """Extract integer from environment variable with fallback."""
    raw = os.getenv(key)
    if raw is None:
        return fallback

    try:
        return int(raw)
    except ValueError:
        return fallback


# Bento API
DEFAULT_BENTO_BASE_URL = 'https://app.bentonow.com/api/v1'
BENTO_BATCH_EMAILS_PATH = '/batch/emails'

# Credentials every Bento request needs, in the order they are reported
REQUIRED_CONFIG_KEYS = ('publishable_key', 'secret_key', 'site_uuid')

DEFAULT_TIMEOUT_SECONDS = 30

# Environment variable -> config key
ENV_CONFIG_KEYS = {
    'BENTO_PUBLISHABLE_KEY': 'publishable_key',
    'BENTO_SECRET_KEY': 'secret_key',
    'BENTO_SITE_UUID': 'site_uuid',
    'BENTO_BASE_URL': 'base_url',
}


def bento_config_from_env() -> Dict[str, Any]:
    """
    Build a Bento config mapping from environment variables.

    Only variables that are set end up in the mapping. Nothing is validated
    here; the adapter checks required keys before sending. Reads the .env
    file first.
    """
    load_env_file()

    config = {}
    for env_key, config_key in ENV_CONFIG_KEYS.items():
        value = os.getenv(env_key)
        if value:
            config[config_key] = value

    config['timeout'] = _number_from_env('BENTO_TIMEOUT_SECONDS', DEFAULT_TIMEOUT_SECONDS)
    return config
