import importlib
from unittest.mock import MagicMock

import dotenv
import pytest

from bento_mailer import config as bento_config
from bento_mailer.config import bento_config_from_env


@pytest.fixture
def load_dotenv(monkeypatch):
    fake = MagicMock()
    monkeypatch.setattr(bento_config, 'load_dotenv', fake)
    return fake


def test_config_from_env(monkeypatch, load_dotenv):
    monkeypatch.setenv('BENTO_PUBLISHABLE_KEY', 'pk')
    monkeypatch.setenv('BENTO_SECRET_KEY', 'sk')
    monkeypatch.setenv('BENTO_SITE_UUID', 'uuid')
    monkeypatch.setenv('BENTO_BASE_URL', 'http://localhost:4000')
    monkeypatch.setenv('BENTO_TIMEOUT_SECONDS', '10')

    assert bento_config_from_env() == {
        'publishable_key': 'pk',
        'secret_key': 'sk',
        'site_uuid': 'uuid',
        'base_url': 'http://localhost:4000',
        'timeout': 10,
    }


def test_unset_variables_are_left_out(monkeypatch, load_dotenv):
    for key in ('BENTO_PUBLISHABLE_KEY', 'BENTO_SECRET_KEY', 'BENTO_SITE_UUID', 'BENTO_BASE_URL'):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv('BENTO_TIMEOUT_SECONDS', 'soon')

    assert bento_config_from_env() == {'timeout': 30}


def test_env_file_is_read_when_building_config(monkeypatch, tmp_path, load_dotenv):
    env_file = tmp_path / 'bento.env'
    monkeypatch.setenv('ENV_FILE', str(env_file))

    bento_config_from_env()

    load_dotenv.assert_called_once_with(env_file)


def test_env_local_is_preferred_over_dotenv(monkeypatch, tmp_path, load_dotenv):
    monkeypatch.delenv('ENV_FILE', raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / '.env.local').write_text('BENTO_SITE_UUID=local-uuid\n')

    bento_config_from_env()

    load_dotenv.assert_called_once_with(tmp_path / '.env.local')


def test_importing_config_leaves_environment_alone(monkeypatch):
    fake = MagicMock()
    with monkeypatch.context() as m:
        m.setattr(dotenv, 'load_dotenv', fake)
        importlib.reload(bento_config)
    importlib.reload(bento_config)

    fake.assert_not_called()
