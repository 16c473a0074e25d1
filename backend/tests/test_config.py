import importlib

import pytest

import config


@pytest.fixture()
def reload_config(monkeypatch):
    def _reload(**env):
        for key in ('DEBUG', 'ALLOW_UNSAFE_WERKZEUG', 'PORT'):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config).Config
    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_dev_server_is_not_unlocked_by_default(reload_config):
    cfg = reload_config()
    assert cfg.DEBUG is False
    assert cfg.ALLOW_UNSAFE_WERKZEUG is False
    assert cfg.PORT == 8080
    assert not hasattr(cfg, 'SECRET_KEY')


def test_dev_server_flags_come_from_environment(reload_config):
    cfg = reload_config(DEBUG='true', ALLOW_UNSAFE_WERKZEUG='1', PORT='9000')
    assert cfg.DEBUG is True
    assert cfg.ALLOW_UNSAFE_WERKZEUG is True
    assert cfg.PORT == 9000
