import importlib

import pytest

import volmeta.config.settings as settings_module


@pytest.fixture(autouse=True)
def restore_settings():
    yield
    importlib.reload(settings_module)


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("VOLMETA_METADATA_DIRECTORY", raising=False)
    monkeypatch.delenv("VOLMETA_DEFAULT_ACCOUNT", raising=False)
    monkeypatch.delenv("VOLMETA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("VOLMETA_VERSION", raising=False)

    importlib.reload(settings_module)
    cfg = settings_module.config

    assert cfg.metadata_directory == "/var/lib/volmeta/metadata"
    assert cfg.default_account == ""
    assert cfg.log_level == "INFO"
    assert cfg.version_override == ""


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("VOLMETA_METADATA_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("VOLMETA_DEFAULT_ACCOUNT", "storageacct")
    monkeypatch.setenv("VOLMETA_LOG_LEVEL", "debug")

    importlib.reload(settings_module)
    cfg = settings_module.config

    assert cfg.metadata_directory == str(tmp_path)
    assert cfg.default_account == "storageacct"
    assert cfg.log_level == "DEBUG"
