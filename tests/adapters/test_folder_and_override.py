"""Folder provider and override source adapters."""

from __future__ import annotations

import os

import platformdirs

from lib_config_paths.adapters.env.default import APP_CONFIG_FILE_VARIABLE, DefaultOverrideSource
from lib_config_paths.adapters.folders.default import (
    LOCAL_ROOT_VARIABLE,
    ROAMING_ROOT_VARIABLE,
    DefaultFolderProvider,
)


def test_folder_overrides_win(tmp_path) -> None:
    env = {ROAMING_ROOT_VARIABLE: str(tmp_path / "roaming"), LOCAL_ROOT_VARIABLE: str(tmp_path / "local")}
    provider = DefaultFolderProvider(env=env)

    assert provider.roaming_root() == str(tmp_path / "roaming")
    assert provider.local_root() == str(tmp_path / "local")


def test_folder_defaults_come_from_platformdirs(monkeypatch) -> None:
    monkeypatch.delenv(ROAMING_ROOT_VARIABLE, raising=False)
    monkeypatch.delenv(LOCAL_ROOT_VARIABLE, raising=False)
    provider = DefaultFolderProvider()

    assert provider.roaming_root() == platformdirs.user_config_dir(appname=None, appauthor=False, roaming=True)
    assert provider.local_root() == platformdirs.user_data_dir(appname=None, appauthor=False, roaming=False)
    assert os.path.isabs(provider.roaming_root())


def test_override_source_reads_injected_environ() -> None:
    source = DefaultOverrideSource(environ={APP_CONFIG_FILE_VARIABLE: " /etc/acme/app.config "})
    assert source.app_config_file() == "/etc/acme/app.config"


def test_override_source_unset() -> None:
    assert DefaultOverrideSource(environ={}).app_config_file() is None


def test_override_source_follows_process_environment(monkeypatch) -> None:
    source = DefaultOverrideSource()
    monkeypatch.delenv(APP_CONFIG_FILE_VARIABLE, raising=False)
    assert source.app_config_file() is None
    monkeypatch.setenv(APP_CONFIG_FILE_VARIABLE, "conf/app.config")
    assert source.app_config_file() == "conf/app.config"


def test_folder_provider_follows_process_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv(ROAMING_ROOT_VARIABLE, raising=False)
    provider = DefaultFolderProvider()
    monkeypatch.setenv(ROAMING_ROOT_VARIABLE, str(tmp_path))
    assert provider.roaming_root() == str(tmp_path)


def test_injected_env_wins_over_process_environment(monkeypatch) -> None:
    provider = DefaultFolderProvider(env={LOCAL_ROOT_VARIABLE: "/srv/local"})
    monkeypatch.setenv(LOCAL_ROOT_VARIABLE, "/tmp/other")
    assert provider.local_root() == "/srv/local"
