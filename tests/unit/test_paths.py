from __future__ import annotations

import dataclasses
import json

import pytest

from lib_config_paths.domain.paths import ResolvedPaths


def make_paths(**overrides: object) -> ResolvedPaths:
    fields = {
        "has_entry_identity": True,
        "application_uri": "/opt/acme/widget.py",
        "application_config_uri": "/opt/acme/widget.py.config",
        "roaming_config_directory": "/home/demo/.config/Acme/widget_Url_x/1.0",
        "roaming_config_file": "/home/demo/.config/Acme/widget_Url_x/1.0/user.config",
        "includes_user_config": True,
    }
    fields.update(overrides)
    return ResolvedPaths(**fields)


def test_paths_are_immutable() -> None:
    paths = make_paths()
    with pytest.raises(dataclasses.FrozenInstanceError):
        paths.application_uri = "/tmp/other"  # type: ignore[misc]


def test_has_config_flags_follow_user_config_request() -> None:
    paths = make_paths()
    assert paths.has_roaming_config is True
    assert paths.has_local_config is False

    not_requested = make_paths(includes_user_config=False, roaming_config_file=None)
    assert not_requested.has_roaming_config is True
    assert not_requested.has_local_config is True


def test_to_json_includes_derived_flags() -> None:
    payload = json.loads(make_paths().to_json(indent=2))
    assert payload["application_config_uri"] == "/opt/acme/widget.py.config"
    assert payload["local_config_file"] is None
    assert payload["has_local_config"] is False
