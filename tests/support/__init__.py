"""In-memory port doubles shared by the resolver, cache and CLI suites.

Each double answers exactly what a test scripts into it, so scenarios read as
"given this identity and these folders, expect these paths".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lib_config_paths.application.resolver import ConfigPathResolver
from lib_config_paths.domain.errors import PlatformUnsupported
from lib_config_paths.domain.identity import EntryModuleInfo

ROAMING_ROOT = "/home/demo/.config"
LOCAL_ROOT = "/home/demo/.local/share"


@dataclass
class FakeIdentityProvider:
    """Scripted identity; ``calls`` counts entry-module lookups."""

    entry: EntryModuleInfo | None = None
    executable: str | None = None
    base_dir: str = "/opt/acme"
    friendly: str = ""
    introspection_unsupported: bool = False
    calls: int = 0

    def entry_module(self) -> EntryModuleInfo | None:
        self.calls += 1
        return self.entry

    def current_executable(self) -> str | None:
        if self.introspection_unsupported:
            raise PlatformUnsupported("process introspection unavailable")
        return self.executable

    def base_directory(self) -> str:
        return self.base_dir

    def friendly_name(self) -> str:
        return self.friendly


@dataclass
class FakeFolderProvider:
    roaming: str = ROAMING_ROOT
    local: str = LOCAL_ROOT

    def roaming_root(self) -> str:
        return self.roaming

    def local_root(self) -> str:
        return self.local


@dataclass
class StubHasher:
    """Return a fixed suffix (``None`` simulates missing digest support)."""

    suffix: str | None = "_Url_stubhash"
    received: list[dict[str, Any]] = field(default_factory=list)

    def supports_hashing(self) -> bool:
        return self.suffix is not None

    def compute_suffix(self, **candidates: Any) -> str | None:
        self.received.append(candidates)
        return self.suffix


@dataclass
class FakeOverrideSource:
    value: str | None = None

    def app_config_file(self) -> str | None:
        return self.value


def build_resolver(
    *,
    identity: FakeIdentityProvider | None = None,
    folders: FakeFolderProvider | None = None,
    hasher: Any = None,
    override: str | None = None,
    platform: str = "linux",
) -> ConfigPathResolver:
    """Return a resolver wired to doubles, defaulting every port to a benign answer."""

    return ConfigPathResolver(
        identity=identity or FakeIdentityProvider(),
        folders=folders or FakeFolderProvider(),
        hasher=hasher if hasher is not None else StubHasher(),
        overrides=FakeOverrideSource(override),
        platform=platform,
    )


__all__ = [
    "LOCAL_ROOT",
    "ROAMING_ROOT",
    "FakeFolderProvider",
    "FakeIdentityProvider",
    "FakeOverrideSource",
    "StubHasher",
    "build_resolver",
]
