"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the resolver depends on so it can run against
the real interpreter, a frozen bundle, or test doubles without change.

Contents
--------
* :class:`IdentityProvider` – entry-module metadata and process details.
* :class:`SpecialFolderProvider` – per-user roaming and local base directories.
* :class:`IdentityHasher` – hash-derived directory suffixes with a capability check.
* :class:`ConfigOverrideSource` – ambient override for the application config file.

System Role
-----------
These protocols enforce Dependency Inversion. Each default adapter under
``lib_config_paths.adapters`` implements exactly one of them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.identity import EntryModuleInfo, StrongName


@runtime_checkable
class IdentityProvider(Protocol):
    """Describe the running application.

    Every method may return ``None``/empty; the resolver treats absence as a
    reason to degrade, never to fail.
    """

    def entry_module(self) -> EntryModuleInfo | None:
        """Return metadata about the entry module, or ``None`` for custom hosts."""

    def current_executable(self) -> str | None:
        """Return the process executable path.

        ``None`` or :class:`~lib_config_paths.domain.errors.PlatformUnsupported`
        both mean process introspection is unavailable.
        """

    def base_directory(self) -> str:
        """Return the directory the application was started from."""

    def friendly_name(self) -> str:
        """Return a short display name for the application (may be empty)."""


@runtime_checkable
class SpecialFolderProvider(Protocol):
    """Resolve per-user base directories.

    Non-absolute return values are treated as unusable by the resolver.
    """

    def roaming_root(self) -> str:
        """Return the roaming per-user data root (``%APPDATA%`` equivalent)."""

    def local_root(self) -> str:
        """Return the local per-user data root (``%LOCALAPPDATA%`` equivalent)."""


@runtime_checkable
class IdentityHasher(Protocol):
    """Produce ``_<Kind>_<hash>`` suffixes from identity candidates."""

    def supports_hashing(self) -> bool:
        """Return ``True`` when the platform offers the required digest."""

    def compute_suffix(
        self,
        *,
        strong_name: StrongName | None = None,
        code_base_uri: str | None = None,
        fallback_path: str | None = None,
    ) -> str | None:
        """Return the suffix of the first candidate that hashes, else ``None``."""


@runtime_checkable
class ConfigOverrideSource(Protocol):
    """Supply an alternate application config location."""

    def app_config_file(self) -> str | None:
        """Return the override value or ``None`` when unset."""
