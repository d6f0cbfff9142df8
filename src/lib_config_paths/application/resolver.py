"""Configuration path resolution.

Purpose
-------
Combine the identity, folder, hashing and override ports into a single
:class:`~lib_config_paths.domain.paths.ResolvedPaths` snapshot. This module owns
every precedence rule: where the application URI comes from, how the config
URI is derived or overridden, and how the per-user directory suffix is built.

Contents
--------
* :class:`ConfigPathResolver` – orchestrates one resolution per call.
* :func:`resolve_names_and_version` – company/product/version with namespace
  fallbacks.
* :func:`is_well_formed_absolute_uri` – override classification helper.

System Role
-----------
Called by :class:`lib_config_paths.application.cache.PathsCache` (cached,
implicit executable) and directly for explicitly pinned executables.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
import re
import sys
from pathlib import PurePosixPath, PureWindowsPath
from types import ModuleType
from typing import Callable, Final, Iterable
from urllib.parse import unquote, urlsplit

from ..domain.errors import InvalidArgument, PlatformUnsupported
from ..domain.identity import EntryModuleInfo
from ..domain.paths import CONFIG_EXTENSION, USER_CONFIG_FILENAME, ResolvedPaths
from ..domain.segments import combine_if_valid, sanitize
from ..observability import log_debug, log_error, make_event
from .ports import ConfigOverrideSource, IdentityHasher, IdentityProvider, SpecialFolderProvider

DEFAULT_PRODUCT_VERSION: Final[str] = "1.0.0.0"
SINGLE_FILE_EXTENSION: Final[str] = ".dll"
_REMOTE_SCHEMES: Final[tuple[str, ...]] = ("http://", "https://")
# Two or more scheme characters so drive letters (``C:``) never pass as a scheme.
_ABSOLUTE_URI: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:[^\s\\]+$")


class ConfigPathResolver:
    """Resolve configuration locations for the running (or a pinned) application.

    Why
    ----
    Centralise the precedence rules so adapters only answer narrow questions
    and the rules stay testable with in-memory doubles.

    Parameters
    ----------
    identity / folders / hasher / overrides:
        Port implementations (see :mod:`lib_config_paths.application.ports`).
    platform:
        ``sys.platform`` clone selecting Windows or POSIX path semantics.
        Defaults to the running interpreter.
    """

    def __init__(
        self,
        *,
        identity: IdentityProvider,
        folders: SpecialFolderProvider,
        hasher: IdentityHasher,
        overrides: ConfigOverrideSource,
        platform: str | None = None,
    ) -> None:
        self.identity = identity
        self.folders = folders
        self.hasher = hasher
        self.overrides = overrides
        self.platform = platform or sys.platform

    @property
    def _is_windows(self) -> bool:
        return self.platform.startswith("win")

    @property
    def pathmod(self) -> ModuleType:
        """Return :mod:`ntpath` or :mod:`posixpath` according to :attr:`platform`."""

        return ntpath if self._is_windows else posixpath

    def resolve(self, exe_path: str | None = None, include_user_config: bool = True) -> ResolvedPaths:
        """Return the configuration locations as an immutable snapshot.

        Why
        ----
        Each call is a pure function of the adapters' answers, so the result
        can be cached and shared across threads.

        What
        ----
        1. Determine the application URI (explicit path, entry module, or
           process executable).
        2. Derive the application config URI (override or ``<app>.config``).
        3. Unless the executable was pinned or user paths were not requested,
           resolve company/product/version and build the roaming and local
           ``user.config`` locations.

        Parameters
        ----------
        exe_path:
            Explicit executable. Must exist; user paths are never computed for it.
        include_user_config:
            Whether to resolve the roaming and local per-user locations.

        Raises
        ------
        InvalidArgument
            When *exe_path* is given but does not name an existing file.
        """

        entry: EntryModuleInfo | None = None
        if exe_path is not None:
            application_uri = os.path.abspath(exe_path)
            if not os.path.isfile(application_uri):
                log_error("explicit_exe_path_missing", **make_event("application", application_uri))
                raise InvalidArgument("exe_path", exe_path)
        else:
            entry = self.identity.entry_module()
            application_uri = self._application_uri(entry)
        is_single_file = entry is not None and entry.is_single_file
        log_debug(
            "application_uri_resolved",
            **make_event("application", application_uri or None, {"entry_module": entry is not None}),
        )

        config_uri = self._application_config_uri(application_uri, is_single_file)
        log_debug("application_config_uri_resolved", **make_event("application_config", config_uri))

        if exe_path is not None or not include_user_config:
            log_debug(
                "user_paths_skipped",
                **make_event("user", None, {"explicit_exe_path": exe_path is not None}),
            )
            return ResolvedPaths(
                has_entry_identity=entry is not None,
                application_uri=application_uri,
                application_config_uri=config_uri,
                includes_user_config=include_user_config,
            )

        is_remote = config_uri is not None and config_uri.lower().startswith(_REMOTE_SCHEMES)
        company, product, version = resolve_names_and_version(entry, is_remote)
        log_debug(
            "identity_resolved",
            **make_event("identity", None, {"company": company, "product": product, "version": version}),
        )
        identity_fields = {
            "has_entry_identity": entry is not None,
            "application_uri": application_uri,
            "application_config_uri": config_uri,
            "company_name": company,
            "product_name": product,
            "product_version": version,
            "includes_user_config": True,
        }
        if is_remote:
            log_debug("user_paths_skipped", **make_event("user", config_uri, {"remote": True}))
            return ResolvedPaths(**identity_fields)

        dir_suffix = self._directory_suffix(entry, application_uri, company, product, version)
        roaming_dir, roaming_file = self._user_location(self.folders.roaming_root(), dir_suffix)
        local_dir, local_file = self._user_location(self.folders.local_root(), dir_suffix)
        log_debug(
            "user_paths_resolved",
            **make_event("user", dir_suffix, {"roaming": roaming_file, "local": local_file}),
        )
        return ResolvedPaths(
            **identity_fields,
            roaming_config_directory=roaming_dir,
            roaming_config_file=roaming_file,
            local_config_directory=local_dir,
            local_config_file=local_file,
        )

    def _application_uri(self, entry: EntryModuleInfo | None) -> str:
        """Return the entry-module path, falling back to the process executable."""

        if entry is not None and not entry.is_single_file:
            return self.pathmod.join(self.identity.base_directory(), entry.manifest_module_name)
        # Bundled builds and custom hosts: the executable is all we can name.
        try:
            return self.identity.current_executable() or ""
        except PlatformUnsupported:
            log_debug("process_introspection_unsupported", **make_event("application", None))
            return ""

    def _application_config_uri(self, application_uri: str, is_single_file: bool) -> str | None:
        """Return the override location or ``<application>.config``.

        Why
        ----
        Operators can redirect an application to another config file; without
        an override the file sits next to the application.

        What
        ----
        * Absolute ``file:`` URI override → its local path.
        * Other absolute URI override → ``None`` (no local config file).
        * Any other override → filesystem path rooted at the base directory.
        * No override → ``<application>.config``; single-file builds first
          retarget to ``.dll`` (swap on Windows, append elsewhere).
        """

        override = self.overrides.app_config_file()
        if override:
            if is_well_formed_absolute_uri(override):
                parts = urlsplit(override)
                if parts.scheme.lower() == "file":
                    return self._file_uri_to_path(parts.netloc, parts.path)
                log_debug(
                    "config_override_ignored",
                    **make_event("application_config", override, {"scheme": parts.scheme}),
                )
                return None
            path = override
            if not self.pathmod.isabs(path):
                path = self.pathmod.join(self.identity.base_directory(), path)
            return self.pathmod.normpath(path)

        if not application_uri:
            return None
        application_path = application_uri
        if is_single_file:
            if self._is_windows:
                application_path = self.pathmod.splitext(application_uri)[0] + SINGLE_FILE_EXTENSION
            else:
                application_path = application_uri + SINGLE_FILE_EXTENSION
        return application_path + CONFIG_EXTENSION

    def _file_uri_to_path(self, netloc: str, path: str) -> str:
        """Translate the authority and path of a ``file:`` URI into a local path."""

        local = unquote(path)
        if self._is_windows:
            if re.match(r"^/[A-Za-z]:", local):
                local = local[1:]
            local = local.replace("/", "\\")
            if netloc and netloc.lower() != "localhost":
                return f"\\\\{netloc}{local}"
            return local
        if netloc and netloc.lower() != "localhost":
            return f"//{netloc}{local}"
        return local

    def _directory_suffix(
        self,
        entry: EntryModuleInfo | None,
        application_uri: str,
        company: str,
        product: str,
        version: str,
    ) -> str | None:
        """Return ``<company>/<name><hash>/<version>`` or ``None`` when any part is missing.

        The name part only exists when both a display name and a hash tag
        could be derived; a missing part makes the whole suffix ``None``.
        """

        part1 = sanitize(company, limit_length=True) or None
        name_prefix = sanitize(self.identity.friendly_name(), limit_length=True) or sanitize(
            product, limit_length=True
        )

        strong_name = None
        code_base_uri = None
        if entry is not None and not entry.is_single_file:
            strong_name = entry.strong_name
            code_base_uri = self._as_file_uri(
                self.pathmod.join(self.identity.base_directory(), entry.manifest_module_name)
            )
        hash_suffix = self.hasher.compute_suffix(
            strong_name=strong_name,
            code_base_uri=code_base_uri,
            fallback_path=application_uri.lower() or None,
        )

        part2 = name_prefix + hash_suffix if name_prefix and hash_suffix else None
        part3 = sanitize(version, limit_length=False) or None
        dir_suffix = combine_if_valid(
            combine_if_valid(part1, part2, pathmod=self.pathmod), part3, pathmod=self.pathmod
        )
        if dir_suffix is None:
            log_debug(
                "directory_suffix_unavailable",
                **make_event(
                    "suffix",
                    None,
                    {"company": bool(part1), "name": bool(name_prefix), "hash": bool(hash_suffix)},
                ),
            )
        return dir_suffix

    def _user_location(self, root: str, dir_suffix: str | None) -> tuple[str | None, str | None]:
        """Return ``(directory, user.config)`` under *root*, or ``(None, None)``."""

        if not root or not self.pathmod.isabs(root):
            return None, None
        directory = combine_if_valid(root, dir_suffix, pathmod=self.pathmod)
        return directory, combine_if_valid(directory, USER_CONFIG_FILENAME, pathmod=self.pathmod)

    def _as_file_uri(self, path: str) -> str | None:
        """Return a ``file:`` URI for *path*, ``None`` when it is not absolute."""

        pure = PureWindowsPath(path) if self._is_windows else PurePosixPath(path)
        try:
            return pure.as_uri()
        except ValueError:
            return None


def resolve_names_and_version(entry: EntryModuleInfo | None, is_remote: bool) -> tuple[str, str, str]:
    """Return ``(company, product, version)`` for *entry*.

    Why
    ----
    The directory suffix needs all three even when the application declares
    no packaging metadata.

    What
    ----
    Declared metadata wins. When any value is missing and the application is
    not remote, product falls back to the trailing namespace segment, then the
    entry type name; company falls back to the leading namespace segment, then
    the product. A missing version always becomes :data:`DEFAULT_PRODUCT_VERSION`.

    Examples
    --------
    >>> resolve_names_and_version(EntryModuleInfo(namespace="Contoso.Tools.Editor"), is_remote=False)
    ('Contoso', 'Editor', '1.0.0.0')
    >>> resolve_names_and_version(EntryModuleInfo(entry_type_name="Program"), is_remote=False)
    ('Program', 'Program', '1.0.0.0')
    >>> resolve_names_and_version(None, is_remote=True)
    ('', '', '1.0.0.0')
    """

    company = _clean(entry.company) if entry is not None else ""
    product = _clean(entry.product) if entry is not None else ""
    version = _clean(entry.version) if entry is not None else ""

    if not is_remote and not (company and product and version):
        namespace = entry.namespace if entry is not None else None
        type_name = entry.entry_type_name if entry is not None else None
        if not product:
            product = _first_non_empty(
                (
                    lambda: _trailing_segment(namespace),
                    lambda: _clean(type_name),
                )
            )
        if not company:
            company = _first_non_empty(
                (
                    lambda: _leading_segment(namespace),
                    lambda: product,
                )
            )

    return company, product, version or DEFAULT_PRODUCT_VERSION


def is_well_formed_absolute_uri(value: str) -> bool:
    """Return ``True`` for strings such as ``file:///etc/app.config``.

    Examples
    --------
    >>> is_well_formed_absolute_uri("file:///etc/app.config")
    True
    >>> is_well_formed_absolute_uri("C:\\\\apps\\\\app.config")
    False
    >>> is_well_formed_absolute_uri("conf/app.config")
    False
    """

    return _ABSOLUTE_URI.match(value) is not None


def _first_non_empty(producers: Iterable[Callable[[], str]]) -> str:
    for produce in producers:
        value = produce()
        if value:
            return value
    return ""


def _clean(value: str | None) -> str:
    return value.strip() if value else ""


def _trailing_segment(namespace: str | None) -> str:
    if not namespace:
        return ""
    _, dot, tail = namespace.rpartition(".")
    return (tail if dot and tail else namespace).strip()


def _leading_segment(namespace: str | None) -> str:
    if not namespace:
        return ""
    return namespace.partition(".")[0].strip()
