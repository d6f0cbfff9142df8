"""Composition root for ``lib_config_paths``.

Purpose
-------
Wire the default adapters into a :class:`ConfigPathResolver` and expose the
process-wide cached resolution through a handful of stable functions.

Contents
--------
* :func:`default_resolver` – resolver built from the default adapters.
* :func:`current_paths` – cached paths for the running application.
* :func:`get_paths` – cached or explicit-executable resolution.
* :func:`refresh_current` – invalidate the process-wide cache.

System Role
-----------
The canonical place to change which adapters the library uses by default.
The CLI and library consumers call into this module only.
"""

from __future__ import annotations

from typing import Mapping

from .adapters.env.default import DefaultOverrideSource
from .adapters.folders.default import DefaultFolderProvider
from .adapters.hashing.default import DefaultIdentityHasher
from .adapters.identity.default import DefaultIdentityProvider
from .application.cache import PathsCache
from .application.resolver import ConfigPathResolver
from .domain.errors import ConfigPathError, InvalidArgument, PlatformUnsupported
from .domain.paths import ResolvedPaths
from .domain.segments import sanitize


def default_resolver(*, env: Mapping[str, str] | None = None, platform: str | None = None) -> ConfigPathResolver:
    """Return a resolver wired to the default adapters.

    Parameters
    ----------
    env:
        Optional environment mapping. When given it is used for the
        ``APP_CONFIG_FILE`` override and merged over :data:`os.environ` for the
        folder roots.
    platform:
        Optional ``sys.platform`` clone.

    Examples
    --------
    >>> resolver = default_resolver(env={"APP_CONFIG_FILE": "/etc/demo/app.config"}, platform="linux")
    >>> resolver.resolve(include_user_config=False).application_config_uri
    '/etc/demo/app.config'
    """

    return ConfigPathResolver(
        identity=DefaultIdentityProvider(),
        folders=DefaultFolderProvider(env=env),
        hasher=DefaultIdentityHasher(),
        overrides=DefaultOverrideSource(environ=env),
        platform=platform,
    )


_CACHE = PathsCache(default_resolver())


def current_paths() -> ResolvedPaths:
    """Return the cached paths of the running application, user paths included."""

    return _CACHE.current


def get_paths(exe_path: str | None = None, include_user_config: bool = True) -> ResolvedPaths:
    """Return configuration paths for the running application or *exe_path*.

    Why
    ----
    Most callers want the cached answer for the current process; tools that
    inspect another application pin its executable instead.

    Raises
    ------
    InvalidArgument
        When *exe_path* is given but does not exist.
    """

    return _CACHE.get_paths(exe_path, include_user_config)


def refresh_current() -> None:
    """Invalidate the process-wide cache; the next request resolves again."""

    _CACHE.refresh()


__all__ = [
    "ConfigPathError",
    "InvalidArgument",
    "PlatformUnsupported",
    "ResolvedPaths",
    "current_paths",
    "default_resolver",
    "get_paths",
    "refresh_current",
    "sanitize",
]
