"""Process-wide cache for resolved configuration paths.

Purpose
-------
Resolve the implicit (entry-module based) paths once per process and share the
snapshot across callers, while still allowing explicit invalidation.

Contents
--------
* :class:`PathsCache` – a single published snapshot guarded by a lock.

System Role
-----------
:mod:`lib_config_paths.core` owns one instance wired to the default adapters;
tests build their own around in-memory doubles.
"""

from __future__ import annotations

import threading
from typing import NamedTuple

from ..domain.paths import ResolvedPaths
from ..observability import log_info, make_event
from .resolver import ConfigPathResolver


class _Snapshot(NamedTuple):
    paths: ResolvedPaths
    includes_user_config: bool


class PathsCache:
    """Cache the resolution for the implicit executable.

    Why
    ----
    Entry-module discovery and hashing are cheap but not free, and every
    consumer should agree on one answer until someone calls :meth:`refresh`.

    What
    ----
    Holds at most one immutable snapshot. A snapshot built without user paths
    is replaced when a caller asks for them; a richer snapshot is never
    downgraded. Explicit executable paths bypass the cache entirely.

    Examples
    --------
    >>> from lib_config_paths.core import default_resolver
    >>> cache = PathsCache(default_resolver())
    >>> cache.get_paths(include_user_config=False) is cache.get_paths(include_user_config=False)
    True
    """

    def __init__(self, resolver: ConfigPathResolver) -> None:
        self.resolver = resolver
        self._snapshot: _Snapshot | None = None
        self._lock = threading.Lock()

    @property
    def current(self) -> ResolvedPaths:
        """Return the cached paths including the per-user locations."""

        return self.get_paths(None, True)

    def get_paths(self, exe_path: str | None = None, include_user_config: bool = True) -> ResolvedPaths:
        """Return resolved paths, serving implicit requests from the cache.

        Parameters
        ----------
        exe_path:
            Explicit executable. When given a fresh, uncached resolution is
            returned (and may raise :class:`~lib_config_paths.domain.errors.InvalidArgument`).
        include_user_config:
            Whether roaming/local locations are required.
        """

        if exe_path is not None:
            return self.resolver.resolve(exe_path, include_user_config)

        snapshot = self._snapshot
        if snapshot is not None and (snapshot.includes_user_config or not include_user_config):
            return snapshot.paths

        with self._lock:
            snapshot = self._snapshot
            if snapshot is None or (include_user_config and not snapshot.includes_user_config):
                snapshot = _Snapshot(self.resolver.resolve(None, include_user_config), include_user_config)
                self._snapshot = snapshot
                log_info(
                    "paths_cache_published",
                    **make_event("cache", snapshot.paths.application_uri or None, {"user_config": include_user_config}),
                )
            return snapshot.paths

    def refresh(self) -> None:
        """Drop the cached snapshot so the next request resolves from scratch."""

        with self._lock:
            self._snapshot = None
        log_info("paths_cache_refreshed", **make_event("cache", None))
