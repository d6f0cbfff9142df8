"""Public package surface for ``lib_config_paths``.

Exports the cached resolution API from :mod:`lib_config_paths.core`, the
result and identity value objects, the error taxonomy, and the logging hooks
from :mod:`lib_config_paths.observability`.
"""

from __future__ import annotations

from .application.cache import PathsCache
from .application.resolver import ConfigPathResolver
from .core import current_paths, default_resolver, get_paths, refresh_current
from .domain.errors import ConfigPathError, InvalidArgument, PlatformUnsupported
from .domain.identity import EntryModuleInfo, StrongName
from .domain.paths import USER_CONFIG_FILENAME, ResolvedPaths
from .domain.segments import combine_if_valid, sanitize
from .observability import bind_trace_id, get_logger

__all__ = [
    "USER_CONFIG_FILENAME",
    "ConfigPathError",
    "ConfigPathResolver",
    "EntryModuleInfo",
    "InvalidArgument",
    "PathsCache",
    "PlatformUnsupported",
    "ResolvedPaths",
    "StrongName",
    "bind_trace_id",
    "combine_if_valid",
    "current_paths",
    "default_resolver",
    "get_logger",
    "get_paths",
    "refresh_current",
    "sanitize",
]
