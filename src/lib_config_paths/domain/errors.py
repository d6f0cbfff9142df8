"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by adapters, the resolver, and consuming
applications. The hierarchy lives in the domain layer so outer layers may
depend on it without creating import cycles.

Contents
--------
* :class:`ConfigPathError` – umbrella base class for all library errors.
* :class:`InvalidArgument` – an explicitly supplied executable path is unusable.
* :class:`PlatformUnsupported` – a platform capability (hashing, process
  introspection) is unavailable.

System Role
-----------
Only :class:`InvalidArgument` ever reaches callers. Every other missing-input
scenario degrades to ``None``/empty fields on
:class:`lib_config_paths.domain.paths.ResolvedPaths`.
"""

from __future__ import annotations


class ConfigPathError(Exception):
    """Base type for all exceptions emitted by ``lib_config_paths``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidArgument(ConfigPathError, ValueError):
    """Raised when an explicitly supplied executable path does not exist.

    Why
    ----
    Pinning the executable is a deliberate caller decision; a typo there must
    surface instead of silently producing paths for a different application.

    Attributes
    ----------
    argument:
        Name of the offending parameter (``"exe_path"``).
    value:
        The rejected value as supplied by the caller.
    """

    def __init__(self, argument: str, value: str) -> None:
        super().__init__(f"Invalid value for {argument!r}: {value!r} does not exist")
        self.argument = argument
        self.value = value


class PlatformUnsupported(ConfigPathError):
    """Signals that a platform capability is unavailable.

    Current Usage
    -------------
    Adapters may raise it from probing helpers; the resolver and the hasher
    catch it and treat the capability as absent. It is never propagated to
    library consumers.
    """
