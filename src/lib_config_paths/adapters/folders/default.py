"""Per-user base directory adapter.

Purpose
-------
Implement :class:`lib_config_paths.application.ports.SpecialFolderProvider` on
top of :mod:`platformdirs`, which already knows the roaming/local conventions
of Windows, macOS and the XDG desktops.

Contents
--------
* :data:`ROAMING_ROOT_VARIABLE` / :data:`LOCAL_ROOT_VARIABLE` – environment
  overrides for portable setups and deterministic tests.
* :class:`DefaultFolderProvider` – the adapter.

System Role
-----------
Feeds the two base directories into
:class:`lib_config_paths.application.resolver.ConfigPathResolver`, which appends
the identity-derived directory suffix.
"""

from __future__ import annotations

import os
from typing import Final, Mapping

import platformdirs

ROAMING_ROOT_VARIABLE: Final[str] = "LIB_CONFIG_PATHS_ROAMING_ROOT"
LOCAL_ROOT_VARIABLE: Final[str] = "LIB_CONFIG_PATHS_LOCAL_ROOT"


class DefaultFolderProvider:
    """Resolve the roaming and local per-user roots.

    Roaming maps to ``%APPDATA%`` on Windows and ``$XDG_CONFIG_HOME`` on Linux;
    local maps to ``%LOCALAPPDATA%`` and ``$XDG_DATA_HOME`` respectively. macOS
    uses ``~/Library/Application Support`` for both.
    """

    def __init__(self, *, env: Mapping[str, str] | None = None) -> None:
        """Store the environment used for overrides.

        Parameters
        ----------
        env:
            Optional mapping merged over :data:`os.environ` at lookup time
            (useful for deterministic tests).
        """

        self._env = env

    @property
    def env(self) -> dict[str, str]:
        """Return the current process environment with the injected overrides applied."""

        return {**os.environ, **(self._env or {})}

    def roaming_root(self) -> str:
        """Return the roaming root, honouring :data:`ROAMING_ROOT_VARIABLE`."""

        override = self.env.get(ROAMING_ROOT_VARIABLE)
        if override is not None:
            return override
        return platformdirs.user_config_dir(appname=None, appauthor=False, roaming=True)

    def local_root(self) -> str:
        """Return the local root, honouring :data:`LOCAL_ROOT_VARIABLE`."""

        override = self.env.get(LOCAL_ROOT_VARIABLE)
        if override is not None:
            return override
        return platformdirs.user_data_dir(appname=None, appauthor=False, roaming=False)
