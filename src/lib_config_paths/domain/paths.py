"""Resolved configuration locations.

Purpose
-------
Provide the immutable value object every resolution returns. It is built once
by :class:`lib_config_paths.application.resolver.ConfigPathResolver` and shared
freely afterwards, including across threads through the process-wide cache.

Contents
--------
* :data:`USER_CONFIG_FILENAME` – name of the per-user override file.
* :data:`CONFIG_EXTENSION` – suffix appended to the application path.
* :class:`ResolvedPaths` – the result entity.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Final

USER_CONFIG_FILENAME: Final[str] = "user.config"
CONFIG_EXTENSION: Final[str] = ".config"


@dataclass(frozen=True, slots=True)
class ResolvedPaths:
    """Configuration locations for one application identity.

    Why
    ----
    Callers need a read-only snapshot they can cache and pass around without
    worrying about later mutation.

    What
    ----
    Holds the application URI, its config URI, the roaming and local
    ``user.config`` locations, and the identity metadata used to derive them.
    ``None`` means "this category of configuration is unavailable".

    Examples
    --------
    >>> paths = ResolvedPaths(application_uri="/opt/demo/demo", application_config_uri="/opt/demo/demo.config")
    >>> paths.has_roaming_config, paths.roaming_config_file
    (True, None)
    >>> ResolvedPaths(includes_user_config=True).has_local_config
    False
    """

    has_entry_identity: bool = False
    application_uri: str = ""
    application_config_uri: str | None = None
    roaming_config_directory: str | None = None
    roaming_config_file: str | None = None
    local_config_directory: str | None = None
    local_config_file: str | None = None
    company_name: str = ""
    product_name: str = ""
    product_version: str = ""
    includes_user_config: bool = False

    @property
    def has_roaming_config(self) -> bool:
        """Return ``True`` when a roaming file exists or was never requested.

        A missing file only means "skip roaming" when user paths were
        attempted; instances built without them report ``True`` as a no-op.
        """

        return self.roaming_config_file is not None or not self.includes_user_config

    @property
    def has_local_config(self) -> bool:
        """Local counterpart of :attr:`has_roaming_config`."""

        return self.local_config_file is not None or not self.includes_user_config

    def as_dict(self) -> dict[str, Any]:
        """Return the fields plus the derived ``has_*`` flags as a plain dict."""

        payload = asdict(self)
        payload["has_roaming_config"] = self.has_roaming_config
        payload["has_local_config"] = self.has_local_config
        return payload

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise :meth:`as_dict` to JSON.

        Examples
        --------
        >>> json.loads(ResolvedPaths(application_uri="/bin/demo").to_json())["application_uri"]
        '/bin/demo'
        """

        return json.dumps(self.as_dict(), indent=indent, separators=(",", ":") if indent is None else None)
