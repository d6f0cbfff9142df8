"""Environment override adapter.

Purpose
-------
Read the ambient override that points an application at an alternate config
file. It implements :class:`lib_config_paths.application.ports.ConfigOverrideSource`.

Key behaviours
--------------
* Reads :data:`APP_CONFIG_FILE_VARIABLE` from an injectable environ mapping.
* Blank values count as unset.
"""

from __future__ import annotations

import os
from typing import Final, Mapping

from ...observability import log_debug

APP_CONFIG_FILE_VARIABLE: Final[str] = "APP_CONFIG_FILE"


class DefaultOverrideSource:
    """Expose the ``APP_CONFIG_FILE`` override from the process environment."""

    def __init__(self, *, environ: Mapping[str, str] | None = None, variable: str = APP_CONFIG_FILE_VARIABLE) -> None:
        """Initialise the source with a specific ``environ`` mapping for testability.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`, read lazily so
            later changes are honoured.
        variable:
            Name of the override variable.
        """

        self._environ = environ
        self.variable = variable

    def app_config_file(self) -> str | None:
        """Return the override value or ``None`` when unset or blank.

        Examples
        --------
        >>> DefaultOverrideSource(environ={"APP_CONFIG_FILE": "app.config"}).app_config_file()
        'app.config'
        >>> DefaultOverrideSource(environ={"APP_CONFIG_FILE": "  "}).app_config_file() is None
        True
        """

        environ = os.environ if self._environ is None else self._environ
        value = environ.get(self.variable, "").strip()
        if not value:
            return None
        log_debug("config_override_found", stage="override", path=value, variable=self.variable)
        return value
