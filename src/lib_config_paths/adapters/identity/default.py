"""Process identity adapter.

Purpose
-------
Implement :class:`lib_config_paths.application.ports.IdentityProvider` for the
running CPython process: the ``__main__`` module plays the entry point, the
distribution that owns its top-level package supplies company/product/version
metadata, and :data:`sys.executable` is the process executable.

Contents
--------
* :class:`DefaultIdentityProvider` – the adapter.
* :func:`distribution_metadata` – company/product/version lookup via
  :mod:`importlib.metadata`.

System Role
-----------
Only consulted when no explicit executable path is supplied. Every lookup
degrades to ``None``/empty so embedded interpreters and interactive sessions
still resolve what they can.
"""

from __future__ import annotations

import os
import sys
from email.utils import parseaddr
from importlib import metadata
from pathlib import Path
from types import ModuleType

from ...domain.identity import EntryModuleInfo
from ...observability import log_debug

_MAIN_MODULE_NAME = "__main__"


class DefaultIdentityProvider:
    """Describe the current interpreter process.

    Why
    ----
    Keeps every interpreter-specific lookup (``sys.frozen``, ``__spec__``,
    distribution metadata) in one adapter so the resolver stays testable.
    """

    def __init__(
        self,
        *,
        main_module: ModuleType | None = None,
        executable: str | None = None,
        frozen: bool | None = None,
        cwd: Path | None = None,
    ) -> None:
        """Store overrides used instead of interpreter state.

        Parameters
        ----------
        main_module:
            Module treated as the entry point. Defaults to ``sys.modules["__main__"]``.
        executable:
            Process executable. Defaults to :data:`sys.executable`.
        frozen:
            Whether the application is a bundled single-file build. Defaults to
            ``getattr(sys, "frozen", False)``.
        cwd:
            Fallback base directory. Defaults to :func:`pathlib.Path.cwd`.
        """

        self._main_module = main_module
        self._executable = executable
        self.frozen = bool(getattr(sys, "frozen", False)) if frozen is None else frozen
        self.cwd = cwd

    def entry_module(self) -> EntryModuleInfo | None:
        """Return entry-module metadata or ``None`` for interactive/embedded hosts."""

        module = self._module()
        if module is None:
            return None
        file = getattr(module, "__file__", None)
        spec = getattr(module, "__spec__", None)
        if not file and spec is None and not self.frozen:
            log_debug("entry_module_missing", stage="identity", path=None)
            return None

        module_name = self._module_name(module)
        namespace, _, type_name = module_name.rpartition(".")
        company, product, version = distribution_metadata(module_name.partition(".")[0])
        is_single_file = self.frozen or not (file and Path(file).is_file())
        if file:
            manifest = Path(file).name
        elif type_name:
            manifest = f"{type_name}.py"
        else:
            manifest = Path(self.current_executable() or "").name
        return EntryModuleInfo(
            company=company,
            product=product,
            version=version,
            namespace=namespace or None,
            entry_type_name=type_name or None,
            manifest_module_name=manifest,
            is_single_file=is_single_file,
        )

    def current_executable(self) -> str | None:
        """Return the interpreter or bundle executable, ``None`` when unknown."""

        return self._executable or sys.executable or None

    def base_directory(self) -> str:
        """Return the directory holding the entry module (or bundle executable)."""

        if self.frozen:
            executable = self.current_executable()
            if executable:
                return os.path.dirname(os.path.abspath(executable))
        module = self._module()
        file = getattr(module, "__file__", None) if module is not None else None
        if file and Path(file).is_file():
            return os.path.dirname(os.path.abspath(file))
        return str(self.cwd or Path.cwd())

    def friendly_name(self) -> str:
        """Return a short application name (``tools`` for ``python -m acme.tools``)."""

        if self.frozen:
            executable = self.current_executable()
            return Path(executable).stem if executable else ""
        module = self._module()
        if module is None:
            return ""
        segments = [part for part in self._module_name(module).split(".") if part != _MAIN_MODULE_NAME]
        return segments[-1] if segments else ""

    def _module(self) -> ModuleType | None:
        if self._main_module is not None:
            return self._main_module
        return sys.modules.get(_MAIN_MODULE_NAME)

    @staticmethod
    def _module_name(module: ModuleType) -> str:
        """Return the import name of *module*, or the file stem for plain scripts."""

        spec = getattr(module, "__spec__", None)
        if spec is not None and spec.name:
            return spec.name
        file = getattr(module, "__file__", None)
        return Path(file).stem if file else ""


def distribution_metadata(package: str) -> tuple[str | None, str | None, str | None]:
    """Return ``(company, product, version)`` of the distribution owning *package*.

    Why
    ----
    Packaging metadata is the closest thing Python has to assembly-level
    company/product/version attributes.

    What
    ----
    Maps the top-level import *package* to its distribution, then reads
    ``Author`` (or the display name in ``Author-email``, then ``Maintainer``),
    ``Name`` and ``Version``. Unknown packages yield ``(None, None, None)``.
    """

    if not package:
        return None, None, None
    names = metadata.packages_distributions().get(package) or []
    for name in names:
        try:
            meta = metadata.metadata(name)
        except metadata.PackageNotFoundError:
            continue
        company = meta.get("Author") or parseaddr(meta.get("Author-email") or "")[0] or meta.get("Maintainer")
        return company or None, meta.get("Name"), meta.get("Version")
    return None, None, None
