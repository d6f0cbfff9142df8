"""Identity value objects describing the running application.

Purpose
-------
Carry the metadata an :class:`~lib_config_paths.application.ports.IdentityProvider`
discovers about the entry module so the resolver never touches interpreter
internals directly.

Contents
--------
* :class:`StrongName` – signed identity (name, version, public key token).
* :class:`EntryModuleInfo` – company/product/version metadata plus the
  location details needed to build the application URI.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StrongName:
    """Signed identity of the entry module.

    A strong name only counts as present when ``public_key_token`` is set;
    unsigned modules fall back to the code-base or path hashing tiers.

    Examples
    --------
    >>> StrongName("Demo", "2.1.0", "b77a5c561934e089").is_present
    True
    >>> StrongName("Demo", "2.1.0", "").is_present
    False
    """

    name: str
    version: str = ""
    public_key_token: str = ""

    @property
    def is_present(self) -> bool:
        return bool(self.name) and bool(self.public_key_token)

    def display_name(self) -> str:
        """Return the canonical ``name, Version=..., PublicKeyToken=...`` string."""

        return f"{self.name}, Version={self.version}, PublicKeyToken={self.public_key_token}"


@dataclass(frozen=True, slots=True)
class EntryModuleInfo:
    """Metadata about the module the process was started with.

    Attributes
    ----------
    company / product / version:
        Distribution-level metadata. ``None`` or empty when not declared.
    namespace:
        Dotted package that contains the entry point (``acme.tools``), used to
        guess company and product when metadata is missing.
    entry_type_name:
        Name of the entry point itself (``cli`` for ``acme.tools.cli``).
    manifest_module_name:
        File name of the entry module inside the base directory.
    is_single_file:
        ``True`` for bundled deployments whose module has no on-disk location.
    strong_name:
        Optional signed identity used by the highest-priority hashing tier.
    """

    company: str | None = None
    product: str | None = None
    version: str | None = None
    namespace: str | None = None
    entry_type_name: str | None = None
    manifest_module_name: str = ""
    is_single_file: bool = False
    strong_name: StrongName | None = None
