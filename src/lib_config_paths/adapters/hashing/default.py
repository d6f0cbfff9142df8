"""Identity hashing adapter.

Purpose
-------
Implement the :class:`lib_config_paths.application.ports.IdentityHasher`
protocol: derive a short, path-safe, collision-resistant tag from the
strongest identity signal available so two applications sharing a company
and product name still land in different directories.

Key behaviours
--------------
* Tiers are tried in priority order: ``StrongName`` → ``Url`` → ``Path``.
* Each tier yields ``_<Kind>_<hash>``; the hash is a SHA-1 digest rendered in
  a lower-case base32 alphabet that is safe on case-insensitive filesystems.
* URIs are lower-cased before hashing; strong names and paths are hashed as
  given.
* Missing digest support is a normal branch (:meth:`supports_hashing`), never
  an exception that reaches the caller.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Callable, Final, Sequence

from ...domain.identity import StrongName
from ...observability import log_debug

STRONG_NAME_KIND: Final[str] = "StrongName"
URL_KIND: Final[str] = "Url"
PATH_KIND: Final[str] = "Path"

_RFC4648_ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_DIR_SAFE_ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz012345"
_TO_DIR_SAFE: Final[dict[int, int]] = str.maketrans(_RFC4648_ALPHABET, _DIR_SAFE_ALPHABET)


def to_dir_safe_base32(digest: bytes) -> str:
    """Encode *digest* with the lower-case, padding-free base32 alphabet.

    Examples
    --------
    >>> to_dir_safe_base32(bytes(5))
    'aaaaaaaa'
    >>> to_dir_safe_base32(b"\\xff" * 5)
    '55555555'
    """

    encoded = base64.b32encode(digest).decode("ascii").rstrip("=")
    return encoded.translate(_TO_DIR_SAFE)


class DefaultIdentityHasher:
    """Hash identity candidates with SHA-1 (or an injected algorithm).

    Parameters
    ----------
    algorithm:
        :mod:`hashlib` algorithm name. Tests pass an unavailable name to
        simulate platforms without digest support.
    """

    def __init__(self, *, algorithm: str = "sha1") -> None:
        self.algorithm = algorithm

    def supports_hashing(self) -> bool:
        """Return ``True`` when :mod:`hashlib` offers :attr:`algorithm`."""

        return self.algorithm in hashlib.algorithms_available

    def compute_suffix(
        self,
        *,
        strong_name: StrongName | None = None,
        code_base_uri: str | None = None,
        fallback_path: str | None = None,
    ) -> str | None:
        """Return ``_<Kind>_<hash>`` for the first candidate that hashes.

        Why
        ----
        The strongest available identity decides the directory, so a signed
        application keeps its settings when it is moved on disk.

        Returns
        -------
        str | None
            Suffix such as ``"_Url_<32 chars>"`` or ``None`` when no candidate
            is present or hashing is unsupported for every tier.

        Examples
        --------
        >>> hasher = DefaultIdentityHasher()
        >>> hasher.compute_suffix(code_base_uri="file:///opt/demo/app.py").startswith("_Url_")
        True
        >>> hasher.compute_suffix() is None
        True
        """

        tiers: Sequence[tuple[str, bool, Callable[[], str | None]]] = (
            (
                STRONG_NAME_KIND,
                strong_name is not None and strong_name.is_present,
                lambda: self.strong_name_hash(strong_name),  # type: ignore[arg-type]
            ),
            (URL_KIND, bool(code_base_uri), lambda: self.uri_hash(code_base_uri or "")),
            (PATH_KIND, bool(fallback_path), lambda: self.path_hash(fallback_path or "")),
        )
        for kind, present, produce in tiers:
            if not present:
                continue
            digest = produce()
            if digest:
                return f"_{kind}_{digest}"
        return None

    def strong_name_hash(self, strong_name: StrongName) -> str | None:
        """Hash the canonical display name of *strong_name*."""

        return self._hash(strong_name.display_name())

    def uri_hash(self, uri: str) -> str | None:
        """Hash *uri* after lower-casing it so casing variants collide."""

        return self._hash(uri.lower())

    def path_hash(self, path: str) -> str | None:
        """Hash *path* verbatim."""

        return self._hash(path)

    def _hash(self, text: str) -> str | None:
        if not self.supports_hashing():
            log_debug("hashing_unsupported", algorithm=self.algorithm, reason="unavailable")
            return None
        try:
            digest = hashlib.new(self.algorithm, text.encode("utf-8"), usedforsecurity=False).digest()
        except ValueError as exc:  # restricted OpenSSL builds refuse legacy digests
            log_debug("hashing_unsupported", algorithm=self.algorithm, reason=str(exc))
            return None
        return to_dir_safe_base32(digest)
