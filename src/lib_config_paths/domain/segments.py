"""Path segment helpers shared by the resolver.

Purpose
-------
Turn arbitrary identity strings (company names, product names, versions) into
legal directory names and join path fragments without ever producing a partial
path.

Contents
--------
* :data:`MAX_SEGMENT_LENGTH` – cap applied by :func:`sanitize` when requested.
* :data:`INVALID_FILENAME_CHARS` – characters replaced by ``_``.
* :func:`sanitize` – make a string usable as a single path segment.
* :func:`combine_if_valid` – join two fragments, ``None`` if either is missing.

System Role
-----------
Pure functions without I/O; the resolver composes them into the
``<company>/<name><hash>/<version>`` directory suffix.
"""

from __future__ import annotations

import os
from types import ModuleType
from typing import Final

MAX_SEGMENT_LENGTH: Final[int] = 25

# Windows rejects the widest set, so it is applied everywhere to keep suffixes
# portable between machines sharing a roaming profile.
INVALID_FILENAME_CHARS: Final[frozenset[str]] = frozenset('"<>|:*?\\/' + "".join(chr(code) for code in range(32)))


def sanitize(value: str | None, limit_length: bool) -> str | None:
    """Return *value* with every illegal filename character replaced by ``_``.

    Why
    ----
    Company and product names come from free-form metadata and routinely
    contain characters that cannot appear in a directory name.

    What
    ----
    Replaces characters from :data:`INVALID_FILENAME_CHARS` and spaces with
    ``_``. When *limit_length* is true the result is cut to
    :data:`MAX_SEGMENT_LENGTH` characters. ``None`` and ``""`` pass through.

    Examples
    --------
    >>> sanitize("My:Company*Name", limit_length=True)
    'My_Company_Name'
    >>> sanitize("Contoso Widgets", limit_length=False)
    'Contoso_Widgets'
    >>> len(sanitize("x" * 40, limit_length=True))
    25
    >>> sanitize("", limit_length=True)
    ''
    """

    if not value:
        return value
    cleaned = "".join("_" if char in INVALID_FILENAME_CHARS or char == " " else char for char in value)
    if limit_length:
        cleaned = cleaned[:MAX_SEGMENT_LENGTH]
    return cleaned


def combine_if_valid(first: str | None, second: str | None, *, pathmod: ModuleType = os.path) -> str | None:
    """Join *first* and *second* or return ``None`` when either is missing.

    Examples
    --------
    >>> import posixpath
    >>> combine_if_valid("/data", "Acme", pathmod=posixpath)
    '/data/Acme'
    >>> combine_if_valid("C:\\\\data", None) is None
    True
    """

    if first is None or second is None:
        return None
    return pathmod.join(first, second)
