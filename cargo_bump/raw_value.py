"""Fallible accessors for the untyped manifest tree.

A parsed manifest is a tree of tables, arrays and scalars. Only the
`package.version` path is known, every accessor returns None on a type mismatch
instead of raising so navigation never needs the full manifest schema.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

PACKAGE_KEY = "package"
VERSION_KEY = "version"


def as_table(value: Any) -> MutableMapping[str, Any] | None:
    if isinstance(value, MutableMapping):
        return value
    return None


def as_str(value: Any) -> str | None:
    if isinstance(value, str):
        return str(value)
    return None


def get_table(table: MutableMapping[str, Any] | None, key: str) -> MutableMapping[str, Any] | None:
    if table is None:
        return None
    return as_table(table.get(key))


def manifest_version_table(doc: Any) -> MutableMapping[str, Any] | None:
    """
    >>> manifest_version_table({"package": {"name": "a", "version": "0.1.0"}})
    {'name': 'a', 'version': '0.1.0'}
    >>> manifest_version_table({"package": {"name": "a"}}) is None
    True
    >>> manifest_version_table({"package": "a"}) is None
    True
    """
    package = get_table(as_table(doc), PACKAGE_KEY)
    if package is None or VERSION_KEY not in package:
        return None
    return package


def manifest_version(doc: Any) -> str | None:
    if package := manifest_version_table(doc):
        return as_str(package[VERSION_KEY])
    return None
