from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, Callable

from semver import Version
from zero_3rdparty.enum_utils import StrEnum

from cargo_bump.raw_value import VERSION_KEY, as_str, manifest_version_table

logger = logging.getLogger(__name__)


class BumpType(StrEnum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


_bumps: dict[BumpType, Callable[[Version], Version]] = {
    BumpType.MAJOR: Version.bump_major,
    BumpType.MINOR: Version.bump_minor,
    BumpType.PATCH: Version.bump_patch,
}
# fail at import if a BumpType is added without a bump method
_missing_bumps = [bump for bump in list(BumpType) if bump not in _bumps]
assert not _missing_bumps, f"missing bump method for BumpType: {_missing_bumps}"


def parse_version(raw: str) -> Version | None:
    try:
        return Version.parse(raw)
    except ValueError:
        return None


def bump(version: Version, bump_type: BumpType) -> Version:
    """
    >>> str(bump(Version.parse("1.2.3"), BumpType.MINOR))
    '1.3.0'
    """
    return _bumps[bump_type](version)


def bump_package_table(
    package: MutableMapping[str, Any], bump_type: BumpType
) -> Version | None:
    """Replace package['version'] in place, None when the value is not a semver string."""
    raw_version = as_str(package.get(VERSION_KEY))
    if raw_version is None:
        logger.debug(f"skipping non-string version: {package.get(VERSION_KEY)!r}")
        return None
    old_version = parse_version(raw_version)
    if old_version is None:
        logger.debug(f"skipping invalid semver: {raw_version!r}")
        return None
    new_version = bump(old_version, bump_type)
    package[VERSION_KEY] = str(new_version)
    return new_version


def bump_manifest(doc: Any, bump_type: BumpType) -> Version | None:
    package = manifest_version_table(doc)
    if package is None:
        logger.debug("skipping manifest without a package.version key")
        return None
    return bump_package_table(package, bump_type)


__all__ = [
    "BumpType",
    "bump",
    "bump_manifest",
    "bump_package_table",
    "parse_version",
]
