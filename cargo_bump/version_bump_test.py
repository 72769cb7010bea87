import logging

import pytest
import tomlkit
from semver import Version

from cargo_bump.version_bump import (
    BumpType,
    bump,
    bump_manifest,
    bump_package_table,
    parse_version,
)

_versions = ["0.0.0", "1.2.3", "0.9.19", "10.0.1"]


@pytest.mark.parametrize("raw", _versions)
def test_bump_resets_lower_components(raw):
    old = Version.parse(raw)
    patch = bump(old, BumpType.PATCH)
    assert (patch.major, patch.minor, patch.patch) == (old.major, old.minor, old.patch + 1)
    minor = bump(old, BumpType.MINOR)
    assert (minor.major, minor.minor, minor.patch) == (old.major, old.minor + 1, 0)
    major = bump(old, BumpType.MAJOR)
    assert (major.major, major.minor, major.patch) == (old.major + 1, 0, 0)


def test_bump_drops_prerelease():
    assert str(bump(Version.parse("1.0.0-rc.1+build.5"), BumpType.PATCH)) == "1.0.1"


@pytest.mark.parametrize("raw", ["1.2", "v1.2.3", "", "1.2.3.4", "latest"])
def test_parse_version_invalid(raw):
    assert parse_version(raw) is None


def test_bump_package_table_in_place():
    package = {"name": "a", "version": "0.4.2"}
    assert bump_package_table(package, BumpType.MINOR) == Version(0, 5, 0)
    assert package == {"name": "a", "version": "0.5.0"}


@pytest.mark.parametrize("version", [3, True, ["1.0.0"], {"workspace": True}])
def test_bump_package_table_non_string(version):
    package = {"name": "a", "version": version}
    assert bump_package_table(package, BumpType.PATCH) is None
    assert package["version"] == version


_manifest = """\
[package]
name = "a"
# keep this comment
version = "1.9.9"  # trailing
"""


def test_bump_manifest_tomlkit_document_in_place():
    doc = tomlkit.parse(_manifest)
    assert str(bump_manifest(doc, BumpType.MINOR)) == "1.10.0"
    dumped = tomlkit.dumps(doc)
    assert 'version = "1.10.0"' in dumped
    assert "# keep this comment" in dumped


@pytest.mark.parametrize("doc", [{}, {"package": "a"}, {"package": {"name": "a"}}, []])
def test_bump_manifest_miss(doc):
    assert bump_manifest(doc, BumpType.PATCH) is None


def test_bump_manifest_miss_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="cargo_bump.version_bump"):
        assert bump_manifest({"package": {"name": "a"}}, BumpType.PATCH) is None
    assert "package.version" in caplog.text
