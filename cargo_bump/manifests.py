from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from semver import Version
from tomlkit import TOMLDocument

from cargo_bump.errors import LoadError, PersistError
from cargo_bump.raw_value import PACKAGE_KEY, manifest_version
from cargo_bump.settings import BumpSettings
from cargo_bump.toml_doc import dump_manifest, read_manifest
from cargo_bump.version_bump import BumpType, bump_manifest
from cargo_bump.workspace import CargoPackage, Discover, cargo_discover

logger = logging.getLogger(__name__)


@dataclass
class WorkspaceManifests:
    """The raw Cargo.toml documents of every workspace member.

    `documents` is keyed by package id and always holds exactly the ids in `packages`.
    Name lookups resolve to the first package in discovery order.
    """

    project_root: Path
    packages: tuple[CargoPackage, ...]
    documents: dict[str, TOMLDocument] = field(default_factory=dict)

    def __post_init__(self):
        package_ids = {package.id for package in self.packages}
        assert package_ids == set(self.documents), (
            f"packages and documents out of sync: {sorted(package_ids ^ set(self.documents))}"
        )

    @classmethod
    def from_dir(
        cls,
        project_root: Path,
        *,
        discover: Discover | None = None,
        settings: BumpSettings | None = None,
    ) -> WorkspaceManifests:
        project_root = Path(project_root)
        discover = discover or cargo_discover(settings or BumpSettings.from_env())
        try:
            packages = tuple(discover(project_root))
        except Exception as e:
            raise LoadError(project_root, f"workspace inspection failed: {e!r}") from e
        documents: dict[str, TOMLDocument] = {}
        for package in packages:
            path = package.manifest_path
            try:
                documents[package.id] = read_manifest(path)
            except (OSError, ValueError) as e:
                raise LoadError(project_root, f"invalid manifest {path}: {e!r}") from e
            logger.debug(f"loaded manifest for {package.name} @ {path}")
        logger.info(f"loaded {len(packages)} manifests from {project_root}")
        return cls(project_root=project_root, packages=packages, documents=documents)

    def package_id(self, name: str) -> str | None:
        return next((p.id for p in self.packages if p.name == name), None)

    def package_names(self) -> list[str]:
        return [package.name for package in self.packages]

    def current_version(self, name: str) -> str | None:
        package_id = self.package_id(name)
        if package_id is None:
            return None
        return manifest_version(self.documents[package_id])

    def versions(self) -> dict[str, str | None]:
        versions: dict[str, str | None] = {}
        for package in self.packages:
            if package.name not in versions:
                versions[package.name] = manifest_version(self.documents[package.id])
        return versions

    def bump_version(self, name: str, bump_type: BumpType) -> Version | None:
        """Bump the package with the given name, return the new version.

        None when the name is unknown or the manifest has no semver `package.version`.
        """
        package_id = self.package_id(name)
        if package_id is None:
            logger.debug(f"no package named {name}")
            return None
        old_version = manifest_version(self.documents[package_id])
        new_version = bump_manifest(self.documents[package_id], bump_type)
        if new_version is not None:
            logger.info(f"{name}: {old_version} -> {new_version}")
        return new_version

    def bump_patch_version(self, name: str) -> Version | None:
        return self.bump_version(name, BumpType.PATCH)

    def bump_minor_version(self, name: str) -> Version | None:
        return self.bump_version(name, BumpType.MINOR)

    def bump_major_version(self, name: str) -> Version | None:
        return self.bump_version(name, BumpType.MAJOR)

    def bump_all_versions(self, bump_type: BumpType = BumpType.PATCH) -> None:
        for package in self.packages:
            new_version = bump_manifest(self.documents[package.id], bump_type)
            if new_version is None:
                logger.debug(f"{package.name}: no {PACKAGE_KEY}.version to bump")
            else:
                logger.info(f"{package.name}: bumped to {new_version}")

    def bump_all_patch_versions(self) -> None:
        self.bump_all_versions(BumpType.PATCH)

    def dump(self) -> None:
        """Write every manifest back to disk, including the unchanged ones.

        All documents are serialized before the first write, a failing write can
        still leave earlier manifests updated.
        """
        rendered: list[tuple[Path, str]] = []
        for package in self.packages:
            path = package.manifest_path
            try:
                rendered.append((path, dump_manifest(self.documents[package.id])))
            except (TypeError, ValueError) as e:
                raise PersistError(path, f"serialize failed: {e!r}") from e
        for path, text in rendered:
            try:
                path.write_text(text, encoding="utf-8")
            except OSError as e:
                raise PersistError(path, f"write failed: {e!r}") from e
            logger.debug(f"wrote {path}")
        logger.info(f"wrote {len(rendered)} manifests")
