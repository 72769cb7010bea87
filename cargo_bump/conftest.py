from dataclasses import dataclass, field
from pathlib import Path

import pytest
from zero_3rdparty.file_utils import ensure_parents_write_text

from cargo_bump.manifests import WorkspaceManifests
from cargo_bump.workspace import CargoPackage


def cargo_toml(name: str, version: str | None = "0.1.0", extra: str = "") -> str:
    version_line = f'version = "{version}"\n' if version is not None else ""
    return f'[package]\nname = "{name}"\n{version_line}edition = "2021"\n{extra}'


@dataclass
class FakeWorkspace:
    root: Path
    packages: list[CargoPackage] = field(default_factory=list)

    def add(self, name: str, manifest_text: str, dir_name: str = "") -> CargoPackage:
        member_dir = self.root / (dir_name or name)
        manifest_path = member_dir / "Cargo.toml"
        ensure_parents_write_text(manifest_path, manifest_text)
        package = CargoPackage(
            name=name,
            id=f"path+file://{member_dir}#{name}",
            manifest_path=manifest_path,
        )
        self.packages.append(package)
        return package

    def discover(self, project_root: Path) -> list[CargoPackage]:
        assert project_root == self.root
        return list(self.packages)

    def load(self) -> WorkspaceManifests:
        return WorkspaceManifests.from_dir(self.root, discover=self.discover)


@pytest.fixture()
def workspace(tmp_path) -> FakeWorkspace:
    return FakeWorkspace(tmp_path)
