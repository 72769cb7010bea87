"""Workspace inspection through `cargo metadata`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, TypeAlias

from ask_shell import run_and_wait
from model_lib.model_base import Entity
from pydantic import Field

from cargo_bump.settings import BumpSettings

logger = logging.getLogger(__name__)


class CargoPackage(Entity):
    name: str
    id: str
    version: str = ""
    manifest_path: Path


class CargoMetadata(Entity):
    packages: list[CargoPackage] = Field(default_factory=list)
    workspace_members: list[str] = Field(default_factory=list)
    workspace_root: Path | None = None

    def members(self) -> list[CargoPackage]:
        """Workspace members in the order cargo listed the packages."""
        if not self.workspace_members:
            return list(self.packages)
        member_ids = set(self.workspace_members)
        return [package for package in self.packages if package.id in member_ids]


Discover: TypeAlias = Callable[[Path], list[CargoPackage]]


def parse_metadata(raw_json: str) -> CargoMetadata:
    return CargoMetadata.model_validate_json(raw_json)


def discover(project_root: Path, settings: BumpSettings | None = None) -> list[CargoPackage]:
    settings = settings or BumpSettings.from_env()
    run = run_and_wait(
        settings.metadata_command(),
        timeout=settings.metadata_timeout,
        cwd=project_root,
    )
    metadata = parse_metadata(run.stdout)
    members = metadata.members()
    logger.debug(f"found {len(members)} workspace members @ {metadata.workspace_root}")
    return members


def cargo_discover(settings: BumpSettings) -> Discover:
    def _discover(project_root: Path) -> list[CargoPackage]:
        return discover(project_root, settings)

    return _discover
