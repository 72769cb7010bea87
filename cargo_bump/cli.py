"""CLI commands for cargo-bump."""

import logging
from pathlib import Path

import typer
from typer import Typer

from cargo_bump.manifests import WorkspaceManifests
from cargo_bump.settings import BumpSettings
from cargo_bump.version_bump import BumpType

logger = logging.getLogger(__name__)
app = Typer(name="cargo-bump", help="Bump package versions in a Cargo workspace")

option_root = typer.Option(
    ...,
    "-r",
    "--root",
    default_factory=Path.cwd,
    help="Workspace root, the directory `cargo metadata` runs in",
)
option_level = typer.Option(
    BumpType.PATCH,
    "-l",
    "--level",
    help="Which semver component to increment",
)
option_dry_run = typer.Option(
    False,
    "--dry-run",
    help="Bump in memory only, the manifests are not written",
)


def load_manifests(root: Path) -> WorkspaceManifests:
    return WorkspaceManifests.from_dir(root, settings=BumpSettings.from_env())


@app.command()
def bump(
    name: str = typer.Argument(..., help="Package name as declared in Cargo.toml"),
    root: Path = option_root,
    level: BumpType = option_level,
    dry_run: bool = option_dry_run,
):
    manifests = load_manifests(root)
    new_version = manifests.bump_version(name, level)
    if new_version is None:
        typer.echo(f"no semver version found for package: {name}", err=True)
        raise typer.Exit(1)
    if not dry_run:
        manifests.dump()
    typer.echo(str(new_version))


@app.command("bump-all")
def bump_all(
    root: Path = option_root,
    level: BumpType = option_level,
    dry_run: bool = option_dry_run,
):
    manifests = load_manifests(root)
    manifests.bump_all_versions(level)
    if not dry_run:
        manifests.dump()
    for name, version in manifests.versions().items():
        typer.echo(f"{name} {version or '-'}")


@app.command()
def show(root: Path = option_root):
    manifests = load_manifests(root)
    for name, version in manifests.versions().items():
        typer.echo(f"{name} {version or '-'}")


def main():
    from ask_shell.typer_command import configure_logging

    configure_logging(app)
    app()
