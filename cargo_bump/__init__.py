from cargo_bump.errors import LoadError, PersistError
from cargo_bump.manifests import WorkspaceManifests
from cargo_bump.settings import BumpSettings
from cargo_bump.version_bump import BumpType
from cargo_bump.workspace import CargoMetadata, CargoPackage, discover

VERSION = "0.1.0"
__all__ = (
    "BumpSettings",
    "BumpType",
    "CargoMetadata",
    "CargoPackage",
    "LoadError",
    "PersistError",
    "WorkspaceManifests",
    "discover",
)
