from pathlib import Path


class LoadError(Exception):
    def __init__(self, project_root: Path, reason: str):
        self.project_root = project_root
        self.reason = reason
        super().__init__(f"Could not load workspace @ {project_root}: {reason}")


class PersistError(Exception):
    def __init__(self, manifest_path: Path, reason: str):
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"Could not write manifest @ {manifest_path}: {reason}")
