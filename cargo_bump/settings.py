from typing import Self

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BumpSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CARGO_BUMP_")

    cargo_bin: str = Field(
        default="cargo",
        description="Executable used to run `cargo metadata`.",
    )
    metadata_timeout: float = Field(
        default=60,
        description="Seconds to wait for `cargo metadata` to complete.",
    )
    offline: bool = Field(
        default=False,
        description="Pass --offline to cargo, no registry access during inspection.",
    )

    @classmethod
    def from_env(cls, **kwargs) -> Self:
        return cls(**kwargs)

    def metadata_command(self) -> str:
        command = f"{self.cargo_bin} metadata --format-version 1 --no-deps"
        if self.offline:
            command += " --offline"
        return command
