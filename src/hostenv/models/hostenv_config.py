"""Configuration model for hostenv."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_STORAGE_DIR = Path.home() / ".hostenv"
DEFAULT_CONNECT_TIMEOUT = 5.0


class HostEnvConfig(BaseModel):
    """Runtime configuration for hostenv."""

    storage_path: Path = DEFAULT_STORAGE_DIR
    connect_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0)

    @property
    def machine_dir(self) -> Path:
        """Directory holding one subdirectory per host (config and TLS material)."""
        return self.storage_path / "machines"
