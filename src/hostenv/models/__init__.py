"""Model package for hostenv."""

from hostenv.models.host import HostRecord, HostState, SwarmOptions, TLSOptions
from hostenv.models.hostenv_config import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_STORAGE_DIR,
    HostEnvConfig,
)
from hostenv.models.shell_config import ShellConfig

__all__ = [
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_STORAGE_DIR",
    "HostEnvConfig",
    "HostRecord",
    "HostState",
    "ShellConfig",
    "SwarmOptions",
    "TLSOptions",
]
