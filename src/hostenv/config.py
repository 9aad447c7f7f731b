"""Configuration loading for hostenv."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from hostenv.models import DEFAULT_CONNECT_TIMEOUT, DEFAULT_STORAGE_DIR, HostEnvConfig

log = logging.getLogger(__name__)

STORAGE_PATH_ENV = "HOSTENV_STORAGE_PATH"
CONNECT_TIMEOUT_ENV = "HOSTENV_CONNECT_TIMEOUT"

# Checked in order; the first one holding a non-empty value wins.
NO_PROXY_VARS = ("NO_PROXY", "no_proxy")


def load_config(environ: Mapping[str, str] | None = None) -> HostEnvConfig:
    """Build the runtime configuration from environment overrides."""
    env = os.environ if environ is None else environ
    storage = env.get(STORAGE_PATH_ENV, "").strip()
    timeout = env.get(CONNECT_TIMEOUT_ENV, "").strip()
    try:
        config = HostEnvConfig(
            storage_path=Path(storage).expanduser() if storage else DEFAULT_STORAGE_DIR,
            connect_timeout=timeout or DEFAULT_CONNECT_TIMEOUT,
        )
    except ValidationError as e:
        raise ValueError(f"Invalid {CONNECT_TIMEOUT_ENV} value {timeout!r}") from e
    log.debug("storage_path=%s connect_timeout=%s", config.storage_path, config.connect_timeout)
    return config
