"""Host lookup by name."""

import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from hostenv.errors import HostLookupError, HostNotFoundError, InvalidHostRecordError
from hostenv.models import HostRecord

log = logging.getLogger(__name__)

HOST_CONFIG_FILE = "config.json"


class HostRegistry(Protocol):
    def find(self, name: str) -> HostRecord: ...


class FileHostRegistry:
    """Read host records from ``<machine_dir>/<name>/config.json``."""

    def __init__(self, machine_dir: Path) -> None:
        self.machine_dir = machine_dir

    def find(self, name: str) -> HostRecord:
        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            raise HostLookupError(f"Invalid host name: {name!r}")
        path = self.machine_dir / name / HOST_CONFIG_FILE
        try:
            with open(path, encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise HostNotFoundError(name) from e
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidHostRecordError(name, str(e)) from e

        if not isinstance(payload, dict):
            raise InvalidHostRecordError(name, "expected a JSON object")
        payload.setdefault("name", name)
        try:
            host = HostRecord.model_validate(payload)
        except ValidationError as e:
            raise InvalidHostRecordError(name, str(e)) from e
        log.debug("loaded host %s from %s", host.name, path)
        return host
