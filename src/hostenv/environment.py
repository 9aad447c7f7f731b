"""Read-only access to the process environment."""

import os
from collections.abc import Mapping


class ProcessEnvironment:
    """Look up variables in a mapping, ``os.environ`` unless one is given."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> tuple[str, bool]:
        """Return ``(value, present)`` for a case-sensitive variable name."""
        if name in self._environ:
            return self._environ[name], True
        return "", False
