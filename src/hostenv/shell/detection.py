"""Shell detection for the auto (empty) shell id."""

import logging
import os
from collections.abc import Mapping

log = logging.getLogger(__name__)


def _classify_shell(candidate: str) -> str:
    """Return the shell id for a shell executable name or path."""
    name = os.path.basename(candidate.replace("\\", "/")).lower()
    if name.endswith(".exe"):
        name = name[: -len(".exe")]
    if name == "fish":
        return "fish"
    if name in {"pwsh", "powershell"}:
        return "powershell"
    if name == "cmd":
        return "cmd"
    return name


def detect_shell(environ: Mapping[str, str] | None = None, os_name: str | None = None) -> str:
    """Guess the user's shell id from ``SHELL``.

    Bash-like shells keep their own name, which selects the default dialect.
    Without ``SHELL``, Windows falls back to cmd and everything else to the
    default dialect.
    """
    env = os.environ if environ is None else environ
    env_shell = env.get("SHELL", "").strip()
    if env_shell:
        shell = _classify_shell(env_shell)
        log.debug("detected shell %r from SHELL=%s", shell, env_shell)
        return shell
    if (os.name if os_name is None else os_name) == "nt":
        log.debug("SHELL unset on Windows, using cmd")
        return "cmd"
    log.debug("SHELL unset, using default shell dialect")
    return ""
