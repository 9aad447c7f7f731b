"""Merge a host address into the proxy exclusion list."""

import logging
from collections.abc import Sequence

from hostenv.config import NO_PROXY_VARS
from hostenv.environment import ProcessEnvironment

log = logging.getLogger(__name__)


def find_no_proxy(
    env: ProcessEnvironment, names: Sequence[str] = NO_PROXY_VARS
) -> tuple[str, str]:
    """Return the exclusion variable name and its current value.

    The first name with a non-empty value wins. When none is set the first
    name is returned with an empty value.
    """
    for name in names:
        value, present = env.get(name)
        if present and value:
            log.debug("found existing %s=%r", name, value)
            return name, value
    log.debug("no proxy exclusion variable set, defaulting to %s", names[0])
    return names[0], ""


def merge(existing: str, host_address: str) -> str:
    """Append ``host_address`` to a comma-separated list unless already listed."""
    if not existing:
        return host_address
    entries = existing.split(",")
    if host_address not in entries:
        entries.append(host_address)
    return ",".join(entries)
