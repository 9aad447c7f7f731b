"""Check that a host's daemon can be reached with its recorded settings."""

import logging
import os
import socket
from typing import Protocol
from urllib.parse import urlsplit, urlunsplit

from hostenv.errors import HostConnectionError
from hostenv.models import DEFAULT_CONNECT_TIMEOUT, HostRecord, HostState, TLSOptions

log = logging.getLogger(__name__)


class ConnectionResolver(Protocol):
    def check(self, host: HostRecord, swarm: bool) -> tuple[str, TLSOptions | None]: ...


class DaemonConnectionChecker:
    """Resolve the daemon URL for a running host and probe its TCP port."""

    def __init__(self, timeout: float = DEFAULT_CONNECT_TIMEOUT) -> None:
        self.timeout = timeout

    def check(self, host: HostRecord, swarm: bool) -> tuple[str, TLSOptions | None]:
        if host.state is not HostState.RUNNING:
            raise HostConnectionError(
                f"{host.name} is not running. Please start it in order to use "
                "the connection settings."
            )
        if not host.url:
            raise HostConnectionError(f"{host.name} has no daemon URL recorded")

        url = _swarm_url(host) if swarm else host.url
        if host.tls is not None:
            _check_tls_files(host.name, host.tls)

        parts = urlsplit(url)
        if parts.scheme != "tcp" or not parts.hostname or parts.port is None:
            raise HostConnectionError(f"Invalid daemon URL for {host.name}: {url!r}")
        self._probe(host.name, parts.hostname, parts.port)
        log.debug("daemon for %s reachable at %s", host.name, url)
        return url, host.tls

    def _probe(self, name: str, hostname: str, port: int) -> None:
        try:
            with socket.create_connection((hostname, port), timeout=self.timeout):
                pass
        except OSError as e:
            raise HostConnectionError(
                f"Error connecting to {name} at {hostname}:{port}: {e}"
            ) from e


def _swarm_url(host: HostRecord) -> str:
    """Return the daemon URL with its port swapped for the swarm manager's."""
    if host.swarm is None or not host.swarm.master:
        raise HostConnectionError(
            f"{host.name!r} is not a swarm master. The --swarm flag is intended "
            "for use with swarm masters"
        )
    swarm_port = urlsplit(host.swarm.host).port
    if swarm_port is None:
        raise HostConnectionError(f"Invalid swarm host for {host.name}: {host.swarm.host!r}")
    parts = urlsplit(host.url)
    hostname = parts.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    return urlunsplit(parts._replace(netloc=f"{hostname}:{swarm_port}"))


def _check_tls_files(name: str, tls: TLSOptions) -> None:
    for path in (tls.ca_cert_path, tls.client_cert_path, tls.client_key_path):
        if not os.path.isfile(path):
            raise HostConnectionError(f"TLS material for {name} is missing: {path}")
