"""Host record models as stored by the host registry."""

from enum import Enum

from pydantic import BaseModel

from hostenv.errors import HostStateError


class HostState(str, Enum):
    NONE = ""
    RUNNING = "Running"
    PAUSED = "Paused"
    SAVED = "Saved"
    STOPPED = "Stopped"
    STOPPING = "Stopping"
    STARTING = "Starting"
    ERROR = "Error"
    TIMEOUT = "Timeout"


class TLSOptions(BaseModel):
    """Paths to the client TLS material used to talk to a host's daemon."""

    ca_cert_path: str
    client_cert_path: str
    client_key_path: str


class SwarmOptions(BaseModel):
    master: bool = False
    host: str = ""


class HostRecord(BaseModel):
    """A single container host known to the registry."""

    name: str
    driver_name: str = "none"
    state: HostState = HostState.NONE
    ip_address: str | None = None
    url: str | None = None
    swarm: SwarmOptions | None = None
    tls: TLSOptions | None = None

    def get_ip(self) -> str:
        """Return the network-reachable IP of the host."""
        if not self.ip_address:
            raise HostStateError(f"Host {self.name!r} has no IP address")
        return self.ip_address
