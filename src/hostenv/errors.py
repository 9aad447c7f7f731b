"""Exceptions raised while resolving a host environment."""


class HostEnvError(Exception):
    """Base class for all hostenv errors."""


class ImproperArgsError(HostEnvError):
    def __init__(self) -> None:
        super().__init__("Expected one machine name as an argument")


class ImproperUnsetArgsError(HostEnvError):
    def __init__(self) -> None:
        super().__init__("Expected no machine name when the -u flag is present")


class HostLookupError(HostEnvError):
    """The host registry could not produce a host record."""


class HostNotFoundError(HostLookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Host does not exist: {name!r}")
        self.name = name


class InvalidHostRecordError(HostLookupError):
    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Host {name!r} has an unreadable record: {reason}")
        self.name = name


class HostStateError(HostEnvError):
    """The host record lacks something the requested operation needs."""


class HostConnectionError(HostEnvError):
    """The host's daemon cannot be used with the current settings."""
