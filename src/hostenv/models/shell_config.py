"""Finished shell configuration produced for one invocation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShellConfig:
    """Environment directives for one shell, plus the hint on how to apply them.

    ``prefix``, ``delimiter`` and ``suffix`` render a single variable: an
    assignment in set mode, a removal in unset mode. Host fields are only
    populated in set mode.
    """

    prefix: str
    delimiter: str
    suffix: str
    usage_hint: str
    docker_cert_path: str | None = None
    docker_host: str | None = None
    docker_tls_verify: str | None = None
    machine_name: str | None = None
    no_proxy_var: str | None = None
    no_proxy_value: str | None = None

    def __post_init__(self) -> None:
        if (self.no_proxy_var is None) != (self.no_proxy_value is None):
            raise ValueError("no_proxy_var and no_proxy_value must be set together")
