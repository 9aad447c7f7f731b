"""Build the shell configuration for the ``env`` command."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from hostenv.config import NO_PROXY_VARS
from hostenv.connection import ConnectionResolver
from hostenv.environment import ProcessEnvironment
from hostenv.errors import ImproperArgsError, ImproperUnsetArgsError
from hostenv.models import ShellConfig
from hostenv.proxy import find_no_proxy, merge
from hostenv.registry import HostRegistry
from hostenv.shell import UsageHintGenerator, detect_shell, lookup

log = logging.getLogger(__name__)


@dataclass
class CommandLine:
    """Parsed ``env`` invocation."""

    args: list[str] = field(default_factory=list)
    shell: str = ""
    no_proxy: bool = False
    swarm: bool = False
    invoked: Sequence[str] = ()


class ConfigurationBuilder:
    """Resolve a host into a ShellConfig, or produce the config that undoes it."""

    def __init__(
        self,
        machine_dir: Path,
        resolver: ConnectionResolver,
        hint_generator: UsageHintGenerator,
        env: ProcessEnvironment | None = None,
        no_proxy_vars: Sequence[str] = NO_PROXY_VARS,
    ) -> None:
        self.machine_dir = machine_dir
        self.resolver = resolver
        self.hint_generator = hint_generator
        self.env = env or ProcessEnvironment()
        self.no_proxy_vars = no_proxy_vars

    def _user_shell(self, requested: str) -> str:
        if requested:
            return requested
        value, _ = self.env.get("SHELL")
        return detect_shell({"SHELL": value} if value else {})

    def build_set(self, command_line: CommandLine, registry: HostRegistry) -> ShellConfig:
        if len(command_line.args) != 1:
            raise ImproperArgsError()

        name = command_line.args[0]
        host = registry.find(name)
        docker_host, tls_options = self.resolver.check(host, command_line.swarm)
        log.debug("host=%s url=%s tls=%s", name, docker_host, tls_options is not None)

        no_proxy_var = no_proxy_value = None
        if command_line.no_proxy:
            no_proxy_var, existing = find_no_proxy(self.env, self.no_proxy_vars)
            no_proxy_value = merge(existing, host.get_ip())

        user_shell = self._user_shell(command_line.shell)
        syntax = lookup(user_shell)
        return ShellConfig(
            prefix=syntax.prefix,
            delimiter=syntax.delimiter,
            suffix=syntax.suffix,
            usage_hint=self.hint_generator.generate(user_shell, command_line.invoked),
            docker_cert_path=str(self.machine_dir / name),
            docker_host=docker_host,
            docker_tls_verify="1",
            machine_name=name,
            no_proxy_var=no_proxy_var,
            no_proxy_value=no_proxy_value,
        )

    def build_unset(self, command_line: CommandLine) -> ShellConfig:
        # Any proxy exclusion value that predates the set call is left as is.
        if command_line.args:
            raise ImproperUnsetArgsError()

        user_shell = self._user_shell(command_line.shell)
        syntax = lookup(user_shell, unset=True)
        return ShellConfig(
            prefix=syntax.prefix,
            delimiter=syntax.delimiter,
            suffix=syntax.suffix,
            usage_hint=self.hint_generator.generate(user_shell, command_line.invoked),
        )
