"""`hostenv env` command implementation."""

import argparse
import logging
import sys
from collections.abc import Sequence

from hostenv.builder import CommandLine, ConfigurationBuilder
from hostenv.config import load_config
from hostenv.connection import DaemonConnectionChecker
from hostenv.environment import ProcessEnvironment
from hostenv.errors import HostEnvError
from hostenv.registry import FileHostRegistry
from hostenv.shell import EnvUsageHintGenerator, render

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the env command."""
    parser = argparse.ArgumentParser(
        prog="hostenv env",
        description="Display the commands to set up the environment for the docker client",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--shell",
        default="",
        help="Force environment to be configured for a specified shell: "
        "[fish, cmd, powershell], default is auto-detect",
    )
    parser.add_argument(
        "-u",
        "--unset",
        action="store_true",
        help="Unset variables instead of setting them",
    )
    parser.add_argument(
        "--no-proxy",
        action="store_true",
        help="Add machine IP to NO_PROXY environment variable",
    )
    parser.add_argument(
        "--swarm",
        action="store_true",
        help="Display the Swarm config instead of the Docker daemon",
    )
    parser.add_argument("host", nargs="*", help="Machine name")
    return parser


def run(argv: list[str], invoked: Sequence[str] | None = None) -> int:
    """Execute the env command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    command_line = CommandLine(
        args=list(args.host),
        shell=args.shell,
        no_proxy=args.no_proxy,
        swarm=args.swarm,
        invoked=list(sys.argv if invoked is None else invoked),
    )

    try:
        config = load_config()
        builder = ConfigurationBuilder(
            machine_dir=config.machine_dir,
            resolver=DaemonConnectionChecker(timeout=config.connect_timeout),
            hint_generator=EnvUsageHintGenerator(),
            env=ProcessEnvironment(),
        )
        if args.unset:
            shell_cfg = builder.build_unset(command_line)
        else:
            shell_cfg = builder.build_set(command_line, FileHostRegistry(config.machine_dir))
    except (HostEnvError, ValueError) as e:
        log.debug("env failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(render(shell_cfg))
    return 0
