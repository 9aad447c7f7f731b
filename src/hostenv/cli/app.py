"""Top-level CLI router."""

import argparse
import os
import sys

from hostenv import __version__

from . import env as env_cmd


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hostenv",
        description="Point a local docker client at a remote container host",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("command", choices=["env"], help="Command to run")
    return parser


def _invoked_command() -> list[str]:
    """Return the command line as the user can re-run it."""
    if os.path.basename(sys.argv[0]) == "__main__.py":
        return [sys.executable, "-m", "hostenv", *sys.argv[1:]]
    return list(sys.argv)


def main(argv: list[str] | None = None) -> int:
    """Route to the requested subcommand."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "env":
        invoked = _invoked_command() if argv is None else ["hostenv", *args]
        return env_cmd.run(args[1:], invoked=invoked)
    build_parser().parse_args(args)
    return 2


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
