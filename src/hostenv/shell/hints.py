"""Usage hints telling the user how to evaluate the emitted configuration."""

from collections.abc import Sequence
from typing import Protocol

from hostenv.shell.dialects import Dialect


class UsageHintGenerator(Protocol):
    def generate(self, user_shell: str, invoked_args: Sequence[str]) -> str: ...


class EnvUsageHintGenerator:
    """Wrap the invoked command line in the shell's eval idiom."""

    def generate(self, user_shell: str, invoked_args: Sequence[str]) -> str:
        command_line = " ".join(invoked_args)
        comment = "#"
        dialect = Dialect.from_id(user_shell)
        if dialect is Dialect.FISH:
            cmd = f"eval ({command_line})"
        elif dialect is Dialect.POWERSHELL:
            cmd = f"{command_line} | Invoke-Expression"
        elif dialect is Dialect.CMD:
            cmd = f"\tFOR /f \"tokens=*\" %i IN ('{command_line}') DO %i"
            comment = "REM"
        else:
            cmd = f'eval "$({command_line})"'
        return f"{comment} Run this command to configure your shell: \n{comment} {cmd}\n"
