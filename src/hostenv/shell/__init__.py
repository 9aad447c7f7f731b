"""Shell dialects, detection, usage hints and rendering."""

from hostenv.shell.detection import detect_shell
from hostenv.shell.dialects import Dialect, DialectSyntax, lookup
from hostenv.shell.hints import EnvUsageHintGenerator, UsageHintGenerator
from hostenv.shell.render import render

__all__ = [
    "Dialect",
    "DialectSyntax",
    "EnvUsageHintGenerator",
    "UsageHintGenerator",
    "detect_shell",
    "lookup",
    "render",
]
