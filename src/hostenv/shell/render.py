"""Render a ShellConfig as shell statements."""

from hostenv.models import ShellConfig


def _line(cfg: ShellConfig, name: str, value: str | None) -> str:
    return f"{cfg.prefix}{name}{cfg.delimiter}{value or ''}{cfg.suffix}"


def render(cfg: ShellConfig) -> str:
    """Return the statements for every variable followed by the usage hint.

    An unset config carries no values, so only the names are emitted. The
    proxy exclusion variable is only written in set mode.
    """
    variables = [
        ("DOCKER_TLS_VERIFY", cfg.docker_tls_verify),
        ("DOCKER_HOST", cfg.docker_host),
        ("DOCKER_CERT_PATH", cfg.docker_cert_path),
        ("DOCKER_MACHINE_NAME", cfg.machine_name),
    ]
    if cfg.no_proxy_var is not None:
        variables.append((cfg.no_proxy_var, cfg.no_proxy_value))
    return "".join(_line(cfg, name, value) for name, value in variables) + cfg.usage_hint
