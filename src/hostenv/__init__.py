"""Point a local docker client at a remote container host."""

__version__ = "0.1.0"
