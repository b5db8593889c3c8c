from __future__ import annotations


class SetupError(RuntimeError):
    """Fatal, user-facing failure. main() prints it as `ERROR: <message>`."""


class ConfigError(SetupError):
    pass
