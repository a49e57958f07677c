"""Errors raised while resolving targets, toolchains and host tools."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Fatal build configuration problem. Never retried."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        msg = super().__str__()
        if self.hint:
            return f"{msg}\n{self.hint}"
        return msg


class UnsupportedArchitectureError(ConfigurationError):
    pass


class UnsupportedPlatformError(ConfigurationError):
    pass


class MissingToolchainError(ConfigurationError):
    """Toolchain installation (e.g. Visual Studio) not found or unsupported."""


class ToolVersionError(ConfigurationError):
    """Host tool missing, outdated, or its version output could not be parsed."""


class RemoveTimeoutError(TimeoutError):
    """A file could not be deleted before the retry ceiling elapsed."""
