"""Custom exceptions for RulesKit."""

from typing import Any


class RulesKitError(Exception):
    """Base exception for all RulesKit errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}


class ManifestError(RulesKitError):
    """Raised when a package manifest cannot be found or parsed."""


class RenderError(RulesKitError):
    """Raised when a formatter pipeline cannot render a configuration value."""


class DeploymentError(RulesKitError):
    """Raised when one or more configuration files fail to deploy."""

    def __init__(
        self,
        message: str,
        failures: dict[str, BaseException] | None = None,
    ) -> None:
        self.failures = failures or {}
        super().__init__(
            message,
            details={path: str(error) for path, error in self.failures.items()},
        )


class HookInstallError(RulesKitError):
    """Raised when git hooks cannot be installed or written."""
