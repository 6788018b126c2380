"""Core data models for the RulesKit deployment engine."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .formatters import Formatter, render
from .logger import ConsoleLogger, LoggerPort

DEFAULT_HOOKS_DIR = ".githooks"


class ArtifactEntry(BaseModel):
    """A configuration value and the formatters rendering it to file content."""

    model_config = ConfigDict(frozen=True)

    value: Any = Field(..., description="Tool settings or ignore list")
    formatters: tuple[Formatter, ...] = Field(
        ...,
        description="Ordered rendering pipeline, ending with a string",
    )

    def render(self) -> str:
        """Render the configuration value through its pipeline."""
        return render(self.value, self.formatters)


class HookEntry(BaseModel):
    """Ordered shell commands run by a single git hook."""

    model_config = ConfigDict(frozen=True)

    commands: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Commands in execution order",
    )


ArtifactRegistry = dict[str, ArtifactEntry]
HookRegistry = dict[str, HookEntry]


class PackageIdentity(BaseModel):
    """Name and version of the package generating the configuration."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Distribution name")
    version: str = Field(..., description="Distribution version")

    @field_validator("name", "version")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty identity fields."""
        if not v.strip():
            msg = "Package name and version must not be empty"
            raise ValueError(msg)
        return v

    @property
    def log_preamble(self) -> str:
        return f"{self.name}[{self.version}]:"

    @property
    def edit_warning(self) -> str:
        return f"DO NOT EDIT THIS FILE AS IT IS GENERATED BY {self.name}"


def _identity(registry: Any) -> Any:
    return registry


class InstallOptions(BaseModel):
    """Options for a single deployment run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    root: Path = Field(
        default_factory=Path.cwd,
        description="Directory of the project receiving the configuration",
    )
    hooks_dir: str = Field(
        default=DEFAULT_HOOKS_DIR,
        description="Hooks directory, relative to root",
    )
    edit_warning: str | list[str] | None = Field(
        default=None,
        description="Banner written atop every generated file",
    )
    log_preamble: str | None = Field(
        default=None,
        description="Prefix of every status line",
    )
    tweak_configuration_files: Callable[[ArtifactRegistry], Any] = Field(
        default=_identity,
        description="Transform applied to the artifact registry before deployment",
    )
    tweak_hooks: Callable[[HookRegistry], Any] = Field(
        default=_identity,
        description="Transform applied to the hook registry before deployment",
    )
    logger: LoggerPort = Field(default_factory=ConsoleLogger)
    step_logger: LoggerPort | None = Field(
        default=None,
        description="Receives one line per deployed file (defaults to logger)",
    )
    result_logger: LoggerPort | None = Field(
        default=None,
        description="Receives the final outcome line (defaults to logger)",
    )
