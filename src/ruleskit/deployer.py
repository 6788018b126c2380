"""Deployment of configuration files and git hooks into a project."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .exceptions import DeploymentError
from .formatters import add_hashed_header, header_input
from .hooks import HookInstaller
from .identity import resolve_self_identity
from .models import ArtifactEntry, ArtifactRegistry, HookRegistry, InstallOptions
from .registry import configuration_files, hook_commands

StepLogger = Callable[[str], None]


async def _deploy_artifact(
    root: Path,
    target: str,
    entry: ArtifactEntry,
    log_step: StepLogger,
) -> None:
    content = entry.render()
    await asyncio.to_thread((root / target).write_text, content, encoding="utf-8")
    log_step(f"{target} deployed")


async def deploy_artifacts(
    registry: ArtifactRegistry,
    root: Path,
    log_step: StepLogger,
) -> None:
    """Render and write every configuration file concurrently.

    All writes are issued before any outcome is inspected; files written
    successfully stay on disk when others fail.

    Args:
        registry: Target paths mapped to their configuration entries
        root: Directory target paths are relative to
        log_step: Called once per deployed file

    Raises:
        DeploymentError: If any file fails to render or write, listing
            every failure
    """
    targets = list(registry)
    results = await asyncio.gather(
        *(
            _deploy_artifact(root, target, registry[target], log_step)
            for target in targets
        ),
        return_exceptions=True,
    )

    failures = {
        target: result
        for target, result in zip(targets, results)
        if isinstance(result, BaseException)
    }
    if not failures:
        return

    summary = "; ".join(f"{target} ({error})" for target, error in failures.items())
    msg = f"failed to deploy {summary}"
    raise DeploymentError(msg, failures=failures)


def deploy_hooks(
    registry: HookRegistry,
    installer: HookInstaller,
    log_step: StepLogger,
) -> None:
    """Install git hooks one after the other.

    Each hook is reset, then receives its commands in order. The first
    failure stops the remaining hooks. Nothing is written while hooks
    are disabled.

    Raises:
        HookInstallError: If installation or any hook write fails
    """
    if not installer.enabled:
        return

    installer.install()
    for name, entry in registry.items():
        installer.set(name, "")
        for command in entry.commands:
            installer.add(name, command)
        log_step(f"{Path(installer.hooks_dir, name).as_posix()} deployed")


async def _apply_tweak(tweak: Callable[[Any], Any], registry: Any) -> Any:
    result = tweak(registry)
    if inspect.isawaitable(result):
        result = await result
    return result


async def install(options: InstallOptions | None = None, **overrides: Any) -> None:
    """Deploy configuration files and git hooks into a project.

    Args:
        options: Run options; defaults apply when omitted
        **overrides: Individual InstallOptions fields, taking precedence
            over ``options``

    Raises:
        RulesKitError: If identity resolution or either deployment phase
            fails, after the failure has been reported
    """
    if options is None:
        options = InstallOptions(**overrides)
    elif overrides:
        options = InstallOptions(**{**dict(options), **overrides})

    step_logger = options.step_logger or options.logger
    result_logger = options.result_logger or options.logger

    edit_warning = options.edit_warning
    log_preamble = options.log_preamble
    if edit_warning is None or log_preamble is None:
        identity = resolve_self_identity(options.logger)
        edit_warning = identity.edit_warning if edit_warning is None else edit_warning
        log_preamble = identity.log_preamble if log_preamble is None else log_preamble

    def log_step(message: str) -> None:
        step_logger.log(log_preamble, message)

    try:
        add_warning_header = add_hashed_header(header_input(edit_warning))
        files = await _apply_tweak(
            options.tweak_configuration_files,
            configuration_files(add_warning_header),
        )
        await deploy_artifacts(files, options.root, log_step)

        hooks = await _apply_tweak(options.tweak_hooks, hook_commands())
        installer = HookInstaller(options.root, options.hooks_dir)
        await asyncio.to_thread(deploy_hooks, hooks, installer, log_step)

        result_logger.log(log_preamble, "successfully deployed")
    except Exception as e:
        result_logger.error(log_preamble, f"installation failed: {e}")
        raise
