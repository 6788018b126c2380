"""Default configuration files and git hooks deployed into a project.

Every factory builds fresh values on each call so that customizations made
during one run never leak into another.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .formatters import Formatter, to_multiline, to_yaml
from .models import ArtifactEntry, ArtifactRegistry, HookEntry, HookRegistry

LINT_COMMAND = "npx --no-install eslint ."
WIP_CHECK_COMMAND = "ruleskit is-wip"

COMMANDS_TAG_BEGIN = "# tag::commands[]"
COMMANDS_TAG_END = "# end::commands[]"


def eslint_configuration() -> dict[str, Any]:
    return {"extends": ["@r2d2bzh"]}


def eslint_ignore() -> list[str]:
    return ["node_modules"]


def prettier_configuration() -> dict[str, Any]:
    return {
        "singleQuote": True,
        "semi": True,
        "tabWidth": 2,
        "printWidth": 120,
    }


def prettier_ignore() -> list[str]:
    return ["__fixtures__", "helm", "*.json", "*.yml", "*.yaml"]


def configuration_files(add_warning_header: Formatter) -> ArtifactRegistry:
    """Build the default artifact registry.

    Args:
        add_warning_header: Formatter prepending the edit warning banner

    Returns:
        Target paths mapped to their configuration and rendering pipeline
    """
    return {
        ".eslintrc.yaml": ArtifactEntry(
            value=eslint_configuration(),
            formatters=(to_yaml, add_warning_header),
        ),
        ".eslintignore": ArtifactEntry(
            value=eslint_ignore(),
            formatters=(to_multiline, add_warning_header),
        ),
        ".prettierrc.yaml": ArtifactEntry(
            value=prettier_configuration(),
            formatters=(to_yaml, add_warning_header),
        ),
        ".prettierignore": ArtifactEntry(
            value=prettier_ignore(),
            formatters=(to_multiline, add_warning_header),
        ),
    }


def tag_commands(commands: Iterable[str]) -> tuple[str, ...]:
    """Surround commands with asciidoc tag markers for documentation includes."""
    return (COMMANDS_TAG_BEGIN, *commands, COMMANDS_TAG_END)


def hook_commands() -> HookRegistry:
    """Build the default hook registry."""
    return {
        "pre-commit": HookEntry(commands=tag_commands([LINT_COMMAND])),
        "pre-push": HookEntry(
            commands=tag_commands(
                [f"{WIP_CHECK_COMMAND} || {LINT_COMMAND} && npm test"],
            ),
        ),
    }
