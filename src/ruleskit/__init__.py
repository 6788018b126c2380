"""RulesKit: shared lint, format and git hook configuration for projects."""

__version__ = "0.1.0"
__author__ = "RulesKit Contributors"
__description__ = "Shared lint, format and git hook configuration for projects"

from .deployer import deploy_artifacts, deploy_hooks, install
from .formatters import (
    MultiLine,
    SingleLine,
    add_hashed_header,
    make_header_formatter,
    render,
    to_multiline,
    to_yaml,
)
from .models import ArtifactEntry, HookEntry, InstallOptions, PackageIdentity

__all__ = [
    "ArtifactEntry",
    "HookEntry",
    "InstallOptions",
    "MultiLine",
    "PackageIdentity",
    "SingleLine",
    "add_hashed_header",
    "deploy_artifacts",
    "deploy_hooks",
    "install",
    "make_header_formatter",
    "render",
    "to_multiline",
    "to_yaml",
]
