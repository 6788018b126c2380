"""Resolution of the generating package's own name and version."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable
from importlib.metadata import PackageNotFoundError, metadata
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from .exceptions import ManifestError
from .logger import LoggerPort
from .models import PackageIdentity

DISTRIBUTION_NAME = "ruleskit"
MANIFEST_NAME = "pyproject.toml"

T = TypeVar("T")


def read_manifest(path: Path) -> dict[str, Any]:
    """Read and parse a JSON or TOML manifest.

    Args:
        path: Manifest file, parsed according to its suffix

    Returns:
        Parsed manifest content

    Raises:
        ManifestError: If the file cannot be read or parsed
    """
    path = Path(path)
    kind = "TOML" if path.suffix == ".toml" else "JSON"
    try:
        text = path.read_text(encoding="utf-8")
        data = tomllib.loads(text) if kind == "TOML" else json.loads(text)
    except (OSError, ValueError) as e:
        msg = f"failed to extract {kind} from {path} ({e})"
        raise ManifestError(msg, details={"path": str(path)}) from e

    if not isinstance(data, dict):
        msg = f"failed to extract {kind} from {path} (expected a table at top level)"
        raise ManifestError(msg, details={"path": str(path)})
    return data


def find_up(name: str, start: Path) -> Path | None:
    """Find the closest file named ``name`` in ``start`` or its parents."""
    current = Path(start).resolve()
    if current.is_file():
        current = current.parent

    for directory in (current, *current.parents):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def extract_package_details(
    start: Path,
    extract: Callable[[dict[str, Any]], T],
    logger: LoggerPort,
) -> T:
    """Apply ``extract`` to the nearest pyproject.toml above ``start``.

    Raises:
        ManifestError: If no manifest is found or it cannot be parsed
    """
    try:
        manifest_path = find_up(MANIFEST_NAME, start)
        if manifest_path is None:
            msg = f"no {MANIFEST_NAME} found above {start}"
            raise ManifestError(msg)
        return extract(read_manifest(manifest_path))
    except ManifestError as e:
        logger.error(f"Unable to get {start} package details:", str(e))
        raise


def _identity_from_pyproject(manifest: dict[str, Any]) -> PackageIdentity:
    project = manifest.get("project", {})
    try:
        return PackageIdentity(
            name=project.get("name", ""),
            version=project.get("version", ""),
        )
    except ValidationError as e:
        msg = f"incomplete [project] table: {e.errors()[0]['msg']}"
        raise ManifestError(msg) from e


def resolve_self_identity(logger: LoggerPort) -> PackageIdentity:
    """Resolve this package's identity.

    Installed distribution metadata wins; a development checkout falls
    back to the pyproject.toml above the package sources.

    Raises:
        ManifestError: If neither source yields a name and a version
    """
    try:
        dist = metadata(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return extract_package_details(
            Path(__file__).parent,
            _identity_from_pyproject,
            logger,
        )

    return PackageIdentity(name=dist["Name"], version=dist["Version"])
