"""Work-in-progress branch detection."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

WIP_PATTERN = re.compile(r"(^|.*/)wip/", re.IGNORECASE)


def is_wip_branch(branch: str | None) -> bool:
    """Check whether a branch name has a ``wip`` path segment."""
    if not branch:
        return False
    return WIP_PATTERN.match(branch) is not None


def current_branch(repo: Path) -> str | None:
    """Get the checked out branch, or None when detached or not a repository."""
    try:
        result = subprocess.run(
            ["git", "branch", "--show-current"],
            cwd=repo,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return None

    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def is_wip(repo: Path) -> bool:
    return is_wip_branch(current_branch(repo))
