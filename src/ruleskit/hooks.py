"""Git hook installation into a project-local hooks directory."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from .exceptions import HookInstallError
from .models import DEFAULT_HOOKS_DIR

SKIP_ENV_VAR = "RULESKIT"

HOOK_HELPER = """\
#!/usr/bin/env sh
if [ "$RULESKIT" = "0" ]; then
  exit 0
fi
"""


class HookInstaller:
    """Creates hook scripts and points git at the directory holding them.

    Hook scripts source a shared helper from ``<hooks_dir>/_/`` so that
    setting ``RULESKIT=0`` disables every hook at once.
    """

    def __init__(self, root: Path, hooks_dir: str = DEFAULT_HOOKS_DIR) -> None:
        """Initialize installer for a project.

        Args:
            root: Project directory
            hooks_dir: Hooks directory, relative to root
        """
        self.root = Path(root)
        self.hooks_dir = hooks_dir

    @property
    def enabled(self) -> bool:
        """False when hooks are disabled through RULESKIT=0."""
        return os.environ.get(SKIP_ENV_VAR) != "0"

    @property
    def hooks_path(self) -> Path:
        return self.root / self.hooks_dir

    def hook_path(self, name: str) -> Path:
        return self.hooks_path / name

    def install(self) -> None:
        """Create the hooks directory and register it with git.

        Safe to call repeatedly. Git configuration is skipped when the
        project is not a git work tree.

        Raises:
            HookInstallError: If the helper files cannot be written or git
                rejects the configuration
        """
        if not self.enabled:
            return

        helper_dir = self.hooks_path / "_"
        try:
            helper_dir.mkdir(parents=True, exist_ok=True)
            (helper_dir / ".gitignore").write_text("*\n", encoding="utf-8")
            helper = helper_dir / "hook.sh"
            helper.write_text(HOOK_HELPER, encoding="utf-8")
            helper.chmod(0o755)
        except OSError as e:
            msg = f"Failed to create hooks directory {self.hooks_path}: {e}"
            raise HookInstallError(msg) from e

        if not (self.root / ".git").exists():
            return

        try:
            subprocess.run(
                ["git", "config", "core.hooksPath", self.hooks_dir],
                cwd=self.root,
                check=True,
                capture_output=True,
                text=True,
            )
        except (OSError, subprocess.CalledProcessError) as e:
            reason = getattr(e, "stderr", None) or e
            msg = f"Failed to configure git hooks path: {reason}"
            raise HookInstallError(msg) from e

    def set(self, name: str, command: str) -> Path:
        """Create or reset a hook script so that it runs a single command."""
        path = self.hook_path(name)
        content = (
            "#!/usr/bin/env sh\n"
            '. "$(dirname -- "$0")/_/hook.sh"\n'
            "\n"
            f"{command}\n"
        )
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            path.chmod(0o755)
        except OSError as e:
            msg = f"Failed to write hook {path}: {e}"
            raise HookInstallError(msg) from e
        return path

    def add(self, name: str, command: str) -> Path:
        """Append a command to an existing hook script."""
        path = self.hook_path(name)
        if not path.exists():
            msg = f"Cannot add to missing hook {path}"
            raise HookInstallError(msg)
        try:
            with path.open("a", encoding="utf-8") as f:
                f.write(f"{command}\n")
        except OSError as e:
            msg = f"Failed to append to hook {path}: {e}"
            raise HookInstallError(msg) from e
        return path
