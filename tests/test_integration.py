"""End-to-end tests for a complete deployment."""

import asyncio
import os
from pathlib import Path

import pytest
import yaml

from ruleskit.deployer import install

PREAMBLE = "ruleskit[1.0.0]:"
WARNING = "DO NOT EDIT THIS FILE AS IT IS GENERATED BY ruleskit"

CONFIGURATION_FILES = {
    ".eslintrc.yaml": f"# {WARNING}\nextends:\n- '@r2d2bzh'\n",
    ".eslintignore": f"# {WARNING}\nnode_modules\n",
    ".prettierrc.yaml": (
        f"# {WARNING}\nsingleQuote: true\nsemi: true\ntabWidth: 2\nprintWidth: 120\n"
    ),
    ".prettierignore": f"# {WARNING}\n__fixtures__\nhelm\n*.json\n*.yml\n*.yaml\n",
}

HOOK_HEADER = '#!/usr/bin/env sh\n. "$(dirname -- "$0")/_/hook.sh"\n\n\n'

HOOK_FILES = {
    "pre-commit": HOOK_HEADER
    + "# tag::commands[]\nnpx --no-install eslint .\n# end::commands[]\n",
    "pre-push": HOOK_HEADER
    + "# tag::commands[]\n"
    + "ruleskit is-wip || npx --no-install eslint . && npm test\n"
    + "# end::commands[]\n",
}


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


class TestRulesKitIntegration:
    """Test a complete install into an empty project."""

    @pytest.fixture
    def run_install(self, tmp_path: Path, logger):
        def run() -> None:
            asyncio.run(
                install(
                    root=tmp_path,
                    edit_warning=WARNING,
                    log_preamble=PREAMBLE,
                    logger=logger,
                ),
            )

        return run

    def test_generated_files(self, run_install, tmp_path: Path) -> None:
        run_install()

        top_level = sorted(p.name for p in tmp_path.iterdir() if p.is_file())
        assert top_level == sorted(CONFIGURATION_FILES)
        for name, expected in CONFIGURATION_FILES.items():
            assert (tmp_path / name).read_text() == expected

        hooks_dir = tmp_path / ".githooks"
        assert sorted(p.name for p in hooks_dir.iterdir() if p.is_file()) == sorted(HOOK_FILES)
        for name, expected in HOOK_FILES.items():
            hook = hooks_dir / name
            assert hook.read_text() == expected
            assert os.access(hook, os.X_OK)

    def test_generated_yaml_parses(self, run_install, tmp_path: Path) -> None:
        run_install()

        prettier = yaml.safe_load((tmp_path / ".prettierrc.yaml").read_text())
        assert prettier["printWidth"] == 120

    def test_log_lines(self, run_install, logger) -> None:
        """Test one step line per file and hook, then one success line."""
        run_install()

        *steps, last = logger.lines
        assert last == ("log", PREAMBLE, "successfully deployed")
        assert all(level == "log" and preamble == PREAMBLE for level, preamble, _ in steps)
        assert sorted(message for _, _, message in steps[:4]) == sorted(
            f"{name} deployed" for name in CONFIGURATION_FILES
        )
        assert [message for _, _, message in steps[4:]] == [
            ".githooks/pre-commit deployed",
            ".githooks/pre-push deployed",
        ]

    def test_rerun_is_byte_identical(self, run_install, tmp_path: Path) -> None:
        run_install()
        first = _snapshot(tmp_path)

        run_install()

        assert _snapshot(tmp_path) == first

    def test_hand_edits_are_replaced(self, run_install, tmp_path: Path) -> None:
        run_install()
        (tmp_path / ".eslintignore").write_text("dist\n")
        with (tmp_path / ".githooks" / "pre-commit").open("a") as f:
            f.write("echo extra\n")

        run_install()

        assert (tmp_path / ".eslintignore").read_text() == CONFIGURATION_FILES[".eslintignore"]
        assert (tmp_path / ".githooks" / "pre-commit").read_text() == HOOK_FILES["pre-commit"]
