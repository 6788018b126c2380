"""Tests for CLI commands."""

from importlib.metadata import version as package_version
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ruleskit import cli
from ruleskit.cli import app


class TestCLI:
    """Test CLI commands."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        """Create CLI test runner."""
        return CliRunner()

    def test_install_command(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test install deploys configuration into the given directory."""
        result = runner.invoke(app, ["install", "--path", str(tmp_path)])

        assert result.exit_code == 0
        assert "successfully deployed" in result.stdout
        assert ".eslintrc.yaml deployed" in result.stdout
        assert (tmp_path / ".prettierrc.yaml").exists()
        assert (tmp_path / ".githooks" / "pre-push").exists()

    def test_install_custom_hooks_dir(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["install", "--path", str(tmp_path), "--hooks-dir", ".hooks"],
        )

        assert result.exit_code == 0
        assert (tmp_path / ".hooks" / "pre-commit").exists()
        assert not (tmp_path / ".githooks").exists()

    def test_install_is_default_command(
        self,
        runner: CliRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert (tmp_path / ".eslintignore").exists()

    def test_install_failure_exits_nonzero(self, runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / ".githooks").write_text("not a directory")

        result = runner.invoke(app, ["install", "--path", str(tmp_path)])

        assert result.exit_code == 1
        assert "successfully deployed" not in result.stdout

    def test_install_missing_path(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["install", "--path", str(tmp_path / "absent")])

        assert result.exit_code != 0

    @pytest.mark.parametrize(("wip", "exit_code"), [(True, 0), (False, 1)])
    def test_is_wip(
        self,
        runner: CliRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        wip: bool,
        exit_code: int,
    ) -> None:
        monkeypatch.setattr(cli, "is_wip", lambda path: wip)

        result = runner.invoke(app, ["is-wip", "--path", str(tmp_path)])

        assert result.exit_code == exit_code

    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "RulesKit version" in result.stdout

    def test_version_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "RulesKit version" in result.stdout

    def test_version_matches_package_metadata(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["version"])

        assert result.stdout.strip() == f"RulesKit version {package_version('ruleskit')}"
