"""Tests for the tsscaffold CLI."""

import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import yaml
from click.testing import CliRunner

from tsscaffold.main import cli


def test_cli_version() -> None:
    """Test that CLI shows version."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_cli_help() -> None:
    """Test the help command."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "init" in result.output
    assert "bump" in result.output
    assert "make" in result.output


def test_cli_files() -> None:
    """The files command lists the make file entries."""
    runner = CliRunner()
    result = runner.invoke(cli, ["files"])
    assert result.exit_code == 0
    for name in ("ignore", "package", "eslint", "tsconfig"):
        assert name in result.output


def test_cli_init_without_install() -> None:
    """Init writes every file and the service record."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        with patch("tsscaffold.typescript.service.subprocess.run") as run:
            result = runner.invoke(
                cli,
                ["init", "proj", "--name", "demo", "--version", "0.1.0", "-d", "express=^4.17.1", "--no-install"],
            )
        assert result.exit_code == 0, result.output
        run.assert_not_called()

        proj = Path("proj")
        for name in ("package.json", "tsconfig.json", "tsconfig.build.json", ".eslintrc.json", "src/index.ts"):
            assert (proj / name).exists()
        pkg = json.loads((proj / "package.json").read_text())
        assert pkg["name"] == "demo"
        assert pkg["dependencies"] == {"express": "^4.17.1"}
        info = yaml.safe_load((proj / "service.yaml").read_text())
        assert info == {"identifier": "demo", "version": "0.1.0"}


def test_cli_init_installs_packages() -> None:
    """Init runs the package manager in the service directory."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        with patch("tsscaffold.typescript.service.subprocess.run") as run:
            result = runner.invoke(cli, ["init", "proj"])
        assert result.exit_code == 0, result.output
        run.assert_called_once_with(["yarn", "--cwd", "proj"], check=True)


def test_cli_init_install_failure() -> None:
    """A failing package manager exits with code 1."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        error = subprocess.CalledProcessError(2, ["yarn"])
        with patch("tsscaffold.typescript.service.subprocess.run", side_effect=error):
            result = runner.invoke(cli, ["init", "proj"])
        assert result.exit_code == 1
        assert "exit code 2" in result.output
        assert Path("proj/package.json").exists()


def test_cli_init_bad_pair() -> None:
    """Malformed NAME=VALUE options are rejected."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["init", "proj", "-d", "express", "--no-install"])
        assert result.exit_code != 0


def test_cli_bump() -> None:
    """Bump updates package.json and the service record."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        runner.invoke(cli, ["init", "proj", "--name", "demo", "--version", "0.1.0", "--no-install"])
        result = runner.invoke(cli, ["bump", "0.2.0", "proj"])
        assert result.exit_code == 0, result.output

        pkg = json.loads(Path("proj/package.json").read_text())
        assert pkg["version"] == "0.2.0"
        assert pkg["name"] == "demo"
        assert yaml.safe_load(Path("proj/service.yaml").read_text())["version"] == "0.2.0"


def test_cli_bump_without_package_file() -> None:
    """Bump without package.json succeeds without writing it."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("proj").mkdir()
        result = runner.invoke(cli, ["bump", "0.2.0", "proj"])
        assert result.exit_code == 0, result.output
        assert not Path("proj/package.json").exists()


def test_cli_bump_invalid_package_file() -> None:
    """Bump reports a malformed package.json."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("proj").mkdir()
        Path("proj/package.json").write_text("{")
        result = runner.invoke(cli, ["bump", "0.2.0", "proj"])
        assert result.exit_code == 1


def test_cli_make() -> None:
    """Make creates a single file."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("proj").mkdir()
        result = runner.invoke(cli, ["make", "tsconfig", "proj"])
        assert result.exit_code == 0, result.output
        assert Path("proj/tsconfig.json").exists()
        assert not Path("proj/package.json").exists()


def test_cli_make_unknown_entry() -> None:
    """Unknown entries exit with code 1."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("proj").mkdir()
        result = runner.invoke(cli, ["make", "dockerfile", "proj"])
        assert result.exit_code == 1
