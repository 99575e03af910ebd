"""Tests for the generate-service command."""

import json
import os
import subprocess
from pathlib import Path

from genservice import __version__
from genservice.cli import EXIT_NOT_INSTALLED, exit_status, main


class TestUsage:
    """Argument validation."""

    def test_no_argument(self, cli_runner, tmp_path):
        with cli_runner.isolated_filesystem(temp_dir=tmp_path):
            result = cli_runner.invoke(main, [])
            assert result.exit_code == 1
            assert "Usage: generate-service <project_name>" in result.output
            assert os.listdir(".") == []

    def test_empty_argument(self, cli_runner, tmp_path):
        with cli_runner.isolated_filesystem(temp_dir=tmp_path):
            result = cli_runner.invoke(main, [""])
            assert result.exit_code == 1
            assert os.listdir(".") == []

    def test_extra_argument(self, cli_runner, tmp_path):
        with cli_runner.isolated_filesystem(temp_dir=tmp_path):
            result = cli_runner.invoke(main, ["one", "two"])
            assert result.exit_code == 1
            assert "Usage:" in result.output
            assert os.listdir(".") == []

    def test_version(self, cli_runner):
        result = cli_runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestGenerate:
    """End-to-end runs with git and npm faked."""

    def test_success(self, cli_runner, tmp_path, fake_toolchain):
        with cli_runner.isolated_filesystem(temp_dir=tmp_path) as td:
            root = Path(td) / "demo"
            fake_toolchain(root)

            result = cli_runner.invoke(main, ["demo"])

            assert result.exit_code == 0, result.output
            assert "Project 'demo' has been created successfully." in result.output
            assert "cd demo" in result.output
            assert "npm run build" in result.output
            for rel in ("tsconfig.json", "Dockerfile", "src/index.ts", ".gitignore", ".env"):
                assert (root / rel).is_file()

            data = json.loads((root / "package.json").read_text())
            assert data["scripts"]["build"] == "tsc"
            assert data["scripts"]["start"] == "node dist/index.js"

    def test_existing_directory(self, cli_runner, tmp_path, fp):
        with cli_runner.isolated_filesystem(temp_dir=tmp_path) as td:
            existing = Path(td) / "demo"
            existing.mkdir()
            (existing / "README.md").write_text("original")

            result = cli_runner.invoke(main, ["demo"])

            assert result.exit_code == 1
            assert "already exists" in result.output
            assert [p.name for p in existing.iterdir()] == ["README.md"]
            assert (existing / "README.md").read_text() == "original"

    def test_command_failure_propagates_status(self, cli_runner, tmp_path, fp):
        fp.register(["git", "init"], returncode=128, stderr="fatal: unable to create repo\n")
        with cli_runner.isolated_filesystem(temp_dir=tmp_path):
            result = cli_runner.invoke(main, ["demo"])

            assert result.exit_code == 128
            # The tool's own diagnostics are passed through
            assert "fatal: unable to create repo" in result.output

    def test_npm_missing(self, cli_runner, tmp_path, fp, monkeypatch):
        fp.register(["git", "init"])
        real_run = subprocess.run

        def run(cmd, **kwargs):
            if cmd[0] == "npm":
                raise FileNotFoundError("npm")
            return real_run(cmd, **kwargs)

        monkeypatch.setattr(subprocess, "run", run)
        with cli_runner.isolated_filesystem(temp_dir=tmp_path):
            result = cli_runner.invoke(main, ["demo"])

            assert result.exit_code == EXIT_NOT_INSTALLED
            assert "npm is not installed" in result.output

    def test_markup_in_name_printed_literally(self, cli_runner, tmp_path, fake_toolchain):
        with cli_runner.isolated_filesystem(temp_dir=tmp_path) as td:
            fake_toolchain(Path(td) / "[red]x")

            result = cli_runner.invoke(main, ["[red]x"])

            assert result.exit_code == 0, result.output
            assert "Project '[red]x' has been created successfully." in result.output

    def test_missing_parent_directory(self, cli_runner, tmp_path, fp):
        with cli_runner.isolated_filesystem(temp_dir=tmp_path):
            result = cli_runner.invoke(main, ["nope/demo"])

            assert result.exit_code == 1
            assert isinstance(result.exception, SystemExit)
            assert result.output.count("Error:") == 1
            assert "Error: Cannot create directory 'demo': No such file or directory" in result.output
            assert "Traceback" not in result.output
            assert os.listdir(".") == []

    def test_success_message_is_fixed_text(self, cli_runner, tmp_path, fake_toolchain):
        with cli_runner.isolated_filesystem(temp_dir=tmp_path) as td:
            fake_toolchain(Path(td) / "demo")

            result = cli_runner.invoke(main, ["demo"])

            assert result.exit_code == 0, result.output
            assert (
                "Project 'demo' has been created successfully.\n"
                "Next steps:\n"
                "1. Navigate to the project directory: cd demo\n"
                "2. Install dependencies if not already installed: npm install\n"
                "3. Build the project: npm run build\n"
                "4. Run the project: npm start\n"
            ) in result.output
            assert "✓" not in result.output

    def test_killed_command_exits_128_plus_signal(self, cli_runner, tmp_path, fp):
        fp.register(["git", "init"], returncode=-15)
        with cli_runner.isolated_filesystem(temp_dir=tmp_path):
            result = cli_runner.invoke(main, ["demo"])

            assert result.exit_code == 143


class TestExitStatus:
    """Tests for exit_status()."""

    def test_passes_through_positive(self):
        assert exit_status(1) == 1
        assert exit_status(128) == 128

    def test_signal_maps_to_128_plus_n(self):
        assert exit_status(-9) == 137
        assert exit_status(-2) == 130
