"""Shared test fixtures for genservice.

Provides:
- cli_runner: Click CliRunner
- npm_manifest: What `npm init -y` writes, as a dict
- project_with_manifest: Directory holding only that package.json
- fake_toolchain: pytest-subprocess setup faking git and npm for one project root
"""

import json

import pytest
from click.testing import CliRunner
from pathlib import Path


NPM_INIT_MANIFEST = {
    "name": "demo",
    "version": "1.0.0",
    "description": "",
    "main": "index.js",
    "scripts": {
        "test": "echo \"Error: no test specified\" && exit 1"
    },
    "keywords": [],
    "author": "",
    "license": "ISC",
}


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def npm_manifest():
    """A fresh copy of the manifest npm init -y produces."""
    return json.loads(json.dumps(NPM_INIT_MANIFEST))


@pytest.fixture
def project_with_manifest(tmp_path, npm_manifest):
    """Directory holding only an npm-init style package.json."""
    (tmp_path / "package.json").write_text(json.dumps(npm_manifest, indent=2) + "\n")
    return tmp_path


@pytest.fixture
def fake_toolchain(fp):
    """Register fake git/npm commands for a scaffold of `root`.

    Returns a function taking the project root; `npm init -y` is faked
    by writing a package.json there. Use `fp` directly for failures.
    """

    def _register(root: Path, npm_init_manifest: dict = None):
        manifest = npm_init_manifest or dict(NPM_INIT_MANIFEST, name=root.name)

        def write_manifest(process):
            (root / "package.json").write_text(json.dumps(manifest, indent=2) + "\n")

        fp.register(["git", "init"], stdout=f"Initialized empty Git repository in {root}/.git/\n")
        fp.register(["npm", "init", "-y"], callback=write_manifest)
        fp.register(["npm", "install", fp.any()], occurrences=2)
        return fp

    return _register
