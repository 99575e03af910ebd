"""npm utilities for genservice."""

from genservice.npm.utils import (
    format_spec,
    install_packages,
    npm_init,
    run_npm,
    NpmError,
    NpmNotInstalledError,
    NpmTimeoutError,
    NpmCommandError,
)

__all__ = [
    "format_spec",
    "install_packages",
    "npm_init",
    "run_npm",
    "NpmError",
    "NpmNotInstalledError",
    "NpmTimeoutError",
    "NpmCommandError",
]
