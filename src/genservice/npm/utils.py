"""npm utilities for genservice.

Wraps the package-manager calls the generator makes: creating the
manifest and installing runtime and development dependencies.
Installation talks to the registry, so no timeout is applied unless
the caller asks for one.
"""

import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class NpmError(Exception):
    """Base exception for npm operations."""
    pass


class NpmNotInstalledError(NpmError):
    """npm is not installed or not in PATH."""
    pass


class NpmTimeoutError(NpmError):
    """npm command timed out."""

    def __init__(self, message: str, timeout: int):
        super().__init__(message)
        self.timeout = timeout


class NpmCommandError(NpmError):
    """npm command failed with non-zero exit code."""

    def __init__(self, message: str, returncode: int, stderr: str = "", stdout: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
        self.stdout = stdout


# =============================================================================
# Core Functions
# =============================================================================


def format_spec(name: str, version: Optional[str] = None) -> str:
    """Build an install spec such as ``express@^4.19.2``.

    An empty or missing version installs whatever the registry tags latest.
    """
    if not version:
        return name
    return f"{name}@{version}"


def run_npm(
    *args,
    cwd: Optional[Path] = None,
    check: bool = True,
    timeout: Optional[int] = None
) -> subprocess.CompletedProcess:
    """Run an npm command.

    Args:
        *args: npm command arguments
        cwd: Working directory
        check: Raise exception on failure
        timeout: Command timeout in seconds (None waits forever)

    Returns:
        CompletedProcess result

    Raises:
        NpmNotInstalledError: If npm is not installed
        NpmTimeoutError: If command times out
        NpmCommandError: If check=True and command fails
    """
    cmd = ["npm"] + list(args)
    cmd_str = " ".join(cmd)
    logger.debug("Running %s in %s", cmd_str, cwd or Path.cwd())

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd or Path.cwd(),
            capture_output=True,
            text=True,
            timeout=timeout
        )
    except FileNotFoundError:
        raise NpmNotInstalledError(
            "npm is not installed or not in PATH. "
            "Please install Node.js: https://nodejs.org/en/download"
        )
    except subprocess.TimeoutExpired:
        raise NpmTimeoutError(
            f"npm command timed out after {timeout}s: {cmd_str}",
            timeout=timeout
        )

    if check and result.returncode != 0:
        logger.debug("%s exited with %d", cmd_str, result.returncode)
        raise NpmCommandError(
            f"npm command failed: {cmd_str}",
            returncode=result.returncode,
            stderr=result.stderr,
            stdout=result.stdout,
        )
    return result


def npm_init(path: Path, timeout: Optional[int] = None) -> Path:
    """Create a default package.json in path.

    Returns:
        Path to the generated manifest
    """
    run_npm("init", "-y", cwd=path, timeout=timeout)
    return path / "package.json"


def install_packages(
    path: Path,
    packages: Dict[str, str],
    dev: bool = False,
    timeout: Optional[int] = None,
) -> List[str]:
    """Install packages into the project at path.

    Args:
        path: Project root containing package.json
        packages: Mapping of package name to version range
        dev: Save as devDependencies
        timeout: Command timeout in seconds

    Returns:
        The install specs passed to npm, in order
    """
    specs = [format_spec(name, version) for name, version in packages.items()]
    if not specs:
        return []

    args = ["install"]
    if dev:
        args.append("--save-dev")
    run_npm(*args, *specs, cwd=path, timeout=timeout)
    return specs
