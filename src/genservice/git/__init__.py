"""Git utilities for genservice."""

from genservice.git.utils import (
    init_repo,
    run_git,
    GitError,
    GitNotInstalledError,
    GitTimeoutError,
    GitCommandError,
    DEFAULT_GIT_TIMEOUT,
)

__all__ = [
    "init_repo",
    "run_git",
    "GitError",
    "GitNotInstalledError",
    "GitTimeoutError",
    "GitCommandError",
    "DEFAULT_GIT_TIMEOUT",
]
