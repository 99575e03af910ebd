"""Templates module for genservice scaffolding."""

from pathlib import Path
from typing import Callable, Dict, List

from genservice.core.config import ScaffoldConfig
from genservice.templates.express import (
    render_dockerfile,
    render_dockerignore,
    render_env,
    render_gitignore,
    render_index,
    render_tsconfig,
)


def get_project_files(config: ScaffoldConfig) -> Dict[str, Callable[[], str]]:
    """Map each generated file (relative path) to its renderer, in write order."""
    files: Dict[str, Callable[[], str]] = {
        "tsconfig.json": render_tsconfig,
        "Dockerfile": lambda: render_dockerfile(config.port, config.node_image),
        ".dockerignore": render_dockerignore,
        "src/index.ts": lambda: render_index(config.port),
    }
    if config.write_env_file:
        files[".env"] = lambda: render_env(config.port)
    files[".gitignore"] = render_gitignore
    return files


def write_project_files(target_dir: Path, config: ScaffoldConfig) -> List[str]:
    """Write every template file under target_dir.

    Existing files are overwritten without being read.

    Returns:
        Relative paths of the files written
    """
    written = []
    for rel_path, render in get_project_files(config).items():
        _write_file(target_dir / rel_path, render())
        written.append(rel_path)
    return written


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
