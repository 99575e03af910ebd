"""Project scaffolding pipeline.

Runs the generation steps strictly in order against a new project
directory:

1. create the directory
2. git init
3. npm init + dependency installation
4. write template files
5. patch package.json scripts

The first failing step raises and the run stops there. Nothing already
created is rolled back.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from tqdm import tqdm

from genservice.core.config import GeneratedProject, ScaffoldConfig, ScaffoldRequest
from genservice.core.manifest import patch_manifest
from genservice.git.utils import init_repo
from genservice.npm.utils import install_packages, npm_init
from genservice.templates import write_project_files

logger = logging.getLogger(__name__)


class ScaffoldError(Exception):
    """Base exception for scaffolding failures not raised by a tool."""
    pass


class DirectoryExistsError(ScaffoldError):
    """Target project directory already exists."""

    def __init__(self, path: Path):
        super().__init__(f"Directory '{path.name}' already exists")
        self.path = path


class ProjectDirectoryError(ScaffoldError):
    """Target project directory could not be created."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot create directory '{path.name}': {reason}")
        self.path = path
        self.reason = reason


class ProjectFilesError(ScaffoldError):
    """A template file could not be written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot write '{path.name}': {reason}")
        self.path = path
        self.reason = reason


class Scaffolder:
    """Generates an Express/TypeScript service skeleton.

    Usage:
        project = Scaffolder().run(ScaffoldRequest("demo"), Path.cwd())
    """

    def __init__(self, config: Optional[ScaffoldConfig] = None):
        self.config = config or ScaffoldConfig()

    def run(
        self,
        request: ScaffoldRequest,
        parent_dir: Optional[Path] = None,
        show_progress: bool = False,
    ) -> GeneratedProject:
        """Generate the project described by request under parent_dir.

        Args:
            request: What to generate
            parent_dir: Where the project directory is created (defaults to cwd)
            show_progress: Draw a progress bar over the steps

        Returns:
            The generated project

        Raises:
            DirectoryExistsError: If the project directory already exists
            GitError: If git init fails
            NpmError: If npm init or an install fails
            ManifestError: If package.json cannot be patched
        """
        root = (parent_dir or Path.cwd()) / request.project_name
        project = GeneratedProject(name=request.project_name, root=root)

        steps: List[Tuple[str, Callable[[GeneratedProject], None]]] = [
            ("Creating directory", self._create_directory),
            ("Initializing git", self._init_git),
            ("Initializing npm", self._init_npm),
            ("Installing dependencies", self._install_dependencies),
            ("Installing dev dependencies", self._install_dev_dependencies),
            ("Writing files", self._write_files),
            ("Patching package.json", self._patch_manifest),
        ]

        with tqdm(
            total=len(steps),
            desc="Scaffolding",
            bar_format="{l_bar}{bar}| {n_fmt}/{total_fmt}",
            disable=not show_progress,
        ) as pbar:
            for desc, step in steps:
                pbar.set_description(desc)
                logger.debug("%s: %s", project.name, desc)
                step(project)
                pbar.update(1)

        return project

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def _create_directory(self, project: GeneratedProject) -> None:
        try:
            project.root.mkdir()
        except FileExistsError:
            raise DirectoryExistsError(project.root)
        except OSError as e:
            raise ProjectDirectoryError(project.root, e.strerror or str(e)) from e

    def _init_git(self, project: GeneratedProject) -> None:
        init_repo(project.root, timeout=self.config.git_timeout)

    def _init_npm(self, project: GeneratedProject) -> None:
        npm_init(project.root, timeout=self.config.install_timeout)

    def _install_dependencies(self, project: GeneratedProject) -> None:
        project.installed += install_packages(
            project.root,
            self.config.dependencies,
            timeout=self.config.install_timeout,
        )

    def _install_dev_dependencies(self, project: GeneratedProject) -> None:
        project.installed += install_packages(
            project.root,
            self.config.dev_dependencies,
            dev=True,
            timeout=self.config.install_timeout,
        )

    def _write_files(self, project: GeneratedProject) -> None:
        try:
            project.files = write_project_files(project.root, self.config)
        except OSError as e:
            raise ProjectFilesError(Path(e.filename or project.root), e.strerror or str(e)) from e

    def _patch_manifest(self, project: GeneratedProject) -> None:
        project.scripts = patch_manifest(
            project.root,
            self.config.scripts,
            self.config.manifest_fields,
        )
