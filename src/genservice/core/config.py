"""Configuration and data model for genservice.

ScaffoldConfig holds every fixed value the generator uses: dependency
ranges, manifest scripts, the port and base image baked into templates.
The CLI always runs with the defaults; alternatives can be built in-process.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List, Optional

from genservice.git.utils import DEFAULT_GIT_TIMEOUT


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_PORT = 8080
DEFAULT_NODE_IMAGE = "node:18-alpine"

DEFAULT_DEPENDENCIES = {
    "express": "^4.19.2",
    "dotenv": "^16.4.5",
    "uuid": "^9.0.1",
}

DEFAULT_DEV_DEPENDENCIES = {
    "typescript": "^5.4.5",
    "@types/node": "^20.12.7",
    "@types/express": "^4.17.21",
    "@types/uuid": "^9.0.8",
    "tsx": "^4.7.3",
}

DEFAULT_SCRIPTS = {
    "build": "tsc",
    "start": "node dist/index.js",
    "dev": "tsx watch src/index.ts",
}

# NodeNext + verbatimModuleSyntax only compiles ESM imports in a module package
DEFAULT_MANIFEST_FIELDS = {
    "type": "module",
    "main": "dist/index.js",
}


# =============================================================================
# Configuration Data Class
# =============================================================================

@dataclass
class ScaffoldConfig:
    """Fixed inputs for a scaffold run."""
    port: int = DEFAULT_PORT
    node_image: str = DEFAULT_NODE_IMAGE
    dependencies: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_DEPENDENCIES))
    dev_dependencies: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_DEV_DEPENDENCIES))
    scripts: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SCRIPTS))
    manifest_fields: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_MANIFEST_FIELDS))
    write_env_file: bool = True

    # Timeouts in seconds; None means wait for the command however long it takes
    git_timeout: int = DEFAULT_GIT_TIMEOUT
    install_timeout: Optional[int] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ScaffoldConfig":
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })


# =============================================================================
# Request / Result
# =============================================================================

@dataclass
class ScaffoldRequest:
    """A request to generate one project.

    The name is used verbatim as the directory name. Only emptiness is
    rejected; anything else is handed to the filesystem as given.
    """
    project_name: str

    def __post_init__(self):
        if not self.project_name:
            raise ValueError("Project name must not be empty")


@dataclass
class GeneratedProject:
    """Outcome of a successful scaffold run."""
    name: str
    root: Path
    files: List[str] = field(default_factory=list)
    scripts: Dict[str, str] = field(default_factory=dict)
    installed: List[str] = field(default_factory=list)
