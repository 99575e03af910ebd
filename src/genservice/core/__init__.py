"""Core modules for genservice.

- config: Generator defaults and data model
- manifest: package.json script patching
- scaffolder: The generation pipeline (import from genservice.core.scaffolder)
"""

from genservice.core.config import (
    ScaffoldConfig,
    ScaffoldRequest,
    GeneratedProject,
)

from genservice.core.manifest import (
    ManifestError,
    patch_manifest,
)

__all__ = [
    # Config
    "ScaffoldConfig",
    "ScaffoldRequest",
    "GeneratedProject",
    # Manifest
    "ManifestError",
    "patch_manifest",
]
