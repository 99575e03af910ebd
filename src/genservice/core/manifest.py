"""package.json script patching.

`npm init -y` leaves a manifest whose scripts block only holds a
placeholder test command. This module merges the generator's scripts
(and a few top-level fields) into it as parsed JSON, so the result is
always a valid manifest regardless of how npm formatted the original.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from filelock import FileLock

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


class ManifestError(Exception):
    """package.json is missing or cannot be patched."""
    pass


def load_manifest(path: Path) -> dict:
    """Read and parse a package.json.

    Raises:
        ManifestError: If the file is missing, is not valid JSON,
            or does not hold a JSON object
    """
    if not path.exists():
        raise ManifestError(f"Manifest not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestError(f"Cannot read manifest: {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Manifest is not valid JSON: {path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest must be a JSON object: {path}")
    return data


def merge_scripts(manifest: dict, scripts: Dict[str, str]) -> dict:
    """Merge scripts into manifest["scripts"] in place.

    Existing entries not named in scripts are kept; named ones are replaced.
    A missing or malformed scripts block is recreated.

    Returns:
        The resulting scripts mapping
    """
    current = manifest.get("scripts")
    if not isinstance(current, dict):
        if current is not None:
            logger.warning("Replacing non-object scripts block: %r", current)
        current = {}
    current.update(scripts)
    manifest["scripts"] = current
    return current


def write_manifest(path: Path, manifest: dict) -> None:
    """Atomically write manifest to path in npm's layout (2-space indent)."""
    fd = None
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=str(path.parent),
            suffix=".tmp",
            prefix="package_",
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            fd = None  # os.fdopen takes ownership of fd
            json.dump(manifest, f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, str(path))
        tmp_path = None
    except Exception:
        if fd is not None:
            os.close(fd)
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def patch_manifest(
    project_root: Path,
    scripts: Dict[str, str],
    fields: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """Add scripts (and top-level fields) to the project's package.json.

    Holds a file lock over the whole read-merge-write cycle.

    Args:
        project_root: Directory containing package.json
        scripts: Script name to command
        fields: Extra top-level keys to set, e.g. {"type": "module"}

    Returns:
        The manifest's scripts mapping after patching

    Raises:
        ManifestError: If package.json is missing, unparseable or unwritable
    """
    path = project_root / MANIFEST_NAME
    lock_path = project_root / (MANIFEST_NAME + ".lock")

    try:
        with FileLock(str(lock_path)):
            manifest = load_manifest(path)
            result = merge_scripts(manifest, scripts)
            for key, value in (fields or {}).items():
                manifest[key] = value
            write_manifest(path, manifest)
    except OSError as e:
        raise ManifestError(f"Cannot write manifest: {path}: {e.strerror or e}") from e

    # The lock file would otherwise land in the generated project
    try:
        lock_path.unlink()
    except OSError:
        logger.debug("Could not remove %s", lock_path)

    logger.debug("Patched %s scripts: %s", path, ", ".join(sorted(result)))
    return dict(result)
