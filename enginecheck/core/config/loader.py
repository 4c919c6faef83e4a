"""
Manifest loader — reads package.json into the Manifest model.

Unlike most config loaders this one never raises: a project without a
readable manifest is simply a project with no declared constraints.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from enginecheck.core.models.manifest import Manifest

logger = logging.getLogger(__name__)

# Default manifest filename
MANIFEST_FILE = "package.json"


def manifest_path(project_dir: Path) -> Path:
    """Path of the manifest inside ``project_dir``."""
    return project_dir / MANIFEST_FILE


def load_manifest(project_dir: Path | None = None) -> Manifest:
    """Load the project manifest, degrading to an empty one on any failure.

    Args:
        project_dir: Directory holding package.json (default: cwd).

    Returns:
        Parsed Manifest, or ``Manifest()`` when the file is missing,
        unreadable, not JSON, or not a JSON object.
    """
    path = manifest_path(project_dir or Path.cwd())

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("No readable manifest at %s: %s", path, e)
        return Manifest()

    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.debug("Invalid JSON in %s: %s", path, e)
        return Manifest()

    if not isinstance(data, dict):
        logger.debug("Expected a JSON object in %s, got %s", path, type(data).__name__)
        return Manifest()

    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as e:
        logger.debug("Unusable manifest %s: %s", path, e)
        return Manifest()

    logger.debug(
        "Loaded manifest %s (engines=%s, volta=%s)",
        path, sorted(manifest.engines), sorted(manifest.volta),
    )
    return manifest
