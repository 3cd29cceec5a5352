"""
Configuration loader — reads pods.yml into the installation manifest.

It reads YAML, validates against Pydantic schemas, and returns
typed domain objects.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from podenv.core.models.manifest import InstallationManifest

logger = logging.getLogger(__name__)

# Default manifest filename
MANIFEST_FILE = "pods.yml"


class ConfigError(Exception):
    """Raised when the manifest is invalid or missing."""


def find_manifest_file(start_dir: Path | None = None) -> Path | None:
    """Search for pods.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to pods.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / MANIFEST_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_manifest(path: Path | None = None) -> InstallationManifest:
    """Load and validate the installation manifest.

    Args:
        path: Explicit path to pods.yml. If None, searches upward.

    Returns:
        Validated InstallationManifest model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_manifest_file()

    if path is None:
        raise ConfigError(f"No {MANIFEST_FILE} found. Specify one with --manifest.")

    if not path.is_file():
        raise ConfigError(f"Manifest not found: {path}")

    logger.debug("Loading manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        manifest = InstallationManifest.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid manifest: {e}") from e

    logger.info(
        "Loaded manifest with %d target definitions, %d pods, configurations: %s",
        len(manifest.target_definitions),
        len(manifest.pods),
        ", ".join(manifest.build_configurations) or "(none)",
    )
    return manifest
