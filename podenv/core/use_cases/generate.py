"""
Generate use case — load pods.yml and write the environment header.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from podenv.adapters.base import ResolutionError
from podenv.adapters.manifest import ManifestResolver
from podenv.core.config.loader import ConfigError, find_manifest_file, load_manifest
from podenv.core.services.generators.target_environment_header import (
    DEFAULT_HEADER_NAME,
    HeaderGenerationError,
    TargetEnvironmentHeader,
)

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Outcome of one header generation."""

    manifest_path: Path | None = None
    output_path: Path | None = None
    content: str = ""
    written: bool = False
    pod_count: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        if self.error:
            return {"ok": False, "error": self.error}
        return {
            "ok": True,
            "manifest_path": str(self.manifest_path) if self.manifest_path else None,
            "output_path": str(self.output_path) if self.output_path else None,
            "written": self.written,
            "pod_count": self.pod_count,
        }


def generate_header(
    manifest_path: Path | None = None,
    output_path: Path | None = None,
    *,
    write: bool = True,
) -> GenerateResult:
    """Render the environment header described by a manifest.

    Args:
        manifest_path: Explicit pods.yml. If None, searches upward from cwd.
        output_path: Destination header. Defaults to Pods-environment.h
            beside the manifest.
        write: When False, only render; nothing touches the disk.

    Returns:
        GenerateResult with the rendered content, or an error message.
    """
    result = GenerateResult()

    if manifest_path is None:
        manifest_path = find_manifest_file()

    try:
        manifest = load_manifest(manifest_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    assert manifest_path is not None  # load_manifest raises otherwise
    result.manifest_path = manifest_path
    result.output_path = output_path or manifest_path.parent / DEFAULT_HEADER_NAME

    try:
        header = TargetEnvironmentHeader(
            manifest.target_definitions,
            manifest.build_configurations,
            ManifestResolver(manifest),
        )
        result.content = header.render()
        if write:
            header.save_as(result.output_path)
            result.written = True
    except (HeaderGenerationError, ResolutionError) as e:
        result.error = str(e)
        return result
    except OSError as e:
        logger.error("Cannot write %s: %s", result.output_path, e)
        result.error = f"Cannot write {result.output_path}: {e}"
        return result

    result.pod_count = len(manifest.target_definitions)
    return result
