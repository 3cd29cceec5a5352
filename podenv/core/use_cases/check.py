"""
Check use case — validate pods.yml and report problems before generating.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from podenv.core.config.loader import ConfigError, find_manifest_file, load_manifest
from podenv.core.models.manifest import InstallationManifest
from podenv.core.services.generators.target_environment_header import (
    invalid_configuration_names,
    safe_spec_name,
)


@dataclass
class CheckResult:
    """Result of manifest validation."""

    valid: bool = False
    manifest: InstallationManifest | None = None
    manifest_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "manifest_path": str(self.manifest_path) if self.manifest_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "target_definition_count": len(self.manifest.target_definitions) if self.manifest else 0,
            "pod_count": len(self.manifest.pods) if self.manifest else 0,
            "build_configurations": self.manifest.build_configurations if self.manifest else [],
        }


def check_manifest(manifest_path: Path | None = None) -> CheckResult:
    """Validate a manifest and report issues.

    Args:
        manifest_path: Optional explicit path to pods.yml.

    Returns:
        CheckResult with validation status and any issues.
    """
    result = CheckResult()

    if manifest_path is None:
        manifest_path = find_manifest_file()
    result.manifest_path = manifest_path

    try:
        manifest = load_manifest(manifest_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.manifest = manifest

    if not manifest.build_configurations:
        result.warnings.append("No build configurations defined.")

    for name in invalid_configuration_names(manifest.build_configurations):
        result.errors.append(
            f"Build configuration '{name}' is not a valid macro suffix "
            "(use only letters, digits and underscores)"
        )

    if not manifest.target_definitions:
        result.warnings.append("No target definitions. The header will only contain its preamble.")

    for name in manifest.unknown_pods():
        result.errors.append(f"Pod '{name}' is used by a target definition but not declared")

    # Distinct pods emitted into the header must not share a macro identifier
    by_identifier: dict[str, list[str]] = {}
    for td in manifest.target_definitions:
        names = by_identifier.setdefault(safe_spec_name(td.pod), [])
        if td.pod not in names:
            names.append(td.pod)
    for identifier, names in by_identifier.items():
        if len(names) > 1:
            result.errors.append(
                f"Pods {', '.join(names)} share the macro identifier '{identifier}'"
            )

    # Duplicate pod names across target definitions
    used = [td.pod for td in manifest.target_definitions]
    dupes = sorted({n for n in used if used.count(n) > 1})
    if dupes:
        result.warnings.append(f"Pods used by several target definitions: {', '.join(dupes)}")

    for pod_name, configs in manifest.unknown_configurations().items():
        result.warnings.append(
            f"Pod '{pod_name}' is whitelisted for unknown configurations: {', '.join(configs)}"
        )

    for pod in manifest.pods:
        if pod.configurations is None:
            continue
        if not any(c in manifest.build_configurations for c in pod.configurations):
            result.warnings.append(
                f"Pod '{pod.name}' is not whitelisted for any build configuration"
            )

    result.valid = len(result.errors) == 0
    return result
