"""
Manifest resolver — resolves target definitions against a loaded pods.yml.
"""

from __future__ import annotations

import logging

from podenv.adapters.base import PodTargetResolver, ResolutionError
from podenv.core.models.manifest import InstallationManifest
from podenv.core.models.pod import PodTarget, TargetDefinition

logger = logging.getLogger(__name__)


class ManifestResolver(PodTargetResolver):
    """Resolve pod targets from the pods declared in an InstallationManifest."""

    def __init__(self, manifest: InstallationManifest):
        self._manifest = manifest
        self._cache: dict[str, PodTarget] = {}

    @property
    def name(self) -> str:
        return "manifest"

    def resolve(self, target_definition: TargetDefinition) -> PodTarget:
        pod_name = target_definition.pod
        if pod_name in self._cache:
            return self._cache[pod_name]

        entry = self._manifest.get_pod(pod_name)
        if entry is None:
            raise ResolutionError(
                f"Target definition '{target_definition.name}' uses pod "
                f"'{pod_name}', which is not declared in the manifest"
            )

        pod_target = entry.to_pod_target()
        logger.debug(
            "Resolved %s → %s (%d specs)",
            target_definition.name, pod_target.name, len(pod_target.specs),
        )
        self._cache[pod_name] = pod_target
        return pod_target
