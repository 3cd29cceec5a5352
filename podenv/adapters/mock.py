"""
Mock resolver — test double for pod target resolution.

Returns pod targets registered by name and records every target
definition it was asked about.
"""

from __future__ import annotations

from podenv.adapters.base import PodTargetResolver, ResolutionError
from podenv.core.models.pod import PodTarget, Specification, TargetDefinition


class MockResolver(PodTargetResolver):
    """Universal mock resolver for testing.

    Pod targets are registered per pod name with ``add_pod`` or
    ``set_pod_target``; unknown pods raise ResolutionError.
    """

    def __init__(self, resolver_name: str = "mock"):
        self._name = resolver_name
        self._pod_targets: dict[str, PodTarget] = {}
        self._call_log: list[TargetDefinition] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[TargetDefinition]:
        """All target definitions this mock has resolved."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times resolve has been called."""
        return len(self._call_log)

    def set_pod_target(self, pod_name: str, pod_target: PodTarget) -> None:
        """Register a fully built pod target."""
        self._pod_targets[pod_name] = pod_target

    def add_pod(
        self,
        name: str,
        version: str = "1.0.0",
        configurations: list[str] | None = None,
    ) -> TargetDefinition:
        """Register a single-spec pod and return a target definition for it."""
        self._pod_targets[name] = PodTarget(
            name=name,
            specs=[Specification(name=name, version=version)],
            configurations=configurations,
        )
        return TargetDefinition(name=f"Pods-{name}", pod=name)

    def resolve(self, target_definition: TargetDefinition) -> PodTarget:
        self._call_log.append(target_definition)
        try:
            return self._pod_targets[target_definition.pod]
        except KeyError:
            raise ResolutionError(f"No pod target registered for '{target_definition.pod}'") from None
