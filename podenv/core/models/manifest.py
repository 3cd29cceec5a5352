"""
Installation manifest — the inputs of one header generation, loaded from pods.yml.

Describes which pods were installed, which target definitions use them,
and which build configurations the aggregate target has.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from podenv.core.models.pod import PodTarget, Specification, TargetDefinition
from podenv.core.models.version import single_line


class PodEntry(BaseModel):
    """A pod declared in the manifest.

    ``configurations`` restricts the pod to some build configurations;
    leave it out to enable the pod everywhere.
    """

    name: str = Field(min_length=1)
    version: str
    subspecs: list[str] = Field(default_factory=list)
    configurations: list[str] | None = None

    @field_validator("version", mode="before")
    @classmethod
    def _require_quoted_version(cls, value: object) -> object:
        # YAML reads an unquoted 1.10 as the float 1.1
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            raise ValueError(
                f"version was read as the number {value!r}; quote it so it is kept as written"
            )
        return value

    @field_validator("name", "version")
    @classmethod
    def _check_single_line(cls, value: str) -> str:
        return single_line(value)

    @field_validator("subspecs")
    @classmethod
    def _check_subspecs(cls, value: list[str]) -> list[str]:
        return [single_line(sub) for sub in value]

    def to_pod_target(self) -> PodTarget:
        """Expand into a PodTarget: root spec first, then ``Pod/sub`` specs."""
        specs = [Specification(name=self.name, version=self.version)]
        specs.extend(
            Specification(name=f"{self.name}/{sub}", version=self.version)
            for sub in self.subspecs
        )
        configurations = list(self.configurations) if self.configurations is not None else None
        return PodTarget(name=self.name, specs=specs, configurations=configurations)


class InstallationManifest(BaseModel):
    """Root manifest model — loaded from pods.yml."""

    version: int = 1

    build_configurations: list[str] = Field(default_factory=lambda: ["Debug", "Release"])
    target_definitions: list[TargetDefinition] = Field(default_factory=list)
    pods: list[PodEntry] = Field(default_factory=list)

    def get_pod(self, name: str) -> PodEntry | None:
        """Look up a pod entry by name."""
        for pod in self.pods:
            if pod.name == name:
                return pod
        return None

    def unknown_pods(self) -> list[str]:
        """Pods referenced by target definitions but never declared."""
        declared = {p.name for p in self.pods}
        missing: list[str] = []
        for td in self.target_definitions:
            if td.pod not in declared and td.pod not in missing:
                missing.append(td.pod)
        return missing

    def unknown_configurations(self) -> dict[str, list[str]]:
        """Per pod, whitelisted configurations the aggregate target lacks."""
        known = set(self.build_configurations)
        result: dict[str, list[str]] = {}
        for pod in self.pods:
            extra = [c for c in (pod.configurations or []) if c not in known]
            if extra:
                result[pod.name] = extra
        return result
