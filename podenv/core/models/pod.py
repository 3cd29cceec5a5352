"""
Pod models — specifications, resolved pod targets and target definitions.

These are the narrow views the header generator reads.  Whatever richer
dependency graph produced them stays behind a resolver adapter.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from podenv.core.models.version import Version, single_line


class Specification(BaseModel):
    """A resolved pod specification (root spec or subspec)."""

    name: str = Field(min_length=1)
    version: Version

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return single_line(value)

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: object) -> object:
        if isinstance(value, str):
            return Version.parse(value)
        return value


class PodTarget(BaseModel):
    """A pod as installed into the aggregate target.

    Attributes:
        name:           Pod name.
        specs:          Root specification first, then subspecs.
        configurations: Build configurations the pod is whitelisted for.
                        ``None`` means every configuration.
    """

    name: str
    specs: list[Specification] = Field(default_factory=list)
    configurations: list[str] | None = None

    @property
    def root_spec(self) -> Specification | None:
        return self.specs[0] if self.specs else None

    def is_whitelisted_for_configuration(self, spec_name: str, config_name: str) -> bool:
        """Whether ``spec_name`` is built into ``config_name``."""
        if not any(spec.name == spec_name for spec in self.specs):
            return False
        if self.configurations is None:
            return True
        return config_name in self.configurations


class TargetDefinition(BaseModel):
    """A logical target grouping that resolves to one pod target."""

    name: str
    pod: str
