"""
Version model — a pod's version string, with semantic-versioning accessors.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

# major.minor.patch with optional pre-release and build metadata
_SEMVER_RE = re.compile(
    r"^(\d+)\.(\d+)\.(\d+)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)


def single_line(value: str) -> str:
    """Reject values that would break out of a generated `//` comment line."""
    if "\n" in value or "\r" in value:
        raise ValueError("must not contain line breaks")
    return value


class Version(BaseModel):
    """A version as declared by a pod specification.

    Only ``raw`` is stored.  The numeric components are derived on access
    and are ``None`` when the version does not follow semantic versioning
    (``HEAD``, ``1.0``, ``2014-05-01`` ...).
    """

    model_config = ConfigDict(frozen=True)

    raw: str

    @field_validator("raw")
    @classmethod
    def _check_raw(cls, value: str) -> str:
        return single_line(value)

    @classmethod
    def parse(cls, value: str | Version) -> Version:
        """Build a Version from a version string."""
        if isinstance(value, Version):
            return value
        return cls(raw=value.strip())

    def _components(self) -> tuple[int, int, int] | None:
        match = _SEMVER_RE.match(self.raw)
        if match is None:
            return None
        return int(match.group(1)), int(match.group(2)), int(match.group(3))

    @property
    def is_semantic(self) -> bool:
        return self._components() is not None

    @property
    def major(self) -> int | None:
        parts = self._components()
        return parts[0] if parts else None

    @property
    def minor(self) -> int | None:
        parts = self._components()
        return parts[1] if parts else None

    @property
    def patch(self) -> int | None:
        parts = self._components()
        return parts[2] if parts else None

    def __str__(self) -> str:
        return self.raw
