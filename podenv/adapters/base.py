"""
Resolver base — the contract between the header generator and the
dependency graph that produced the installed pods.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from podenv.core.models.pod import PodTarget, TargetDefinition


class ResolutionError(LookupError):
    """Raised when a target definition has no pod target behind it."""


class PodTargetResolver(ABC):
    """Abstract base class for all pod target resolvers.

    To create a new resolver:
        1. Subclass PodTargetResolver
        2. Implement name and resolve
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The resolver identifier (e.g., 'manifest', 'mock')."""

    @abstractmethod
    def resolve(self, target_definition: TargetDefinition) -> PodTarget:
        """Return the pod target the target definition was installed into.

        Raises:
            ResolutionError: If the definition cannot be resolved.
        """
