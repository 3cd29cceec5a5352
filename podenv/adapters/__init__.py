"""
Adapters — how the generator reaches the dependency graph.

The generator never looks at how pods were resolved.  It asks a
``PodTargetResolver`` for the pod target behind each target definition.
"""

from podenv.adapters.base import PodTargetResolver, ResolutionError

__all__ = ["PodTargetResolver", "ResolutionError"]
