"""
Domain models — Pydantic types for pods and generated output.

All models are re-exported here for convenient access:

    from podenv.core.models import Specification, PodTarget, TargetDefinition
"""

from podenv.core.models.manifest import InstallationManifest, PodEntry
from podenv.core.models.pod import PodTarget, Specification, TargetDefinition
from podenv.core.models.template import GeneratedFile
from podenv.core.models.version import Version

__all__ = [
    "GeneratedFile",
    # manifest.py
    "InstallationManifest",
    "PodEntry",
    # pod.py
    "PodTarget",
    "Specification",
    "TargetDefinition",
    # version.py
    "Version",
]
