"""
Target environment header generator — lets client code inspect, at compile
time, which pods are installed and which versions they are.

Example output:

    // ObjectiveSugar
    #define COCOAPODS_POD_HEADERS_AVAILABLE_ObjectiveSugar
    #define COCOAPODS_POD_AVAILABLE_ObjectiveSugar
    #define COCOAPODS_VERSION_MAJOR_ObjectiveSugar 0
    #define COCOAPODS_VERSION_MINOR_ObjectiveSugar 6
    #define COCOAPODS_VERSION_PATCH_ObjectiveSugar 2

Example usage:

    #ifdef COCOAPODS
      #ifdef COCOAPODS_POD_AVAILABLE_ObjectiveSugar
        #import "ObjectiveSugar.h"
      #endif
    #else
      // Non CocoaPods code
    #endif
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from podenv.adapters.base import PodTargetResolver
from podenv.core.models.pod import PodTarget, Specification, TargetDefinition
from podenv.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)

DEFAULT_HEADER_NAME = "Pods-environment.h"

_PREAMBLE: tuple[str, ...] = (
    "",
    "// To check if a library is compiled with CocoaPods you",
    "// can use the `COCOAPODS` macro definition which is",
    "// defined in the xcconfigs so it is available in",
    "// headers also when they are imported in the client",
    "// project.",
    "",
    "",
)

_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_]")
_CONFIG_NAME_RE = re.compile(r"[A-Za-z0-9_]+")


class HeaderGenerationError(Exception):
    """Raised when the inputs cannot be turned into a valid header."""


class EmptyPodTargetError(HeaderGenerationError):
    """A resolved pod target exposes no specification."""


class IdentifierCollisionError(HeaderGenerationError):
    """Two different spec names sanitize to the same macro identifier."""


class InvalidConfigurationNameError(HeaderGenerationError):
    """A build configuration name cannot be part of a macro name."""


def safe_spec_name(spec_name: str) -> str:
    """Replace every non-word character with ``_`` (``My-Lib++`` → ``My_Lib__``)."""
    return _NON_WORD_RE.sub("_", spec_name)


def invalid_configuration_names(build_configs: Iterable[str]) -> list[str]:
    """Names that would not form a single `COCOAPODS_BUILD_CONFIGURATION_*` token."""
    return [name for name in build_configs if not _CONFIG_NAME_RE.fullmatch(name)]


class TargetEnvironmentHeader:
    """Generates the environment header for an aggregate target.

    Args:
        target_definitions: Target definitions installed for the target,
            in the order their blocks should appear.
        build_configs: Names of the configurations in the aggregate target.
        resolver: Resolves each target definition to its pod target.

    Raises:
        InvalidConfigurationNameError: A configuration name cannot be used
            in a macro name.
    """

    def __init__(
        self,
        target_definitions: Iterable[TargetDefinition],
        build_configs: Sequence[str],
        resolver: PodTargetResolver,
    ):
        self.target_definitions = list(target_definitions)
        self.build_configs = tuple(build_configs)
        self._resolver = resolver

        invalid = invalid_configuration_names(self.build_configs)
        if invalid:
            raise InvalidConfigurationNameError(
                "Build configuration names must only contain letters, digits and "
                f"underscores: {', '.join(repr(name) for name in invalid)}"
            )

        if not self.build_configs:
            logger.warning(
                "No build configurations given; every pod is treated as available"
            )

    # ── Public API ──────────────────────────────────────────────

    def render(self) -> str:
        """Return the full header text.

        Raises:
            EmptyPodTargetError: A pod target has no specification.
            IdentifierCollisionError: Distinct spec names share an identifier.
            ResolutionError: The resolver cannot resolve a target definition.
        """
        lines = list(_PREAMBLE)
        seen: dict[str, str] = {}

        logger.debug("Rendering header for %d target definitions", len(self.target_definitions))
        for target_definition in self.target_definitions:
            pod_target = self._resolver.resolve(target_definition)
            spec = self._root_spec(target_definition, pod_target)
            spec_id = safe_spec_name(spec.name)

            other = seen.setdefault(spec_id, spec.name)
            if other != spec.name:
                raise IdentifierCollisionError(
                    f"'{other}' and '{spec.name}' both map to macro identifier '{spec_id}'"
                )

            lines.extend(self._spec_block(spec, spec_id, pod_target))

        return "\n".join(lines) + "\n"

    def generate(self, output_path: str = DEFAULT_HEADER_NAME) -> GeneratedFile:
        """Render the header into a GeneratedFile."""
        return GeneratedFile(
            path=output_path,
            content=self.render(),
            overwrite=True,
            reason=f"Environment header for {len(self.target_definitions)} pods",
        )

    def save_as(self, path: Path | str) -> Path:
        """Generate and save the file, replacing any existing content.

        The header is fully rendered before the file is opened, so input
        errors never truncate a previous header.  I/O errors propagate.
        """
        target = Path(path)
        content = self.render()

        with target.open("w", encoding="utf-8", newline="\n") as source:
            source.write(content)

        logger.info("Wrote environment header: %s", target)
        return target

    # ── Helpers ─────────────────────────────────────────────────

    def _root_spec(self, target_definition: TargetDefinition, pod_target: PodTarget) -> Specification:
        spec = pod_target.root_spec
        if spec is None:
            raise EmptyPodTargetError(
                f"Pod target '{pod_target.name}' (from target definition "
                f"'{target_definition.name}') has no specifications"
            )
        if len(pod_target.specs) > 1:
            logger.debug(
                "%s: using root spec %s, skipping %d subspecs",
                pod_target.name, spec.name, len(pod_target.specs) - 1,
            )
        return spec

    def _whitelisted_configs(self, spec: Specification, pod_target: PodTarget) -> list[str]:
        return [
            config_name
            for config_name in self.build_configs
            if pod_target.is_whitelisted_for_configuration(spec.name, config_name)
        ]

    def _spec_block(self, spec: Specification, spec_id: str, pod_target: PodTarget) -> list[str]:
        block = [
            f"// {spec.name}",
            f"#define COCOAPODS_POD_HEADERS_AVAILABLE_{spec_id}",
        ]

        whitelisted = self._whitelisted_configs(spec, pod_target)
        if len(whitelisted) == len(self.build_configs):
            block.append(f"#define COCOAPODS_POD_AVAILABLE_{spec_id}")
        else:
            if whitelisted:
                condition = " || ".join(
                    f"COCOAPODS_BUILD_CONFIGURATION_{config_name}" for config_name in whitelisted
                )
            else:
                logger.warning("%s is not whitelisted for any build configuration", spec.name)
                condition = "0"
            block.append(f"#if {condition}")
            block.append(f"    #define COCOAPODS_POD_AVAILABLE_{spec_id}")
            block.append("#endif")

        version = spec.version
        if version.is_semantic:
            block.append(f"#define COCOAPODS_VERSION_MAJOR_{spec_id} {version.major}")
            block.append(f"#define COCOAPODS_VERSION_MINOR_{spec_id} {version.minor}")
            block.append(f"#define COCOAPODS_VERSION_PATCH_{spec_id} {version.patch}")
        else:
            block.append("// This library does not follow semantic-versioning,")
            block.append("// so we were not able to define version macros.")
            block.append("// Please contact the author.")
            block.append(f"// Version: {version}.")

        block.append("")
        return block
