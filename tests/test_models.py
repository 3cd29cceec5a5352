"""
Tests for domain models — version parsing, pod targets, manifest lookups.
"""

import pytest
from pydantic import ValidationError

from podenv.core.models import (
    GeneratedFile,
    InstallationManifest,
    PodEntry,
    PodTarget,
    Specification,
    TargetDefinition,
    Version,
)


class TestVersion:
    """Version model tests."""

    def test_semantic(self):
        v = Version.parse("2.3.1")
        assert v.is_semantic
        assert (v.major, v.minor, v.patch) == (2, 3, 1)

    def test_semantic_with_prerelease_and_build(self):
        v = Version.parse("1.0.0-rc.1+build.5")
        assert v.is_semantic
        assert (v.major, v.minor, v.patch) == (1, 0, 0)

    @pytest.mark.parametrize("raw", ["HEAD", "1.0", "1", "1.2.3.4", "v1.2.3", "2014-05-01"])
    def test_non_semantic(self, raw: str):
        v = Version.parse(raw)
        assert not v.is_semantic
        assert v.major is None
        assert v.minor is None
        assert v.patch is None

    def test_str_is_raw(self):
        assert str(Version.parse("HEAD")) == "HEAD"

    def test_parse_strips_whitespace(self):
        assert Version.parse(" 1.2.3 ").raw == "1.2.3"

    def test_parse_passes_versions_through(self):
        v = Version.parse("1.2.3")
        assert Version.parse(v) is v

    def test_line_break_rejected(self):
        with pytest.raises(ValidationError, match="line breaks"):
            Version.parse("HEAD\r#define EVIL 1")

    def test_frozen(self):
        v = Version.parse("1.2.3")
        with pytest.raises(ValidationError):
            v.raw = "2.0.0"


class TestSpecification:
    def test_version_from_string(self):
        spec = Specification(name="Kiwi", version="2.2.4")
        assert isinstance(spec.version, Version)
        assert spec.version.major == 2

    def test_numeric_version_rejected(self):
        """Floats lose digits (1.10 → 1.1); only strings are accepted."""
        with pytest.raises(ValidationError):
            Specification(name="Kiwi", version=1.10)

    def test_line_break_in_name_rejected(self):
        with pytest.raises(ValidationError, match="line breaks"):
            Specification(name="Kiwi\n#define EVIL 1", version="1.0.0")

    def test_line_break_in_version_rejected(self):
        with pytest.raises(ValidationError, match="line breaks"):
            Specification(name="Kiwi", version="HEAD\n#define EVIL 1")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Specification(name="", version="1.0.0")


class TestPodTarget:
    def _target(self, configurations=None) -> PodTarget:
        return PodTarget(
            name="Kiwi",
            specs=[Specification(name="Kiwi", version="2.2.4")],
            configurations=configurations,
        )

    def test_whitelisted_everywhere_by_default(self):
        target = self._target()
        assert target.is_whitelisted_for_configuration("Kiwi", "Debug")
        assert target.is_whitelisted_for_configuration("Kiwi", "Anything")

    def test_whitelisted_for_listed_configurations(self):
        target = self._target(["Debug"])
        assert target.is_whitelisted_for_configuration("Kiwi", "Debug")
        assert not target.is_whitelisted_for_configuration("Kiwi", "Release")

    def test_unknown_spec_never_whitelisted(self):
        assert not self._target().is_whitelisted_for_configuration("Other", "Debug")

    def test_root_spec(self):
        assert self._target().root_spec.name == "Kiwi"
        assert PodTarget(name="Empty").root_spec is None


class TestPodEntry:
    def test_to_pod_target_with_subspecs(self):
        entry = PodEntry(name="Parse", version="1.2.3", subspecs=["UI", "Core"])
        target = entry.to_pod_target()

        assert [s.name for s in target.specs] == ["Parse", "Parse/UI", "Parse/Core"]
        assert all(s.version.raw == "1.2.3" for s in target.specs)
        assert target.configurations is None

    @pytest.mark.parametrize("value", [1.10, 2, 1.0])
    def test_numeric_version_rejected(self, value):
        with pytest.raises(ValidationError, match="quote it"):
            PodEntry(name="Old", version=value)

    def test_string_version_kept_as_written(self):
        assert PodEntry(name="Old", version="1.10").version == "1.10"

    def test_line_break_in_subspec_rejected(self):
        with pytest.raises(ValidationError, match="line breaks"):
            PodEntry(name="Parse", version="1.0.0", subspecs=["UI\r\n#undef X"])

    def test_configurations_copied(self):
        entry = PodEntry(name="Kiwi", version="1.0.0", configurations=["Debug"])
        target = entry.to_pod_target()
        target.configurations.append("Release")
        assert entry.configurations == ["Debug"]


class TestInstallationManifest:
    def test_defaults(self):
        m = InstallationManifest()
        assert m.version == 1
        assert m.build_configurations == ["Debug", "Release"]
        assert m.target_definitions == []
        assert m.pods == []

    def test_get_pod(self):
        m = InstallationManifest(pods=[PodEntry(name="Kiwi", version="1.0.0")])
        assert m.get_pod("Kiwi") is not None
        assert m.get_pod("Missing") is None

    def test_unknown_pods(self):
        m = InstallationManifest(
            target_definitions=[
                TargetDefinition(name="A", pod="Kiwi"),
                TargetDefinition(name="B", pod="Ghost"),
                TargetDefinition(name="C", pod="Ghost"),
            ],
            pods=[PodEntry(name="Kiwi", version="1.0.0")],
        )
        assert m.unknown_pods() == ["Ghost"]

    def test_unknown_configurations(self):
        m = InstallationManifest(
            pods=[
                PodEntry(name="Kiwi", version="1.0.0", configurations=["Debug", "Beta"]),
                PodEntry(name="Other", version="1.0.0"),
            ],
        )
        assert m.unknown_configurations() == {"Kiwi": ["Beta"]}


class TestGeneratedFile:
    def test_defaults(self):
        f = GeneratedFile(path="env.h", content="")
        assert f.overwrite is True
        assert f.reason == ""
