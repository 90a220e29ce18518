"""Tests for the batch entry point."""

from pathlib import Path

import pytest

from fxcop_locator.errors import UnmappedRuleKeyError
from fxcop_locator.finding import Finding
from fxcop_locator.language_registry import LanguageRegistry
from fxcop_locator.locator_config import LocatorConfig
from fxcop_locator.resolution_outcome import Resolved, Skipped
from fxcop_locator.resolve_and_emit import resolve_and_emit
from fxcop_locator.rule_key import RuleKey
from fxcop_locator.rule_profile import ActiveRule, RuleProfile


@pytest.fixture
def project(tmp_path: Path) -> tuple[Path, LanguageRegistry]:
    """A small C# project with one untracked generated file."""
    for name in (
        "src/Foo/Bar.cs",
        "src/Other/Baz.cs",
        "Properties/AssemblyInfo.cs",
        "obj/Debug/App.g.cs",
    ):
        (tmp_path / name).parent.mkdir(parents=True, exist_ok=True)
        (tmp_path / name).write_text("")
    registry = LanguageRegistry()
    for name in ("src/Foo/Bar.cs", "src/Other/Baz.cs", "Properties/AssemblyInfo.cs"):
        registry.track(tmp_path / name, "cs")
    return tmp_path, registry


@pytest.fixture
def profile() -> RuleProfile:
    """Profile with the rules used by the findings below."""
    return RuleProfile(
        "fxcop",
        [
            ActiveRule("AvoidUnusedPrivateFields", config_key="CA1823"),
            ActiveRule("MarkAssembliesWithClsCompliant", config_key="CA1014"),
        ],
    )


def test_resolve_and_emit_batch(
    project: tuple[Path, LanguageRegistry], profile: RuleProfile
) -> None:
    """Verify exact, degraded and skipped findings in one pass."""
    root, registry = project
    findings = [
        Finding(str(root / "src/Foo"), "Bar.cs", 10, "Unused.", "CA1823", 1),
        Finding(None, "Baz.cs", 5, "Unused too.", "CA1823", 2),
        Finding(None, None, None, "Not CLS compliant.", "CA1014", 3),
        Finding("obj/Debug", "App.g.cs", 3, "Generated.", "CA1823", 4),
    ]

    report = resolve_and_emit(
        findings, root, "cs", registry=registry, profile=profile
    )

    exact, guessed, manifest, generated = report.outcomes
    assert isinstance(exact, Resolved) and exact.exact
    assert isinstance(guessed, Resolved) and not guessed.exact
    assert isinstance(manifest, Resolved) and manifest.line == 1
    assert isinstance(generated, Skipped)

    assert [(i.path.name, i.line) for i in registry.issues] == [
        ("Bar.cs", 10),
        ("Baz.cs", 5),
        ("AssemblyInfo.cs", 1),
    ]
    assert registry.issues[0].rule_key == RuleKey("fxcop", "AvoidUnusedPrivateFields")
    assert registry.issues[0].message == "Unused."
    assert registry.issues[1].message.startswith("Unused too. {File name may not")

    stats = report.compute_stats()
    assert stats["exact"] == 1
    assert stats["degraded"] == 2  # noqa: PLR2004
    assert stats["skipped"] == 1


def test_other_target_language_skips(
    project: tuple[Path, LanguageRegistry], profile: RuleProfile
) -> None:
    """Verify that the target language argument drives the language guard."""
    root, registry = project
    findings = [Finding(str(root / "src/Foo"), "Bar.cs", 10, "m", "CA1823", 1)]

    report = resolve_and_emit(
        findings, root, "vbnet", registry=registry, profile=profile
    )

    assert isinstance(report.outcomes[0], Skipped)
    assert registry.issues == []


def test_unmapped_rule_key_aborts(
    project: tuple[Path, LanguageRegistry], profile: RuleProfile
) -> None:
    """Verify that an unmapped rule key propagates out of the batch."""
    root, registry = project
    findings = [
        Finding(str(root / "src/Foo"), "Bar.cs", 1, "m", "CA1823", 1),
        Finding(str(root / "src/Foo"), "Bar.cs", 2, "m", "CA0000", 2),
    ]

    with pytest.raises(UnmappedRuleKeyError):
        resolve_and_emit(findings, root, "cs", registry=registry, profile=profile)

    assert len(registry.issues) == 1


def test_skipped_findings_need_no_rule(
    project: tuple[Path, LanguageRegistry], profile: RuleProfile
) -> None:
    """Verify that rule keys are only looked up for attached findings."""
    root, registry = project
    findings = [Finding(None, "Gone.g.cs", 1, "m", "CA0000", 1)]

    report = resolve_and_emit(findings, root, "cs", registry=registry, profile=profile)

    assert isinstance(report.outcomes[0], Skipped)


def test_report_is_tagged_with_config_hash(
    project: tuple[Path, LanguageRegistry], profile: RuleProfile
) -> None:
    """Verify that the report carries the fingerprint of the configuration."""
    root, registry = project

    report = resolve_and_emit([], root, "cs", registry=registry, profile=profile)

    assert report.config_hash == LocatorConfig.default().config_hash
    assert report.outcomes == []
