"""Command line entry point: attach FxCop findings to files of a project tree."""

import argparse
import logging
import sys
from pathlib import Path

from fxcop_locator.errors import FindingsFileError, UnmappedRuleKeyError
from fxcop_locator.language_registry import LanguageRegistry
from fxcop_locator.load_config import load_config
from fxcop_locator.load_findings import load_findings
from fxcop_locator.locator_config import LocatorConfig
from fxcop_locator.resolve_and_emit import resolve_and_emit
from fxcop_locator.rule_profile import RuleProfile
from fxcop_locator.should_execute import should_execute


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Map FxCop findings onto the files of a project tree."
    )
    parser.add_argument("findings", type=Path, help="YAML/JSON list of findings")
    parser.add_argument("project_root", type=Path, help="Root of the project tree")
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument(
        "--language",
        help="Target language key (defaults to the configured language_key)",
    )
    parser.add_argument(
        "--report", type=Path, help="Write a JSON resolution report to this path"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log skipped findings"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Resolve the findings and print the issues that would be attached."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    language = args.language or config["language_key"]
    registry = LanguageRegistry.from_tree(
        args.project_root, config["language_extensions"]
    )
    profile = RuleProfile.from_config(config)
    if not should_execute(registry.files_of_language(language), profile):
        print("Nothing to do.")
        return 0

    try:
        findings = load_findings(args.findings)
        report = resolve_and_emit(
            findings,
            args.project_root,
            language,
            registry=registry,
            profile=profile,
            config=LocatorConfig.from_dict(config),
        )
    except (FindingsFileError, UnmappedRuleKeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for issue in registry.issues:
        print(f"{issue.path}:{issue.line}: [{issue.rule_key}] {issue.message}")

    if args.report:
        report.generate_report(args.report)

    stats = report.compute_stats()
    print(
        f"{stats['exact']} exact, {stats['degraded']} guessed, "
        f"{stats['skipped']} skipped"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
