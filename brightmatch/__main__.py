"""Command line entry point for BrightMatch scoring."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from brightmatch import __version__
from brightmatch.assessments.catalog import CatalogService, get_catalog
from brightmatch.assessments.models import Question
from brightmatch.assessments.validation import InvalidAnswersError
from brightmatch.config.settings import Settings
from brightmatch.utils.logging import configure_logging


def _answers(value: str) -> list[int]:
    parts = [chunk.strip() for chunk in value.replace(" ", ",").split(",")]
    try:
        return [int(part) for part in parts if part]
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            "--answers must be comma-separated option indices (e.g. 0,2,1)"
        ) from e


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2))


def _load_questions(catalog: Path | None, default: str) -> Sequence[Question]:
    if catalog is not None:
        return CatalogService().load_catalog(catalog)
    return get_catalog(default)


def _add_answer_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--answers",
        type=_answers,
        required=True,
        help="Comma-separated option indices, one per question",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Optional custom catalog (YAML or JSON) instead of the built-in one",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON output")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="brightmatch",
        description="BrightMatch: IQ/EQ/personality scoring and compatibility",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m brightmatch iq --answers 0,0,0,0,2,0,0,1,0,0
  python -m brightmatch compat --a alice.yaml --b bob.yaml --breakdown
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
    )

    iq_parser = subparsers.add_parser("iq", help="Score an IQ test submission")
    _add_answer_arguments(iq_parser)

    eq_parser = subparsers.add_parser("eq", help="Score an EQ test submission")
    _add_answer_arguments(eq_parser)

    type_parser = subparsers.add_parser(
        "type", help="Classify a personality questionnaire"
    )
    _add_answer_arguments(type_parser)
    type_parser.add_argument(
        "--short",
        action="store_true",
        help="Use the 20-question quick questionnaire",
    )

    interpret_parser = subparsers.add_parser(
        "interpret", help="Explain an already calibrated score"
    )
    interpret_parser.add_argument("--kind", choices=["iq", "eq"], required=True)
    interpret_parser.add_argument("--score", type=int, required=True)

    compat_parser = subparsers.add_parser(
        "compat", help="Compatibility percentage of two profiles"
    )
    compat_parser.add_argument(
        "--a", type=Path, required=True, help="First profile (YAML or JSON)"
    )
    compat_parser.add_argument(
        "--b", type=Path, required=True, help="Second profile (YAML or JSON)"
    )
    compat_parser.add_argument(
        "--breakdown", action="store_true", help="Show the per-factor breakdown"
    )
    compat_parser.add_argument("--json", action="store_true", help="Print JSON output")

    leaderboard_parser = subparsers.add_parser(
        "leaderboard", help="Rank profiles by IQ, EQ or combined score"
    )
    leaderboard_parser.add_argument(
        "profiles", type=Path, help="Profiles file (YAML or JSON list)"
    )
    leaderboard_parser.add_argument(
        "--kind",
        choices=["iq", "eq"],
        default=None,
        help="Rank by a single score (defaults to IQ + EQ)",
    )
    leaderboard_parser.add_argument("--city", default=None, help="Only this city")
    leaderboard_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum entries (defaults to settings)",
    )
    leaderboard_parser.add_argument(
        "--json", action="store_true", help="Print JSON output"
    )

    questions_parser = subparsers.add_parser(
        "questions", help="Print a built-in question catalog"
    )
    questions_parser.add_argument(
        "name", choices=["iq", "eq", "type", "type-short"], help="Catalog name"
    )

    return parser


def _run_test(parsed: argparse.Namespace) -> int:
    from brightmatch.assessments.scoring import interpret_score, score_eq, score_iq

    scorer = score_iq if parsed.command == "iq" else score_eq
    questions = _load_questions(parsed.catalog, parsed.command)
    result = scorer(parsed.answers, questions)
    interpretation = interpret_score(result.score, parsed.command)

    if parsed.json:
        _print_json({**result.to_dict(), "interpretation": interpretation})
        return 0

    print(f"{parsed.command.upper()} score: {result.score}")
    print(f"Percentile: {result.percentile}")
    print(f"Band: {result.description}")
    print(interpretation)
    return 0


def _run_type(parsed: argparse.Namespace) -> int:
    from brightmatch.assessments.personality import classify_type, describe_type

    default = "type-short" if parsed.short else "type"
    questions = _load_questions(parsed.catalog, default)
    code = classify_type(parsed.answers, questions)
    profile = describe_type(code)

    if parsed.json:
        _print_json(profile.to_dict())
        return 0

    print(f"{code}: {profile.archetype}")
    print(f"{profile.summary} {profile.description}")
    return 0


def _run_compat(parsed: argparse.Namespace) -> int:
    from brightmatch.matching.profile import ProfileService
    from brightmatch.matching.service import CompatibilityService

    profiles = ProfileService()
    first = profiles.load_profile(parsed.a)
    second = profiles.load_profile(parsed.b)

    service = CompatibilityService()
    result = service.breakdown(first, second)

    if parsed.json:
        _print_json(result.to_dict())
    elif parsed.breakdown:
        print(service.format_breakdown(result))
    else:
        print(f"{result.score}%")
    return 0


def _run_leaderboard(parsed: argparse.Namespace, settings: Settings) -> int:
    from brightmatch.matching.leaderboard import rank_profiles
    from brightmatch.matching.profile import ProfileService

    profiles = ProfileService().load_profiles(parsed.profiles)
    limit = parsed.limit if parsed.limit is not None else settings.leaderboard_limit
    entries = rank_profiles(profiles, parsed.kind, city=parsed.city, limit=limit)

    if parsed.json:
        _print_json([entry.to_dict() for entry in entries])
        return 0

    if not entries:
        print("No ranked profiles.")
        return 0

    for entry in entries:
        p = entry.profile
        label = p.name or p.user_id
        print(
            f"{entry.rank:>3}. {label:<20} iq={p.iq_score:<4} eq={p.eq_score:<4} "
            f"total={entry.total_score}"
        )
    return 0


def _run_questions(parsed: argparse.Namespace) -> int:
    for index, question in enumerate(get_catalog(parsed.name)):
        tag = f" [{question.dimension.value}]" if question.dimension else ""
        print(f"{index + 1}. {question.text}{tag}")
        for option_index, option in enumerate(question.options):
            print(f"   {option_index}) {option}")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.command is None:
        parser.print_help()
        return 0

    logger.info(f"BrightMatch v{__version__} running '{parsed.command}'")

    try:
        if parsed.command in {"iq", "eq"}:
            return _run_test(parsed)
        if parsed.command == "type":
            return _run_type(parsed)
        if parsed.command == "interpret":
            from brightmatch.assessments.scoring import interpret_score, result_for_score

            result = result_for_score(parsed.score, parsed.kind)
            print(f"{result.description} (percentile {result.percentile})")
            print(interpret_score(parsed.score, parsed.kind))
            return 0
        if parsed.command == "compat":
            return _run_compat(parsed)
        if parsed.command == "leaderboard":
            return _run_leaderboard(parsed, settings)
        if parsed.command == "questions":
            return _run_questions(parsed)
    except (InvalidAnswersError, FileNotFoundError, KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
