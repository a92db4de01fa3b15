"""Command-line entry point: rank vacancies for a job seeker profile."""

from dotenv import load_dotenv

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from jobboard.config.environment import EnvironmentConfig
from jobboard.config.exceptions import ConfigurationError
from jobboard.config.loader import load_config
from jobboard.config.models import AppConfig
from jobboard.domain.exceptions import InvalidRecordError
from jobboard.logging import get_logger
from jobboard.logging.config import configure_logging
from jobboard.logging.context import log_context
from jobboard.matching import MatchScorer, build_match_payload

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve effective runtime settings.

    Priority for log level and format: CLI > environment > config file.

    Args:
        config_path: Path to configuration file (None = search defaults)
        log_level_override: Log level from CLI

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with log settings resolved

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    if not env_config.log_format:
        env_config.log_format = app_config.logging.format

    if not env_config.language:
        env_config.language = app_config.language

    return app_config, env_config


def read_json_file(path: Path, record_type: str) -> Any:
    """Read and parse a JSON input file.

    Raises:
        InvalidRecordError: If the file is missing or not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise InvalidRecordError(f"file not found: {path}", record_type=record_type) from e
    except json.JSONDecodeError as e:
        raise InvalidRecordError(f"{path} is not valid JSON: {e}", record_type=record_type) from e


def load_jobs(path: Path) -> List[Any]:
    """Read the jobs file; accepts a JSON array or an object with a "jobs" array."""
    data = read_json_file(path, "jobs")
    if isinstance(data, dict) and "jobs" in data:
        data = data["jobs"]
    if not isinstance(data, list):
        raise InvalidRecordError(
            f"{path} must contain a JSON array of jobs", record_type="jobs"
        )
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobboard-match",
        description="Rank job postings for a job seeker profile",
    )
    parser.add_argument(
        "--profile",
        type=Path,
        required=True,
        help="Path to a JSON file with the job seeker profile",
    )
    parser.add_argument(
        "--jobs",
        type=Path,
        required=True,
        help="Path to a JSON file with an array of job postings",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--min-score",
        type=int,
        default=0,
        help="Drop jobs scoring below this value (default: 0)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of jobs to print",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Drop jobs failing a stated gender, age, education or experience requirement",
    )
    parser.add_argument(
        "--lang",
        choices=["uz", "ru"],
        default=None,
        help="Language of match explanations (overrides config and environment)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Rank jobs and print them as a JSON array.

    Returns:
        Exit code (0 for success, 1 for configuration or input errors).
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
        configure_logging(
            level=env_config.log_level,
            format_type=env_config.log_format,
            environment=env_config.environment,
            stream=sys.stderr,
        )
        lang = args.lang or env_config.language

        profile = read_json_file(args.profile, "profile")
        jobs = load_jobs(args.jobs)

        scorer = MatchScorer(
            scoring_config=app_config.scoring,
            adjacency=app_config.regions.build_adjacency(),
        )

        with log_context(profile_file=str(args.profile), lang=lang):
            results = scorer.rank(
                profile, jobs, min_score=args.min_score, limit=args.limit, strict=args.strict
            )

        payload = [build_match_payload(result, lang) for result in results]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except InvalidRecordError as e:
        print(f"Input Error: {e}", file=sys.stderr)
        logger.error(
            f"Input error: {e}",
            extra={"event": "input.error", "record_type": e.record_type},
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
