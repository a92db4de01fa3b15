"""Unit tests for the command-line entry point.

Tests the main() function including:
- Configuration priority (CLI > env > config)
- Reading profile and jobs files
- JSON output of ranked matches
- Exit code handling for configuration and input errors
"""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from jobboard.config.environment import EnvironmentConfig
from jobboard.config.models import AppConfig, LoggingConfig
from jobboard.domain.exceptions import InvalidRecordError
from jobboard.main import load_jobs, load_runtime_config, main


@pytest.fixture(autouse=True)
def isolated_run(tmp_path, monkeypatch):
    """Run from an empty directory without .env loading or lasting log handlers."""
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    with patch("jobboard.main.load_dotenv"):
        yield

    root.handlers[:] = handlers
    root.setLevel(level)


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def input_files(tmp_path, strong_profile, strong_job):
    """Profile and jobs files for a typical run."""
    profile_file = write_json(tmp_path / "profile.json", strong_profile)
    jobs_file = write_json(
        tmp_path / "jobs.json",
        [
            {"id": "far", "region_id": 13},
            strong_job,
            {"id": "near", "region_id": 2},
        ],
    )
    return profile_file, jobs_file


class TestLoadRuntimeConfig:
    """Test suite for load_runtime_config helper."""

    def test_config_values_used_by_default(self):
        """Test that config file values fill unset environment values."""
        app_config = AppConfig(logging=LoggingConfig(level="WARNING", format="json"), language="ru")

        with patch("jobboard.main.load_config", return_value=(app_config, EnvironmentConfig())):
            _, env_config = load_runtime_config(None, None)

        assert env_config.log_level == "WARNING"
        assert env_config.log_format == "json"
        assert env_config.language == "ru"

    def test_log_level_priority(self):
        """Test log level priority: CLI > env > config."""
        app_config = AppConfig(logging=LoggingConfig(level="WARNING"))

        with patch(
            "jobboard.main.load_config",
            return_value=(app_config, EnvironmentConfig(log_level="ERROR")),
        ):
            _, env_config = load_runtime_config(None, None)
        assert env_config.log_level == "ERROR"

        with patch(
            "jobboard.main.load_config",
            return_value=(app_config, EnvironmentConfig(log_level="ERROR")),
        ):
            _, env_config = load_runtime_config(None, "DEBUG")
        assert env_config.log_level == "DEBUG"


class TestLoadJobs:
    """Tests for load_jobs."""

    def test_array(self, tmp_path):
        """Test a plain JSON array."""
        assert load_jobs(write_json(tmp_path / "jobs.json", [{"id": 1}])) == [{"id": 1}]

    def test_wrapped_array(self, tmp_path):
        """Test an object holding a jobs array."""
        path = write_json(tmp_path / "jobs.json", {"jobs": [{"id": 1}], "total": 1})
        assert load_jobs(path) == [{"id": 1}]

    def test_not_an_array(self, tmp_path):
        """Test that other JSON documents are rejected."""
        with pytest.raises(InvalidRecordError) as exc_info:
            load_jobs(write_json(tmp_path / "jobs.json", {"id": 1}))

        assert exc_info.value.record_type == "jobs"


class TestMain:
    """Test suite for main()."""

    def test_ranks_and_prints_json(self, input_files, capsys):
        """Test a successful run."""
        profile_file, jobs_file = input_files

        exit_code = main(["--profile", str(profile_file), "--jobs", str(jobs_file)])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert [item["job_id"] for item in output] == ["job-1", "near", "far"]
        assert output[0]["match_score"] == 90
        assert output[0]["match_quality"] == "strong"
        assert output[1]["breakdown"] == {"neighbor_region": 15}
        assert output[1]["explanation"] == "Qo'shni hudud"

    def test_min_score_limit_and_lang(self, input_files, capsys):
        """Test CLI filters and language selection."""
        profile_file, jobs_file = input_files

        exit_code = main(
            [
                "--profile", str(profile_file),
                "--jobs", str(jobs_file),
                "--min-score", "10",
                "--limit", "1",
                "--lang", "ru",
            ]
        )

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert len(output) == 1
        assert output[0]["explanation"].startswith("Локация подходит")

    def test_language_from_environment(self, input_files, capsys, monkeypatch):
        """Test that MATCH_LANGUAGE selects the explanation language."""
        monkeypatch.setenv("MATCH_LANGUAGE", "ru")
        profile_file, jobs_file = input_files

        assert main(["--profile", str(profile_file), "--jobs", str(jobs_file), "--limit", "1"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert "Локация подходит" in output[0]["explanation"]

    def test_config_file_weights(self, tmp_path, input_files, capsys):
        """Test that weights from --config are applied."""
        profile_file, jobs_file = input_files
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("regions:\n  neighbors: {}\n", encoding="utf-8")

        exit_code = main(
            [
                "--profile", str(profile_file),
                "--jobs", str(jobs_file),
                "--config", str(config_file),
            ]
        )

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        near = next(item for item in output if item["job_id"] == "near")
        assert near["match_score"] == 0

    def test_strict_flag(self, tmp_path, capsys):
        """Test that --strict drops vacancies with unmet requirements."""
        profile_file = write_json(tmp_path / "profile.json", {"region_id": 1, "gender": "erkak"})
        jobs_file = write_json(
            tmp_path / "jobs.json",
            [{"id": "women", "region_id": 1, "gender": 2}, {"id": "open", "region_id": 1}],
        )
        base_args = ["--profile", str(profile_file), "--jobs", str(jobs_file)]

        assert main(base_args) == 0
        assert [item["job_id"] for item in json.loads(capsys.readouterr().out)] == ["women", "open"]

        assert main(base_args + ["--strict"]) == 0
        assert [item["job_id"] for item in json.loads(capsys.readouterr().out)] == ["open"]

    def test_missing_config_file(self, input_files, capsys):
        """Test exit code 1 for a missing configuration file."""
        profile_file, jobs_file = input_files

        exit_code = main(
            [
                "--profile", str(profile_file),
                "--jobs", str(jobs_file),
                "--config", "absent.yaml",
            ]
        )

        assert exit_code == 1
        assert "Configuration Error" in capsys.readouterr().err

    def test_invalid_environment(self, input_files, capsys, monkeypatch):
        """Test exit code 1 for invalid environment variables."""
        monkeypatch.setenv("LOG_FORMAT", "xml")
        profile_file, jobs_file = input_files

        assert main(["--profile", str(profile_file), "--jobs", str(jobs_file)]) == 1
        assert "LOG_FORMAT" in capsys.readouterr().err

    def test_missing_profile_file(self, tmp_path, input_files, capsys):
        """Test exit code 1 for a missing profile file."""
        _, jobs_file = input_files

        exit_code = main(["--profile", str(tmp_path / "nope.json"), "--jobs", str(jobs_file)])

        assert exit_code == 1
        assert "Input Error: Invalid profile: file not found" in capsys.readouterr().err

    def test_malformed_jobs_file(self, tmp_path, input_files, capsys):
        """Test exit code 1 for broken JSON."""
        profile_file, _ = input_files
        jobs_file = tmp_path / "broken.json"
        jobs_file.write_text("[{", encoding="utf-8")

        assert main(["--profile", str(profile_file), "--jobs", str(jobs_file)]) == 1
        assert "is not valid JSON" in capsys.readouterr().err

    def test_profile_not_an_object(self, tmp_path, input_files, capsys):
        """Test exit code 1 when the profile is not a JSON object."""
        _, jobs_file = input_files
        profile_file = write_json(tmp_path / "list.json", [1, 2])

        assert main(["--profile", str(profile_file), "--jobs", str(jobs_file)]) == 1
        assert "Invalid JobSeekerProfile" in capsys.readouterr().err

    def test_missing_required_argument(self):
        """Test that argparse exits when required arguments are missing."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
