# SPDX-License-Identifier: MIT
"""Tests for the semver parse, compare, sort, min, max and check commands."""

from __future__ import annotations

import json

from click.testing import CliRunner

from semver_cli.main import cli


class TestParseCommand:
    """Tests for semver parse command."""

    def test_parse_text(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "1.2.3-alpha.1+001"])

        assert result.exit_code == 0
        assert "major: 1" in result.output
        assert "minor: 2" in result.output
        assert "patch: 3" in result.output
        assert "prerelease: alpha.1" in result.output
        assert "build: 001" in result.output
        assert "stable: True" in result.output

    def test_parse_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--format", "json", "parse", "0.1.0"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "major": 0,
            "minor": 1,
            "patch": 0,
            "prerelease": None,
            "build": None,
            "stable": False,
        }

    def test_parse_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "1.2.03"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "MAJOR.MINOR.PATCH" in result.output


class TestCompareCommand:
    """Tests for semver compare command."""

    def test_less(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0-beta.2", "1.0.0-beta.11"])

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_greater(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0", "1.0.0-rc.1"])

        assert result.output.strip() == "1"

    def test_build_ignored_verbose(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "compare", "1.0.0+a", "1.0.0+b"])

        assert result.exit_code == 0
        assert "1.0.0+a = 1.0.0+b" in result.output
        assert "different build metadata" in result.output
        assert result.output.strip().endswith("0")

    def test_compare_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--format", "json", "compare", "2.0.0", "1.0.0"])

        assert json.loads(result.stdout)["result"] == 1

    def test_compare_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0", "1.0"])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestSortCommand:
    """Tests for semver sort command."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["sort", "1.0.0", "1.0.0-beta.11", "1.0.0-alpha", "1.0.0-beta.2", "0.9.0"]
        )

        assert result.exit_code == 0
        assert result.output.split() == [
            "0.9.0",
            "1.0.0-alpha",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0",
        ]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "--reverse", "1.0.0", "2.0.0"])

        assert result.output.split() == ["2.0.0", "1.0.0"]

    def test_sort_stable(self, cli_runner: CliRunner) -> None:
        """Precedence-equal versions keep their input order."""
        result = cli_runner.invoke(cli, ["sort", "1.0.0+b", "1.0.0+a"])

        assert result.output.split() == ["1.0.0+b", "1.0.0+a"]

    def test_sort_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--format", "json", "sort", "1.0.0", "0.1.0"])

        assert json.loads(result.stdout) == ["0.1.0", "1.0.0"]


class TestMinMaxCommands:
    """Tests for semver min and max commands."""

    def test_min(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["min", "1.0.0", "0.0.0", "0.1.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "0.0.0"

    def test_max(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["max", "1.0.0", "0.0.0", "0.1.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.0.0"

    def test_requires_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["max"])

        assert result.exit_code == 2


class TestCheckCommand:
    """Tests for semver check command."""

    def test_all_included(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "[1.0.0, 2.0.0)", "1.0.0", "1.5.0"])

        assert result.exit_code == 0
        assert "1.5.0 is in [1.0.0, 2.0.0)" in result.output

    def test_some_excluded(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "[1.0.0, 2.0.0)", "1.5.0", "2.0.0"])

        assert result.exit_code == 1
        assert "2.0.0 is not in [1.0.0, 2.0.0)" in result.output

    def test_check_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--format", "json", "check", "(0.0.0, 1.0.0]", "0.0.0", "1.0.0"]
        )

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["range"] == "(0.0.0, 1.0.0]"
        assert data["results"] == [
            {"version": "0.0.0", "included": False},
            {"version": "1.0.0", "included": True},
        ]

    def test_repeated_versions_reported_each_time(self, cli_runner: CliRunner) -> None:
        """Every argument gets its own result, even when repeated."""
        result = cli_runner.invoke(
            cli, ["--format", "json", "check", "[1.0.0, 2.0.0)", "1.5.0", "1.5.0", "3.0.0"]
        )

        assert result.exit_code == 1
        versions = [entry["version"] for entry in json.loads(result.stdout)["results"]]
        assert versions == ["1.5.0", "1.5.0", "3.0.0"]

    def test_repeated_versions_text(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "[1.0.0, 2.0.0)", "1.5.0", "1.5.0"])

        assert result.exit_code == 0
        assert result.output.count("1.5.0 is in [1.0.0, 2.0.0)") == 2

    def test_malformed_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "1.0.0 - 2.0.0", "1.5.0"])

        assert result.exit_code == 1
        assert "Invalid version range" in result.output

    def test_included_absent_maximum(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "[1.0.0, ]", "1.5.0"])

        assert result.exit_code == 1
        assert "upper boundary" in result.output


class TestEnvironmentConfig:
    """Tests for configuration picked up from the environment."""

    def test_json_from_env(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["max", "1.0.0", "2.0.0"], env={"SEMVER_OUTPUT_FORMAT": "json"}
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == "2.0.0"

    def test_option_overrides_env(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--format", "text", "max", "1.0.0"], env={"SEMVER_OUTPUT_FORMAT": "json"}
        )

        assert result.output.strip() == "1.0.0"
