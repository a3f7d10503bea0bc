"""Unit tests for CLI commands.

This module tests the command-line interface for hospital-records including
main options, per-entity commands and error reporting.
"""

import json
from pathlib import Path
from typing import Iterator, List
from unittest.mock import patch

import pytest
from click.testing import CliRunner, Result

from hospital_records.cli.main import cli
from hospital_records.utils.exceptions import PersistenceWriteError


@pytest.fixture(autouse=True)
def no_logging_setup() -> Iterator[None]:
    """Keep CLI invocations from installing real log handlers."""
    with patch("hospital_records.cli.main.configure_logging"):
        yield


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def invoke(runner: CliRunner, data_file: Path, args: List[str], **kwargs) -> Result:
    return runner.invoke(cli, ["--data-file", str(data_file), *args], **kwargs)


class TestMainCLI:
    """Test cases for main CLI entry point."""

    def test_cli_help(self, runner: CliRunner) -> None:
        # Act
        result = runner.invoke(cli, ["--help"])

        # Assert
        assert result.exit_code == 0
        assert "Hospital Records" in result.output
        assert "--data-file" in result.output
        for group in ["patient", "staff", "appointment", "service", "pharmacy", "invoice", "user"]:
            assert group in result.output

    def test_cli_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "hospital-records" in result.output

    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0
        assert "hospital-records version" in result.output

    def test_verbose_flag_configures_debug_logging(self, runner: CliRunner) -> None:
        # Act
        with patch("hospital_records.cli.main.configure_logging") as mock_config:
            result = runner.invoke(cli, ["--verbose", "patient", "--help"])

        # Assert
        assert result.exit_code == 0
        mock_config.assert_called_once()
        assert mock_config.call_args[1]["level"] == "DEBUG"


class TestPatientCommands:
    """Test cases for patient commands."""

    def test_add_and_list(self, runner: CliRunner, data_file: Path) -> None:
        # Act
        added = invoke(runner, data_file, [
            "patient", "add", "--name", "Dupont", "--surname", "Jean",
            "--birth-date", "01/02/1980", "--health-number", "180027512345678",
        ])
        listed = invoke(runner, data_file, ["patient", "list"])

        # Assert
        assert added.exit_code == 0, added.output
        assert "Patient added with ID 1" in added.output
        assert listed.exit_code == 0
        assert "Name: Dupont Jean" in listed.output
        assert json.loads(data_file.read_text(encoding="utf-8"))["patients"][0]["id"] == 1

    def test_add_prompts_for_missing_values(self, runner: CliRunner, data_file: Path) -> None:
        result = invoke(
            runner, data_file, ["patient", "add"],
            input="Dupont\nJean\n01/02/1980\n180027512345678\n",
        )

        assert result.exit_code == 0, result.output
        assert "Patient added with ID 1" in result.output

    def test_note_unknown_patient(self, runner: CliRunner, data_file: Path) -> None:
        result = invoke(runner, data_file, ["patient", "note", "3", "--content", "x", "--author", "1"])

        assert result.exit_code == 1
        assert "Patient 3 not found" in result.output

    def test_urgency_and_show(self, runner: CliRunner, data_file: Path) -> None:
        # Arrange
        invoke(runner, data_file, [
            "patient", "add", "--name", "Dupont", "--surname", "Jean",
            "--birth-date", "01/02/1980", "--health-number", "1",
        ])
        invoke(runner, data_file, ["patient", "note", "1", "--content", "Stable", "--author", "8"])

        # Act
        urgency = invoke(runner, data_file, ["patient", "urgency", "1", "--level", "3"])
        shown = invoke(runner, data_file, ["patient", "show", "1"])

        # Assert
        assert "Urgency set to High" in urgency.output
        assert shown.exit_code == 0
        assert "Unknown: Stable" in shown.output

    def test_urgency_rejects_out_of_range(self, runner: CliRunner, data_file: Path) -> None:
        result = invoke(runner, data_file, ["patient", "urgency", "1", "--level", "9"])

        assert result.exit_code == 2


class TestInvoiceCommands:
    """Test cases for invoice commands."""

    def test_create_with_items_and_pay(self, runner: CliRunner, data_file: Path) -> None:
        # Act
        created = invoke(runner, data_file, [
            "invoice", "create", "--patient-id", "1",
            "--item", "Consultation", "25.0", "CS",
            "--item", "Blood test", "12.5", "B120",
        ])
        status = invoke(runner, data_file, ["invoice", "status", "1", "--status", "2"])
        listed = invoke(runner, data_file, ["invoice", "list"])

        # Assert
        assert "Invoice 1 created, total 37.50" in created.output
        assert "Invoice 1 marked Paid" in status.output
        assert "Patient: Unknown" in listed.output
        assert "Status: Paid" in listed.output

    def test_create_interactive_items(self, runner: CliRunner, data_file: Path) -> None:
        # Arrange - amount "abc" is rejected and re-prompted
        answers = "y\nConsultation\nabc\n25\nCS\nn\n"

        # Act
        result = invoke(runner, data_file, ["invoice", "create", "--patient-id", "1"], input=answers)

        # Assert
        assert result.exit_code == 0, result.output
        assert "total 25.00" in result.output

    def test_status_unknown_invoice(self, runner: CliRunner, data_file: Path) -> None:
        result = invoke(runner, data_file, ["invoice", "status", "4", "--status", "2"])

        assert result.exit_code == 1
        assert "Invoice 4 not found" in result.output


class TestOtherCommands:
    """Test staff, service, pharmacy, user and stats commands."""

    def test_staff_service_pharmacy_user(self, runner: CliRunner, data_file: Path) -> None:
        # Act
        staff = invoke(runner, data_file, [
            "staff", "add", "--name", "Martin", "--surname", "Claude",
            "--specialty", "Cardiology", "--qualification", "MD",
        ])
        service = invoke(runner, data_file, [
            "service", "add", "--name", "Cardiology", "--chief-id", "1", "--capacity", "20",
        ])
        equipment = invoke(runner, data_file, [
            "service", "equipment", "1", "--name", "ECG", "--status", "2",
            "--last-maintenance", "01/01/2024", "--next-maintenance", "01/07/2024",
        ])
        medication = invoke(runner, data_file, [
            "pharmacy", "add", "--name", "Paracetamol", "--description", "Analgesic",
            "--stock", "5", "--alert-threshold", "5", "--expiry-date", "31/12/2025",
        ])
        user = invoke(runner, data_file, [
            "user", "add", "--username", "admin", "--password", "s3cret", "--role", "1",
        ])
        services = invoke(runner, data_file, ["service", "list"])
        stock = invoke(runner, data_file, ["pharmacy", "stock"])
        users = invoke(runner, data_file, ["user", "list"])

        # Assert
        for result in [staff, service, equipment, medication, user]:
            assert result.exit_code == 0, result.output
        assert "Head of service: Dr. Martin Claude" in services.output
        assert "ECG - Under maintenance" in services.output
        assert "Low stock!" in stock.output
        assert "Role: Admin" in users.output
        assert "s3cret" not in data_file.read_text(encoding="utf-8")

    def test_stats(self, runner: CliRunner, data_file: Path) -> None:
        # Arrange
        invoke(runner, data_file, [
            "appointment", "add", "--date", "10/05/2024", "--time", "09:00",
            "--patient-id", "1", "--staff-id", "1",
        ])

        # Act
        result = invoke(runner, data_file, ["stats", "--date", "10/05/2024"])

        # Assert
        assert result.exit_code == 0
        assert "Appointments today: 1" in result.output
        assert "Paid invoices total: 0.00" in result.output

    def test_write_failure_reported(self, runner: CliRunner, data_file: Path) -> None:
        # Arrange
        error = PersistenceWriteError(data_file, "Permission denied")

        # Act
        with patch("hospital_records.store.json_store.JsonStore.save", side_effect=error):
            result = invoke(runner, data_file, [
                "staff", "add", "--name", "Martin", "--surname", "Claude", "--specialty", "x",
            ])

        # Assert
        assert result.exit_code == 1
        assert "may not have been saved" in result.output

    def test_save_command(self, runner: CliRunner, data_file: Path) -> None:
        result = invoke(runner, data_file, ["save"])

        assert result.exit_code == 0
        assert json.loads(data_file.read_text(encoding="utf-8"))["patients"] == []


class TestConfigCommands:
    """Test config validate."""

    def test_validate_valid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        # Arrange
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"store": {"on_corrupt": "fail"}}))

        # Act
        result = runner.invoke(cli, ["config", "validate", str(config_file)])

        # Assert
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "On corrupt:  fail" in result.output

    def test_validate_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"store": {"on_corrupt": "shrug"}}))

        result = runner.invoke(cli, ["config", "validate", str(config_file)])

        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output
