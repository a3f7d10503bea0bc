"""Integration tests for CLI workflows.

This module tests multi-step CLI sessions sharing one data file, and how the
CLI reacts to an unreadable data file under each corrupt-store policy.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from hospital_records.cli.main import cli


class TestCLIWorkflows:
    """Integration tests for complete CLI workflows."""

    def test_register_book_and_list(self, runner: CliRunner, tmp_path: Path) -> None:
        """Register a patient and a physician, book, then list the appointment."""
        # Arrange
        data_file = str(tmp_path / "data.json")
        base = ["--data-file", data_file]

        # Act
        runner.invoke(cli, base + [
            "patient", "add", "--name", "Dupont", "--surname", "Jean",
            "--birth-date", "01/02/1980", "--health-number", "180027512345678",
        ])
        runner.invoke(cli, base + [
            "staff", "add", "--name", "Martin", "--surname", "Claude", "--specialty", "Cardiology",
        ])
        booked = runner.invoke(cli, base + [
            "appointment", "add", "--date", "10/05/2024", "--time", "09:00",
            "--patient-id", "1", "--staff-id", "1",
        ])
        listed = runner.invoke(cli, base + ["appointment", "list"])

        # Assert
        assert booked.exit_code == 0, booked.output
        assert "Appointment added with ID 1" in booked.output
        assert "Patient: Dupont Jean" in listed.output
        assert "Physician: Dr. Martin Claude" in listed.output

    def test_dangling_appointment_lists_unknown(self, runner: CliRunner, tmp_path: Path) -> None:
        # Arrange
        data_file = str(tmp_path / "data.json")

        # Act
        runner.invoke(cli, ["--data-file", data_file, "appointment", "add",
                            "--date", "10/05/2024", "--time", "09:00",
                            "--patient-id", "99", "--staff-id", "98"])
        listed = runner.invoke(cli, ["--data-file", data_file, "appointment", "list"])

        # Assert
        assert listed.exit_code == 0
        assert "Patient: Unknown" in listed.output
        assert "Physician: Dr. Unknown" in listed.output

    def test_data_file_from_environment(self, runner: CliRunner, tmp_path: Path) -> None:
        # Arrange
        data_file = tmp_path / "env-data.json"

        # Act
        result = runner.invoke(
            cli,
            ["staff", "add", "--name", "Martin", "--surname", "Claude", "--specialty", "x"],
            env={"HOSPITAL_DATA_FILE": str(data_file)},
        )

        # Assert
        assert result.exit_code == 0, result.output
        assert json.loads(data_file.read_text(encoding="utf-8"))["staff"][0]["name"] == "Martin"


class TestCorruptDataFile:
    """CLI behaviour when the data file cannot be parsed."""

    def test_prompt_declined_leaves_file_untouched(
        self, runner: CliRunner, corrupt_data_file: Path
    ) -> None:
        # Act
        result = runner.invoke(
            cli, ["--data-file", str(corrupt_data_file), "patient", "list"], input="n\n"
        )

        # Assert
        assert result.exit_code == 1
        assert "unreadable or malformed" in result.output
        assert "left untouched" in result.output
        assert corrupt_data_file.read_text(encoding="utf-8") == '{"patients": ['

    def test_prompt_accepted_quarantines_and_starts_empty(
        self, runner: CliRunner, corrupt_data_file: Path
    ) -> None:
        # Act
        result = runner.invoke(
            cli,
            ["--data-file", str(corrupt_data_file), "staff", "add",
             "--name", "Martin", "--surname", "Claude", "--specialty", "x"],
            input="y\n",
        )

        # Assert
        assert result.exit_code == 0, result.output
        assert "Staff member added with ID 1" in result.output
        kept = list(corrupt_data_file.parent.glob("data.json.corrupt-*"))
        assert len(kept) == 1
        assert kept[0].read_text(encoding="utf-8") == '{"patients": ['
        assert json.loads(corrupt_data_file.read_text(encoding="utf-8"))["staff"][0]["id"] == 1

    def test_fail_policy_aborts(self, runner: CliRunner, corrupt_data_file: Path) -> None:
        # Act
        result = runner.invoke(
            cli,
            ["--data-file", str(corrupt_data_file), "stats"],
            env={"HOSPITAL_ON_CORRUPT": "fail"},
        )

        # Assert
        assert result.exit_code == 1
        assert "on_corrupt" in result.output
        assert not list(corrupt_data_file.parent.glob("data.json.corrupt-*"))

    def test_reset_policy_without_backup_starts_empty(
        self, runner: CliRunner, corrupt_data_file: Path
    ) -> None:
        # Act
        result = runner.invoke(
            cli,
            ["--data-file", str(corrupt_data_file), "stats", "--date", "10/05/2024"],
            env={"HOSPITAL_ON_CORRUPT": "reset", "HOSPITAL_BACKUP_CORRUPT": "false"},
        )

        # Assert
        assert result.exit_code == 0, result.output
        assert "Patients: 0" in result.output
        assert not list(corrupt_data_file.parent.glob("data.json.corrupt-*"))
