"""Entry point for running hospital_records as a module.

This allows the package to be executed as:
    python -m hospital_records
"""

from hospital_records.cli.main import cli

if __name__ == "__main__":
    cli()
