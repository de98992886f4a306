"""``patioroof validate``: check a configuration file without quoting it."""

from pathlib import Path
from typing import Annotated

import typer

from patioroof.application.config import (
    ConfigError,
    ValidationIssue,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a patio roof configuration file.

    Reports JSON syntax errors, schema errors (unknown fields, out-of-range
    values, unknown options), sizes without a price, and advisories about
    gutter height, pitch and custom sizes.

    Exit codes:
        0 - valid
        1 - errors, the configuration cannot be quoted
        2 - valid with warnings

    Example:
        patioroof validate my-roof.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "json_parse":
        lines = ["Invalid JSON syntax"]
        for detail in error.details:
            lines.append(
                f"  Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}"
            )
        return lines
    if error.error_type == "validation":
        lines = []
        for detail in error.details:
            lines.append(f"{detail.get('path') or '<root>'}: {detail.get('message')}")
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                lines.append(f"  Value: {value!r}")
        return lines
    return [error.message]


def display_load_error(error: ConfigError) -> None:
    """Print a file loading error to stderr."""
    typer.echo("Errors:", err=True)
    for line in _load_error_lines(error):
        typer.echo(f"  {line}", err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)


def _echo_issues(title: str, issues: list[ValidationIssue], err: bool) -> None:
    if not issues:
        return
    typer.echo(f"{title}:", err=err)
    for issue in issues:
        typer.echo(f"  {issue.path}: {issue.message}", err=err)
        if issue.value is not None:
            typer.echo(f"    Value: {issue.value!r}", err=err)
        if issue.suggestion:
            typer.echo(f"    Suggestion: {issue.suggestion}", err=err)
    typer.echo()


def _display_validation_result(result: ValidationResult) -> None:
    _echo_issues("Errors", result.errors, err=True)
    _echo_issues("Warnings", result.warnings, err=False)

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
