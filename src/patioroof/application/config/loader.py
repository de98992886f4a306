"""Loading of quote configuration files.

A configuration file is JSON validated against ``PatioRoofConfiguration``.
Every failure surfaces as a ``ConfigError`` whose ``error_type`` tells the
caller what went wrong and whose ``details`` carry the machine-readable
parts (JSON line/column, or one entry per schema violation).
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from patioroof.application.config.schemas import PatioRoofConfiguration


class ConfigError(Exception):
    """A quote configuration could not be loaded.

    Attributes:
        message: Human-readable summary, one line per problem
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation
        path: Configuration file, when the data came from a file
        details: Structured problem descriptions
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_validation_error(
        cls, error: PydanticValidationError, path: Path | None = None
    ) -> "ConfigError":
        """Build a ``validation`` error from a pydantic ValidationError."""
        details = _extract_validation_errors(error)
        return cls(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it reads in the JSON file.

    Examples:
        >>> _format_json_path(("configuration", "depth"))
        'configuration.depth'
        >>> _format_json_path(("items", 0, "width"))
        'items[0].width'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path'] or '<root>'}: {detail['message']}"
        value = detail.get("value")
        # Whole objects are noise in a one-line summary.
        if value is not None and not isinstance(value, dict):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config(path: Path) -> PatioRoofConfiguration:
    """Load and validate a quote configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        The validated configuration

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema.
    """
    data = _read_json(path)
    try:
        return PatioRoofConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError.from_validation_error(e, path=path)


def load_config_from_dict(data: dict[str, Any]) -> PatioRoofConfiguration:
    """Validate configuration data that did not come from a file.

    Used for request bodies and for re-validating merged configurations.

    Raises:
        ConfigError: With error_type "validation" if the data is invalid.
    """
    try:
        return PatioRoofConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError.from_validation_error(e)
