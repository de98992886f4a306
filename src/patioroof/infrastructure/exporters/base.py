"""Exporter protocol, format registry and the multi-format export manager."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from patioroof.application.dtos import QuoteOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Writes a quote in one file format."""

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    def export(self, output: QuoteOutput, path: Path) -> None: ...

    def export_string(self, output: QuoteOutput) -> str: ...


class ExporterRegistry:
    """Exporter classes by format name.

    Exporter modules register their class with the decorator when they are
    imported:

        @ExporterRegistry.register("json")
        class JsonQuoteExporter:
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Callable[[type[Exporter]], type[Exporter]]:
        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(f"Replacing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}' ({exporter_class.__name__})")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for ``format_name``.

        Raises:
            KeyError: If the format is not registered.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            available = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available}"
            ) from None

    @classmethod
    def create(cls, format_name: str, **options: Any) -> Exporter:
        """Instantiate the exporter for ``format_name`` with ``options``."""
        return cls.get(format_name)(**options)

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes one quote in several formats into a directory.

    Files are named ``{project_name}_{format}.{extension}``; the directory is
    created when the first export runs.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def filename(self, format_name: str, project_name: str = "patio_roof") -> Path:
        extension = ExporterRegistry.get(format_name).file_extension
        return self.output_dir / f"{project_name}_{format_name}.{extension}"

    def export_all(
        self,
        formats: Iterable[str],
        output: QuoteOutput,
        project_name: str = "patio_roof",
    ) -> dict[str, Path]:
        """Export ``output`` in every format of ``formats``.

        All formats are resolved before anything is written, so an unknown
        format leaves the directory untouched.

        Returns:
            Written file path by format name.

        Raises:
            KeyError: If a format is not registered.
            OSError: If a file cannot be written.
        """
        targets = {name: self.filename(name, project_name) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        for format_name, path in targets.items():
            logger.info(f"Exporting {format_name} to {path}")
            ExporterRegistry.create(format_name).export(output, path)
        return targets

    def export_single(
        self,
        format_name: str,
        output: QuoteOutput,
        project_name: str = "patio_roof",
    ) -> Path:
        return self.export_all([format_name], output, project_name)[format_name]
