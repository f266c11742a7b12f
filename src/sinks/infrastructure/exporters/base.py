"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sinks.application.dtos import BomResult


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters render a BomResult in one presentation format. They consume the
    already aggregated and categorized views and never merge or classify
    again.

    Attributes:
        format_name: Registered name of the format (e.g., "csv", "tree").
        file_extension: File extension without leading dot (e.g., "csv").
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export_string(self, result: BomResult) -> str:
        """Render the result as a string."""
        ...

    def export(self, result: BomResult, path: Path) -> None:
        """Export the result to a file.

        Args:
            result: The compiled BOM.
            path: Path where the file will be saved.
        """
        path.write_text(self.export_string(result), encoding="utf-8")
        logger.info(f"Exported {self.format_name} to {path}")


class ExporterRegistry:
    """Exporter classes keyed by format name.

    Exporter modules register on import with the ``register`` decorator; the
    CLI ``--format`` option and ``ExportManager`` look formats up here.

    Example:
        @ExporterRegistry.register("csv")
        class CsvBomExporter(Exporter):
            format_name = "csv"
            file_extension = "csv"
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Class decorator registering an exporter under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            declared = getattr(exporter_class, "format_name", format_name)
            if declared != format_name:
                raise ValueError(
                    f"{exporter_class.__name__} declares format '{declared}' "
                    f"but is registered as '{format_name}'"
                )
            if format_name in cls._exporters:
                logger.warning(f"Replacing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {', '.join(cls.available_formats()) or 'none'}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes one compiled BOM in several formats into a directory.

    Files are named ``{project_name}_{format}.{ext}``, e.g.
    ``b-001_csv.csv`` and ``b-001_tree.txt``.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        result: BomResult,
        project_name: str = "bom",
    ) -> dict[str, Path]:
        """Export ``result`` once per format.

        Every format is looked up before anything is written, so an unknown
        format leaves the directory untouched.

        Returns:
            Mapping of format name to the written file.

        Raises:
            KeyError: If any format is not registered.
        """
        exporters = {name: ExporterRegistry.get(name)() for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for name, exporter in exporters.items():
            path = self.output_dir / f"{project_name}_{name}.{exporter.file_extension}"
            exporter.export(result, path)
            written[name] = path
        return written

    def export_single(self, format_name: str, result: BomResult, project_name: str = "bom") -> Path:
        return self.export_all([format_name], result, project_name)[format_name]
