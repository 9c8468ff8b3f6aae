"""Exporter framework: the Exporter protocol, a format registry and a manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sandwich.application.dtos import SandwichOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for layer sinks.

    An exporter turns a SandwichOutput into one or more files in an output
    directory and reports the paths it wrote.

    Attributes:
        format_name: Registry key of the format (e.g., "svg").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(
        self, output: SandwichOutput, output_dir: Path, project_name: str
    ) -> list[Path]:
        """Write the layer stack to ``output_dir``.

        Args:
            output: The built layer stack.
            output_dir: Existing directory to write into.
            project_name: Base name for the written files.

        Returns:
            Paths of the written files, in writing order.
        """
        ...


class ExporterRegistry:
    """Registry mapping format names to exporter classes.

    Example:
        @ExporterRegistry.register("json")
        class JsonManifestExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Any:
        """Class decorator registering an exporter under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(f"Overwriting existing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Forget every registered exporter (used by tests)."""
        cls._exporters.clear()


class ExportManager:
    """Runs one or more exporters against the same layer stack.

    Attributes:
        output_dir: Directory the files are written to. Created on export.
        options: Per-format keyword arguments for the exporter constructors.
    """

    def __init__(
        self,
        output_dir: Path,
        options: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.options = options or {}

    def create_exporter(self, format_name: str) -> Exporter:
        """Instantiate the exporter of a format with its configured options.

        Raises:
            KeyError: If the format is not registered.
        """
        exporter_class = ExporterRegistry.get(format_name)
        return exporter_class(**self.options.get(format_name, {}))

    def export_all(
        self,
        formats: list[str],
        output: SandwichOutput,
        project_name: str = "design",
    ) -> dict[str, list[Path]]:
        """Export the layer stack to several formats.

        Every format is looked up before anything is written, so an
        unknown format leaves the output directory untouched.

        Returns:
            Mapping of format name to the paths written for it.

        Raises:
            KeyError: If any format is not registered.
            ShapeResolutionError: If a shape cannot be embedded.
            OSError: If file operations fail.
        """
        exporters = {name: self.create_exporter(name) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, list[Path]] = {}
        for format_name, exporter in exporters.items():
            logger.info(f"Exporting {format_name} to {self.output_dir}")
            results[format_name] = exporter.export(output, self.output_dir, project_name)
        return results

    def export_single(
        self, format_name: str, output: SandwichOutput, project_name: str = "design"
    ) -> list[Path]:
        """Export the layer stack to a single format."""
        return self.export_all([format_name], output, project_name)[format_name]
