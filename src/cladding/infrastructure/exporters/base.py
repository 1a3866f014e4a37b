"""Exporter protocol, format registry and file export manager."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cladding.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Something that can write a layout in one file format.

    Implementations declare ``format_name`` (the registry key) and
    ``file_extension`` (without the dot) as class attributes.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Write the layout to ``path``."""
        ...

    def export_string(self, output: LayoutOutput) -> str:
        """Return the layout as a document string."""
        ...


def require_result(output: LayoutOutput, format_name: str) -> None:
    """Raise ValueError if the output has nothing to export."""
    if not output.is_valid:
        raise ValueError(
            f"Cannot export '{format_name}': layout has errors: "
            f"{'; '.join(output.errors) or 'no result'}"
        )


class ExporterRegistry:
    """Maps format names to exporter classes.

    Exporter modules register themselves on import:

        @ExporterRegistry.register("csv")
        class CsvPlacementExporter:
            ...
    """

    _by_format: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Callable[[type], type]:
        """Class decorator adding an exporter under ``format_name``."""

        def add(exporter_class: type) -> type:
            previous = cls._by_format.get(format_name)
            if previous is not None and previous is not exporter_class:
                logger.warning(
                    f"Exporter {exporter_class.__name__} replaces "
                    f"{previous.__name__} for '{format_name}'"
                )
            cls._by_format[format_name] = exporter_class
            logger.debug(f"Exporter for '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return add

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up the exporter class for a format.

        Raises:
            KeyError: If the format is unknown. The message lists the
                formats that are available.
        """
        try:
            return cls._by_format[format_name]
        except KeyError:
            known = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"Unknown export format '{format_name}'. Available formats: {known}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        """Registered format names in alphabetical order."""
        return sorted(cls._by_format)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._by_format


class ExportManager:
    """Writes a layout to one file per requested format.

    Attributes:
        output_dir: Directory receiving the files; created on first export.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def path_for(self, project_name: str, format_name: str, extension: str) -> Path:
        """File path used for one format: ``{project}_{format}.{ext}``."""
        return self.output_dir / f"{project_name}_{format_name}.{extension}"

    def export_all(
        self,
        formats: list[str],
        output: LayoutOutput,
        project_name: str = "wall",
        exporter_options: dict[str, dict[str, Any]] | None = None,
    ) -> dict[str, Path]:
        """Export a layout in several formats.

        Args:
            formats: Format names, e.g. ``["json", "svg"]``.
            output: A valid layout output.
            project_name: Prefix of every file name.
            exporter_options: Constructor keyword arguments per format,
                e.g. ``{"svg": {"scale": 4.0}}``.

        Returns:
            The written path for each format.

        Raises:
            KeyError: If any format is unknown. Nothing is written then.
            ValueError: If the output holds no result.
            OSError: If a file cannot be written.
        """
        options = exporter_options or {}
        resolved = [(name, ExporterRegistry.get(name)) for name in formats]

        self.output_dir.mkdir(parents=True, exist_ok=True)
        written: dict[str, Path] = {}
        for name, exporter_class in resolved:
            exporter = exporter_class(**options.get(name, {}))
            target = self.path_for(project_name, name, exporter.file_extension)
            logger.info(f"Writing {name} export to {target}")
            exporter.export(output, target)
            written[name] = target
        return written

    def export_single(
        self,
        format_name: str,
        output: LayoutOutput,
        project_name: str = "wall",
    ) -> Path:
        """Export a layout in one format and return the file path."""
        return self.export_all([format_name], output, project_name)[format_name]
