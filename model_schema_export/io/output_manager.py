"""File system operations for workbook output."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook

from model_schema_export.core.config import config


class OutputManager:
    """Manages file system operations for workbook output.

    This class creates the output directory and persists rendered workbooks.
    Errors from the file system are not wrapped; callers see the unwrapped
    OSError.
    """

    def __init__(
        self,
        output_dir: Path = config.output_dir,
        workbook_pattern: str = config.file_names.workbook_pattern,
    ) -> None:
        """Initialize the output manager.

        Args:
            output_dir: Directory the workbooks are written to
            workbook_pattern: File name pattern, formatted with ``model_name``
        """
        self.output_dir = output_dir
        self.workbook_pattern = workbook_pattern

    def create_output_structure(self) -> None:
        """Create the output directory if it does not exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write_workbook(self, workbook: Workbook, model_name: str) -> Path:
        """Write a rendered workbook for ``model_name``.

        The workbook is saved next to its destination first and then moved
        into place, so an interrupted save never leaves a truncated file at
        the final path.

        Args:
            workbook: Rendered workbook
            model_name: Canonical name of the root model

        Returns:
            Path where the file was written
        """
        return self.write_workbooks([(workbook, model_name)])[0]

    def write_workbooks(
        self, workbooks: Sequence[tuple[Workbook, str]]
    ) -> list[Path]:
        """Write several rendered workbooks, either all of them or none.

        Every workbook is saved to a temporary file first. The files are moved
        into place only once all saves succeeded. On failure the temporary
        files and the workbooks already moved are removed.

        Args:
            workbooks: Pairs of rendered workbook and root model name

        Returns:
            Paths where the files were written, in input order
        """
        staged: list[tuple[Path, Path]] = []
        written: list[Path] = []
        try:
            for workbook, model_name in workbooks:
                output_path = self._get_output_path(model_name)
                output_path.parent.mkdir(parents=True, exist_ok=True)
                temp_path = output_path.with_name(f".{output_path.name}.tmp")
                staged.append((temp_path, output_path))
                workbook.save(temp_path)

            for temp_path, output_path in staged:
                os.replace(temp_path, output_path)
                written.append(output_path)
        except Exception:
            for output_path in written:
                output_path.unlink(missing_ok=True)
            raise
        finally:
            for temp_path, _ in staged:
                temp_path.unlink(missing_ok=True)

        return written

    def _get_output_path(self, model_name: str) -> Path:
        """Get the output path of the workbook for a root model.

        Args:
            model_name: Canonical name of the root model

        Returns:
            Path where the workbook should be written
        """
        return self.output_dir / self.workbook_pattern.format(model_name=model_name)
