"""Tests for the OutputManager class."""

import os
from unittest.mock import Mock

import pytest
from openpyxl import load_workbook

from model_schema_export.core.config import config
from model_schema_export.io import output_manager as output_manager_module
from model_schema_export.io.output_manager import OutputManager
from model_schema_export.io.workbook_renderer import WorkbookRenderer


@pytest.fixture
def output_manager(temp_output_dir):
    """Create an OutputManager instance with a temporary directory."""
    return OutputManager(temp_output_dir)


class TestOutputManager:
    """Test suite for OutputManager class."""

    def test_init_with_default_output_dir(self):
        manager = OutputManager()
        assert manager.output_dir == config.output_dir
        assert manager.workbook_pattern == "{model_name}.xlsx"

    def test_create_output_structure(self, tmp_path):
        output_dir = tmp_path / "nested" / "output"
        manager = OutputManager(output_dir)

        manager.create_output_structure()

        assert output_dir.is_dir()

    def test_get_output_path(self, output_manager):
        path = output_manager._get_output_path("order")

        assert path == output_manager.output_dir / "order.xlsx"

    def test_custom_workbook_pattern(self, temp_output_dir):
        manager = OutputManager(temp_output_dir, "schema-{model_name}.xlsx")

        assert manager._get_output_path("order").name == "schema-order.xlsx"

    def test_write_workbook(self, output_manager, order_sheets):
        workbook = WorkbookRenderer().render(order_sheets)

        path = output_manager.write_workbook(workbook, "order")

        assert path == output_manager.output_dir / "order.xlsx"
        assert path.is_file()
        loaded = load_workbook(path)
        assert loaded.sheetnames == ["sheet1", "sheet2"]
        assert loaded["sheet1"]["A4"].value == "order_id"
        assert loaded["sheet1"]["C4"].value == "N"

    def test_write_leaves_no_temporary_file(self, output_manager, order_sheets):
        workbook = WorkbookRenderer().render(order_sheets)

        output_manager.write_workbook(workbook, "order")

        assert [p.name for p in output_manager.output_dir.iterdir()] == ["order.xlsx"]

    def test_write_creates_missing_directory(self, tmp_path, order_sheets):
        manager = OutputManager(tmp_path / "missing")

        path = manager.write_workbook(WorkbookRenderer().render(order_sheets), "order")

        assert path.is_file()

    def test_write_error_is_raised_verbatim(self, output_manager):
        workbook = Mock()
        workbook.save.side_effect = OSError("No space left on device")

        with pytest.raises(OSError, match="No space left on device"):
            output_manager.write_workbook(workbook, "order")

        assert list(output_manager.output_dir.iterdir()) == []

    def test_overwrites_existing_workbook(self, output_manager, order_sheets):
        first = output_manager.write_workbook(
            WorkbookRenderer().render(order_sheets), "order"
        )
        second = output_manager.write_workbook(
            WorkbookRenderer().render(order_sheets[:1]), "order"
        )

        assert first == second
        assert load_workbook(second).sheetnames == ["sheet1"]

    def test_write_workbooks(self, output_manager, order_sheets):
        renderer = WorkbookRenderer()
        workbooks = [
            (renderer.render(order_sheets), "order"),
            (renderer.render(order_sheets[1:]), "customer"),
        ]

        paths = output_manager.write_workbooks(workbooks)

        assert [p.name for p in paths] == ["order.xlsx", "customer.xlsx"]
        assert sorted(p.name for p in output_manager.output_dir.iterdir()) == [
            "customer.xlsx",
            "order.xlsx",
        ]

    def test_failed_save_writes_no_workbook(self, output_manager, order_sheets):
        broken = Mock()
        broken.save.side_effect = OSError("No space left on device")
        workbooks = [
            (WorkbookRenderer().render(order_sheets), "order"),
            (broken, "customer"),
        ]

        with pytest.raises(OSError, match="No space left on device"):
            output_manager.write_workbooks(workbooks)

        assert list(output_manager.output_dir.iterdir()) == []

    def test_failed_move_removes_moved_workbooks(
        self, monkeypatch, output_manager, order_sheets
    ):
        replace = os.replace
        calls = []

        def replace_once(src, dst):
            calls.append(dst)
            if len(calls) > 1:
                raise PermissionError("Access denied")
            replace(src, dst)

        monkeypatch.setattr(output_manager_module.os, "replace", replace_once)
        renderer = WorkbookRenderer()
        workbooks = [
            (renderer.render(order_sheets), "order"),
            (renderer.render(order_sheets[1:]), "customer"),
        ]

        with pytest.raises(PermissionError):
            output_manager.write_workbooks(workbooks)

        assert len(calls) == 2
        assert list(output_manager.output_dir.iterdir()) == []
