"""Tests for recording inventory and reading it back."""

from coursework.application import sample_data
from coursework.application.record_inventory import (
    RecordInventoryHandler,
    ShowInventoryHandler,
)
from coursework.infrastructure.persistence.json_inventory_log import JsonInventoryLog


class TestRecordInventory:

    def test_record_then_show_from_fresh_log(self, tmp_path, now):
        path = tmp_path / "inventory.json"
        assert RecordInventoryHandler(JsonInventoryLog(path)).handle(
            sample_data.inventory_items(now)
        )

        lines = ShowInventoryHandler(JsonInventoryLog(path)).handle()
        assert [line.name for line in lines] == [
            "Hammer", "Screwdriver", "Pliers", "Wrench", "Drill",
        ]
        assert lines[0].date_added == "2026-01-15"

    def test_show_without_file_is_empty(self, tmp_path):
        assert ShowInventoryHandler(JsonInventoryLog(tmp_path / "none.json")).handle() == []
