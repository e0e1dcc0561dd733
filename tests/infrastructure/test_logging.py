"""Tests for the JSON log formatter."""

import json
import logging
import sys

from inventory_service.infrastructure.logging import JsonFormatter


def _record(msg, *args, exc_info=None):
    return logging.LogRecord("inventory_service.test", logging.WARNING, __file__, 1, msg, args, exc_info)


class TestJsonFormatter:

    def test_one_json_object_per_record(self):
        line = JsonFormatter().format(_record("Skipping %s", "broken.json"))
        data = json.loads(line)
        assert data["level"] == "WARNING"
        assert data["name"] == "inventory_service.test"
        assert data["message"] == "Skipping broken.json"
        assert "exc_info" not in data

    def test_exception_included(self):
        try:
            raise OSError("disk full")
        except OSError:
            record = _record("failed", exc_info=sys.exc_info())
        data = json.loads(JsonFormatter().format(record))
        assert "disk full" in data["exc_info"]
