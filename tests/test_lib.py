"""Tests for the local library helpers."""

import json
import logging
from decimal import Decimal

from invoice_studio.lib import logs, objects, paths
from invoice_studio.models.invoice import AdjustmentMode


def test_logger_uses_module_name_for_paths():
    log = logs.logger("/tmp/some/module_name.py")
    assert log.name == "module_name"
    assert len(log.handlers) == 1
    assert logs.logger("/tmp/some/module_name.py").handlers == log.handlers
    assert isinstance(log, logging.Logger)


def test_new_id_has_prefix():
    first, second = objects.new_id("inv"), objects.new_id("inv")
    assert first.startswith("inv-") and first != second


def test_to_json_handles_decimal_and_enum():
    data = json.loads(objects.to_json({"amount": Decimal("1.10"), "mode": AdjustmentMode.AMOUNT}))
    assert data == {"amount": "1.10", "mode": "amount"}


def test_data_dir_override(monkeypatch, tmp_path):
    monkeypatch.setenv("INVOICE_STUDIO_DATA_DIR", str(tmp_path))
    assert paths.data_dir() == tmp_path
    monkeypatch.delenv("INVOICE_STUDIO_DATA_DIR")
    assert paths.data_dir() == paths.temp_dir() / "invoice_studio"


def test_disk_store(store):
    assert store.get("missing", []) == []
    store.set("profile", {"name": "Acme"})
    assert "profile" in store
    assert list(store.keys()) == ["profile"]
    store.delete("profile")
    store.delete("profile")
    assert store.get("profile") is None
