"""Tests for kata discovery."""

from fleetkata import catalog
from fleetkata.catalog import list_katas, load_kata
from fleetkata.rating import rating
from fleetkata.report_lines import report_lines


def test_lists_both_katas_sorted():
    names = [k.name for k in list_katas()]
    assert names == ["rating", "report-lines"]


def test_kata_metadata():
    info = load_kata("rating")
    assert info is not None
    assert info.module == "fleetkata.rating"
    assert info.entry_point is rating
    assert info.description


def test_load_report_lines():
    info = load_kata("report-lines")
    assert info is not None
    assert info.entry_point is report_lines


def test_unknown_kata_returns_none():
    assert load_kata("nonexistent") is None


def test_unimportable_module_is_skipped(monkeypatch):
    modules = dict(catalog.KATA_MODULES)
    modules["fleetkata.does_not_exist"] = "run"
    monkeypatch.setattr(catalog, "KATA_MODULES", modules)
    assert [k.name for k in list_katas()] == ["rating", "report-lines"]


def test_module_missing_entry_point_is_skipped(monkeypatch):
    monkeypatch.setattr(catalog, "KATA_MODULES", {"fleetkata.rating": "no_such_function"})
    assert list_katas() == []
