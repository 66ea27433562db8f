"""Tests for catalog loading and the terminal client."""

import json

import cli_search
from catalog_search.catalog_loader import load_catalog


def _write_catalog(tmp_path, catalog):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog), encoding="utf-8")
    return path


def test_load_catalog_accepts_list_and_wrapped_forms(tmp_path, catalog):
    assert load_catalog(_write_catalog(tmp_path, catalog)) == catalog

    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"products": catalog}), encoding="utf-8")
    assert load_catalog(wrapped) == catalog


def test_load_catalog_missing_file_is_empty(tmp_path):
    assert load_catalog(tmp_path / "nope.json") == []


def test_cli_single_query(tmp_path, catalog, capsys):
    path = _write_catalog(tmp_path, catalog)

    assert cli_search.main(["--catalog", str(path), "runing"]) == 0

    out = capsys.readouterr().out
    assert "results: 2" in out
    assert "Red Running Shoe" in out
    assert "/product/2" in out
    assert "Laptop Stand" not in out


def test_cli_batch_mode(tmp_path, catalog, capsys):
    path = _write_catalog(tmp_path, catalog)
    queries = tmp_path / "queries.txt"
    queries.write_text("laptop\nr\n", encoding="utf-8")

    assert cli_search.main(["--catalog", str(path), "--batch", str(queries)]) == 0

    out = capsys.readouterr().out
    assert "Query: laptop | results: 1" in out
    assert "Query: r | results: 0" in out


def test_cli_missing_catalog(tmp_path):
    assert cli_search.main(["--catalog", str(tmp_path / "missing.json"), "shoe"]) == 1
