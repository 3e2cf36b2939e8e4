"""
Tests for the command line front-end.
"""
import json
from datetime import datetime, timezone

import pandas as pd
import pytest

from listing_engine.cli import main, parse_args, spec_from_args
from listing_engine.filters import SortKey
from listing_engine.samples import marketplace_payloads, property_payloads

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def items_file(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps(marketplace_payloads(NOW)), encoding="utf-8")
    return str(path)


def test_spec_from_args_defaults():
    args = parse_args(["--kind", "jobs", "--input", "x.json"])
    spec = spec_from_args(args)
    assert spec.featured is None
    assert spec.remote is None
    assert spec.sort_by is SortKey.LATEST
    assert (spec.page, spec.limit) == (1, 20)


def test_spec_from_args_flags():
    args = parse_args(["--kind", "jobs", "--input", "x.json", "--featured", "--sort", "salary_low"])
    spec = spec_from_args(args)
    assert spec.featured is True
    assert spec.sort_by is SortKey.PRICE_LOW


def test_flat_query_prints_page(items_file, capsys):
    rc = main(["--kind", "marketplace", "--input", items_file, "--category", "electronics"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "1 matches, page 1/1" in out
    assert "iPhone 14 Pro Max" in out


def test_grouped_query_prints_buckets(tmp_path, capsys):
    path = tmp_path / "props.json"
    path.write_text(json.dumps(property_payloads(NOW)), encoding="utf-8")
    rc = main(["--kind", "properties", "--input", str(path), "--grouped", "--cap", "1"])
    lines = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert lines[0] == "manila (3)"
    assert lines[1] == "  house (1)"


def test_out_writes_full_sorted_set(items_file, tmp_path):
    out = tmp_path / "result.csv"
    rc = main(["--kind", "marketplace", "--input", items_file, "--sort", "price_low",
               "--limit", "1", "--out", str(out)])
    assert rc == 0
    df = pd.read_csv(out, dtype={"id": str})
    assert list(df["id"]) == ["4", "3", "5", "1", "2"]


def test_missing_input_returns_error(tmp_path):
    assert main(["--kind", "jobs", "--input", str(tmp_path / "missing.json")]) == 1
