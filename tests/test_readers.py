"""Tests for curve file readers."""
from __future__ import annotations

import pytest

from spectral_resample.io.readers import discover_files, read_any_curve


def test_reader_sorts_and_drops_duplicates(tmp_path) -> None:
    path = tmp_path / "sample.xy"
    path.write_text("# 2theta intensity\n3.0 30\n1.0, 10\n\n2.0;20\n1.0 99\nnot a row\n", encoding="utf-8")
    curve = read_any_curve(str(path))
    assert curve.x.tolist() == [1.0, 2.0, 3.0]
    assert curve.y.tolist() == [10.0, 20.0, 30.0]
    assert curve.meta["source"] == "sample.xy"


def test_reader_needs_numbers(tmp_path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("hello\nworld\n", encoding="utf-8")
    with pytest.raises(ValueError, match="no numeric"):
        read_any_curve(str(path))


def test_discover_files(tmp_path) -> None:
    (tmp_path / "a.xy").write_text("1 2\n", encoding="utf-8")
    (tmp_path / "b.CSV").write_text("1,2\n", encoding="utf-8")
    (tmp_path / "notes.md").write_text("x", encoding="utf-8")
    names = sorted(p.rsplit("/", 1)[-1] for p in discover_files(str(tmp_path)))
    assert names == ["a.xy", "b.CSV"]
