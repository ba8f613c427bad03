"""Tests for markdown rendering."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from noticegen.report.markdown import DISCLAIMER, render, write_report
from noticegen.scanner.models import PackageRecord, PackageStore
from noticegen.scanner.walker import scan

_FIXED = datetime(2026, 10, 18, 9, 30, 0, tzinfo=timezone.utc)


def _store(*records: PackageRecord) -> PackageStore:
    store = PackageStore()
    for record in records:
        store.add(record)
    return store


def _rows(text: str) -> list[str]:
    lines = text.splitlines()
    start = lines.index("| --- | --- | --- | --- |") + 1
    return [line for line in lines[start:] if line.startswith("| ")]


class TestRender:
    def test_layout(self):
        text = render(_store(PackageRecord("foo", "1.0.0", "MIT", "https://x")), "app/node_modules", _FIXED)
        assert text.splitlines() == [
            "# Open Source Notices",
            "",
            "Generated on 2026-10-18T09:30:00.000Z from installed npm dependencies in "
            "`app/node_modules`.",
            "",
            "| Package | Version | License | Homepage/Repository |",
            "| --- | --- | --- | --- |",
            "| foo | 1.0.0 | MIT | https://x |",
            "",
            DISCLAIMER,
        ]
        assert text.endswith(DISCLAIMER + "\n")

    def test_empty_store(self):
        text = render(PackageStore(), "node_modules", _FIXED)
        assert _rows(text) == []
        assert DISCLAIMER in text

    def test_end_to_end_rows(self, node_modules, make_package):
        make_package(
            node_modules, "foo", name="foo", version="1.0.0", license="MIT", homepage="https://x"
        )
        make_package(node_modules, "bar", name="bar", version="2.0.0")
        store = PackageStore()
        scan(node_modules, store)
        assert _rows(render(store, "node_modules", _FIXED)) == [
            "| bar | 2.0.0 | UNKNOWN |  |",
            "| foo | 1.0.0 | MIT | https://x |",
        ]

    def test_sorted_by_name_then_lexicographic_version(self):
        store = _store(
            PackageRecord("zod", "3.0.0"),
            PackageRecord("abc", "2.0.0"),
            PackageRecord("abc", "10.0.0"),
            PackageRecord("abc", "1.5.0"),
        )
        rows = _rows(render(store, "node_modules", _FIXED))
        assert [r.split(" | ")[0:2] for r in rows] == [
            ["| abc", "1.5.0"],
            ["| abc", "10.0.0"],
            ["| abc", "2.0.0"],
            ["| zod", "3.0.0"],
        ]

    def test_pipe_in_homepage_escaped(self):
        store = _store(PackageRecord("foo", "1.0.0", "MIT", "https://x|y|z"))
        rows = _rows(render(store, "node_modules", _FIXED))
        assert rows == ["| foo | 1.0.0 | MIT | https://x\\|y\\|z |"]

    def test_timestamp_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        moment = datetime(2026, 10, 18, 11, 30, 0, 123000, tzinfo=plus_two)
        text = render(PackageStore(), "node_modules", moment)
        assert "Generated on 2026-10-18T09:30:00.123Z " in text

    def test_deterministic_apart_from_timestamp(self):
        store = _store(PackageRecord("b", "1"), PackageRecord("a", "2", "MIT"))
        first = render(store, "node_modules").splitlines()
        second = render(store, "node_modules").splitlines()
        del first[2], second[2]
        assert first == second


class TestWriteReport:
    def test_creates_parent_dirs(self, tmp_path, captured_logs):
        out = tmp_path / "docs" / "NOTICES.md"
        write_report(out, "hello\n")
        assert out.read_text(encoding="utf-8") == "hello\n"
        assert captured_logs[-1]["event"] == "report.written"
