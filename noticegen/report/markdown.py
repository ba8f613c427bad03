"""Render the open source notices markdown table."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import structlog

from noticegen.scanner.models import PackageStore

log = structlog.get_logger("noticegen.report")

TITLE = "# Open Source Notices"
HEADER = "| Package | Version | License | Homepage/Repository |"
SEPARATOR = "| --- | --- | --- | --- |"
DISCLAIMER = (
    "_This file is informational and should be reviewed for legal compliance "
    "before redistribution._"
)


def _iso_timestamp(moment: datetime) -> str:
    # e.g. 2026-10-18T09:30:00.000Z
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _escape_cell(value: str) -> str:
    return value.replace("|", "\\|")


def render(
    store: PackageStore,
    source_label: str,
    generated_at: datetime | None = None,
) -> str:
    """Render *store* as the notices markdown document.

    Rows are sorted by name then version using plain string comparison, so
    ``10.0.0`` sorts before ``2.0.0``. Only the timestamp line varies between
    runs over the same tree.
    """
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)

    lines = [
        TITLE,
        "",
        f"Generated on {_iso_timestamp(generated_at)} from installed npm "
        f"dependencies in `{source_label}`.",
        "",
        HEADER,
        SEPARATOR,
    ]
    for record in store.sorted_records():
        lines.append(
            f"| {record.name} | {record.version} | {record.license} "
            f"| {_escape_cell(record.homepage)} |"
        )
    lines.append("")
    lines.append(DISCLAIMER)
    lines.append("")
    return "\n".join(lines)


def write_report(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    log.info("report.written", path=str(path), size=len(text))
