"""CLI entry point: noticegen.

Usage:
    noticegen                                  # node_modules -> OPEN_SOURCE_NOTICES.md
    noticegen app/node_modules -o NOTICES.md
    noticegen app/node_modules --stdout
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click
import structlog

from noticegen.core.logging import setup_logging
from noticegen.exceptions import RootNotFoundError
from noticegen.report.markdown import render, write_report
from noticegen.scanner.models import PackageStore
from noticegen.scanner.walker import ensure_root, scan

# Defaults (overridable via env vars)
_DEFAULT_ROOT = os.environ.get("NOTICEGEN_ROOT", "node_modules")
_DEFAULT_OUTPUT = os.environ.get("NOTICEGEN_OUTPUT", "OPEN_SOURCE_NOTICES.md")

log = structlog.get_logger("noticegen.cli")


@click.command()
@click.argument("root", default=_DEFAULT_ROOT, type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output",
    default=_DEFAULT_OUTPUT,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Report file path",
)
@click.option("--label", default=None, help="Source name shown in the report (default: ROOT)")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the report instead of writing it")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(root: Path, output: Path, label: str | None, to_stdout: bool, verbose: bool) -> None:
    """Generate open source notices from an installed node_modules tree."""
    setup_logging(verbose)

    try:
        ensure_root(root)
    except RootNotFoundError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    store = PackageStore()
    scan(root, store)
    log.info(
        "scan.complete",
        root=str(root),
        packages=len(store),
        duplicates=store.duplicates,
        skipped=store.skipped,
        unlisted=store.unlisted,
    )

    text = render(store, label or str(root))
    if to_stdout:
        click.echo(text, nl=False)
        return

    write_report(output, text)
    click.echo(f"Wrote {output} ({len(store)} packages).")


if __name__ == "__main__":
    main()
