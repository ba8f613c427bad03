"""Recursive walk over an installed node_modules tree."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from noticegen.exceptions import DescriptorError, RootNotFoundError
from noticegen.scanner.descriptor import DESCRIPTOR_NAME, read_descriptor
from noticegen.scanner.models import PackageStore

log = structlog.get_logger("noticegen.scanner")

NESTED_DIR = "node_modules"
SCOPE_SIGIL = "@"


def ensure_root(root_dir: Path) -> Path:
    """Return *root_dir* if it is a directory, else raise RootNotFoundError."""
    if not root_dir.is_dir():
        raise RootNotFoundError(root_dir)
    return root_dir


def scan(root_dir: Path, store: PackageStore) -> None:
    """Collect every package under *root_dir* into *store*.

    Symlinked directories are skipped. ``@scope`` directories are walked as
    containers. Each package's own descriptor is recorded before its nested
    ``node_modules`` is visited, so the first copy met in listing order wins.
    Malformed descriptors and unlistable nested directories are skipped;
    errors listing *root_dir* propagate.
    """
    _walk(Path(root_dir), store)
    log.debug(
        "scanner.done",
        root=str(root_dir),
        packages=len(store),
        duplicates=store.duplicates,
        skipped=store.skipped,
        unlisted=store.unlisted,
    )


def _walk(directory: Path, store: PackageStore) -> None:
    with os.scandir(directory) as it:
        entries = list(it)

    for entry in entries:
        # Symlinked directories report False here.
        if not entry.is_dir(follow_symlinks=False):
            continue
        path = Path(entry.path)

        if entry.name.startswith(SCOPE_SIGIL):
            _walk_subtree(path, store)
            continue

        descriptor = path / DESCRIPTOR_NAME
        if descriptor.is_file():
            try:
                record = read_descriptor(descriptor)
            except DescriptorError:
                store.skipped += 1
            else:
                if record is not None:
                    store.add(record)

        nested = path / NESTED_DIR
        if nested.is_dir() and not nested.is_symlink():
            _walk_subtree(nested, store)


def _walk_subtree(directory: Path, store: PackageStore) -> None:
    # Only the root listing may fail the run.
    try:
        _walk(directory, store)
    except OSError:
        store.unlisted += 1
