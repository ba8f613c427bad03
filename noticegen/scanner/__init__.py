"""Dependency scanner — collect package metadata from a node_modules tree."""

from noticegen.scanner.descriptor import StringOrObject, read_descriptor
from noticegen.scanner.models import PackageRecord, PackageStore
from noticegen.scanner.walker import ensure_root, scan

__all__ = [
    "PackageRecord",
    "PackageStore",
    "StringOrObject",
    "ensure_root",
    "read_descriptor",
    "scan",
]
