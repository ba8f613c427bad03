"""Data models for the dependency scanner."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

UNKNOWN_LICENSE = "UNKNOWN"


@dataclass(frozen=True)
class PackageRecord:
    """A single installed package as it appears in the notices report."""

    name: str
    version: str
    license: str = UNKNOWN_LICENSE
    homepage: str = ""

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.version)


class PackageStore:
    """Keyed store of records, one per (name, version).

    The first record added for a key wins; later duplicates are counted and
    dropped, never merged. ``skipped`` counts malformed descriptors and
    ``unlisted`` counts nested directories that could not be listed.
    """

    def __init__(self) -> None:
        self._records: dict[tuple[str, str], PackageRecord] = {}
        self.duplicates = 0
        self.skipped = 0
        self.unlisted = 0

    def add(self, record: PackageRecord) -> bool:
        """Insert *record* if its key is absent. Returns True when inserted."""
        if record.key in self._records:
            self.duplicates += 1
            return False
        self._records[record.key] = record
        return True

    def records(self) -> list[PackageRecord]:
        """Records in insertion (traversal) order."""
        return list(self._records.values())

    def sorted_records(self) -> list[PackageRecord]:
        """Records ordered by name, then version (plain string comparison)."""
        return sorted(self._records.values(), key=lambda r: (r.name, r.version))

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __iter__(self) -> Iterator[PackageRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)
