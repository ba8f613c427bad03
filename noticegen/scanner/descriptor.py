"""Parser for package.json descriptors."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from noticegen.exceptions import DescriptorError
from noticegen.scanner.models import UNKNOWN_LICENSE, PackageRecord

DESCRIPTOR_NAME = "package.json"


@dataclass(frozen=True)
class StringOrObject:
    """A descriptor field that is either a plain string or an object.

    ``license`` may be ``"MIT"`` or ``{"type": "MIT"}``; ``repository`` may be
    a URL or ``{"type": "git", "url": "..."}``. Anything else parses to an
    empty value.
    """

    text: str | None = None
    members: Mapping[str, Any] | None = None

    @classmethod
    def parse(cls, raw: Any) -> StringOrObject:
        if isinstance(raw, str):
            return cls(text=raw)
        if isinstance(raw, Mapping):
            return cls(members=raw)
        return cls()

    def resolve(self, member: str) -> str | None:
        """Return the plain string, or the named string member of the object."""
        if self.text is not None:
            return self.text or None
        if self.members is not None:
            value = self.members.get(member)
            if isinstance(value, str) and value:
                return value
        return None


def normalize_license(raw: Any) -> str:
    return StringOrObject.parse(raw).resolve("type") or UNKNOWN_LICENSE


def normalize_homepage(homepage: Any, repository: Any) -> str:
    if isinstance(homepage, str) and homepage:
        return homepage
    return StringOrObject.parse(repository).resolve("url") or ""


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def read_descriptor(path: Path) -> PackageRecord | None:
    """Read a package.json and build its record.

    Returns ``None`` when the descriptor lacks a name or version.

    Raises:
        DescriptorError: the file is unreadable, not UTF-8, not JSON, or not
            a JSON object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DescriptorError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise DescriptorError(path, f"expected an object, got {type(data).__name__}")

    name = _non_empty_str(data.get("name"))
    version = _non_empty_str(data.get("version"))
    if name is None or version is None:
        return None

    return PackageRecord(
        name=name,
        version=version,
        license=normalize_license(data.get("license")),
        homepage=normalize_homepage(data.get("homepage"), data.get("repository")),
    )
