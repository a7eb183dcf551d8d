"""MediaWiki release numbers and version-to-adapter dispatch."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Generic, Mapping, TypeVar

from mwquery.errors import UnsupportedVersionError

log = logging.getLogger(__name__)

T = TypeVar("T")

_VERSION_RE = re.compile(r"(?:MediaWiki\s+)?(\d+)\.(\d+)")


@dataclass(frozen=True, order=True)
class MWVersion:
    major: int
    minor: int

    @classmethod
    def parse(cls, value: str | MWVersion) -> MWVersion:
        """Parse ``"1.16"``, ``"1.35.0-wmf.5"`` or a siteinfo generator like ``"MediaWiki 1.16.2"``."""
        if isinstance(value, MWVersion):
            return value
        m = _VERSION_RE.search(value)
        if m is None:
            raise ValueError(f"not a MediaWiki version: {value!r}")
        return cls(int(m.group(1)), int(m.group(2)))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


MW1_11 = MWVersion(1, 11)
MW1_14 = MWVersion(1, 14)
MW1_15 = MWVersion(1, 15)
MW1_17 = MWVersion(1, 17)
MW1_20 = MWVersion(1, 20)
MW1_23 = MWVersion(1, 23)
MW1_26 = MWVersion(1, 26)


class VersionMap(Generic[T]):
    """Maps the first release of each request shape to the adapter for it.

    ``select`` picks the entry with the highest minimum version not above the
    reported one. A wiki newer than every entry, or one whose version is
    unknown (``None``), gets the most recent adapter. A wiki older than the
    lowest entry is rejected.
    """

    def __init__(self, entries: Mapping[MWVersion, T]) -> None:
        if not entries:
            raise ValueError("VersionMap needs at least one entry")
        self._entries = sorted(entries.items())

    @property
    def minimum(self) -> MWVersion:
        return self._entries[0][0]

    @property
    def latest(self) -> T:
        return self._entries[-1][1]

    def select(self, version: MWVersion | str | None) -> T:
        if version is None:
            log.debug("Unknown MediaWiki version, using the newest adapter")
            return self.latest
        if isinstance(version, str):
            try:
                version = MWVersion.parse(version)
            except ValueError:
                log.warning("Unparseable MediaWiki version %r, using the newest adapter", version)
                return self.latest
        if version < self.minimum:
            raise UnsupportedVersionError(version, self.minimum)
        chosen = self._entries[0][1]
        for since, adapter in self._entries:
            if since > version:
                break
            chosen = adapter
        return chosen
