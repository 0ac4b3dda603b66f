from __future__ import annotations

import re
from enum import IntEnum

from .errors import DXFVersionError


class DXFVersion(IntEnum):
    """Format revisions in release order, valued by their $ACADVER number."""

    AC1001 = 1001
    AC1002 = 1002
    AC1003 = 1003
    AC1004 = 1004
    AC1006 = 1006
    AC1009 = 1009
    AC1012 = 1012
    AC1014 = 1014
    AC1015 = 1015
    AC1018 = 1018
    AC1021 = 1021
    AC1024 = 1024
    AC1027 = 1027
    AC1032 = 1032

    @property
    def token(self) -> str:
        return self.name


OLDEST = DXFVersion.AC1001
NEWEST = DXFVersion.AC1032

# R11 and R12 share AC1009; elevation (38) is legal up to it and extrusion from it.
LEGACY_ELEVATION_MAX = DXFVersion.AC1009
EXTRUSION_MIN = DXFVersion.AC1009
SUBCLASS_MARKERS_MIN = DXFVersion.AC1012
REACTORS_MIN = DXFVersion.AC1014
DEFAULT_VERSION = DXFVersion.AC1009

_RELEASE_NAMES: dict[DXFVersion, str] = {
    DXFVersion.AC1001: "R2.22",
    DXFVersion.AC1002: "R2.5",
    DXFVersion.AC1003: "R2.6",
    DXFVersion.AC1004: "R9",
    DXFVersion.AC1006: "R10",
    DXFVersion.AC1009: "R12",
    DXFVersion.AC1012: "R13",
    DXFVersion.AC1014: "R14",
    DXFVersion.AC1015: "R2000",
    DXFVersion.AC1018: "R2004",
    DXFVersion.AC1021: "R2007",
    DXFVersion.AC1024: "R2010",
    DXFVersion.AC1027: "R2013",
    DXFVersion.AC1032: "R2018",
}

_RELEASE_ALIASES: dict[str, DXFVersion] = {
    name: version for version, name in _RELEASE_NAMES.items()
}
_RELEASE_ALIASES.update(
    {
        "R11": DXFVersion.AC1009,
        "R2000I": DXFVersion.AC1015,
        "R2002": DXFVersion.AC1015,
        "R2005": DXFVersion.AC1018,
        "R2006": DXFVersion.AC1018,
        "R2008": DXFVersion.AC1021,
        "R2009": DXFVersion.AC1021,
        "R2011": DXFVersion.AC1024,
        "R2012": DXFVersion.AC1024,
        "R2014": DXFVersion.AC1027,
        "R2017": DXFVersion.AC1027,
    }
)

_AC_TOKEN = re.compile(r"^AC(\d{4})$")


def parse_version(token: str | int | DXFVersion) -> DXFVersion:
    """Resolve an ``AC10xx`` token, a release name or a number to a version."""
    if isinstance(token, DXFVersion):
        return token
    if isinstance(token, int):
        try:
            return DXFVersion(token)
        except ValueError:
            raise DXFVersionError(f"unsupported DXF version: {token}") from None
    name = str(token).strip().upper()
    match = _AC_TOKEN.match(name)
    if match:
        try:
            return DXFVersion(int(match.group(1)))
        except ValueError:
            raise DXFVersionError(f"unsupported DXF version: {token}") from None
    if name in _RELEASE_ALIASES:
        return _RELEASE_ALIASES[name]
    raise DXFVersionError(f"unsupported DXF version: {token}")


def release_name(version: DXFVersion) -> str:
    return _RELEASE_NAMES[version]


def in_range(version: DXFVersion, min_version: DXFVersion, max_version: DXFVersion | None) -> bool:
    if version < min_version:
        return False
    return max_version is None or version <= max_version
