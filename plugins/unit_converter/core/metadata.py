"""Static package metadata."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

VERSION = "1.0.0"
AUTHOR = "Unit Converter AIO maintainers"
EMAIL = "maintainers@unit-converter-aio.dev"
DESCRIPTION = "Custom unit converter - table-driven conversions with user-defined units"


@dataclass(frozen=True, slots=True)
class PackageInfo:
    version: str
    author: str
    email: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


PACKAGE_INFO = PackageInfo(
    version=VERSION, author=AUTHOR, email=EMAIL, description=DESCRIPTION
)


def check_version() -> str:
    return VERSION


def get_info() -> PackageInfo:
    return PACKAGE_INFO


__all__ = [
    "VERSION",
    "AUTHOR",
    "EMAIL",
    "DESCRIPTION",
    "PackageInfo",
    "PACKAGE_INFO",
    "check_version",
    "get_info",
]
