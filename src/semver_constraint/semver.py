# SPDX-License-Identifier: MIT
"""Semantic version parsing, ordering and rendering.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20150505.1

Build metadata is carried but never takes part in ordering or equality.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

# Numeric fields are stored as signed 64-bit values
MAX_COMPONENT = 2**63 - 1

# Characters allowed in a rendered pre-release or metadata identifier
IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]*")

_DIGITS = re.compile(r"[0-9]+")
_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")


class SemverError(Exception):
    """Base exception for version and constraint parsing errors."""

    pass


class InvalidFormatError(SemverError):
    """Raised when a version string is not in MAJOR.MINOR.PATCH format."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


def _identifiers(value: Iterable[str] | str | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(".")
    parts = tuple(value)
    # Splitting an empty remainder gives [""], which means "absent"
    if parts == ("",):
        return ()
    return parts


def _numeric_identifier(part: str) -> Optional[int]:
    """Return the integer value of a pre-release identifier, or None.

    Any identifier that parses as a signed 64-bit integer counts as numeric,
    including ones with leading zeros ("007" is 7).
    """
    if not _SIGNED_DIGITS.fullmatch(part):
        return None
    value = int(part)
    if not -MAX_COMPONENT - 1 <= value <= MAX_COMPONENT:
        return None
    return value


def _compare_identifier(left: str, right: str) -> int:
    n1 = _numeric_identifier(left)
    n2 = _numeric_identifier(right)
    if n1 is not None and n2 is not None:
        if n1 != n2:
            return -1 if n1 < n2 else 1
        return 0
    if left != right:
        return -1 if left < right else 1
    return 0


def _compare_prerelease(pre1: tuple[str, ...], pre2: tuple[str, ...]) -> int:
    """Compare two pre-release identifier sequences.

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    for p1, p2 in zip(pre1, pre2):
        result = _compare_identifier(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1
    return 0


def _render_identifiers(marker: str, parts: tuple[str, ...]) -> str:
    if not parts or not "".join(parts):
        return ""
    if not all(IDENTIFIER_PATTERN.fullmatch(part) for part in parts):
        return ""
    return marker + ".".join(parts)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1")), may be empty
        metadata: Build metadata identifiers (e.g., ("build", "123")), may be empty

    A bare ``Version()`` is 0.1.0.
    """

    major: int = 0
    minor: int = 1
    patch: int = 0
    prerelease: tuple[str, ...] = ()
    metadata: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "prerelease", _identifiers(self.prerelease))
        object.__setattr__(self, "metadata", _identifiers(self.metadata))

    @classmethod
    def default(cls) -> "Version":
        """Return the default version, 0.1.0."""
        return cls()

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a semantic version string. See :func:`parse_version`."""
        return parse_version(version_string)

    def compare(self, other: "Version") -> int:
        """Compare with another version by SemVer precedence.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other
        """
        for val1, val2 in zip(self.to_triple(), other.to_triple()):
            if val1 != val2:
                return -1 if val1 < val2 else 1
        return _compare_prerelease(self.prerelease, other.prerelease)

    def equals(self, other: "Version") -> bool:
        return self.compare(other) == 0

    def greater_than(self, other: "Version") -> bool:
        return self.compare(other) == 1

    def less_than(self, other: "Version") -> bool:
        return self.compare(other) == -1

    def to_triple(self) -> tuple[int, int, int]:
        """Return (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        """Return the canonical string representation of the version.

        A pre-release or metadata suffix holding characters outside
        ``[0-9A-Za-z-]`` is left out rather than rendered.
        """
        return (
            self.base_version
            + _render_identifiers("-", self.prerelease)
            + _render_identifiers("+", self.metadata)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # Must agree with __eq__: metadata is ignored, "007" == "7"
        pre = tuple(
            (0, n) if (n := _numeric_identifier(part)) is not None else (1, part)
            for part in self.prerelease
        )
        return hash((self.major, self.minor, self.patch, pre))


def _parse_component(text: str, version_string: str) -> int:
    if len(text) > 1 and text[0] == "0":
        raise InvalidFormatError(
            version_string, f"Leading zero in version component {text!r}: {version_string}"
        )
    if not _DIGITS.fullmatch(text):
        raise InvalidFormatError(version_string)
    value = int(text)
    if value > MAX_COMPONENT:
        raise InvalidFormatError(
            version_string, f"Version component {text} is out of range: {version_string}"
        )
    return value


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The string is split on the first two dots. Build metadata (after the
    first ``+``) is removed from the last segment before the pre-release
    (after the first ``-``), so a ``-`` inside metadata is never taken as
    a pre-release marker.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidFormatError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), metadata=())

        >>> parse_version("1.2.3-beta.4+20150505.1")
        Version(major=1, minor=2, patch=3, prerelease=('beta', '4'), metadata=('20150505', '1'))
    """
    if not isinstance(version_string, str):
        raise InvalidFormatError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )
    if not version_string:
        raise InvalidFormatError(version_string, "Version string cannot be empty")

    segments = version_string.split(".", 2)
    if len(segments) != 3:
        raise InvalidFormatError(version_string)

    major, minor, rest = segments
    rest, _, metadata = rest.partition("+")
    patch, _, prerelease = rest.partition("-")

    return Version(
        major=_parse_component(major, version_string),
        minor=_parse_component(minor, version_string),
        patch=_parse_component(patch, version_string),
        prerelease=prerelease.split("."),
        metadata=metadata.split("."),
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.02.0")
        False
    """
    try:
        parse_version(version_string)
    except InvalidFormatError:
        return False
    return True
