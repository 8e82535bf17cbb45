# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting strings or Version objects.

Pre-release ordering: numeric identifiers compare numerically, everything
else compares as plain strings, and any pre-release < release.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Union

from .semver import Version, parse_version


def _as_version(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidFormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.9", "1.0.0-alpha.10")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
    """
    return _as_version(version1).compare(_as_version(version2))


def version_key(version: Union[str, Version]) -> Version:
    """Return a sort key for a version, suitable for sorting.

    The key is the parsed Version itself, whose rich comparisons follow
    SemVer precedence.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _as_version(version)
