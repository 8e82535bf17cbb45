# SPDX-License-Identifier: MIT
"""Semantic version parsing, ordering and constraint matching.

This package parses SemVer 2.0.0 version strings, orders them by SemVer
precedence and tests them against single-operator constraints such as
``>=1.2.3``.

Example:
    >>> from semver_constraint import parse_version, parse_constraint
    >>>
    >>> version = parse_version("1.2.3-beta.4+20150505.1")
    >>> version.prerelease
    ('beta', '4')
    >>> version < parse_version("1.2.3")
    True
    >>>
    >>> constraint = parse_constraint(">=1.2.3-beta4")
    >>> constraint.match(parse_version("1.3.2"))
    True
    >>> "1.2.0" in constraint
    False
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    SemverError,
    InvalidFormatError,
    IDENTIFIER_PATTERN,
    MAX_COMPONENT,
)
from .compare import (
    compare_versions,
    version_key,
)
from .constraint import (
    Constraint,
    Operator,
    parse_constraint,
    is_valid_constraint,
    InvalidOperatorError,
    OPERATORS,
    OPERATOR_CHARS,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "SemverError",
    "InvalidFormatError",
    "IDENTIFIER_PATTERN",
    "MAX_COMPONENT",
    # Version comparison
    "compare_versions",
    "version_key",
    # Constraints
    "Constraint",
    "Operator",
    "parse_constraint",
    "is_valid_constraint",
    "InvalidOperatorError",
    "OPERATORS",
    "OPERATOR_CHARS",
]
