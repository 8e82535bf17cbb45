# SPDX-License-Identifier: MIT
"""Version constraints: a comparison operator applied to a version.

Constraint strings take the form ``<operator><version>``:

    =2.0.0   equal to 2.0.0
    >2.0.0   greater than 2.0.0
    <2.0.0   less than 2.0.0
    >=2.0.0  greater than or equal to 2.0.0
    <=2.0.0  less than or equal to 2.0.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Iterator, TypeVar, Union

from .semver import InvalidFormatError, SemverError, Version, parse_version

# Characters that may make up an operator token
OPERATOR_CHARS = frozenset("=<>")

_V = TypeVar("_V", str, Version)


class Operator(Enum):
    """Version comparison operators."""

    EQ = "="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    def __str__(self) -> str:
        """Return the operator symbol."""
        return self.value


OPERATORS = frozenset(op.value for op in Operator)

# Maps each operator to a test on version.compare(constraint.version)
_MATCHERS: dict[Operator, Callable[[int], bool]] = {
    Operator.EQ: lambda result: result == 0,
    Operator.GT: lambda result: result == 1,
    Operator.LT: lambda result: result == -1,
    Operator.GE: lambda result: result >= 0,
    Operator.LE: lambda result: result <= 0,
}


class InvalidOperatorError(SemverError):
    """Raised when a constraint's leading operator is not recognised.

    Attributes:
        constraint: The constraint string that failed to parse
        operator: The operator token scanned from its start (may be empty)
    """

    def __init__(self, constraint: str, operator: str, message: str = ""):
        self.constraint = constraint
        self.operator = operator
        self.message = message or f"Invalid operator {operator!r} in constraint: {constraint}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Constraint:
    """A version constraint such as ``>=1.2.3``.

    Attributes:
        operator: Comparison operator. Known symbols given as strings are
            converted to :class:`Operator`; anything else is kept as-is and
            matches no version.
        version: The version compared against

    A bare ``Constraint()`` is ``=0.1.0``.
    """

    operator: Union[Operator, str] = Operator.EQ
    version: Version = field(default_factory=Version)

    def __post_init__(self) -> None:
        if isinstance(self.operator, str) and self.operator in OPERATORS:
            object.__setattr__(self, "operator", Operator(self.operator))

    @classmethod
    def default(cls) -> "Constraint":
        """Return the default constraint, =0.1.0."""
        return cls()

    @classmethod
    def parse(cls, constraint_string: str) -> "Constraint":
        """Parse a constraint string. See :func:`parse_constraint`."""
        return parse_constraint(constraint_string)

    def match(self, version: Union[str, Version]) -> bool:
        """Return True if the version satisfies this constraint.

        Raises:
            InvalidFormatError: If ``version`` is a string that does not parse
        """
        matcher = _MATCHERS.get(self.operator)
        if matcher is None:
            return False
        if isinstance(version, str):
            version = parse_version(version)
        return matcher(version.compare(self.version))

    def filter(self, versions: Iterable[_V]) -> Iterator[_V]:
        """Yield the versions that satisfy this constraint, in input order."""
        for version in versions:
            if self.match(version):
                yield version

    def __contains__(self, version: Union[str, Version]) -> bool:
        return self.match(version)

    def __str__(self) -> str:
        return f"{self.operator}{self.version}"


def parse_constraint(constraint_string: str) -> Constraint:
    """Parse a constraint string into a Constraint object.

    The operator is the longest run of ``=``, ``<`` and ``>`` at the start of
    the string; the remainder is parsed as a version.

    Args:
        constraint_string: A string of the form ``<operator><version>``

    Returns:
        A Constraint object

    Raises:
        InvalidOperatorError: If the leading operator token is not one of
            ``=``, ``>``, ``<``, ``>=``, ``<=`` (including when it is empty)
        InvalidFormatError: If the remainder is not a valid version

    Examples:
        >>> str(parse_constraint(">=1.2.3-beta4"))
        '>=1.2.3-beta4'
        >>> parse_constraint("<>1.2.3")
        Traceback (most recent call last):
            ...
        semver_constraint.constraint.InvalidOperatorError: Invalid operator '<>' in constraint: <>1.2.3
    """
    if not isinstance(constraint_string, str):
        raise InvalidFormatError(
            str(constraint_string),
            f"Constraint must be a string, got {type(constraint_string).__name__}",
        )

    end = 0
    while end < len(constraint_string) and constraint_string[end] in OPERATOR_CHARS:
        end += 1
    token = constraint_string[:end]

    if token not in OPERATORS:
        raise InvalidOperatorError(constraint_string, token)

    return Constraint(operator=Operator(token), version=parse_version(constraint_string[end:]))


def is_valid_constraint(constraint_string: str) -> bool:
    """Check if a string is a valid version constraint.

    Examples:
        >>> is_valid_constraint(">=1.0.0")
        True
        >>> is_valid_constraint("~1.0.0")
        False
    """
    try:
        parse_constraint(constraint_string)
    except SemverError:
        return False
    return True
