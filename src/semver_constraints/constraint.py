# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

"""Range clause grammar and tilde/caret expansion.

A range expression such as ``">= 1.2.3, ^1.4"`` is split on commas into
clauses. Each clause is an optional operator followed by a version:

    ~1.2.3  := >=1.2.3, <1.3.0
    ~1.2    := >=1.2.0, <1.3.0
    ~1      := >=1.0.0, <2.0.0
    ^1.2.3  := >=1.2.3, <2.0.0
    ^0.2.3  := >=0.2.3, <0.3.0
    ^0.0.3  := >=0.0.3, <0.0.4

Tilde and caret never survive expansion; only the five plain comparison
operators reach the evaluator.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .errors import MalformedRangeError, MalformedVersionError, UnknownOperatorError
from .gh_logging import Logger
from .version import OmittedComponents, SemanticVersion

log = Logger(__name__)

# Longer tokens first so that ">=" is not read as ">" followed by "=1.2.3".
_CLAUSE_RE = re.compile(r"(?:(?P<operator>>=|<=|=|>|<|\^|~)\s*)?(?P<version>.+)")


class ClauseOperator(Enum):
    EQUAL = "="
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN_OR_EQUAL = "<="
    TILDE = "~"
    CARET = "^"

    @classmethod
    def from_token(cls, token: str | None) -> "ClauseOperator":
        """Resolve an operator token; a missing operator means equality."""
        if not token:
            return cls.EQUAL
        try:
            return cls(token)
        except ValueError:
            raise UnknownOperatorError(token) from None


class ComparatorOperator(Enum):
    EQUAL = "="
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN_OR_EQUAL = "<="

    def holds(self, comparison: int) -> bool:
        """Check a three-way comparison result against this operator."""
        if self is ComparatorOperator.EQUAL:
            return comparison == 0
        if self is ComparatorOperator.GREATER_THAN:
            return comparison > 0
        if self is ComparatorOperator.LESS_THAN:
            return comparison < 0
        if self is ComparatorOperator.GREATER_THAN_OR_EQUAL:
            return comparison >= 0
        if self is ComparatorOperator.LESS_THAN_OR_EQUAL:
            return comparison <= 0
        raise UnknownOperatorError(self.value)


@dataclass(frozen=True)
class Clause:
    """One comma-separated segment of a range expression, before expansion."""

    operator: ClauseOperator
    version: SemanticVersion

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"


@dataclass(frozen=True)
class RangeComparator:
    operator: ComparatorOperator
    version: SemanticVersion

    def is_satisfied_by(self, version: SemanticVersion) -> bool:
        return self.operator.holds(version.compare(self.version))

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"


def parse_clause(text: str) -> Clause:
    """Parse a single clause such as ``">= 1.2.3"`` or ``"^1.2"``."""
    if not isinstance(text, str):
        raise TypeError("Range clause must be a string")

    stripped = text.strip()
    if "," in stripped:
        raise MalformedRangeError(text)

    match = _CLAUSE_RE.fullmatch(stripped)
    if not match:
        raise MalformedRangeError(text)

    try:
        version = SemanticVersion.parse(match["version"])
    except MalformedVersionError as e:
        raise MalformedRangeError(text) from e

    return Clause(ClauseOperator.from_token(match["operator"]), version)


def split_clauses(text: str) -> list[Clause]:
    """Split a range expression on commas and parse every clause in order.

    Empty segments (leading, trailing or doubled commas) are skipped. The
    first malformed clause aborts the whole expression.
    """
    if not isinstance(text, str):
        raise TypeError("Range must be a string")

    return [parse_clause(part) for part in text.split(",") if part.strip()]


def _tilde_upper_bound(version: SemanticVersion) -> SemanticVersion:
    if version.omitted is OmittedComponents.MINOR_AND_PATCH:
        return SemanticVersion(version.major + 1, 0, 0)
    return SemanticVersion(version.major, version.minor + 1, 0)


def _caret_upper_bound(version: SemanticVersion) -> SemanticVersion:
    # Bump the leftmost non-zero component.
    if version.major > 0:
        return SemanticVersion(version.major + 1, 0, 0)
    if version.minor > 0:
        return SemanticVersion(0, version.minor + 1, 0)
    return SemanticVersion(0, 0, version.patch + 1)


def expand(clause: Clause) -> tuple[RangeComparator, ...]:
    """Rewrite a clause into canonical comparators.

    Plain operators map to a single comparator. Tilde and caret become a
    ``>=`` lower bound on the written version plus an exclusive ``<`` upper
    bound.
    """
    operator, version = clause.operator, clause.version

    if operator is ClauseOperator.TILDE:
        upper = _tilde_upper_bound(version)
    elif operator is ClauseOperator.CARET:
        upper = _caret_upper_bound(version)
    else:
        try:
            return (RangeComparator(ComparatorOperator(operator.value), version),)
        except ValueError:
            raise UnknownOperatorError(operator.value) from None

    comparators = (
        RangeComparator(ComparatorOperator.GREATER_THAN_OR_EQUAL, version),
        RangeComparator(ComparatorOperator.LESS_THAN, upper),
    )
    log.debug(f"Expanded {clause} to {', '.join(map(str, comparators))}")
    return comparators
