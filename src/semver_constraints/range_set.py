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

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .constraint import RangeComparator, expand, split_clauses
from .gh_logging import Logger
from .version import SemanticVersion

log = Logger(__name__)


@dataclass(frozen=True)
class RangeSet:
    """Expanded comparators of a range expression, combined with AND."""

    comparators: tuple[RangeComparator, ...]

    @classmethod
    def parse(cls, text: str) -> "RangeSet":
        return parse_range(text)

    def is_satisfied_by(self, version: SemanticVersion) -> bool:
        for comparator in self.comparators:
            if not comparator.is_satisfied_by(version):
                log.debug(f"{version} does not satisfy {comparator}")
                return False
        return True

    def __iter__(self) -> Iterator[RangeComparator]:
        return iter(self.comparators)

    def __len__(self) -> int:
        return len(self.comparators)

    def __str__(self) -> str:
        return ", ".join(map(str, self.comparators))


def parse_range(text: str) -> RangeSet:
    """Parse a comma-separated range expression into a RangeSet.

    Raises MalformedRangeError on the first malformed clause. An expression
    without clauses yields an empty RangeSet, which every version satisfies.
    """
    comparators: list[RangeComparator] = []
    for clause in split_clauses(text):
        comparators.extend(expand(clause))
    return RangeSet(tuple(comparators))


def satisfies(version: SemanticVersion | str, range_set: RangeSet | str) -> bool:
    """Check whether `version` satisfies every comparator of `range_set`.

    Strings are parsed first, so malformed input raises instead of
    returning False.
    """
    if isinstance(version, str):
        version = SemanticVersion.parse(version)
    if isinstance(range_set, str):
        range_set = parse_range(range_set)
    return range_set.is_satisfied_by(version)


def satisfies_all(
    version: SemanticVersion | str, range_sets: Iterable[RangeSet | str]
) -> bool:
    """Check a version against a list of constraints; all of them must hold."""
    if isinstance(version, str):
        version = SemanticVersion.parse(version)
    return all(satisfies(version, r) for r in range_sets)
