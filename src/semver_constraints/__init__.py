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

from .constraint import (
    Clause,
    ClauseOperator,
    ComparatorOperator,
    RangeComparator,
    expand,
    parse_clause,
    split_clauses,
)
from .errors import (
    MalformedRangeError,
    MalformedVersionError,
    UnknownOperatorError,
    VersionConstraintError,
)
from .range_set import RangeSet, parse_range, satisfies, satisfies_all
from .version import (
    BuildIdentifier,
    OmittedComponents,
    PrereleaseIdentifier,
    SemanticVersion,
    parse_version,
)

__all__ = [
    "BuildIdentifier",
    "Clause",
    "ClauseOperator",
    "ComparatorOperator",
    "MalformedRangeError",
    "MalformedVersionError",
    "OmittedComponents",
    "PrereleaseIdentifier",
    "RangeComparator",
    "RangeSet",
    "SemanticVersion",
    "UnknownOperatorError",
    "VersionConstraintError",
    "expand",
    "parse_clause",
    "parse_range",
    "parse_version",
    "satisfies",
    "satisfies_all",
    "split_clauses",
]
