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

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .errors import VersionConstraintError
from .gh_logging import Logger
from .range_set import RangeSet, parse_range, satisfies
from .version import SemanticVersion

CONSTRAINTS_ENV_VAR = "SEMVER_CONSTRAINTS"

log = Logger(__name__)


@dataclass
class Constraint:
    expression: str
    range_set: RangeSet
    # Where the constraint was read from, for annotations
    file: Path | None = None
    line: int | None = None


def parse_args(args: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="semver-constraints",
        description="Check that a version satisfies semantic version ranges.",
    )
    parser.add_argument("version", help="The version to check, e.g. 1.2.3-rc.1.")
    parser.add_argument(
        "ranges",
        nargs="*",
        help=(
            "Range expressions such as '^1.2' or '>=1.2.3, <2.0.0'. "
            "All of them must be satisfied."
        ),
    )
    parser.add_argument(
        "--constraints-file",
        type=Path,
        default=None,
        help=(
            "File with one range expression per line; used when no ranges are "
            f"given on the command line. Defaults to ${CONSTRAINTS_ENV_VAR} "
            "if neither is provided."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug output, including how tilde/caret ranges expand.",
    )
    return parser.parse_args(args)


def _parse_constraint(
    expression: str, file: Path | None = None, line: int | None = None
) -> Constraint:
    try:
        return Constraint(expression, parse_range(expression), file, line)
    except VersionConstraintError as e:
        log.fatal(str(e), file=file, line=line)


def read_constraints_file(path: Path) -> list[Constraint]:
    """Read one range expression per line, skipping blanks and # comments."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        log.fatal(f"{path} could not be read: {e}")

    constraints: list[Constraint] = []
    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        expression = raw_line.split("#", 1)[0].strip()
        if not expression:
            continue
        constraints.append(_parse_constraint(expression, path, lineno))
    return constraints


def get_constraints(args: argparse.Namespace) -> list[Constraint]:
    """Get range constraints from CLI, constraints file, or environment.

    Tries sources in order:
    1. positional RANGE arguments
    2. --constraints-file
    3. SEMVER_CONSTRAINTS environment variable
    """
    if args.ranges:
        log.debug("Using constraints from command-line arguments.")
        return [_parse_constraint(r) for r in args.ranges]
    elif args.constraints_file:
        log.debug(f"Using constraints from {args.constraints_file}.")
        constraints = read_constraints_file(args.constraints_file)
        if not constraints:
            log.fatal(f"{args.constraints_file} contains no constraints.")
        return constraints
    elif expression := os.getenv(CONSTRAINTS_ENV_VAR):
        log.debug("Using constraints from environment variable.")
        return [_parse_constraint(expression)]
    else:
        log.fatal(
            "No constraints given; pass ranges, --constraints-file or "
            f"set ${CONSTRAINTS_ENV_VAR}."
        )


def check_constraints(
    version: SemanticVersion, constraints: list[Constraint]
) -> list[Constraint]:
    """Return the constraints `version` does not satisfy, warning for each."""
    unsatisfied: list[Constraint] = []
    for constraint in constraints:
        if satisfies(version, constraint.range_set):
            log.debug(f"{version} satisfies '{constraint.expression}'")
            continue

        log.warning(
            f"{version} does not satisfy '{constraint.expression}' "
            f"({constraint.range_set})",
            file=constraint.file,
            line=constraint.line,
        )
        unsatisfied.append(constraint)
    return unsatisfied


def main(args: list[str] | None = None) -> None:
    """Main entry point.

    Exits with code 1 on malformed input or if any constraint is not met.
    """
    p = parse_args(args)
    previous_verbose = Logger.verbose
    Logger.verbose = previous_verbose or p.verbose
    try:
        _run(p)
    finally:
        Logger.verbose = previous_verbose


def _run(p: argparse.Namespace) -> None:
    try:
        version = SemanticVersion.parse(p.version)
    except VersionConstraintError as e:
        log.fatal(str(e))

    constraints = get_constraints(p)
    unsatisfied = check_constraints(version, constraints)

    if unsatisfied:
        log.fatal(
            f"{version} does not satisfy {len(unsatisfied)} of "
            f"{len(constraints)} constraints."
        )
    log.ok(f"{version} satisfies all {len(constraints)} constraints.")


if __name__ == "__main__":
    main(args=sys.argv[1:])
