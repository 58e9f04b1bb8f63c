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


class VersionConstraintError(ValueError):
    """Base exception for version and range parsing errors."""


class MalformedVersionError(VersionConstraintError):
    """Raised when a string does not match the semantic version grammar."""

    def __init__(self, raw: str):
        super().__init__(raw)
        self.raw = raw

    def __str__(self) -> str:
        return f"Malformed version: {self.raw}"


class MalformedRangeError(VersionConstraintError):
    """Raised when a single range clause does not match the clause grammar."""

    def __init__(self, raw: str):
        super().__init__(raw)
        self.raw = raw

    def __str__(self) -> str:
        return f"Malformed version range: {self.raw}"


class UnknownOperatorError(LookupError):
    """Raised when an operator token has no evaluator.

    The clause grammar only accepts known tokens, so seeing this means the
    grammar and the operator enums have drifted apart.
    """

    def __init__(self, operator: str):
        super().__init__(operator)
        self.operator = operator

    def __str__(self) -> str:
        return f"Unknown operator: {self.operator}"
