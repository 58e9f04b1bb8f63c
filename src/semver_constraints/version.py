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

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

import semver

from .errors import MalformedVersionError

_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_ID = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_ID = r"[0-9a-zA-Z-]+"

# Minor and patch are optional so that range clauses like "^1.2" and "~1"
# can be parsed; which of them were present is kept in `omitted`.
_VERSION_RE = re.compile(
    rf"(?P<major>{_NUMERIC})"
    rf"(?:\.(?P<minor>{_NUMERIC})(?:\.(?P<patch>{_NUMERIC}))?)?"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?",
    re.ASCII,
)
_PRERELEASE_ID_RE = re.compile(_PRERELEASE_ID, re.ASCII)
_BUILD_ID_RE = re.compile(_BUILD_ID, re.ASCII)


class OmittedComponents(Enum):
    """Which trailing numeric components were left out of the source text."""

    NONE = "none"
    PATCH = "patch"
    MINOR_AND_PATCH = "minor_and_patch"


@total_ordering
@dataclass(frozen=True)
class PrereleaseIdentifier:
    """A single dot-separated prerelease identifier.

    Its ordering is for comparing identifiers on their own. Version
    precedence goes through `SemanticVersion.compare`, which applies the
    same rules via `semver`.
    """

    value: str

    def __post_init__(self) -> None:
        if not _PRERELEASE_ID_RE.fullmatch(self.value):
            raise MalformedVersionError(self.value)

    @property
    def is_numeric(self) -> bool:
        return self.value.isdigit()

    def _precedence_key(self) -> tuple[int, int | str]:
        # Numeric identifiers always sort before alphanumeric ones.
        if self.is_numeric:
            return (0, int(self.value))
        return (1, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PrereleaseIdentifier):
            return NotImplemented
        return self._precedence_key() < other._precedence_key()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BuildIdentifier:
    """Build metadata identifier; carries no precedence."""

    value: str

    def __post_init__(self) -> None:
        if not _BUILD_ID_RE.fullmatch(self.value):
            raise MalformedVersionError(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class SemanticVersion:
    """An immutable SemVer 2.0.0 version.

    Equality, hashing and ordering follow SemVer precedence: build metadata
    and `omitted` are ignored. Ordering is delegated to `semver.Version`.
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: tuple[PrereleaseIdentifier, ...] = ()
    build: tuple[BuildIdentifier, ...] = ()
    omitted: OmittedComponents = OmittedComponents.NONE

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """Parse `major[.minor[.patch]][-prerelease][+build]`.

        Surrounding whitespace is ignored. Missing minor/patch default to 0
        and are recorded in `omitted`.
        """
        if not isinstance(text, str):
            raise TypeError("Version must be a string")

        match = _VERSION_RE.fullmatch(text.strip())
        if not match:
            raise MalformedVersionError(text)

        minor, patch = match["minor"], match["patch"]
        if minor is None:
            omitted = OmittedComponents.MINOR_AND_PATCH
        elif patch is None:
            omitted = OmittedComponents.PATCH
        else:
            omitted = OmittedComponents.NONE

        prerelease = match["prerelease"]
        build = match["build"]
        return cls(
            major=int(match["major"]),
            minor=int(minor or 0),
            patch=int(patch or 0),
            prerelease=tuple(
                PrereleaseIdentifier(p) for p in prerelease.split(".")
            )
            if prerelease
            else (),
            build=tuple(BuildIdentifier(b) for b in build.split("."))
            if build
            else (),
            omitted=omitted,
        )

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def semver(self) -> semver.Version:
        return semver.Version(
            self.major,
            self.minor,
            self.patch,
            prerelease=".".join(map(str, self.prerelease)) or None,
            build=".".join(map(str, self.build)) or None,
        )

    def compare(self, other: "SemanticVersion") -> int:
        """Three-way comparison by precedence: -1, 0 or 1."""
        return self.semver.compare(other.semver)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(map(str, self.prerelease))
        if self.build:
            version += "+" + ".".join(map(str, self.build))
        return version

    def __repr__(self) -> str:
        return f"SemanticVersion('{self}')"


def parse_version(text: str) -> SemanticVersion:
    return SemanticVersion.parse(text)
