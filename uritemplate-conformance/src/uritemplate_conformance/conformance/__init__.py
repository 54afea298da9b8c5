"""Conformance suite utilities.

Each test vector becomes one named, independently reported test case.
"""

from __future__ import annotations

from uritemplate_conformance.conformance.outcome import Error, Fail, Outcome, Pass
from uritemplate_conformance.conformance.registry import (
    AlreadyLoadedError,
    DuplicateIdentifierError,
    DynamicTestRegistry,
    EmptyInputError,
    NotLoadedError,
    RegistryError,
    UnknownIdentityError,
)

__all__ = [
    "AlreadyLoadedError",
    "DuplicateIdentifierError",
    "DynamicTestRegistry",
    "EmptyInputError",
    "Error",
    "Fail",
    "NotLoadedError",
    "Outcome",
    "Pass",
    "RegistryError",
    "UnknownIdentityError",
]
