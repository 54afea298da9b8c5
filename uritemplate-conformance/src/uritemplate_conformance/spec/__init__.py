"""Vector file loading and validation."""

from __future__ import annotations

from uritemplate_conformance.spec.spec_loader import SpecValidationError
from uritemplate_conformance.spec.vectors import (
    TestSpecification,
    load_vector_file,
    load_vector_files,
    select_by_level,
)

__all__ = [
    "SpecValidationError",
    "TestSpecification",
    "load_vector_file",
    "load_vector_files",
    "select_by_level",
]
