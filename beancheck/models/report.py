"""
Typed Pydantic models for the serialized validation report.

The report is the transport-friendly view of a ValidationResult; see
build_validation_report() and VALIDATION_REPORT_SCHEMA.
"""
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field, model_validator


class FieldErrorModel(BaseModel):
    """One violated rule, as exposed to callers."""

    path: str = Field(..., min_length=1, description="Composed field path, e.g. 'nested#simpleProperty~items'.")
    key: str = Field(..., min_length=1, description="Symbolic rule key, e.g. 'is_not_null'.")


class ValidationReport(BaseModel):
    """
    Serialized ValidationResult.

    ``fields`` and ``errors`` describe the same violations: ``errors`` keeps
    the flat insertion order, ``fields`` groups keys per path.
    """

    valid: bool
    error_count: int = Field(..., ge=0)
    errors: List[FieldErrorModel] = Field(default_factory=list)
    fields: Dict[str, List[str]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_consistency(self) -> "ValidationReport":
        if self.error_count != len(self.errors):
            raise ValueError(
                f"error_count={self.error_count} does not match {len(self.errors)} errors"
            )
        if self.valid != (self.error_count == 0):
            raise ValueError("valid must be True exactly when there are no errors")
        return self
