"""
Report Builder: ValidationResult → transport-ready report.

Produces the VALIDATION_REPORT_SCHEMA structure. Serializing the report
(JSON, HTTP, ...) is left to the caller.
"""
import logging
from typing import Dict, List

from jsonschema import validate

from beancheck.config.schemas import VALIDATION_REPORT_SCHEMA
from beancheck.models.report import ValidationReport
from beancheck.models.validation import ValidationResult

logger = logging.getLogger(__name__)


def build_error_list(result: ValidationResult) -> List[Dict[str, str]]:
    """Flat ``[{"path", "key"}]`` list, grouped by path in insertion order."""
    return [error.to_dict() for error in result.iter_errors()]


def build_validation_report(result: ValidationResult) -> dict:
    """
    Build the report dict for *result*.

    Returns:
        {
            "valid": bool,
            "error_count": int,
            "errors": [{"path": str, "key": str}, ...],
            "fields": {path: [key, ...]}
        }

    Raises:
        jsonschema.ValidationError: if the report breaks the schema
            (e.g. an empty rule key slipped through a custom Rule).
    """
    report = {
        "valid": result.is_valid(),
        "error_count": result.error_count(),
        "errors": build_error_list(result),
        "fields": result.to_dict(),
    }
    validate(instance=report, schema=VALIDATION_REPORT_SCHEMA["schema"])
    logger.debug("Built validation report: valid=%s, errors=%d", report["valid"], report["error_count"])
    return report


def build_typed_report(result: ValidationResult) -> ValidationReport:
    """Same as build_validation_report(), as a Pydantic model."""
    return ValidationReport.model_validate(build_validation_report(result))
