"""
JSON Schema for the serialized validation report.

VALIDATION_REPORT_SCHEMA is what build_validation_report() must produce;
callers exposing reports over a transport can reuse it as a contract.
"""

# =============================================================================
# Validation Report Schema
# =============================================================================
VALIDATION_REPORT_SCHEMA: dict = {
    "name": "beancheck_validation_report_v1",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["valid", "error_count", "errors", "fields"],
        "properties": {
            "valid": {
                "type": "boolean",
                "description": "True when every rule ran and passed",
            },
            "error_count": {
                "type": "integer",
                "minimum": 0,
            },
            "errors": {
                "type": "array",
                "description": "Every violation in insertion order",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["path", "key"],
                    "properties": {
                        "path": {"type": "string", "minLength": 1},
                        "key": {"type": "string", "minLength": 1},
                    },
                },
            },
            "fields": {
                "type": "object",
                "description": "Field path -> violated rule keys",
                "additionalProperties": {
                    "type": "array",
                    "minItems": 1,
                    "items": {"type": "string", "minLength": 1},
                },
            },
        },
    },
}
