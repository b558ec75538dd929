"""
Contract Validation Module

JSON Schema контракт output document.
"""

from .validators import (
    OutputDocumentValidator,
    SchemaLoader,
    validate_output_document,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "OutputDocumentValidator",
    # Functions
    "validate_output_document",
]
