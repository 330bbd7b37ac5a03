# models/__init__.py
"""
Pydantic models for request/response validation
"""

from .assignment import (
    Assignment,
    AssignmentWrite
)

from .responses import (
    Envelope,
    AssignmentEnvelope,
    AssignmentListEnvelope
)
