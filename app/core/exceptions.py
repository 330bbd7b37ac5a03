# app/core/exceptions.py
from typing import Optional


class AssignmentAPIException(Exception):
    """Base error rendered as a JSON envelope with its own status code."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequest(AssignmentAPIException):
    """Malformed date, empty content, bad JSON or bad query parameter."""

    status_code = 400


class AssignmentNotFound(AssignmentAPIException):
    status_code = 404
