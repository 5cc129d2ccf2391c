# backend/core/error_handling.py

"""
Error types shared by every module.

Services raise these; ``core.exceptions`` renders them as JSON responses
with a stable ``error_code`` so clients can decide which sub-step to retry.
"""

from typing import Any, Dict, Optional

from fastapi import status


class APIError(Exception):
    """Base exception for API errors"""

    error_code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        if error_code:
            self.error_code = error_code
        super().__init__(self.message)


class NotFoundError(APIError):
    """Resource not found error"""

    error_code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            message=f"{resource} with identifier {identifier} not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "identifier": str(identifier)},
        )


class ConflictError(APIError):
    """Resource conflict error"""

    error_code = "CONFLICT"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message, status_code=status.HTTP_409_CONFLICT, details=details
        )


class APIValidationError(APIError):
    """Input validation error - named to avoid the Pydantic collision"""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details={"validation_errors": errors} if errors else {},
        )


class AuthenticationError(APIError):
    """Credentials were supplied but are wrong"""

    error_code = "AUTH_FAILED"

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message=message, status_code=status.HTTP_401_UNAUTHORIZED)


class AuthorizationError(APIError):
    """Authorization error"""

    error_code = "PERMISSION_DENIED"

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message=message, status_code=status.HTTP_403_FORBIDDEN)


class Unauthenticated(APIError):
    """No resolvable identity on the request"""

    error_code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message=message, status_code=status.HTTP_401_UNAUTHORIZED)


class CodeGenerationExhausted(APIError):
    """Random code generation kept colliding with stored codes"""

    error_code = "CODE_GENERATION_EXHAUSTED"

    def __init__(self, code_kind: str, attempts: int):
        super().__init__(
            message=f"Could not generate a unique {code_kind} after {attempts} attempts",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details={"code_kind": code_kind, "attempts": attempts},
        )
