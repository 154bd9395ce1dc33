"""
Service-layer error taxonomy.

Every error carries the HTTP status and the public message the routing layer
returns as ``{"error": message}``.
"""
from typing import Optional


class ServiceError(Exception):
    status_code = 500
    message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    message = "Invalid request data"


class InvalidData(ValidationError):
    message = "Invalid product data"


class DuplicateUsername(ValidationError):
    message = "Username taken"


class AuthError(ServiceError):
    status_code = 401
    message = "Unauthorized"


class MissingToken(AuthError):
    message = "Missing token"


class InvalidToken(AuthError):
    message = "Invalid token"


class InvalidCredentials(AuthError):
    message = "Bad credentials"


class NotFoundError(ServiceError):
    status_code = 404
    message = "Not found"
