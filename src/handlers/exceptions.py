"""
Custom exceptions for HTTP handlers.
"""

class HandlerError(Exception):
    """Base exception for errors returned to the API caller."""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

class BadRequestError(HandlerError):
    """Raised when the request body or parameters cannot be parsed."""
    status_code = 400

class UnauthorizedError(HandlerError):
    """Raised when no authenticated user can be found on the request."""
    status_code = 401

class RouteNotFoundError(HandlerError):
    """Raised when no route matches the request path."""
    status_code = 404

class MethodNotAllowedError(HandlerError):
    """Raised when the route exists but does not accept the HTTP method."""
    status_code = 405
