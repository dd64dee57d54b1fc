"""
Portal exception hierarchy.
Services raise these; the app-level handler in main.py maps them to HTTP status codes.
"""


class PortalException(Exception):
    """Base exception for all portal business errors"""

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationFailure(PortalException):
    """Missing or malformed input"""

    status_code = 400


class BusinessRuleViolation(PortalException):
    """Request is well-formed but breaks a domain rule (capacity, duplicates, ...)"""

    status_code = 400


class AuthenticationRequired(PortalException):
    """Identity cookie missing or not recognised"""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ForbiddenAction(PortalException):
    """Caller is identified but not allowed to do this"""

    status_code = 403


class ResourceNotFound(PortalException):
    """Referenced entity id does not resolve"""

    status_code = 404

    def __init__(self, resource_type: str):
        self.resource_type = resource_type
        super().__init__(f"{resource_type} not found")
