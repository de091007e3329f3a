# memwatch/domain/exceptions.py
class DomainException(Exception):
    """Base exception for all domain-related errors."""
    status_code = 400

class InvalidPayloadException(DomainException):
    """Raised when a request body cannot be decoded into the expected shape."""
    pass

class InvalidActionException(DomainException):
    """Raised when a memory request names an action other than allocate/release."""
    pass

class LimitExceededException(DomainException):
    """Raised when an allocation asks for more than the configured maximum."""
    pass

class MethodNotAllowedException(DomainException):
    """Raised when an endpoint is invoked with an HTTP method it does not serve."""
    status_code = 405
