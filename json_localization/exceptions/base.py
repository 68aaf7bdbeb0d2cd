"""
Base exception definitions for json-localization
"""


class DomainException(Exception):
    """Base exception for all localization errors"""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR",
                 details: dict = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}


class InvalidArgumentError(DomainException, ValueError):
    """A required argument was None or blank"""

    def __init__(self, argument: str, message: str = None):
        super().__init__(
            message=message or f"Argument must not be None or blank: {argument}",
            code="INVALID_ARGUMENT",
            details={"argument": argument}
        )
