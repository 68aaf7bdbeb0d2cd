"""
Resource loading and formatting exceptions
"""

from .base import DomainException


class MalformedResourceError(DomainException):
    """Resource file content is not a flat JSON object of strings"""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Invalid json content in {path}: {reason}",
            code="MALFORMED_RESOURCE",
            details={"path": path}
        )


class ResourceIOError(DomainException):
    """Reading a resource file failed for a reason other than absence"""

    def __init__(self, path: str, resource_name: str, culture: str):
        super().__init__(
            message=f"Failed to read resource file: {path}",
            code="RESOURCE_IO_ERROR",
            details={"path": path, "resource_name": resource_name, "culture": culture}
        )


class ResourceFormatError(DomainException):
    """A resource template could not be formatted with the given arguments"""

    def __init__(self, name: str, template: str, reason: str):
        super().__init__(
            message=f"Cannot format resource '{name}': {reason}",
            code="RESOURCE_FORMAT_ERROR",
            details={"name": name, "template": template}
        )
