from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    UNRECOGNIZED_OPTION = "unrecognized_option"
    INVALID_NAME = "invalid_name"
    INIT = "init"
    SERIALIZATION = "serialization"
    DESERIALIZATION = "deserialization"
    NOT_FOUND = "not_found"
    WRITE = "write"
    READ = "read"
    DELETE = "delete"
    LIST = "list"


class MetadataError(Exception):
    """
    Base class for volume metadata failures.

    Carries the failing operation, the volume name (when there is one) and the
    underlying cause so callers can branch on ``kind`` instead of parsing text.
    """

    kind: ErrorKind

    def __init__(self, message: str, operation: str, name: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        self.message = message
        self.operation = operation
        self.name = name
        self.cause = cause
        super().__init__(str(self))

    def __str__(self):
        text = f"{self.operation}"
        if self.name is not None:
            text += f" {self.name!r}"
        text += f": {self.message}"
        if self.cause is not None:
            text += f" ({self.cause})"
        return text


class UnrecognizedOptionError(MetadataError):
    kind = ErrorKind.UNRECOGNIZED_OPTION

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"not a recognized volume driver option: {option!r}", "validate")


class InvalidNameError(MetadataError):
    kind = ErrorKind.INVALID_NAME


class InitError(MetadataError):
    kind = ErrorKind.INIT


class SerializationError(MetadataError):
    kind = ErrorKind.SERIALIZATION


class DeserializationError(MetadataError):
    kind = ErrorKind.DESERIALIZATION


class MetadataNotFoundError(MetadataError):
    kind = ErrorKind.NOT_FOUND


class WriteError(MetadataError):
    kind = ErrorKind.WRITE


class ReadError(MetadataError):
    kind = ErrorKind.READ


class DeleteError(MetadataError):
    kind = ErrorKind.DELETE


class ListError(MetadataError):
    kind = ErrorKind.LIST
