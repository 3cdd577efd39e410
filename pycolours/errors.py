from typing import Any


class ColourError(Exception):
    """Base class for every error raised by pycolours."""

    def __init__(self, message: str, value: Any):
        super().__init__(message)
        self.value = value


class InvalidFormat(ColourError, ValueError):
    """The string does not match the format of the representation it claims."""

    def __init__(self, value: str, kind: str):
        super().__init__(f"{value} is not a valid {kind}", value)
        self.kind = kind


class TypeMismatch(ColourError, TypeError):
    def __init__(self, value: Any, kind: str):
        super().__init__(f"{value!r} is not a {kind} string", value)
        self.kind = kind


class MalformedStructure(ColourError, ValueError):
    def __init__(self, value: str, reason: str):
        super().__init__(f"{value} is malformed: {reason}", value)
        self.reason = reason
