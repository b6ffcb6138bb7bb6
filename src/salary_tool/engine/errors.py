"""
Exceptions raised by the salary engine and its transport layer.

Every error the API turns into a 400 response derives from SalaryToolError.
"""


class SalaryToolError(Exception):
    """Base class for salary tool errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedRequestError(SalaryToolError):
    """Request body is absent or not valid JSON."""

    def __init__(self, message: str = "Malformed JSON"):
        super().__init__(message)


class InvalidPayloadError(SalaryToolError):
    """Request body parsed but required fields are missing."""

    def __init__(self, message: str = "Invalid payload"):
        super().__init__(message)


class UnsupportedProfileError(SalaryToolError, ValueError):
    """Profile carries a role or education level the engine has no entry for."""

    def __init__(self, field_name: str, value):
        super().__init__(f"Unsupported {field_name}: {value}")
        self.field_name = field_name
        self.value = value


class ConfigurationGapError(SalaryToolError):
    """Lookup tables are out of step with the enumerations."""
