"""Domain layer exceptions.

All domain exceptions inherit from JobboardError so callers can catch
everything raised by this package with a single except clause.
"""


class JobboardError(Exception):
    """Base exception for all jobboard errors."""

    pass


class InvalidRecordError(JobboardError):
    """Raised when a profile or job record cannot be interpreted.

    Examples:
    - Record is not a mapping (a list or a bare string was supplied)
    - Input file does not contain valid JSON
    - Jobs file does not contain a JSON array
    """

    def __init__(self, message: str, record_type: str = "record"):
        self.message = message
        self.record_type = record_type
        super().__init__(f"Invalid {record_type}: {message}")
