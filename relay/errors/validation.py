"""Input validation exceptions with structured error codes.

Raised when an inbound client frame cannot be decoded into an event. It
carries both a human-readable message and a machine-parseable error code
for the outbound ``error`` event.
"""


class ValidationError(Exception):
    """Structured validation failure with error code metadata.

    Attributes:
        error_code: Machine-parseable error identifier.
        message: Human-readable error description.
    """

    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message


__all__ = ["ValidationError"]
