"""Errors raised across the check submission boundary."""

from typing import List, Optional

from ..domain.value_objects.field_error import FieldError


class CheckApiError(Exception):
    """Failure reported by the vehicle directory or check persistence service.

    ``details`` carries structured field/reason pairs when the service
    rejected the request on validation grounds, and is ``None`` for
    transport failures, malformed responses and other generic errors.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[List[FieldError]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

    @property
    def is_validation_error(self) -> bool:
        """Check if the service answered with a details list, even an empty one."""
        return self.details is not None

    def field_messages(self) -> List[str]:
        """Render details as ``field: reason`` lines, in order."""
        return [detail.format_message() for detail in self.details or []]


class CheckValidationError(ValueError):
    """Server-side validation failure raised by the reference backend."""

    def __init__(self, details: List[FieldError]):
        super().__init__("; ".join(detail.format_message() for detail in details))
        self.details = details
