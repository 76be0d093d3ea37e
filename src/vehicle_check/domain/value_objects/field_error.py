"""Field-level validation error value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single server-reported validation failure for one field."""

    field: str
    reason: str

    def format_message(self) -> str:
        """Render as a user-facing line."""
        return f"{self.field}: {self.reason}"

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "reason": self.reason}
