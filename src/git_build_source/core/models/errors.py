"""Validation error accumulation."""

from pydantic import BaseModel, Field


class ErrorCollection(BaseModel):
    """Collects field-keyed validation errors.

    Each field holds a single message; adding a second error for the same
    field replaces the first.
    """

    field_errors: dict[str, str] = Field(default_factory=dict)
    error_messages: list[str] = Field(default_factory=list)

    def add_error(self, field: str, message: str) -> None:
        self.field_errors[field] = message

    def add_error_message(self, message: str) -> None:
        self.error_messages.append(message)

    def get_field_error(self, field: str) -> str | None:
        return self.field_errors.get(field)

    def has_any_errors(self) -> bool:
        return bool(self.field_errors or self.error_messages)

    @property
    def total_errors(self) -> int:
        return len(self.field_errors) + len(self.error_messages)
