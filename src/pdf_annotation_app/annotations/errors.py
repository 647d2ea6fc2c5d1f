"""Error taxonomy shared by the annotation and upload services."""

from __future__ import annotations


class AnnotationServiceError(Exception):
    """Base error carrying a short machine-checkable code."""

    code = "service_error"

    def __init__(self, message: str, *, code: str | None = None, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.code
        self.field = field

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"error": self.code, "detail": self.message}
        if self.field is not None:
            payload["field"] = self.field
        return payload


class InputError(AnnotationServiceError):
    """Raised when the caller supplied missing or malformed input."""

    code = "invalid_input"


class ValidationError(InputError):
    """Raised when a raw annotation item breaks the required-field or bbox contract."""

    code = "invalid_annotation"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        field: str | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message, code=code, field=field)
        self.index = index

    def at_index(self, index: int) -> "ValidationError":
        """Return a copy of this error tagged with the batch position it came from."""
        return ValidationError(self.message, code=self.code, field=self.field, index=index)

    def to_payload(self) -> dict[str, object]:
        payload = super().to_payload()
        if self.index is not None:
            payload["index"] = self.index
        return payload


class StoreError(AnnotationServiceError):
    """Raised when the document store fails a read or write."""

    code = "store_failed"
