"""Domain error codes for the statements module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    UNKNOWN_CATEGORY_KIND = "UNKNOWN_CATEGORY_KIND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class CategoryNotFoundError(DomainError):
    """Raised when a performance references a category missing from the catalog."""

    def __init__(self, category_id: str) -> None:
        super().__init__(
            code=ErrorCode.CATEGORY_NOT_FOUND,
            message=f"category not found: {category_id}",
        )
        self.category_id = category_id


class UnknownCategoryKindError(DomainError):
    """Raised when a category's kind has no pricing calculator."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_CATEGORY_KIND,
            message=f"unknown type: {kind}",
        )
        self.kind = kind
