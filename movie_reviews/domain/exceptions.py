from typing import Any, Iterable, Mapping


class DomainError(Exception):
    pass


class InvalidIdentifierError(DomainError):
    pass


class ValidationError(DomainError):
    @classmethod
    def from_errors(cls, errors: Iterable[Mapping[str, Any]]) -> "ValidationError":
        return cls(format_errors(errors))


class NotFoundError(DomainError):
    pass


class RepositoryError(DomainError):
    pass


def format_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Render pydantic-style error dicts as ``"field: message; other: message"``."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)
