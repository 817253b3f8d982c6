"""ServiceResult and ServiceError: the contract between pipeline and CLI.

INVARIANT: Processor operations return ServiceResult; they never raise
pipeline errors to the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


def describe_causes(exc: BaseException) -> list[str]:
    """Describe the chain of errors that led to *exc*, nearest cause first.

    Follows ``__cause__``, falling back to ``__context__`` unless the
    context was suppressed with ``raise ... from None``.
    """
    causes: list[str] = []
    seen: set[int] = {id(exc)}
    current = exc.__cause__ or (None if exc.__suppress_context__ else exc.__context__)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        causes.append(f"{type(current).__name__}: {current}")
        current = current.__cause__ or (
            None if current.__suppress_context__ else current.__context__
        )
    return causes


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: BaseException) -> ServiceError:
        """Build an error whose code is the exception's kind and whose detail holds its causes."""
        return cls(
            code=type(exc).__name__,
            message=str(exc),
            detail={"causes": describe_causes(exc)},
        )


class ServiceResult(BaseModel):
    """Return type of processor operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"process_all"`` or ``"process_whitelist"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
