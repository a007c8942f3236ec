"""JSEND envelope schemas shared across the API.

Every response carries a ``status`` of ``success``, ``fail`` or ``error``.
``success`` and ``fail`` wrap their payload in ``data``; ``error`` is reserved
for unexpected server faults and carries a ``message``.
"""

from typing import Any, Literal

from pydantic import BaseModel


class JSendSuccess(BaseModel):
    """Base for successful responses; subclasses declare ``data``."""

    status: Literal["success"] = "success"


class EmptySuccessResponse(JSendSuccess):
    """Success with nothing to return."""

    data: None = None


class FailData(BaseModel):
    """Payload of a ``fail`` envelope."""

    error: str
    fields: list[dict[str, Any]] | None = None


class FailResponse(BaseModel):
    """A request that was understood but could not be carried out."""

    status: Literal["fail"] = "fail"
    data: FailData


class ErrorResponse(BaseModel):
    """An unexpected server-side error."""

    status: Literal["error"] = "error"
    message: str
    details: Any | None = None
