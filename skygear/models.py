"""Pydantic models used by the Skygear Python SDK."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator

from .error_codes import ErrorCode


class ErrorRecord(BaseModel):
    """Canonical, immutable data behind a :class:`~skygear.errors.SkygearError`.

    ``code_value`` is kept exactly as received; the resolved :attr:`code` is
    computed on read and never stored. ``info`` is held as a read-only view
    of a shallow copy of the mapping it was built from.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    code_value: StrictInt = ErrorCode.UNEXPECTED_ERROR.value
    name: str | None = None
    detail_message: str | None = None
    info: Mapping[Any, Any] | None = None
    cause: BaseException | None = None

    # Records carry mappings and exceptions, which are not hashable.
    __hash__ = None  # type: ignore[assignment]

    @field_validator("info", mode="after")
    @classmethod
    def _freeze_info(cls, value: Mapping[Any, Any] | None) -> Mapping[Any, Any] | None:
        if value is None:
            return None
        return MappingProxyType(dict(value))

    @property
    def code(self) -> ErrorCode:
        # Unknown values are logged once, when the owning SkygearError is built.
        return ErrorCode.from_value(self.code_value, log_fallback=False)

    @property
    def is_known_code(self) -> bool:
        return self.code_value == self.code.value

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the record.

        The cause is rendered with ``repr`` since exceptions are not
        serializable.
        """
        code = self.code
        return {
            "code_value": self.code_value,
            "code": code.name,
            "name": self.name,
            "detail_message": self.detail_message,
            "message": code.message,
            "info": dict(self.info) if self.info is not None else None,
            "cause": repr(self.cause) if self.cause is not None else None,
        }
