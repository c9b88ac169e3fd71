"""SDK exception carrying Skygear API error data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .error_codes import ErrorCode
from .models import ErrorRecord


class SkygearError(Exception):
    """Error returned or raised for a failed Skygear request.

    Every construction shape normalizes into one :class:`ErrorRecord`:

    * ``SkygearError(detail_message="oops")``: code ``UNEXPECTED_ERROR``.
    * ``SkygearError(detail_message="oops", cause=exc)``: same, wrapping ``exc``.
    * ``SkygearError(110, detail_message="Not found")``: explicit code.
    * ``SkygearError(110, name="NotFound", detail_message="...", info={...})``.

    Attributes:
        code_value: Raw code as supplied by the server, stored verbatim.
        code: Resolved :class:`ErrorCode`; ``UNEXPECTED_ERROR`` for unknown values.
        name: Short server-supplied error name.
        detail_message: Developer-facing description of the failure.
        info: Additional server-provided metadata, as a read-only mapping.
        cause: Underlying exception this error was derived from.
    """

    def __init__(
        self,
        code_value: int = ErrorCode.UNEXPECTED_ERROR.value,
        name: str | None = None,
        detail_message: str | None = None,
        info: Mapping[Any, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        record = ErrorRecord(
            code_value=code_value,
            name=name,
            detail_message=detail_message,
            info=info,
            cause=cause,
        )
        super().__init__(ErrorCode.from_value(record.code_value).message)
        self._record = record
        self.__cause__ = cause

    @classmethod
    def unexpected(cls, detail_message: str | None, cause: BaseException | None = None) -> SkygearError:
        """Create an ``UNEXPECTED_ERROR`` with a detail message and optional cause."""
        return cls(detail_message=detail_message, cause=cause)

    @classmethod
    def from_exception(cls, exc: BaseException, detail_message: str | None = None) -> SkygearError:
        """Wrap an arbitrary exception, using its text when no detail is given."""
        return cls.unexpected(detail_message if detail_message is not None else str(exc), exc)

    @property
    def record(self) -> ErrorRecord:
        return self._record

    @property
    def code_value(self) -> int:
        return self._record.code_value

    @property
    def code(self) -> ErrorCode:
        return self._record.code

    @property
    def name(self) -> str | None:
        return self._record.name

    @property
    def detail_message(self) -> str | None:
        return self._record.detail_message

    @property
    def info(self) -> Mapping[Any, Any] | None:
        return self._record.info

    @property
    def cause(self) -> BaseException | None:
        return self._record.cause

    @property
    def message(self) -> str:
        """User-facing message for the resolved code."""
        return self.code.message

    @property
    def is_known_code(self) -> bool:
        return self._record.is_known_code

    def as_dict(self) -> dict[str, Any]:
        return self._record.as_dict()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code_value={self.code_value!r}, code={self.code.name}, "
            f"name={self.name!r}, detail_message={self.detail_message!r})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        info = dict(self.info) if self.info is not None else None
        return (
            type(self),
            (self.code_value, self.name, self.detail_message, info, self.cause),
        )
