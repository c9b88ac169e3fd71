"""Error code taxonomy for Skygear API failures."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from loguru import logger


class ErrorCode(IntEnum):
    """Closed set of error codes returned by the Skygear server.

    Values 101-121 are defined by the server protocol. ``UNEXPECTED_ERROR`` is
    the local fallback for any value this client does not know about.
    """

    NOT_AUTHENTICATED = 101
    PERMISSION_DENIED = 102
    ACCESS_KEY_NOT_ACCEPTED = 103
    ACCESS_TOKEN_NOT_ACCEPTED = 104
    INVALID_CREDENTIALS = 105
    INVALID_SIGNATURE = 106
    BAD_REQUEST = 107
    INVALID_ARGUMENT = 108
    DUPLICATED = 109
    RESOURCE_NOT_FOUND = 110
    NOT_SUPPORTED = 111
    NOT_IMPLEMENTED = 112
    CONSTRAINT_VIOLATED = 113
    INCOMPATIBLE_SCHEMA = 114
    ATOMIC_OPERATION_FAILURE = 115
    PARTIAL_OPERATION_FAILURE = 116
    UNDEFINED_OPERATION = 117
    PLUGIN_UNAVAILABLE = 118
    PLUGIN_TIMEOUT = 119
    RECORD_QUERY_INVALID = 120
    PLUGIN_INITIALIZING = 121

    UNEXPECTED_ERROR = 10000

    @classmethod
    def from_value(cls, value: Any, *, log_fallback: bool = True) -> ErrorCode:
        """Resolve a raw server code into a known error code.

        Args:
            value: Integer code as received from the server.
            log_fallback: Emit a debug record when ``value`` is unknown.

        Returns:
            The matching :class:`ErrorCode`, or ``UNEXPECTED_ERROR`` when the
            value is not part of this taxonomy. Never raises.
        """
        try:
            return _CODES_BY_VALUE[value]
        except (KeyError, TypeError):
            if not log_fallback:
                return cls.UNEXPECTED_ERROR
            logger.debug(
                "Unrecognized error code {code_value}, resolving to fallback",
                code_value=value,
                fallback=cls.UNEXPECTED_ERROR.name,
            )
            return cls.UNEXPECTED_ERROR

    @property
    def message(self) -> str:
        """User-facing message for this code."""
        return display_message(self)


_NOT_ALLOWED = "You are not allowed to perform this operation."
_UNABLE_TO_PROCESS_REQUEST = "The server is unable to process the request."
_PROCESSING_PROBLEM = "A problem occurred while processing this request."
_NOT_READY = "The server is not ready yet."

_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NOT_AUTHENTICATED: "You have to be authenticated to perform this operation.",
    ErrorCode.PERMISSION_DENIED: _NOT_ALLOWED,
    ErrorCode.ACCESS_KEY_NOT_ACCEPTED: _NOT_ALLOWED,
    ErrorCode.ACCESS_TOKEN_NOT_ACCEPTED: _NOT_ALLOWED,
    ErrorCode.INVALID_CREDENTIALS: (
        "You are not allowed to log in because the credentials you provided are not valid."
    ),
    ErrorCode.INVALID_SIGNATURE: _UNABLE_TO_PROCESS_REQUEST,
    ErrorCode.BAD_REQUEST: _UNABLE_TO_PROCESS_REQUEST,
    ErrorCode.INVALID_ARGUMENT: "The server is unable to process the data.",
    ErrorCode.DUPLICATED: "This request contains duplicate of an existing resource on the server.",
    ErrorCode.RESOURCE_NOT_FOUND: "The requested resource is not found.",
    ErrorCode.NOT_SUPPORTED: "This operation is not supported.",
    ErrorCode.NOT_IMPLEMENTED: "This operation is not implemented.",
    ErrorCode.CONSTRAINT_VIOLATED: _PROCESSING_PROBLEM,
    ErrorCode.INCOMPATIBLE_SCHEMA: _PROCESSING_PROBLEM,
    ErrorCode.ATOMIC_OPERATION_FAILURE: _PROCESSING_PROBLEM,
    ErrorCode.PARTIAL_OPERATION_FAILURE: _PROCESSING_PROBLEM,
    ErrorCode.UNDEFINED_OPERATION: "The requested operation is not available.",
    ErrorCode.PLUGIN_UNAVAILABLE: _NOT_READY,
    ErrorCode.PLUGIN_TIMEOUT: "The server took too long to process.",
    ErrorCode.RECORD_QUERY_INVALID: _PROCESSING_PROBLEM,
    ErrorCode.PLUGIN_INITIALIZING: _NOT_READY,
    ErrorCode.UNEXPECTED_ERROR: "An unexpected error has occurred.",
}

_missing_messages = [code.name for code in ErrorCode if code not in _MESSAGES]
if _missing_messages:
    raise RuntimeError(f"No display message defined for error codes: {', '.join(_missing_messages)}")

_CODES_BY_VALUE: dict[int, ErrorCode] = {code.value: code for code in ErrorCode}


def display_message(code: ErrorCode) -> str:
    """Return the user-facing message for an error code.

    Distinct codes may share one message; the text is meant for end users and
    is coarser than the protocol-level code. Raw integers are resolved first,
    so unknown values get the fallback message.
    """
    return _MESSAGES[ErrorCode.from_value(code)]
