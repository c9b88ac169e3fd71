"""Skygear Python SDK public exports."""

from loguru import logger

from .error_codes import ErrorCode, display_message
from .errors import SkygearError
from .models import ErrorRecord

# Library logging stays silent until the application calls logger.enable("skygear").
logger.disable("skygear")

__all__ = [
    "ErrorCode",
    "ErrorRecord",
    "SkygearError",
    "display_message",
]
