from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Classification for error logging."""

    PATH = "path"
    IO = "io"
    DECODE = "decode"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CLIPBOARD = "clipboard"
    USAGE = "usage"


class RetrvidError(Exception):
    """Base class for every error reported as ``error: <message>``."""

    category: ErrorCategory = ErrorCategory.VALIDATION
    exit_code: int = 1


class PathResolutionError(RetrvidError):
    """No storage path could be determined."""

    category = ErrorCategory.PATH


class StorageIOError(RetrvidError):
    """Reading, creating or writing the storage file failed."""

    category = ErrorCategory.IO


class DecodeError(RetrvidError):
    """The storage file is not a flat mapping of strings."""

    category = ErrorCategory.DECODE


class ValidationError(RetrvidError):
    category = ErrorCategory.VALIDATION


class NotFoundError(RetrvidError):
    category = ErrorCategory.NOT_FOUND


class ClipboardError(RetrvidError):
    """The system clipboard is unavailable or refused the text."""

    category = ErrorCategory.CLIPBOARD


class UsageError(RetrvidError):
    category = ErrorCategory.USAGE
    exit_code = 2
