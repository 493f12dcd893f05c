"""
Exception types for httpdl.

Inner modules raise these; only the command-line entry point turns them
into a printed message and a process exit code.
"""

from enum import Enum
from typing import Optional


class ErrorCategory(Enum):
    """Where a failure came from."""

    INPUT = "input"
    TRANSPORT = "transport"
    IO = "io"


class HttpdlError(Exception):
    """
    Base exception for all httpdl errors.

    Attributes:
        message: Human-readable error description
        cause: Original exception if wrapping
        category: Error classification
        exit_code: Process status the CLI exits with
    """

    category: ErrorCategory = ErrorCategory.INPUT
    exit_code: int = 1

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


# Input errors


class InvalidRequestTypeError(HttpdlError):
    """Method name is not one of get/post/put/delete/head."""

    def __init__(self, type_of_req: str):
        self.type_of_req = type_of_req
        super().__init__(f"Invalid type of request! ({type_of_req!r})")


class MalformedHeaderError(HttpdlError):
    """Header string has no ':' separating name and value."""

    def __init__(self, header: str):
        self.header = header
        super().__init__(
            f"Malformed header {header!r}: expected the form 'name:value'"
        )


class UnsupportedUrlError(HttpdlError):
    """URL is not http(s) and the user declined to continue."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"The url {url} is not supported.")


# Transport errors


class RequestSendError(HttpdlError):
    category = ErrorCategory.TRANSPORT

    def __init__(self, cause: BaseException):
        super().__init__("Failed to send request!", cause=cause)


# I/O errors


class DownloadError(HttpdlError):
    """Base for failures while copying the body to disk."""

    category = ErrorCategory.IO

    def __init__(self, path: str, reason: str, cause: Optional[BaseException] = None):
        self.path = path
        super().__init__(f"Failed to download file to {path}: {reason}", cause=cause)


class FileCreateError(DownloadError):
    def __init__(self, path: str, cause: BaseException):
        super().__init__(path, "could not create file", cause=cause)


class FileWriteError(DownloadError):
    pass


class StreamReadError(DownloadError):
    def __init__(self, path: str, cause: BaseException):
        super().__init__(path, "error reading response body", cause=cause)


__all__ = [
    "ErrorCategory",
    "HttpdlError",
    "InvalidRequestTypeError",
    "MalformedHeaderError",
    "UnsupportedUrlError",
    "RequestSendError",
    "DownloadError",
    "FileCreateError",
    "FileWriteError",
    "StreamReadError",
]
