"""
Custom exceptions for oocurl.

Only the construction path raises. Everything that goes wrong after a
handle exists (rejected options, failed transfers, re-initialising a live
handle) is reported through return values and the errno/error accessors.
"""

from typing import Optional


class OOCurlError(Exception):
    """Base exception for all oocurl errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class CurlUnavailableError(OOCurlError):
    """Raised when the pycurl binding (and so libcurl) cannot be loaded."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"cURL unavailable: {message}", cause)


class CurlInitError(OOCurlError):
    """Raised when libcurl refuses to create an easy handle."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"cURL init error: {message}", cause)
