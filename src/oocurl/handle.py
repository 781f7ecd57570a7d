"""
Session handle for oocurl.

A SessionHandle owns at most one live ``pycurl.Curl`` easy handle and
tracks its lifecycle. It is the only place that talks to libcurl: option
application, transfer execution and error reporting all pass through here.
"""

import logging
import sys
from enum import Enum
from io import BytesIO
from typing import Any, Callable, Optional, Tuple, Union

from .exceptions import CurlInitError, CurlUnavailableError
from .options import RETURNTRANSFER, OptionId

try:
    import pycurl
except ImportError:
    pycurl = None

logger = logging.getLogger(__name__)

# libcurl's CURLE_OK and CURLE_BAD_FUNCTION_ARGUMENT
E_OK = 0
E_BAD_FUNCTION_ARGUMENT = 43

TransferResult = Union[bytes, bool]


class HandleState(Enum):
    """Lifecycle states of a session handle."""
    UNINITIALIZED = "uninitialized"  # No easy handle created yet
    LIVE = "live"                    # Easy handle open and usable
    CLOSED = "closed"                # Easy handle released


def _write_to_stdout(chunk: bytes) -> None:
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is not None:
        buffer.write(chunk)
    else:
        # Text-only stdout (IDLE, notebook kernels)
        sys.stdout.write(chunk.decode("utf-8", errors="replace"))


class SessionHandle:
    """
    Owner of a single libcurl easy handle.

    The handle can be reopened after it is closed, but never while it is
    live. Errors raised by libcurl during a transfer are captured and
    exposed through errno() and error() instead of propagating.
    """

    def __init__(self) -> None:
        self._curl: Optional[Any] = None
        self._state = HandleState.UNINITIALIZED
        self._return_transfer = False
        self._custom_writer = False
        self._errno = E_OK
        self._error = ""

    @property
    def state(self) -> HandleState:
        return self._state

    @property
    def is_live(self) -> bool:
        return self._state == HandleState.LIVE

    @property
    def return_transfer(self) -> bool:
        return self._return_transfer

    def open(self) -> bool:
        """
        Create a new easy handle.

        Returns:
            True if a handle was created, False if one is already live

        Raises:
            CurlUnavailableError: If pycurl is not installed
            CurlInitError: If libcurl fails to allocate the handle
        """
        if self._state == HandleState.LIVE:
            logger.debug("Refusing to open a handle that is already live")
            return False

        if pycurl is None:
            raise CurlUnavailableError("the pycurl module is not installed")

        try:
            self._curl = pycurl.Curl()
        except pycurl.error as e:
            raise CurlInitError("could not create an easy handle", cause=e)

        self._state = HandleState.LIVE
        self._return_transfer = False
        self._custom_writer = False
        self._errno = E_OK
        self._error = ""
        logger.debug("cURL handle opened")
        return True

    def close(self) -> None:
        """Release the easy handle. Safe to call more than once."""
        if self._state != HandleState.LIVE:
            return

        curl, self._curl = self._curl, None
        self._state = HandleState.CLOSED
        try:
            curl.close()
        finally:
            logger.debug("cURL handle closed")

    def setopt(self, option: OptionId, value: Any) -> bool:
        """
        Apply an option to the live handle.

        Args:
            option: pycurl option constant or emulated option key
            value: Option value

        Returns:
            True if libcurl accepted the option
        """
        if not self.is_live:
            logger.warning(f"Cannot set option {option!r} on a {self._state.value} handle")
            return False

        if option == RETURNTRANSFER:
            self._return_transfer = bool(value)
            return True

        try:
            self._curl.setopt(option, value)
        except (pycurl.error, TypeError, ValueError) as e:
            logger.debug(f"setopt({option!r}) failed: {e}")
            return False

        if option in (pycurl.WRITEFUNCTION, pycurl.WRITEDATA):
            self._custom_writer = value is not None
        return True

    def perform(self) -> TransferResult:
        """
        Execute the configured transfer, blocking until it finishes.

        Returns:
            The response body when return-transfer is enabled, True on
            success otherwise, and False if the transfer failed
        """
        if not self.is_live:
            self._record_error(E_BAD_FUNCTION_ARGUMENT, "cURL handle is closed")
            logger.warning("perform() called on a closed handle")
            return False

        # A caller-supplied writer takes precedence over both defaults
        buffer: Optional[BytesIO] = None
        if not self._custom_writer:
            if self._return_transfer:
                buffer = BytesIO()
                self._install_writer(buffer.write)
            else:
                self._install_writer(_write_to_stdout)

        try:
            self._curl.perform()
        except pycurl.error as e:
            code, message = self._unpack_error(e)
            self._record_error(code, message)
            logger.debug(f"Transfer failed ({code}): {message}")
            return False

        self._record_error(E_OK, "")
        if buffer is not None:
            return buffer.getvalue()
        return True

    def errno(self) -> int:
        return self._errno

    def error(self) -> str:
        return self._error

    def getinfo(self, info: int) -> Any:
        """Query transfer information, returning None if unavailable."""
        if not self.is_live:
            return None
        try:
            return self._curl.getinfo(info)
        except (pycurl.error, ValueError) as e:
            logger.debug(f"getinfo({info!r}) failed: {e}")
            return None

    def _install_writer(self, writer: Callable[[bytes], Any]) -> None:
        self._curl.setopt(pycurl.WRITEFUNCTION, writer)

    def _record_error(self, code: int, message: str) -> None:
        self._errno = code
        self._error = message

    @staticmethod
    def _unpack_error(error: Exception) -> Tuple[int, str]:
        args = error.args
        if len(args) >= 2:
            return int(args[0]), str(args[1])
        if len(args) == 1 and isinstance(args[0], int):
            return args[0], ""
        return E_BAD_FUNCTION_ARGUMENT, str(error)
